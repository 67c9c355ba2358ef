"""Presenters for CLI output formatting."""

from .summary import ExportSummaryPresenter

__all__ = ["ExportSummaryPresenter"]
