"""File output adapters."""

from .typescript_writer import TypeScriptFileWriter

__all__ = ["TypeScriptFileWriter"]
