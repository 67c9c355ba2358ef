"""Helpers for reading rule specs.

A rule spec is either a pipe-delimited string (``"required|integer"``) or a
sequence of tokens; non-string tokens (rule objects) are rendered with
``str()``.
"""

from collections.abc import Sequence

type RuleSpec = str | Sequence[object]

RULE_DELIMITER = "|"
REQUIRED_TOKEN = "required"


def join_rules(spec: object) -> str:
    if isinstance(spec, str):
        return spec
    if isinstance(spec, Sequence):
        return RULE_DELIMITER.join(str(token) for token in spec)
    return str(spec)


def rule_tokens(spec: object) -> list[str]:
    return [
        token.strip()
        for token in join_rules(spec).split(RULE_DELIMITER)
        if token.strip()
    ]


def is_required(spec: object) -> bool:
    return REQUIRED_TOKEN in rule_tokens(spec)
