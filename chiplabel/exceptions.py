"""
Custom exception hierarchy for chiplabel.

Why a custom hierarchy:
- Callers can tell a label that matched no grammar (NoFamilyMatchedError)
  apart from a label that matched but carried a bad field (InvalidFieldError)
  without string-matching generic ValueError messages.
- A batch job can catch ChipLabelError per row and keep going, while a
  misconfigured category table (ConfigurationError) is still easy to spot.
"""

from __future__ import annotations


class ChipLabelError(Exception):
    """Base exception for all chiplabel errors."""


class NoFamilyMatchedError(ChipLabelError):
    """Raised when a label does not match any grammar of a parser.

    Carries the offending label and the name of the family or category
    parser that rejected it.
    """

    def __init__(self, label: str, parser: str | None = None) -> None:
        self.label = label
        self.parser = parser
        if parser:
            message = f"no match for {label!r} in {parser}"
        else:
            message = f"no match for {label!r}"
        super().__init__(message)


class InvalidFieldError(ChipLabelError):
    """Raised when a grammar matched but a captured field failed conversion.

    For example a week of "54", a month of "13", an unknown month letter,
    a resolved year outside the manufacturing window, or a hash with the
    wrong number of hex digits.
    """

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class ConfigurationError(ChipLabelError):
    """Raised when the engine itself is misconfigured.

    This can happen if:
    - A category id has no registered dispatcher.
    - The category catalog references a family parser that does not exist.
    - Two catalog entries share the same category id.
    - An engine config file is empty or fails validation.
    """
