"""Error taxonomy shared by every validator and parser.

Validators raise one of the four typed errors below.  Operation builders
catch them and re-raise a field-attributed :class:`ValidationError` so the
failure can be traced back to the user-supplied field.
"""

from __future__ import annotations

from typing import ClassVar


class TxnGuardError(ValueError):
    """Base class for every error raised by txnguard."""

    code: ClassVar[str] = "ERROR"


class UndefinedError(TxnGuardError):
    """A required field is missing or empty."""

    code: ClassVar[str] = "UNDEFINED"


class FormatError(TxnGuardError):
    """Malformed encoding: bad checksum, bad version byte, bad asset code."""

    code: ClassVar[str] = "FORMAT"


class RangeError(TxnGuardError):
    """Value outside its valid domain, e.g. a negative amount."""

    code: ClassVar[str] = "RANGE"


class ParseError(TxnGuardError):
    """Amount or canonical asset string could not be decoded."""

    code: ClassVar[str] = "PARSE"


class ValidationError(TxnGuardError):
    """A validation failure attributed to a named operation field.

    Attributes:
        field: The operation field on which validation failed.
        message: The underlying validation message.
    """

    code: ClassVar[str] = "VALIDATION"

    def __init__(self, field: str, message: str) -> None:
        super().__init__(field, message)
        self._field = field
        self._message = message

    @property
    def field(self) -> str:
        return self._field

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return f"Field: {self._field}, Error: {self._message}"


def new_validation_error(field: str, message: str) -> ValidationError:
    """Create a :class:`ValidationError` for *field* carrying *message*."""
    return ValidationError(field, message)
