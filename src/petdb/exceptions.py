from enum import StrEnum


class ErrorKind(StrEnum):
    """
    ErrorKind tags every error the database can produce.

    Load reports carry the tag so callers can branch on it without
    matching exception classes.
    """

    invalid_attribute = "invalid_attribute"
    invalid_name = "invalid_name"
    database_full = "database_full"
    invalid_position = "invalid_position"
    malformed_line = "malformed_line"
    non_numeric_attribute = "non_numeric_attribute"


class PetDatabaseError(Exception):
    """Base class for exceptions in this module."""

    kind: ErrorKind


class InvalidAttribute(PetDatabaseError):
    """Raised when an age is outside the allowed range."""

    kind = ErrorKind.invalid_attribute


class InvalidName(PetDatabaseError):
    """Raised when a name is empty or contains whitespace."""

    kind = ErrorKind.invalid_name


class DatabaseFull(PetDatabaseError):
    """Raised when adding to a store that is at capacity."""

    kind = ErrorKind.database_full


class InvalidPosition(PetDatabaseError):
    """Raised when a position does not refer to a stored pet."""

    kind = ErrorKind.invalid_position


class MalformedLine(PetDatabaseError):
    """Raised when a line does not split into exactly two fields."""

    kind = ErrorKind.malformed_line


class NonNumericAttribute(PetDatabaseError):
    """Raised when the age field of a line is not an integer."""

    kind = ErrorKind.non_numeric_attribute
