"""Exception hierarchy for the GAEA schema catalog."""

from __future__ import annotations


class SchemaError(Exception):
    """Base class for every error raised by :mod:`gaea`."""


class SchemaDefinitionError(SchemaError):
    """A record type declares conflicting or unusable wire fields."""


class EncodeError(SchemaError, ValueError):
    """A record holds a value its wire field cannot carry."""


class DecodeError(SchemaError, ValueError):
    """Bytes or JSON payloads could not be turned back into a record."""


class SchemaVariantError(SchemaError, TypeError):
    """A record type of one schema variant was used with the other."""


class UnknownEntityError(SchemaError, KeyError):
    """No record type is registered under the requested name."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
