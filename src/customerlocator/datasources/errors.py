"""
Data-source error taxonomy.

Callers that only need a message can catch `DatasourceError`; diagnostics can tell
"could not read the resource" apart from "the resource holds bad records".
"""

from __future__ import annotations


class DatasourceError(Exception):
    """A data source could not produce a customer list."""


class ResourceAccessError(DatasourceError):
    """The underlying resource could not be opened or read."""


class ContentParseError(DatasourceError):
    """A record could not be decoded into a `Customer`."""

    def __init__(self, message: str, *, line_number: int | None = None):
        super().__init__(message)
        self.line_number = line_number
