"""
JSON-lines customer file.

One JSON object per line:

    {"latitude": "52.833502", "user_id": 25, "name": "David Behan", "longitude": "-8.522366"}

Each line is validated into a `Customer` with Pydantic. Coordinates may be given as
numbers or numeric strings. A single bad line aborts the whole load.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from customerlocator.core.env import resolve_project_path
from customerlocator.datasources.errors import ContentParseError, ResourceAccessError
from customerlocator.domain.models import Customer, CustomerList

logger = logging.getLogger(__name__)

_CUSTOMER_ADAPTER = TypeAdapter(Customer)


class CustomerJsonLinesFile:
    """Customer data source backed by a JSON-lines file on disk."""

    def __init__(self, path: str | Path):
        self.path = resolve_project_path(path)

    def customers(self) -> CustomerList:
        try:
            text = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ResourceAccessError(f"Customer Json file IO error: {exc}") from exc

        customers: list[Customer] = []
        # Only "\n" ends a record; U+2028, U+0085 etc. may appear unescaped inside JSON strings.
        for line_number, line in enumerate(text.split("\n"), start=1):
            if not line.strip():
                continue
            try:
                customers.append(_CUSTOMER_ADAPTER.validate_json(line))
            except ValidationError as exc:
                raise ContentParseError(
                    f"Customer Json file parsing error: line {line_number}: {exc}",
                    line_number=line_number,
                ) from exc

        logger.info("Loaded %d customers from %s", len(customers), self.path)
        return CustomerList.from_sequence(customers)

    def __repr__(self) -> str:
        return f"CustomerJsonLinesFile({str(self.path)!r})"
