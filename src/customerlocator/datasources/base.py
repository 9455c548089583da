"""
Data-source contract.

Anything with a `customers()` method returning a `CustomerList` can feed a
`CustomerLocator`, so the import format can change without touching consumers.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from customerlocator.domain.models import CustomerList


@runtime_checkable
class CustomerDatasource(Protocol):
    def customers(self) -> CustomerList:
        """Produce the full customer list.

        Each call may re-read the underlying resource. Failures raise a
        `DatasourceError` subclass; nothing is partially returned.
        """
        ...
