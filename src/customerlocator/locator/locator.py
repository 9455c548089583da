"""
Radius queries over a customer list.

`CustomerLocator` owns one `CustomerList` and answers "which customers are strictly
closer than R kilometers to point P". It never mutates its list after construction.
"""

from __future__ import annotations

import logging

from customerlocator.core.geo import Coordinate
from customerlocator.core.units import DistanceKm
from customerlocator.datasources.base import CustomerDatasource
from customerlocator.datasources.errors import DatasourceError
from customerlocator.domain.models import CustomerList

logger = logging.getLogger(__name__)


class LocatorError(Exception):
    """A locator could not be built from its data source.

    The message is the data source's message; the original error is kept as `__cause__`.
    """


class CustomerLocator:
    def __init__(self, customers: CustomerList):
        self._customers = customers.copy()

    @classmethod
    def from_source(cls, source: CustomerDatasource) -> CustomerLocator:
        """Load customers from `source` once and wrap them."""
        try:
            customers = source.customers()
        except DatasourceError as exc:
            logger.error("Failed to load customers from %r: %s", source, exc)
            raise LocatorError(str(exc)) from exc
        return cls(customers)

    @property
    def customers(self) -> CustomerList:
        return self._customers.copy()

    def locate_within(self, radius: DistanceKm, location: Coordinate) -> CustomerList:
        """Return customers whose distance from `location` is strictly below `radius`.

        Order is preserved. Customers exactly on the boundary, or at a NaN distance,
        are left out.
        """
        within = [c for c in self._customers.copy() if c.distance_from(location) < radius]
        logger.debug(
            "%d of %d customers within %s of %s", len(within), len(self._customers), radius, location
        )
        return CustomerList.from_sequence(within)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomerLocator):
            return NotImplemented
        return self._customers == other._customers

    __hash__ = None  # type: ignore[assignment]
