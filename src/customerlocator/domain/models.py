"""
Domain models.

These types are the contract between layers:
- data sources produce a `CustomerList`,
- the locator filters it,
- the CLI sorts and prints it.

`Customer` keeps latitude/longitude inline (not a nested coordinate) so it validates
straight from the flat JSON-lines records: `user_id`, `name`, `latitude`, `longitude`.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator
from operator import attrgetter

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator

from customerlocator.core.geo import Coordinate
from customerlocator.core.units import DistanceKm


class Customer(BaseModel):
    """A named, identified customer located at a coordinate.

    `user_id` must be a JSON integer. Coordinates accept numbers or numeric strings
    (the ingestion files quote them), but never booleans.
    """

    model_config = ConfigDict(frozen=True)

    user_id: StrictInt
    name: str
    latitude: float
    longitude: float

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def _reject_bool_coordinates(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("coordinates must be numbers or numeric strings, not booleans")
        return value

    @classmethod
    def new(cls, user_id: int, name: str, coordinate: Coordinate) -> Customer:
        return cls(
            user_id=user_id,
            name=name,
            latitude=coordinate.latitude,
            longitude=coordinate.longitude,
        )

    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)

    def distance_from(self, coordinate: Coordinate) -> DistanceKm:
        return self.coordinate().distance_from(coordinate)

    def __str__(self) -> str:
        return f'Customer("{self.name}":{self.user_id}) located at ({self.latitude}, {self.longitude})'


class CustomerList:
    """An ordered collection of customers.

    Insertion order is kept; the only in-place mutation is `sort_by_user_id`.
    Duplicate ids are allowed.
    """

    def __init__(self, customers: Iterable[Customer] = ()):
        self._customers: list[Customer] = list(customers)

    @classmethod
    def from_sequence(cls, customers: Iterable[Customer]) -> CustomerList:
        return cls(customers)

    from_list = from_sequence

    def sort_by_user_id(self) -> None:
        """Sort ascending by `user_id` in place; ties keep their relative order."""
        self._customers.sort(key=attrgetter("user_id"))

    def user_ids(self) -> list[int]:
        return [c.user_id for c in self._customers]

    def copy(self) -> CustomerList:
        """Return a fully independent copy."""
        return CustomerList(copy.deepcopy(self._customers))

    def __iter__(self) -> Iterator[Customer]:
        return iter(self._customers)

    def __len__(self) -> int:
        return len(self._customers)

    def __getitem__(self, index: int) -> Customer:
        return self._customers[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomerList):
            return NotImplemented
        return self._customers == other._customers

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"CustomerList({self._customers!r})"
