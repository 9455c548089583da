"""
Distance units.

Distances are wrapped in `DistanceKm` instead of being passed around as bare floats,
so a radius in kilometers cannot be compared against some other scalar by accident.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class DistanceKm:
    """A distance in kilometers.

    Negative values are not rejected; the type only carries intent. Comparisons follow
    IEEE float semantics, so anything involving NaN is False and a NaN distance never
    falls within a radius.
    """

    value: float

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"{self.value:.3f} Km"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistanceKm):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __lt__(self, other: DistanceKm) -> bool:
        if not isinstance(other, DistanceKm):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: DistanceKm) -> bool:
        if not isinstance(other, DistanceKm):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: DistanceKm) -> bool:
        if not isinstance(other, DistanceKm):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: DistanceKm) -> bool:
        if not isinstance(other, DistanceKm):
            return NotImplemented
        return self.value >= other.value
