"""Sort keys and their compilation to ``$orderby`` clauses."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

from azquery.core.exceptions import ValidationError
from azquery.core.types import Direction
from azquery.query.filters import geo_distance

DEFAULT_GEO_FIELD = "Geo"


@dataclass(frozen=True)
class ByField:
    """Sort on the value of a field."""

    field: str
    direction: Direction = Direction.ASCENDING

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", Direction(self.direction))
        if not self.field:
            raise ValidationError("A field name is required to sort by field")


@dataclass(frozen=True)
class ByDistance:
    """Sort on the distance between a geo field and a point."""

    longitude: float
    latitude: float
    direction: Direction = Direction.ASCENDING
    field: str = DEFAULT_GEO_FIELD

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", Direction(self.direction))
        if not self.field:
            raise ValidationError("A field name is required to sort by distance")


SortKey: TypeAlias = ByField | ByDistance


def compile_sort(key: SortKey) -> str:
    """Compile one sort key, e.g. ``"Age desc"``."""
    if isinstance(key, ByField):
        return f"{key.field} {key.direction}"
    if isinstance(key, ByDistance):
        return f"{geo_distance(key.field, key.longitude, key.latitude)} {key.direction}"
    raise TypeError(f"Not a sort key: {key!r}")


def compile_sorts(keys: Iterable[SortKey]) -> list[str]:
    """Compile sort keys, keeping their order (the service breaks ties left to right)."""
    return [compile_sort(key) for key in keys]
