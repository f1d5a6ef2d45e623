"""Filter expression model and its compiler to the OData filter language."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime, timezone
from functools import reduce
from typing import TypeAlias

from azquery.core.exceptions import ValidationError
from azquery.core.types import Combiner, Comparison

FilterValue: TypeAlias = str | bool | int | float | datetime | None

_LITERAL_TYPES = (str, bool, int, float, datetime)


class _FilterNode:
    """Infix combination shared by all filter nodes."""

    def __and__(self, other: FilterExpr) -> BinaryFilter:
        return and_(self, other)  # type: ignore[arg-type]

    def __or__(self, other: FilterExpr) -> BinaryFilter:
        return or_(self, other)  # type: ignore[arg-type]


@dataclass(frozen=True)
class FieldFilter(_FilterNode):
    """
    A comparison between an index field and a literal value.

    A ``None`` value turns the filter into the identity filter, which
    compiles to ``true`` whatever the field and comparison are.
    """

    field: str | None
    comparison: Comparison
    value: FilterValue = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "comparison", Comparison(self.comparison))
        if self.value is None:
            return
        if not isinstance(self.value, _LITERAL_TYPES):
            raise TypeError(f"Unsupported filter value type: {type(self.value).__name__}")
        if not self.field:
            raise ValidationError(
                "A field name is required when filtering on a value",
                details={"value": self.value},
            )

    @property
    def is_identity(self) -> bool:
        return self.value is None


@dataclass(frozen=True)
class GeoDistanceFilter(_FilterNode):
    """A comparison on the distance in kilometres between a geo field and a point."""

    field: str
    longitude: float
    latitude: float
    comparison: Comparison
    distance_km: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "comparison", Comparison(self.comparison))
        if not self.field:
            raise ValidationError("A field name is required for a geo distance filter")


@dataclass(frozen=True)
class BinaryFilter(_FilterNode):
    """Two filters joined with ``and`` or ``or``, in the order given."""

    left: FilterExpr
    combiner: Combiner
    right: FilterExpr

    def __post_init__(self) -> None:
        object.__setattr__(self, "combiner", Combiner(self.combiner))


FilterExpr: TypeAlias = FieldFilter | GeoDistanceFilter | BinaryFilter

IDENTITY_FILTER = FieldFilter(None, Comparison.EQ, None)


# ============================================================================
# Combinators
# ============================================================================


def where(field: str, comparison: Comparison, value: FilterValue) -> FieldFilter:
    """Create a basic field filter."""
    return FieldFilter(field, comparison, value)


def where_eq(field: str, value: FilterValue) -> FieldFilter:
    """Create an equality filter."""
    return where(field, Comparison.EQ, value)


def where_geo_distance(
    field: str,
    point: tuple[float, float],
    comparison: Comparison,
    distance_km: float,
) -> GeoDistanceFilter:
    """
    Create a geo distance filter.

    Args:
        field: Name of the ``Edm.GeographyPoint`` field
        point: ``(longitude, latitude)`` of the reference point
        comparison: How the distance is compared to ``distance_km``
        distance_km: Distance in kilometres
    """
    longitude, latitude = point
    return GeoDistanceFilter(field, longitude, latitude, comparison, distance_km)


def and_(left: FilterExpr, right: FilterExpr) -> BinaryFilter:
    """AND two filters together."""
    return BinaryFilter(left, Combiner.AND, right)


def or_(left: FilterExpr, right: FilterExpr) -> BinaryFilter:
    """OR two filters together."""
    return BinaryFilter(left, Combiner.OR, right)


def combine(filters: Iterable[FilterExpr]) -> FilterExpr:
    """
    AND a sequence of filters together.

    The fold is seeded with the identity filter, so an empty sequence
    yields ``IDENTITY_FILTER`` and the compiled form of a non-empty one
    starts with ``true and``.
    """
    return reduce(and_, filters, IDENTITY_FILTER)


# ============================================================================
# Compilation
# ============================================================================


def geo_distance(field: str, longitude: float, latitude: float) -> str:
    """Render the ``geo.distance`` call between a field and a point."""
    return f"geo.distance({field}, geography'POINT({longitude:f} {latitude:f})')"


def format_literal(value: FilterValue) -> str:
    """Render a non-null literal in OData syntax."""
    if isinstance(value, str):
        escaped = value.replace("'", "''")
        return f"'{escaped}'"
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "INF" if value > 0 else "-INF"
        return repr(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat().replace("+00:00", "Z")
    raise TypeError(f"Unsupported filter value type: {type(value).__name__}")


def compile_filter(expr: FilterExpr) -> str:
    """
    Compile a filter expression to an OData ``$filter`` string.

    No parentheses are added: grouping follows the nesting of the
    expression exactly as it was built.

    Args:
        expr: Filter expression to compile

    Returns:
        The filter string, e.g. ``"Age eq 21 and Name eq 'Isaac'"``
    """
    if isinstance(expr, FieldFilter):
        if expr.is_identity:
            return "true"
        return f"{expr.field} {expr.comparison} {format_literal(expr.value)}"

    if isinstance(expr, GeoDistanceFilter):
        lhs = geo_distance(expr.field, expr.longitude, expr.latitude)
        return f"{lhs} {expr.comparison} {expr.distance_km:f}"

    if isinstance(expr, BinaryFilter):
        return f"{compile_filter(expr.left)} {expr.combiner} {compile_filter(expr.right)}"

    raise TypeError(f"Not a filter expression: {expr!r}")
