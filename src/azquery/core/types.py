"""Core enums used by the filter and sort expression models."""

from enum import StrEnum


class Comparison(StrEnum):
    """Comparison operators of the filter language."""

    EQ = "eq"
    NE = "ne"
    GT = "gt"
    LT = "lt"
    GE = "ge"
    LE = "le"


class Combiner(StrEnum):
    """Logical operators joining two filters."""

    AND = "and"
    OR = "or"


class Direction(StrEnum):
    """Sort direction."""

    ASCENDING = "asc"
    DESCENDING = "desc"
