#!/usr/bin/env python3
"""
Exceptions and warning categories for GeoFacetPlot.

Errors abort the current call (grid construction or ``geofacet``).
Warnings are emitted with ``warnings.warn`` and never stop rendering;
callers may filter them or promote them to errors as usual.
"""

from typing import Iterable, List, Optional, Tuple


# ---------------------------------------------------------------------------
# errors
# ---------------------------------------------------------------------------

class GeoFacetError(ValueError):
    """Base class for all GeoFacetPlot errors."""


class GridError(GeoFacetError):
    """A grid layout could not be built or loaded."""


class InvalidEntityError(GridError):
    """Entity code is empty, whitespace-only or duplicated."""


class InvalidPositionError(GridError):
    """Row or column is not a positive integer."""


class PositionConflictError(GridError):
    """Two entities occupy the same (row, col) cell."""

    def __init__(self, first: str, second: str, position: Tuple[int, int]):
        self.entities = (first, second)
        self.position = position
        super().__init__(
            f"Position conflict: regions '{first}' and '{second}' "
            f"both at position {position}"
        )


class ShapeMismatchError(GridError):
    """Parallel input arrays have different lengths."""


class GridFileNotFoundError(GridError):
    """Grid CSV file does not exist."""


class GridFormatError(GridError):
    """Grid CSV file is missing required columns or cannot be parsed."""


class EmptyInputError(GeoFacetError):
    """Input table has no rows."""


class ColumnNotFoundError(GeoFacetError):
    """Region column is not present in the input table."""


class InvalidOptionError(GeoFacetError):
    """Option value is outside its allowed set."""


class _RegionListError(GeoFacetError):

    label = ""

    def __init__(self, regions: Iterable[str], message: Optional[str] = None):
        self.regions: List[str] = list(regions)
        if message is None:
            message = f"{self.label}: {', '.join(self.regions)}"
        super().__init__(message)


class MissingRegionsError(_RegionListError):
    """Grid regions without any rows in the data (``missing_regions='error'``)."""

    label = "Missing regions in data"


class ExtraRegionsError(_RegionListError):
    """Data regions not present in the grid (``extra_regions='error'``)."""

    label = "Additional regions in data not present in the grid provided"


# ---------------------------------------------------------------------------
# warnings
# ---------------------------------------------------------------------------

class GeoFacetWarning(UserWarning):
    """Base class for all GeoFacetPlot warnings."""


class ExtraRegionsWarning(GeoFacetWarning):
    """Data contains regions the grid does not place; they are ignored."""


class RenderFailureWarning(GeoFacetWarning):
    """The plotting callback raised for one entity; other facets still render."""

    def __init__(self, entity: str, cause: BaseException):
        self.entity = entity
        self.cause = cause
        super().__init__(
            f"Error plotting region {entity}: {type(cause).__name__}: {cause}"
        )


class NoLabeledPlotsWarning(GeoFacetWarning):
    """A legend was requested but no plot carries a label."""
