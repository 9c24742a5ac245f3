#!/usr/bin/env python3
"""
Pure queries over a GeoGrid.

Neighbour tests are *existential*: ``has_neighbor_below(grid, e)`` is True
when any entry sits in the same column at a strictly greater row, not only
at ``row + 1``.  Sparse grids therefore still hide inner axis labels across
gaps.
"""

from typing import Callable, Iterable, List, Optional, Tuple, Union

import numpy as np

from GeoFacetPlot.core.geo_grid import GeoGrid
from GeoFacetPlot.core.grid_entry import GridEntry
from GeoFacetPlot.errors import PositionConflictError


def grid_dimensions(grid: GeoGrid) -> Tuple[int, int]:
    """(max_row, max_col); (0, 0) for an empty grid."""
    return grid.dimensions


def validate_grid(grid: GeoGrid) -> bool:
    """Re-check that no two entries share a cell."""
    position_to_entity = {}
    for entity, row, col in grid:
        position = (row, col)
        if position in position_to_entity:
            raise PositionConflictError(position_to_entity[position], entity, position)
        position_to_entity[position] = entity
    return True


def has_entity(grid: GeoGrid, entity: str) -> bool:
    return entity in grid


def get_position(grid: GeoGrid, entity: str) -> Optional[Tuple[int, int]]:
    entry = grid.entry_for(entity)
    return None if entry is None else entry.position


def get_entity_at(grid: GeoGrid, row: int, col: int) -> Optional[str]:
    return grid.entity_at(row, col)


def get_entities(grid: GeoGrid) -> List[str]:
    return list(grid.entities)


def is_complete_rectangle(grid: GeoGrid) -> bool:
    """True when every cell of the bounding rectangle is occupied."""
    if len(grid) == 0:
        return True
    max_row, max_col = grid.dimensions
    return len(grid) == max_row * max_col


# ---------------------------------------------------------------------------
# neighbour detection
# ---------------------------------------------------------------------------

def has_neighbor_below(grid: GeoGrid, entity: str) -> bool:
    pos = get_position(grid, entity)
    if pos is None:
        return False
    row, col = pos
    return bool(np.any((grid.cols == col) & (grid.rows > row)))


def has_neighbor_above(grid: GeoGrid, entity: str) -> bool:
    pos = get_position(grid, entity)
    if pos is None:
        return False
    row, col = pos
    return bool(np.any((grid.cols == col) & (grid.rows < row)))


def has_neighbor_left(grid: GeoGrid, entity: str) -> bool:
    pos = get_position(grid, entity)
    if pos is None:
        return False
    row, col = pos
    return bool(np.any((grid.rows == row) & (grid.cols < col)))


def has_neighbor_right(grid: GeoGrid, entity: str) -> bool:
    pos = get_position(grid, entity)
    if pos is None:
        return False
    row, col = pos
    return bool(np.any((grid.rows == row) & (grid.cols > col)))


def filter_grid(grid: GeoGrid,
                keep: Union[Callable[[GridEntry], bool], Iterable[str]]) -> GeoGrid:
    """New grid holding only the entries selected by *keep* (see GeoGrid.filter)."""
    return grid.filter(keep)
