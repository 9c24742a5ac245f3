"""Core module: grid entries, grid layouts and grid queries."""

from GeoFacetPlot.core.grid_entry import GridEntry
from GeoFacetPlot.core.geo_grid import GeoGrid
from GeoFacetPlot.core.grid_operations import (
    grid_dimensions,
    validate_grid,
    has_entity,
    get_position,
    get_entity_at,
    get_entities,
    is_complete_rectangle,
    has_neighbor_above,
    has_neighbor_below,
    has_neighbor_left,
    has_neighbor_right,
    filter_grid,
)

__all__ = [
    'GridEntry', 'GeoGrid',
    'grid_dimensions', 'validate_grid',
    'has_entity', 'get_position', 'get_entity_at', 'get_entities',
    'is_complete_rectangle',
    'has_neighbor_above', 'has_neighbor_below',
    'has_neighbor_left', 'has_neighbor_right',
    'filter_grid',
]
