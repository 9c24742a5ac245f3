"""
Grid loaders – CSV grid layouts and the bundled grid catalogue.

Adding a bundled layout: drop a ``<name>.csv`` into ``loaders/grids``;
it is then available through ``load_grid("<name>")``.
"""

from GeoFacetPlot.loaders.grid_loader import (
    GRIDS_DIR,
    DEFAULT_GRID_NAME,
    load_grid_from_csv,
    list_available_grids,
    load_grid,
    load_us_state_grid,
    load_us_state_grid_without_dc,
    load_us_contiguous_grid,
    default_grid,
)

__all__ = [
    'GRIDS_DIR', 'DEFAULT_GRID_NAME',
    'load_grid_from_csv', 'list_available_grids', 'load_grid',
    'load_us_state_grid', 'load_us_state_grid_without_dc',
    'load_us_contiguous_grid',
    'default_grid',
]
