#!/usr/bin/env python3
"""
GeoFacetPlot: geofaceted small multiples for matplotlib.

Arranges one plot per region (US state, country, …) on a grid whose cells
approximate the real geographic layout.

Main Components
---------------
GeoGrid : Grid layout
    Ordered, validated collection of region placements
GridEntry : One placement
    Region code, row, col, display name, metadata
geofacet : Plotting entry point
    Partitions a DataFrame by region and calls your plot function per cell
FacetCell : Cell container
    Passed to your plot function; create axes with ``cell.add_axis()``

Grid Layouts
------------
load_grid : Bundled layout by name (``list_available_grids()``)
load_grid_from_csv : Custom layout from a geofacet-style CSV
load_us_state_grid, load_us_state_grid_without_dc, load_us_contiguous_grid

Basic Usage
-----------
>>> import pandas as pd
>>> from GeoFacetPlot import geofacet, load_us_state_grid
>>>
>>> df = pd.DataFrame({
...     'state': ['CA', 'CA', 'TX', 'TX', 'NY', 'NY'],
...     'year':  [2020, 2021] * 3,
...     'value': [100, 110, 85, 90, 95, 97],
... })
>>>
>>> def plot_state(cell, data, **axis_options):
...     ax = cell.add_axis(title=cell.entity, **axis_options)
...     ax.plot(data['year'], data['value'], label='value')
>>>
>>> fig = geofacet(df, 'state', plot_state,
...                grid=load_us_state_grid(), link_axes='both')
>>> fig.savefig('states.png')
"""

from GeoFacetPlot.version import __version__

__author__ = "GeoFacetPlot Team"

# Import main classes for public API
from GeoFacetPlot.core import (
    GridEntry,
    GeoGrid,
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
from GeoFacetPlot.loaders import (
    load_grid_from_csv,
    list_available_grids,
    load_grid,
    load_us_state_grid,
    load_us_state_grid_without_dc,
    load_us_contiguous_grid,
    default_grid,
)
from GeoFacetPlot.viz import geofacet, FacetCell
from GeoFacetPlot.errors import (
    GeoFacetError,
    GridError,
    InvalidEntityError,
    InvalidPositionError,
    PositionConflictError,
    ShapeMismatchError,
    GridFileNotFoundError,
    GridFormatError,
    EmptyInputError,
    ColumnNotFoundError,
    InvalidOptionError,
    MissingRegionsError,
    ExtraRegionsError,
    GeoFacetWarning,
    ExtraRegionsWarning,
    RenderFailureWarning,
    NoLabeledPlotsWarning,
)


# Define public API
__all__ = [
    # Grid model
    'GridEntry',
    'GeoGrid',

    # Grid queries
    'grid_dimensions', 'validate_grid',
    'has_entity', 'get_position', 'get_entity_at', 'get_entities',
    'is_complete_rectangle',
    'has_neighbor_above', 'has_neighbor_below',
    'has_neighbor_left', 'has_neighbor_right',
    'filter_grid',

    # Grid loading
    'load_grid_from_csv', 'list_available_grids', 'load_grid',
    'load_us_state_grid', 'load_us_state_grid_without_dc',
    'load_us_contiguous_grid', 'default_grid',

    # Plotting
    'geofacet',
    'FacetCell',

    # Errors and warnings
    'GeoFacetError', 'GridError',
    'InvalidEntityError', 'InvalidPositionError', 'PositionConflictError',
    'ShapeMismatchError', 'GridFileNotFoundError', 'GridFormatError',
    'EmptyInputError', 'ColumnNotFoundError', 'InvalidOptionError',
    'MissingRegionsError', 'ExtraRegionsError',
    'GeoFacetWarning', 'ExtraRegionsWarning', 'RenderFailureWarning',
    'NoLabeledPlotsWarning',
]


# Package information
def get_version():
    """Get package version."""
    return __version__


def get_info():
    """Get package information."""
    return {
        'name': 'GeoFacetPlot',
        'version': __version__,
        'description': 'Geofaceted small multiples for matplotlib',
        'author': __author__,
    }
