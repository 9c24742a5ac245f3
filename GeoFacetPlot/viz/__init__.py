"""
Visualization module – geofaceted plotting on matplotlib.

``geofacet`` is the entry point; the other names are the building blocks
it uses (data matching, axis-option merging, cells, cross-facet linking).
"""

from GeoFacetPlot.viz.cell         import FacetCell, apply_axis_options
from GeoFacetPlot.viz.data_matching import (
    RegionIndex,
    prepare_grouped_data,
    get_available_regions,
    has_region_data,
    get_region_data,
    find_missing_regions,
    find_extra_regions,
)
from GeoFacetPlot.viz.axis_options import (
    get_yaxis_position,
    compute_decoration_options,
    merge_axis_options,
)
from GeoFacetPlot.viz.linking      import (
    LINK_AXES_MODES,
    collect_axes_by_position,
    link_axes,
    link_cells,
    collect_legend_entries,
    has_labeled_plots,
)
from GeoFacetPlot.viz.geofacet_core import (
    geofacet,
    MISSING_REGION_POLICIES,
    EXTRA_REGION_POLICIES,
)

__all__ = [
    'geofacet',
    'FacetCell', 'apply_axis_options',
    'RegionIndex', 'prepare_grouped_data', 'get_available_regions',
    'has_region_data', 'get_region_data',
    'find_missing_regions', 'find_extra_regions',
    'get_yaxis_position', 'compute_decoration_options', 'merge_axis_options',
    'LINK_AXES_MODES', 'collect_axes_by_position', 'link_axes', 'link_cells',
    'collect_legend_entries', 'has_labeled_plots',
    'MISSING_REGION_POLICIES', 'EXTRA_REGION_POLICIES',
]
