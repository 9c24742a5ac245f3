#!/usr/bin/env python3
"""
Per-axis option merging and inner-decoration hiding.

Every facet may hold several axes (e.g. a dual y-axis plot).  For axis *i*
the final options are layered, later layers winning on key collisions::

    common_axis_options  <  axis_options_list[i]  <  decoration options

Decoration options hide tick marks, tick labels and axis labels on the
inner edges of the grid when axes are linked, because a neighbouring facet
already shows the same scale.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

from GeoFacetPlot.core.geo_grid import GeoGrid
from GeoFacetPlot.core.grid_operations import (
    has_neighbor_below,
    has_neighbor_left,
    has_neighbor_right,
)

HIDE_X_DECORATIONS = {
    'xticks_visible':      False,
    'xticklabels_visible': False,
    'xlabel_visible':      False,
}

HIDE_Y_DECORATIONS = {
    'yticks_visible':      False,
    'yticklabels_visible': False,
    'ylabel_visible':      False,
}

DEFAULT_YAXIS_POSITION = 'left'


def get_yaxis_position(axis_options: Mapping[str, Any]) -> str:
    """``'left'`` or ``'right'``; left unless the options say otherwise."""
    return axis_options.get('yaxis_position', DEFAULT_YAXIS_POSITION)


def resolve_num_axes(axis_options_list: Sequence[Mapping], num_axes: int = 0) -> int:
    """Explicit count, else one per entry of *axis_options_list*, else 1."""
    if num_axes:
        return num_axes
    return len(axis_options_list) or 1


def compute_decoration_options(grid: GeoGrid, entity: str, link_axes: str,
                               hide_inner_decorations: bool = True,
                               common_options: Optional[Mapping[str, Any]] = None,
                               axis_options_list: Sequence[Mapping[str, Any]] = (),
                               num_axes: int = 0) -> List[Dict[str, Any]]:
    """
    Decoration-hiding options for each axis of *entity*'s facet.

    Parameters
    ----------
    grid : GeoGrid
        Neighbour-detection grid – the full grid when empty placeholders are
        drawn, otherwise only the regions that have data.
    entity : str
        Region code of the facet.
    link_axes : {'none', 'x', 'y', 'both'}
    hide_inner_decorations : bool
        When False every returned dict is empty.
    common_options, axis_options_list
        Used only to resolve each axis' ``yaxis_position``.

    Returns
    -------
    list of dict
        One dict per axis.
    """
    common_options = common_options or {}
    num_axes = resolve_num_axes(axis_options_list, num_axes)

    per_axis: List[Dict[str, Any]] = []
    for i in range(num_axes):
        decoration: Dict[str, Any] = {}

        if hide_inner_decorations:
            if link_axes in ('x', 'both') and has_neighbor_below(grid, entity):
                decoration.update(HIDE_X_DECORATIONS)

            if link_axes in ('y', 'both'):
                resolved = dict(common_options)
                if i < len(axis_options_list):
                    resolved.update(axis_options_list[i])

                if get_yaxis_position(resolved) == 'right':
                    hide_y = has_neighbor_right(grid, entity)
                else:
                    hide_y = has_neighbor_left(grid, entity)
                if hide_y:
                    decoration.update(HIDE_Y_DECORATIONS)

        per_axis.append(decoration)

    return per_axis


def merge_axis_options(common_options: Optional[Mapping[str, Any]],
                       axis_options_list: Sequence[Mapping[str, Any]],
                       decoration_options: Sequence[Mapping[str, Any]],
                       num_axes: int = 0) -> List[Dict[str, Any]]:
    """Layer common, per-axis and decoration options into one fresh dict per axis."""
    common_options = common_options or {}
    num_axes = resolve_num_axes(axis_options_list, num_axes)

    merged_list = []
    for i in range(num_axes):
        merged = dict(common_options)
        if i < len(axis_options_list):
            merged.update(axis_options_list[i])
        if i < len(decoration_options):
            merged.update(decoration_options[i])
        merged_list.append(merged)
    return merged_list
