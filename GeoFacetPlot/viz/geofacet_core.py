#!/usr/bin/env python3
"""
geofacet – one plot per region, laid out like the map.

Example
-------
>>> import pandas as pd
>>> from GeoFacetPlot import geofacet
>>> df = pd.DataFrame({'state': ['CA', 'TX', 'NY'],
...                    'year':  [2020, 2020, 2020],
...                    'value': [100, 85, 95]})
>>> def plot_state(cell, data, **axis_options):
...     ax = cell.add_axis(title=cell.display_name, **axis_options)
...     ax.bar(data['year'], data['value'])
>>> fig = geofacet(df, 'state', plot_state, extra_regions='warn')

The callback receives ``(cell, region_data, *plot_args, **plot_kwargs)``
plus the merged axis options: as keyword arguments when the facet has one
axis, or as ``axis_options_list=[...]`` when several axes are configured
or when the callback declares an ``axis_options_list`` parameter.
"""

import inspect
import warnings
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Tuple, Union

import pandas as pd

from GeoFacetPlot.core.geo_grid import GeoGrid
from GeoFacetPlot.core.grid_operations import filter_grid, grid_dimensions
from GeoFacetPlot.errors import (
    ColumnNotFoundError,
    EmptyInputError,
    ExtraRegionsError,
    ExtraRegionsWarning,
    InvalidOptionError,
    MissingRegionsError,
    NoLabeledPlotsWarning,
    RenderFailureWarning,
)
from GeoFacetPlot.loaders.grid_loader import default_grid
from GeoFacetPlot.viz.axis_options import (
    compute_decoration_options,
    merge_axis_options,
    resolve_num_axes,
)
from GeoFacetPlot.viz.cell import FacetCell
from GeoFacetPlot.viz.data_matching import (
    RegionIndex,
    find_extra_regions,
    find_missing_regions,
    has_region_data,
    prepare_grouped_data,
)
from GeoFacetPlot.viz.linking import LINK_AXES_MODES, collect_legend_entries, link_cells

MISSING_REGION_POLICIES = ('skip', 'placeholder', 'error')
EXTRA_REGION_POLICIES = ('warn', 'error')

DEFAULT_LINK_AXES = 'none'
DEFAULT_MISSING_REGIONS = 'skip'
DEFAULT_EXTRA_REGIONS = 'error'

DEFAULT_CELL_SIZE_IN = (2.0, 1.5)     # (width, height) per grid cell
LEGEND_SIZE_RATIO = 0.8               # legend column width relative to a cell
COLLAPSED_RATIO = 1e-3                # unused legend slot


# ---------------------------------------------------------------------------
# validation helpers
# ---------------------------------------------------------------------------

def _check_choice(name: str, value, allowed: Sequence[str]) -> None:
    if value not in allowed:
        raise InvalidOptionError(f"{name} must be one of {list(allowed)}, got {value!r}")


def _check_axis_options(common_axis_options, axis_options_list) -> Tuple[Dict, List[Dict]]:
    if common_axis_options is None:
        common_axis_options = {}
    if not isinstance(common_axis_options, Mapping):
        raise InvalidOptionError("common_axis_options must be a mapping")

    if axis_options_list is None:
        axis_options_list = []
    if (not isinstance(axis_options_list, (list, tuple))
            or not all(isinstance(o, Mapping) for o in axis_options_list)):
        raise InvalidOptionError("axis_options_list must be a list of mappings")
    return dict(common_axis_options), [dict(o) for o in axis_options_list]


def _span(part, default: Tuple[int, int], label: str) -> Tuple[int, int]:
    """Normalise one legend position part to a 1-based inclusive (start, stop)."""
    if part is None:
        return default
    if isinstance(part, range):
        if len(part) == 0 or part.step != 1:
            raise InvalidOptionError(f"legend {label} range must be contiguous and non-empty")
        start, stop = part.start, part.stop - 1
    elif isinstance(part, tuple) and len(part) == 2:
        start, stop = part
    elif isinstance(part, int) and not isinstance(part, bool):
        start = stop = part
    else:
        raise InvalidOptionError(f"legend {label} must be an int, a range or a (start, stop) tuple")
    if not (isinstance(start, int) and isinstance(stop, int)) or start < 1 or stop < start:
        raise InvalidOptionError(f"invalid legend {label} span ({start}, {stop})")
    return start, stop


def _legend_slot(legend_options: Mapping[str, Any], n_rows: int, n_cols: int):
    position = legend_options.get('position', (None, None))
    if not (isinstance(position, tuple) and len(position) == 2):
        raise InvalidOptionError("legend position must be a (row, col) tuple")
    rows = _span(position[0], (1, max(n_rows, 1)), 'row')
    cols = _span(position[1], (n_cols + 1, n_cols + 1), 'col')
    return rows, cols


def _default_figsize(width_ratios, height_ratios) -> Tuple[float, float]:
    return (DEFAULT_CELL_SIZE_IN[0] * sum(width_ratios),
            DEFAULT_CELL_SIZE_IN[1] * sum(height_ratios))


def _wants_axis_options_list(plot_func: Callable) -> bool:
    try:
        parameters = inspect.signature(plot_func).parameters
    except (TypeError, ValueError):
        return False
    return 'axis_options_list' in parameters


# ---------------------------------------------------------------------------
# main entry point
# ---------------------------------------------------------------------------

def geofacet(data: pd.DataFrame,
             region_col,
             plot_func: Callable,
             *plot_args,
             grid: Optional[GeoGrid] = None,
             link_axes: str = DEFAULT_LINK_AXES,
             missing_regions: str = DEFAULT_MISSING_REGIONS,
             extra_regions: str = DEFAULT_EXTRA_REGIONS,
             hide_inner_decorations: bool = True,
             common_axis_options: Optional[Mapping[str, Any]] = None,
             axis_options_list: Optional[Sequence[Mapping[str, Any]]] = None,
             legend_options: Union[None, bool, Mapping[str, Any]] = None,
             title: str = "",
             title_options: Optional[Mapping[str, Any]] = None,
             figure_options: Optional[Mapping[str, Any]] = None,
             plot_kwargs: Optional[Mapping[str, Any]] = None):
    """
    Draw one facet per region, arranged on a geographic grid.

    Parameters
    ----------
    data : pandas.DataFrame
        Long-format table with one or more rows per region.
    region_col : str
        Column holding region codes (matched case-insensitively).
    plot_func : callable
        ``plot_func(cell, region_data, *plot_args, **kwargs)``; see module
        docstring for how axis options are passed.
    *plot_args
        Extra positional arguments forwarded to *plot_func*.
    grid : GeoGrid, optional
        Layout; defaults to the bundled ``us_state_grid1``.
    link_axes : {'none', 'x', 'y', 'both'}
        Give corresponding axes of all facets a common range.
    missing_regions : {'skip', 'placeholder', 'error'}
        What to do with grid regions that have no data.
    extra_regions : {'warn', 'error'}
        What to do with data regions the grid does not place.
    hide_inner_decorations : bool
        Hide ticks/labels on inner edges of linked axes.
    common_axis_options : dict, optional
        Options applied to every axis.
    axis_options_list : list of dict, optional
        Per-axis options; its length sets the number of axes per facet.
    legend_options : None, False or dict
        ``None`` adds a legend when labelled plots exist, ``False`` never
        adds one, a dict requests one (``title``, ``position=(row, col)``,
        other keys go to ``SubFigure.legend``).
    title : str
        Figure title.
    title_options : dict, optional
        Keyword arguments for ``Figure.suptitle``.
    figure_options : dict, optional
        Keyword arguments for ``plt.figure`` (``figsize``, ``dpi``, …).
    plot_kwargs : dict, optional
        Extra keyword arguments forwarded to *plot_func*.

    Returns
    -------
    fig : matplotlib.figure.Figure
        ``fig.facet_cells`` maps each drawn region to its FacetCell and
        ``fig.facet_legend`` holds the legend (or None).
    """
    # -- validate ---------------------------------------------------------
    if not isinstance(data, pd.DataFrame):
        data = pd.DataFrame(data)
    if len(data) == 0:
        raise EmptyInputError("Data cannot be empty")
    if region_col not in data.columns:
        raise ColumnNotFoundError(f"Column {region_col} not found in data")

    _check_choice('link_axes', link_axes, LINK_AXES_MODES)
    _check_choice('missing_regions', missing_regions, MISSING_REGION_POLICIES)
    _check_choice('extra_regions', extra_regions, EXTRA_REGION_POLICIES)
    common_axis_options, axis_options_list = _check_axis_options(
        common_axis_options, axis_options_list)

    if legend_options is True:
        legend_options = {}
    if legend_options is not None and legend_options is not False \
            and not isinstance(legend_options, Mapping):
        raise InvalidOptionError("legend_options must be None, False or a mapping")

    if grid is None:
        grid = default_grid()
    plot_kwargs = dict(plot_kwargs or {})

    # -- partition --------------------------------------------------------
    grouped = prepare_grouped_data(data, region_col)
    region_index = RegionIndex(grouped)
    available_regions = region_index.available

    # -- cross-check ------------------------------------------------------
    if missing_regions == 'error':
        missing = find_missing_regions(grid, available_regions)
        if missing:
            raise MissingRegionsError(missing)

    extra = find_extra_regions(grid, region_index.original_keys)
    if extra:
        if extra_regions == 'error':
            raise ExtraRegionsError(extra)
        warnings.warn(ExtraRegionsWarning(
            "Additional regions in data not present in the grid provided: "
            + ", ".join(extra)), stacklevel=2)

    # -- neighbour-detection grid ------------------------------------------
    if missing_regions == 'placeholder':
        neighbor_grid = grid
    else:
        neighbor_grid = filter_grid(
            grid, lambda entry: has_region_data(available_regions, entry.entity))

    # -- figure -----------------------------------------------------------
    import matplotlib.pyplot as plt

    max_row, max_col = grid_dimensions(grid)
    legend_enabled = legend_options is not False
    if legend_enabled:
        legend_rows, legend_cols = _legend_slot(legend_options or {}, max_row, max_col)
    else:
        legend_rows, legend_cols = (1, 1), (1, 1)
    n_rows = max(max_row, legend_rows[1] if legend_enabled else 0, 1)
    n_cols = max(max_col, legend_cols[1] if legend_enabled else 0, 1)

    width_ratios = [1.0 if c <= max_col else LEGEND_SIZE_RATIO for c in range(1, n_cols + 1)]
    height_ratios = [1.0 if r <= max_row else LEGEND_SIZE_RATIO for r in range(1, n_rows + 1)]

    figure_options = dict(figure_options or {})
    fig_kwargs = {'figsize': _default_figsize(width_ratios, height_ratios)}
    fig_kwargs.update(figure_options)
    fig = plt.figure(**fig_kwargs)
    gs = fig.add_gridspec(n_rows, n_cols, width_ratios=width_ratios,
                          height_ratios=height_ratios)

    # -- per-cell loop ----------------------------------------------------
    num_axes = resolve_num_axes(axis_options_list)
    list_form = num_axes > 1 or _wants_axis_options_list(plot_func)
    cells: Dict[str, FacetCell] = {}

    for entry in grid:
        entity, row, col = entry

        decorations = compute_decoration_options(
            neighbor_grid, entity, link_axes, hide_inner_decorations,
            common_axis_options, axis_options_list, num_axes)
        merged = merge_axis_options(
            common_axis_options, axis_options_list, decorations, num_axes)

        if has_region_data(available_regions, entity):
            cell = FacetCell(entry, fig.add_subfigure(gs[row - 1, col - 1]))
            cells[entity] = cell
            region_data = region_index.get(entity)
            try:
                if list_form:
                    plot_func(cell, region_data, *plot_args,
                              **dict(plot_kwargs, axis_options_list=merged))
                else:
                    plot_func(cell, region_data, *plot_args,
                              **dict(plot_kwargs, **merged[0]))
            except Exception as e:
                warnings.warn(RenderFailureWarning(entity, e), stacklevel=2)
        elif missing_regions == 'placeholder':
            cell = FacetCell(entry, fig.add_subfigure(gs[row - 1, col - 1]))
            cells[entity] = cell
            cell.add_placeholder(merged)

    # -- link pass --------------------------------------------------------
    link_cells(cells, link_axes)

    if title:
        fig.suptitle(title, **(title_options or {}))

    # -- legend pass ------------------------------------------------------
    legend = None
    if legend_enabled:
        handles, labels = collect_legend_entries(cells)
        if handles:
            options = dict(legend_options or {})
            options.pop('position', None)
            options.setdefault('loc', 'center')
            legend_fig = fig.add_subfigure(
                gs[legend_rows[0] - 1:legend_rows[1], legend_cols[0] - 1:legend_cols[1]])
            legend = legend_fig.legend(handles, labels, **options)
        else:
            if legend_options is not None:
                warnings.warn(NoLabeledPlotsWarning(
                    "Legend requested but no plots with labels found. Add labels "
                    "to your plots using the `label=` argument of the plotting "
                    "functions."), stacklevel=2)
            width_ratios = [r if c <= max_col else COLLAPSED_RATIO
                            for c, r in enumerate(width_ratios, start=1)]
            height_ratios = [r if i <= max_row else COLLAPSED_RATIO
                             for i, r in enumerate(height_ratios, start=1)]
            gs.set_width_ratios(width_ratios)
            gs.set_height_ratios(height_ratios)
            if 'figsize' not in figure_options:
                fig.set_size_inches(_default_figsize(width_ratios, height_ratios))

    fig.facet_cells = cells
    fig.facet_legend = legend
    return fig
