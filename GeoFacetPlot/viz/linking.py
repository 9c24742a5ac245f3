#!/usr/bin/env python3
"""
Cross-facet coordination: axis linking and legend collection.

Axes are grouped by *creation order within a cell*: the first axis of
every facet forms one group, the second axis of every facet another, and
so on.  In dual-axis facets the left axes are therefore linked with each
other and never with the right axes.
"""

from typing import Dict, Iterable, List, Mapping, Sequence, Tuple, Union

from GeoFacetPlot.viz.cell import FacetCell

LINK_AXES_MODES = ('none', 'x', 'y', 'both')


def _iter_cells(cells: Union[Mapping[str, FacetCell], Iterable[FacetCell]]):
    if isinstance(cells, Mapping):
        return list(cells.values())
    return list(cells)


def collect_axes_by_position(cells) -> List[List]:
    """``result[i]`` holds the i-th created axis of every cell that has one."""
    groups: List[List] = []
    for cell in _iter_cells(cells):
        for pos, ax in enumerate(cell.axes):
            if pos == len(groups):
                groups.append([])
            groups[pos].append(ax)
    return groups


def _union_limits(limits: Sequence[Tuple[float, float]]) -> Tuple[float, float, bool]:
    lows = [min(lo, hi) for lo, hi in limits]
    highs = [max(lo, hi) for lo, hi in limits]
    inverted = limits[0][0] > limits[0][1]
    return min(lows), max(highs), inverted


def link_axes(axes: Sequence, which: str) -> None:
    """
    Give every axis in *axes* the same x and/or y range.

    The shared range is the union of the current (autoscaled) limits of
    the axes that hold data; empty axes (placeholders, failed callbacks)
    only receive it.  Orientation of the first data axis is kept.
    """
    if which not in LINK_AXES_MODES:
        raise ValueError(f"link mode must be one of {LINK_AXES_MODES}, got {which!r}")
    if which == 'none' or len(axes) < 2:
        return

    sources = [ax for ax in axes if ax.has_data()]
    if not sources:
        return

    if which in ('x', 'both'):
        lo, hi, inverted = _union_limits([ax.get_xlim() for ax in sources])
        for ax in axes:
            ax.set_xlim((hi, lo) if inverted else (lo, hi))
    if which in ('y', 'both'):
        lo, hi, inverted = _union_limits([ax.get_ylim() for ax in sources])
        for ax in axes:
            ax.set_ylim((hi, lo) if inverted else (lo, hi))


def link_cells(cells, link_mode: str) -> List[List]:
    """Link each creation-position group; returns the groups."""
    groups = collect_axes_by_position(cells)
    if link_mode != 'none':
        for group in groups:
            link_axes(group, link_mode)
    return groups


# ---------------------------------------------------------------------------
# legend
# ---------------------------------------------------------------------------

def collect_legend_entries(cells) -> Tuple[List, List[str]]:
    """
    Unique (handle, label) pairs over all cells, first occurrence wins.

    Labels that are empty or start with ``_`` are skipped, following the
    matplotlib convention for artists excluded from legends.
    """
    entries: Dict[str, object] = {}
    for cell in _iter_cells(cells):
        for ax in cell.axes:
            handles, labels = ax.get_legend_handles_labels()
            for handle, label in zip(handles, labels):
                if label and not label.startswith('_') and label not in entries:
                    entries[label] = handle
    return list(entries.values()), list(entries.keys())


def has_labeled_plots(cells_or_figure) -> bool:
    """True if any axis carries at least one legend-eligible artist."""
    if hasattr(cells_or_figure, 'get_axes'):
        axes = cells_or_figure.get_axes()
    else:
        axes = [ax for cell in _iter_cells(cells_or_figure) for ax in cell.axes]
    for ax in axes:
        _, labels = ax.get_legend_handles_labels()
        if any(label and not label.startswith('_') for label in labels):
            return True
    return False
