#!/usr/bin/env python3
"""
FacetCell – the container handed to a plotting callback for one region.

A cell wraps a matplotlib SubFigure placed at the region's grid position.
Callbacks create their axes through ``cell.add_axis(**axis_options)`` so
the merged per-axis options (including inner-decoration hiding) are applied
consistently, and so the axes are recorded in creation order for linking::

    def plot_state(cell, data, **axis_options):
        ax = cell.add_axis(**axis_options)
        ax.plot(data['year'], data['value'], label='value')

The first ``add_axis()`` fills the whole cell; later calls overlay a twin
axis sharing x (dual y-axis facets).  Positional subplot arguments
(``cell.add_axis(2, 1, 2, **opts)``) stack axes inside the cell instead.
"""

from typing import Any, Dict, List, Optional

from GeoFacetPlot.core.grid_entry import GridEntry

_X_SIDES = ('bottom', 'top')
_Y_SIDES = ('left', 'right')


def _set_tick_visibility(ax, axis: str, sides, ticks: Optional[bool],
                         ticklabels: Optional[bool]) -> None:
    params = {}
    for side in sides:
        if ticks is not None:
            params[side] = ticks
        if ticklabels is not None:
            params['label' + side] = ticklabels
    if params:
        ax.tick_params(axis=axis, which='both', **params)


def apply_axis_options(ax, **options) -> None:
    """
    Apply merged axis options to a matplotlib Axes.

    Recognised keys
    ---------------
    xaxis_position : 'bottom' | 'top'
    yaxis_position : 'left' | 'right'
    xticks_visible, xticklabels_visible, xlabel_visible : bool
    yticks_visible, yticklabels_visible, ylabel_visible : bool

    Everything else is forwarded to ``Axes.set`` (``title``, ``xlabel``,
    ``ylim``, ``facecolor``, …).
    """
    options = dict(options)

    xpos = options.pop('xaxis_position', None)
    ypos = options.pop('yaxis_position', None)
    if xpos == 'top':
        ax.xaxis.tick_top()
        ax.xaxis.set_label_position('top')
    elif xpos == 'bottom':
        ax.xaxis.tick_bottom()
        ax.xaxis.set_label_position('bottom')
    if ypos == 'right':
        ax.yaxis.tick_right()
        ax.yaxis.set_label_position('right')
    elif ypos == 'left':
        ax.yaxis.tick_left()
        ax.yaxis.set_label_position('left')

    xticks = options.pop('xticks_visible', None)
    xticklabels = options.pop('xticklabels_visible', None)
    xlabel_visible = options.pop('xlabel_visible', None)
    yticks = options.pop('yticks_visible', None)
    yticklabels = options.pop('yticklabels_visible', None)
    ylabel_visible = options.pop('ylabel_visible', None)

    x_side = (ax.xaxis.get_label_position(),)
    y_side = (ax.yaxis.get_label_position(),)
    # hiding clears both sides; showing only restores the active side
    _set_tick_visibility(ax, 'x', _X_SIDES if xticks is False else x_side, xticks, None)
    _set_tick_visibility(ax, 'x', _X_SIDES if xticklabels is False else x_side, None, xticklabels)
    _set_tick_visibility(ax, 'y', _Y_SIDES if yticks is False else y_side, yticks, None)
    _set_tick_visibility(ax, 'y', _Y_SIDES if yticklabels is False else y_side, None, yticklabels)

    if xlabel_visible is not None:
        ax.xaxis.label.set_visible(xlabel_visible)
    if ylabel_visible is not None:
        ax.yaxis.label.set_visible(ylabel_visible)

    if options:
        ax.set(**options)


class FacetCell:
    """
    One region's slot in the geofacet figure.

    Attributes
    ----------
    entry : GridEntry
        Grid placement of the region.
    subfigure : matplotlib.figure.SubFigure
        Drawing area for this cell.
    axes : list of Axes
        Axes created through ``add_axis``, in creation order.
    placeholder : bool
        True for empty cells drawn for regions without data.
    """

    def __init__(self, entry: GridEntry, subfigure, placeholder: bool = False):
        self.entry = entry
        self.subfigure = subfigure
        self.axes: List[Any] = []
        self.placeholder = placeholder

    @property
    def entity(self) -> str:
        return self.entry.entity

    @property
    def display_name(self) -> str:
        return self.entry.display_name

    def add_axis(self, *subplot_args, **options):
        """Create an axis in this cell and apply *options* to it."""
        if subplot_args:
            ax = self.subfigure.add_subplot(*subplot_args)
        elif self.axes:
            ax = self.axes[0].twinx()
        else:
            ax = self.subfigure.add_subplot(1, 1, 1)
        apply_axis_options(ax, **options)
        self.axes.append(ax)
        return ax

    def add_placeholder(self, axis_options_list: List[Dict[str, Any]]) -> None:
        """Empty axes titled with the region code, one per configured axis."""
        self.placeholder = True
        for options in axis_options_list:
            self.add_axis(**dict(options, title=self.entity))
        if self.axes:
            self.axes[0].text(0.5, 0.5, 'No data', ha='center', va='center',
                              transform=self.axes[0].transAxes,
                              fontsize=8, color='lightgray')

    def __repr__(self) -> str:
        kind = "placeholder" if self.placeholder else "data"
        return f"<FacetCell {self.entity} at {self.entry.position} ({kind}, {len(self.axes)} axes)>"
