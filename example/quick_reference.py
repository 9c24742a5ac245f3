#!/usr/bin/env python3
"""
GeoFacetPlot - Quick Reference

This guide shows common tasks and workflows.
"""

# ============================================================================
# BASIC SETUP
# ============================================================================

import pandas as pd
import matplotlib
matplotlib.use("Agg")

from GeoFacetPlot import (
    GeoGrid,
    geofacet,
    load_grid,
    load_grid_from_csv,
    load_us_state_grid,
    list_available_grids,
    has_neighbor_below,
    MissingRegionsError,
    ExtraRegionsWarning,
)

df = pd.DataFrame({
    "state": ["CA", "CA", "TX", "TX", "NY", "NY"],
    "year":  [2020, 2021] * 3,
    "value": [100, 110, 85, 90, 95, 97],
})

# ============================================================================
# GRIDS
# ============================================================================

# --- Bundled layouts ---
print(list_available_grids())
grid = load_us_state_grid()                  # 50 states + DC
grid = load_grid("us_state_contiguous_grid1")

# --- Your own layout ---
grid = GeoGrid.from_positions({"CA": (1, 1), "NY": (1, 2), "TX": (2, 1)})
grid = GeoGrid.from_arrays(["CA", "NY", "TX"], [1, 1, 2], [1, 2, 1],
                           names=["California", "New York", "Texas"])
# grid = load_grid_from_csv("my_grid.csv")   # columns: row, col, code[, name, ...]

# --- Queries ---
print(grid.dimensions)                       # (max_row, max_col)
print(grid.entry_for("CA").display_name)
print(has_neighbor_below(grid, "CA"))        # TX sits below CA

# ============================================================================
# PLOTTING
# ============================================================================

# The callback gets the cell and that region's rows.  Always forward the
# axis options to add_axis so inner tick labels are hidden consistently.
def plot_state(cell, data, **axis_options):
    ax = cell.add_axis(title=cell.display_name, **axis_options)
    ax.plot(data["year"], data["value"], marker="o", label="value")

fig = geofacet(df, "state", plot_state, grid=grid, link_axes="both")
fig.savefig("quick_reference.png")

# --- Per-cell access ---
for code, cell in fig.facet_cells.items():
    print(code, cell.entry.position, len(cell.axes))

# ============================================================================
# MISSING / EXTRA REGIONS
# ============================================================================

# Regions in the grid without data: skip (default), placeholder, or error
fig = geofacet(df[df.state != "TX"], "state", plot_state, grid=grid,
               missing_regions="placeholder")

try:
    geofacet(df[df.state != "TX"], "state", plot_state, grid=grid,
             missing_regions="error")
except MissingRegionsError as e:
    print(f"Missing: {e.regions}")

# Regions in the data but not in the grid: error (default) or warn
import warnings
with warnings.catch_warnings():
    warnings.simplefilter("ignore", ExtraRegionsWarning)
    fig = geofacet(df, "state", plot_state,
                   grid=grid.filter({"CA", "NY"}), extra_regions="warn")

# ============================================================================
# AXIS OPTIONS
# ============================================================================

# Applied to every axis; unknown keys go to Axes.set
fig = geofacet(df, "state", plot_state, grid=grid,
               common_axis_options={"ylim": (0, 150), "xlabel": "year"})

# Visibility/position keys understood by cell.add_axis:
#   xticks_visible, xticklabels_visible, xlabel_visible
#   yticks_visible, yticklabels_visible, ylabel_visible
#   xaxis_position ('bottom'/'top'), yaxis_position ('left'/'right')

# ============================================================================
# DUAL AXES
# ============================================================================

df["rate"] = df["value"] / 10

def plot_dual(cell, data, axis_options_list):
    left = cell.add_axis(**axis_options_list[0])
    right = cell.add_axis(**axis_options_list[1])    # twin sharing x
    left.plot(data["year"], data["value"], label="value")
    right.plot(data["year"], data["rate"], color="firebrick", label="rate")

fig = geofacet(df, "state", plot_dual, grid=grid, link_axes="both",
               axis_options_list=[{}, {"yaxis_position": "right"}])

# ============================================================================
# LEGEND AND FIGURE
# ============================================================================

fig = geofacet(df, "state", plot_state, grid=grid,
               legend_options={"title": "Series", "position": (1, 3)},
               title="Quick reference",
               figure_options={"figsize": (6, 4), "dpi": 100})

fig = geofacet(df, "state", plot_state, grid=grid, legend_options=False)
