#!/usr/bin/env python3
"""
Demo: US state time series on a geofacet grid

Builds a synthetic cases/deaths table for every state, then draws
  1. a single-axis geofacet with linked axes and a shared legend
  2. a dual-axis geofacet (cases left, deaths right)
  3. a small custom grid with placeholder cells for missing regions
"""

from pathlib import Path

import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")

from GeoFacetPlot import (
    GeoGrid,
    geofacet,
    load_us_state_grid,
    list_available_grids,
)

print("=" * 70)
print("  GEOFACET DEMO")
print("=" * 70)

output_dir = Path("./geofacet_demo_output")
output_dir.mkdir(exist_ok=True)

# ============================================================================
# STEP 1: Grid and data
# ============================================================================
print("\n1. Loading grid...")

print(f"   Bundled grids: {list_available_grids()}")
grid = load_us_state_grid()
print(f"   ✓ {grid}")

print("\n2. Generating synthetic data...")

rng = np.random.default_rng(0)
years = np.arange(2015, 2025)
rows = []
for code in grid.entities:
    base = rng.uniform(50, 500)
    growth = rng.uniform(0.95, 1.10)
    for i, year in enumerate(years):
        cases = base * growth ** i * rng.uniform(0.9, 1.1)
        rows.append({"state": code, "year": year,
                     "cases": cases, "deaths": cases * rng.uniform(0.01, 0.03)})
df = pd.DataFrame(rows)
print(f"   ✓ {len(df)} rows for {df['state'].nunique()} states")

# ============================================================================
# STEP 2: Single-axis geofacet
# ============================================================================
print("\n3. Plotting cases per state...")


def plot_cases(cell, data, **axis_options):
    ax = cell.add_axis(title=cell.entity, **axis_options)
    ax.plot(data["year"], data["cases"], color="steelblue", label="cases")
    ax.title.set_fontsize(8)
    ax.tick_params(labelsize=6)


fig = geofacet(df, "state", plot_cases, grid=grid, link_axes="both",
               title="Cases by state, 2015-2024")
fig.savefig(output_dir / "cases_by_state.png", dpi=100)
print(f"   ✓ Saved: {output_dir / 'cases_by_state.png'}")

# ============================================================================
# STEP 3: Dual-axis geofacet
# ============================================================================
print("\n4. Plotting cases and deaths on twin axes...")


def plot_dual(cell, data, axis_options_list):
    left = cell.add_axis(title=cell.entity, **axis_options_list[0])
    right = cell.add_axis(**axis_options_list[1])
    left.plot(data["year"], data["cases"], color="steelblue", label="cases")
    right.plot(data["year"], data["deaths"], color="firebrick", label="deaths")
    for ax in (left, right):
        ax.tick_params(labelsize=6)
    left.title.set_fontsize(8)


fig = geofacet(df, "state", plot_dual, grid=grid, link_axes="both",
               axis_options_list=[{}, {"yaxis_position": "right"}],
               legend_options={"title": "Metric"})
fig.savefig(output_dir / "cases_and_deaths.png", dpi=100)
print(f"   ✓ Saved: {output_dir / 'cases_and_deaths.png'}")

# ============================================================================
# STEP 4: Custom grid with placeholders
# ============================================================================
print("\n5. Custom grid with a missing region...")

west = GeoGrid.from_arrays(
    ["WA", "OR", "CA", "ID", "NV"],
    [1, 2, 3, 1, 2],
    [1, 1, 1, 2, 2],
    names=["Washington", "Oregon", "California", "Idaho", "Nevada"],
    name="west_coast",
)
subset = df[df["state"].isin(["WA", "OR", "CA", "ID"])]

fig = geofacet(subset, "state", plot_cases, grid=west, link_axes="both",
               missing_regions="placeholder")
fig.savefig(output_dir / "west_coast.png", dpi=100)
print(f"   ✓ Drawn cells: {sorted(fig.facet_cells)}")
print(f"   ✓ Saved: {output_dir / 'west_coast.png'}")

print("\n" + "=" * 70)
print("  DONE")
print("=" * 70)
