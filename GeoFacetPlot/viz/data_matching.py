#!/usr/bin/env python3
"""
Region data matching.

The input DataFrame is grouped once by the region column; nothing is
copied.  Region codes in user data are matched to grid codes
case-insensitively ("ca" finds the "CA" facet).
"""

from typing import FrozenSet, Iterable, List, Optional

import pandas as pd

from GeoFacetPlot.core.geo_grid import GeoGrid


def prepare_grouped_data(data: pd.DataFrame, region_col):
    """Group *data* by *region_col* without copying or sorting."""
    return data.groupby(region_col, sort=False, observed=True)


def _normalise(code) -> str:
    return str(code).upper()


class RegionIndex:
    """
    Upper-cased region code -> original group key for one grouped table.

    Built once per ``geofacet`` call so per-cell lookups do not rescan
    the groups.
    """

    def __init__(self, grouped):
        self.grouped = grouped
        self._keys = {}
        for key in grouped.groups:
            self._keys.setdefault(_normalise(key), key)

    @property
    def available(self) -> FrozenSet[str]:
        return frozenset(self._keys)

    @property
    def original_keys(self) -> List:
        return list(self.grouped.groups)

    def get(self, region_code: str) -> Optional[pd.DataFrame]:
        key = self._keys.get(_normalise(region_code))
        if key is None:
            return None
        return self.grouped.get_group(key)


def get_available_regions(grouped) -> FrozenSet[str]:
    """Upper-cased region codes present in *grouped*."""
    return frozenset(_normalise(key) for key in grouped.groups)


def has_region_data(available_regions: Iterable[str], region_code: str) -> bool:
    return _normalise(region_code) in available_regions


def get_region_data(grouped, region_code: str) -> Optional[pd.DataFrame]:
    """Group for *region_code* (case-insensitive), or None."""
    if isinstance(grouped, RegionIndex):
        return grouped.get(region_code)
    return RegionIndex(grouped).get(region_code)


def find_missing_regions(grid: GeoGrid, available_regions: Iterable[str]) -> List[str]:
    """Grid entities without data, sorted, in grid spelling."""
    available = set(available_regions)
    return sorted(e for e in grid.entities if _normalise(e) not in available)


def find_extra_regions(grid: GeoGrid, data_regions: Iterable) -> List[str]:
    """Data region codes the grid does not place, sorted, in data spelling."""
    grid_codes = {_normalise(e) for e in grid.entities}
    return sorted({str(k) for k in data_regions if _normalise(k) not in grid_codes})
