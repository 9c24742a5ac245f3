#!/usr/bin/env python3
"""
Grid loader – read geographic grid layouts from CSV.

CSV layout (the geofacet grid format)::

    row,col,code,name
    1,1,AK,Alaska
    1,11,ME,Maine
    ...

* ``row`` and ``col`` are required (1-based).
* The first column whose name contains ``code`` (any case) holds the
  entity identifier, e.g. ``code`` or ``code_alpha3``.
* ``name`` is optional and becomes the display name.
* Every other column is stored in ``GridEntry.metadata``.

Bundled layouts live in ``GeoFacetPlot/loaders/grids`` and are addressed by
file stem (``load_grid("us_state_grid1")``).
"""

import re
from functools import lru_cache
from numbers import Real
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from GeoFacetPlot.core.geo_grid import GeoGrid
from GeoFacetPlot.core.grid_entry import GridEntry
from GeoFacetPlot.errors import (
    GridFileNotFoundError,
    GridFormatError,
    InvalidOptionError,
)

GRIDS_DIR = Path(__file__).resolve().parent / "grids"

DEFAULT_GRID_NAME = "us_state_grid1"

REQUIRED_COLUMNS = ("row", "col")
CODE_PATTERN = re.compile(r"code", re.IGNORECASE)

# version -> bundled grid stem
US_STATE_GRIDS = {
    1: "us_state_grid1",
    2: "us_state_grid2",
    3: "us_state_grid3",
}
US_STATE_WITHOUT_DC_GRIDS = {
    1: "us_state_without_DC_grid1",
    2: "us_state_without_DC_grid2",
    3: "us_state_without_DC_grid3",
}
US_CONTIGUOUS_GRID = "us_state_contiguous_grid1"


def _resolve_csv_path(filename: Union[str, Path], directory: Optional[Union[str, Path]]) -> Path:
    filename = str(filename)
    if not filename.endswith(".csv"):
        filename = f"{filename}.csv"
    path = Path(directory) / filename if directory is not None else Path(filename)
    return path


def _metadata_value(value):
    if isinstance(value, float) and pd.isna(value):
        return None
    # numpy scalars -> builtin python values
    return value.item() if hasattr(value, "item") else value


def _as_position(value, column: str, csv_path: Path) -> int:
    if isinstance(value, Real) and not pd.isna(value) and float(value).is_integer():
        return int(value)
    raise GridFormatError(f"Non-integer {column} value {value!r} in {csv_path}")


def load_grid_from_csv(filename: Union[str, Path],
                       directory: Optional[Union[str, Path]] = None) -> GeoGrid:
    """
    Load a grid layout from a CSV file.

    Parameters
    ----------
    filename : str or Path
        File name or path; ``.csv`` is appended when missing.
    directory : str or Path, optional
        Directory joined in front of *filename*.

    Returns
    -------
    GeoGrid
        Named after the file stem.

    Raises
    ------
    GridFileNotFoundError
        The file does not exist.
    GridFormatError
        Required columns are missing or the file cannot be parsed.
    """
    csv_path = _resolve_csv_path(filename, directory)
    if not csv_path.is_file():
        raise GridFileNotFoundError(f"Grid file not found: {csv_path}")

    try:
        df = pd.read_csv(csv_path)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        raise GridFormatError(f"Failed to parse CSV file: {csv_path}. Error: {e}") from e

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise GridFormatError(f"Missing required columns: {', '.join(missing)}")

    code_col = next((c for c in df.columns if CODE_PATTERN.search(str(c))), None)
    if code_col is None:
        raise GridFormatError(
            "Missing code column. No column name contains 'code' (case-insensitive)"
        )

    has_name = "name" in df.columns
    core_columns = {"row", "col", code_col, "name"}
    metadata_columns = [c for c in df.columns if c not in core_columns]

    entries = []
    for record in df.to_dict(orient="records"):
        code = record[code_col]
        entity = "" if pd.isna(code) else str(code)
        name = record["name"] if has_name and not pd.isna(record["name"]) else None
        entries.append(GridEntry(
            entity,
            _as_position(record["row"], "row", csv_path),
            _as_position(record["col"], "col", csv_path),
            str(name) if name is not None else None,
            {c: _metadata_value(record[c]) for c in metadata_columns},
        ))

    return GeoGrid(entries, name=csv_path.stem)


def list_available_grids() -> List[str]:
    """Stems of the bundled grid CSV files, sorted."""
    if not GRIDS_DIR.is_dir():
        return []
    return sorted(p.stem for p in GRIDS_DIR.glob("*.csv"))


def load_grid(grid_name: str) -> GeoGrid:
    """Load a bundled grid by name (see ``list_available_grids``)."""
    available = list_available_grids()
    if grid_name not in available:
        raise GridFileNotFoundError(
            f"Unknown grid '{grid_name}'. Available: {available}"
        )
    return load_grid_from_csv(grid_name, GRIDS_DIR)


def _versioned(registry: dict, version: int, label: str) -> GeoGrid:
    if version not in registry:
        raise InvalidOptionError(
            f"{label} version must be one of {sorted(registry)}, got {version!r}"
        )
    return load_grid(registry[version])


def load_us_state_grid(version: int = 1) -> GeoGrid:
    """US states + DC."""
    return _versioned(US_STATE_GRIDS, version, "US state grid")


def load_us_state_grid_without_dc(version: int = 1) -> GeoGrid:
    """US states, DC excluded."""
    return _versioned(US_STATE_WITHOUT_DC_GRIDS, version, "US state grid (without DC)")


def load_us_contiguous_grid() -> GeoGrid:
    """48 contiguous states + DC."""
    return load_grid(US_CONTIGUOUS_GRID)


@lru_cache(maxsize=None)
def default_grid() -> GeoGrid:
    """The grid ``geofacet`` uses when none is given; loaded on first use."""
    return load_grid(DEFAULT_GRID_NAME)
