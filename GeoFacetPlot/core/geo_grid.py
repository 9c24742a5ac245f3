#!/usr/bin/env python3
"""
GeoGrid – an immutable, ordered collection of GridEntry.

Entries are kept as a tuple of ``GridEntry`` plus parallel numpy arrays
(``entities``, ``rows``, ``cols``) so neighbour queries are vectorised.
Every constructor funnels through ``_validate_entries``; a grid is never
partially built and is never mutated afterwards – filtering returns a new
GeoGrid.

Examples
--------
>>> grid = GeoGrid.from_positions({"CA": (1, 1), "NY": (1, 2),
...                                "TX": (2, 1), "FL": (2, 2)})
>>> grid = GeoGrid.from_arrays(["CA", "NY"], [1, 1], [1, 2],
...                            names=["California", "New York"])
>>> for entity, row, col in grid:
...     print(entity, row, col)
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from GeoFacetPlot.core.grid_entry import GridEntry
from GeoFacetPlot.errors import (
    InvalidEntityError,
    PositionConflictError,
    ShapeMismatchError,
)


def _validate_entries(entries: Sequence[GridEntry]) -> None:
    """Reject duplicate entities and duplicate (row, col) cells."""
    seen_entities = set()
    position_to_entity: Dict[Tuple[int, int], str] = {}
    for entry in entries:
        if not isinstance(entry, GridEntry):
            raise TypeError(f"Expected GridEntry, got {type(entry).__name__}")
        if entry.entity in seen_entities:
            raise InvalidEntityError(f"Region '{entry.entity}' appears more than once")
        seen_entities.add(entry.entity)

        position = entry.position
        if position in position_to_entity:
            raise PositionConflictError(position_to_entity[position], entry.entity, position)
        position_to_entity[position] = entry.entity


class GeoGrid:
    """
    Geographic grid layout.

    Attributes
    ----------
    name : str
        Optional layout name (e.g. ``"us_state_grid1"``).
    entities : numpy.ndarray
        Entity codes, in entry order.
    rows, cols : numpy.ndarray
        1-based positions, in entry order.
    """

    def __init__(self, entries: Iterable[GridEntry] = (), name: str = ""):
        entries = tuple(entries)
        _validate_entries(entries)

        self.name = name
        self._entries: Tuple[GridEntry, ...] = entries
        self.entities = np.array([e.entity for e in entries], dtype=object)
        self.rows = np.array([e.row for e in entries], dtype=int)
        self.cols = np.array([e.col for e in entries], dtype=int)
        self._index = {e.entity: i for i, e in enumerate(entries)}
        self._positions = {e.position: e.entity for e in entries}

    # ------------------------------------------------------------------
    # alternative constructors
    # ------------------------------------------------------------------

    @classmethod
    def from_positions(cls, positions: Mapping[str, Tuple[int, int]],
                       name: str = "") -> 'GeoGrid':
        """Build from a mapping ``entity -> (row, col)``."""
        entries = [GridEntry(entity, row, col) for entity, (row, col) in positions.items()]
        return cls(entries, name=name)

    @classmethod
    def from_arrays(cls, entities: Sequence[str], rows: Sequence[int],
                    cols: Sequence[int], names: Optional[Sequence[str]] = None,
                    metadata: Optional[Sequence[Dict[str, Any]]] = None,
                    name: str = "") -> 'GeoGrid':
        """Build from parallel arrays; names default to the entity codes."""
        lengths = [len(entities), len(rows), len(cols)]
        if names is not None:
            lengths.append(len(names))
        if metadata is not None:
            lengths.append(len(metadata))
        if len(set(lengths)) > 1:
            raise ShapeMismatchError(
                f"All input vectors must have the same length, got lengths {lengths}"
            )

        n = len(entities)
        names = list(names) if names is not None else [None] * n
        metadata = list(metadata) if metadata is not None else [{} for _ in range(n)]
        entries = [
            GridEntry(entities[i], rows[i], cols[i], names[i], metadata[i])
            for i in range(n)
        ]
        return cls(entries, name=name)

    # ------------------------------------------------------------------
    # container protocol
    # ------------------------------------------------------------------

    @property
    def entries(self) -> Tuple[GridEntry, ...]:
        return self._entries

    @property
    def names(self) -> List[str]:
        return [e.display_name for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __getitem__(self, index: int) -> GridEntry:
        return self._entries[index]

    def __contains__(self, entity) -> bool:
        return entity in self._index

    def __eq__(self, other) -> bool:
        if not isinstance(other, GeoGrid):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None

    def __repr__(self) -> str:
        label = f" '{self.name}'" if self.name else ""
        return f"<GeoGrid{label}: {len(self)} regions, {self.dimensions[0]}x{self.dimensions[1]}>"

    # ------------------------------------------------------------------
    # indexed lookups (used by grid_operations)
    # ------------------------------------------------------------------

    def entry_for(self, entity: str) -> Optional[GridEntry]:
        idx = self._index.get(entity)
        return None if idx is None else self._entries[idx]

    def entity_at(self, row: int, col: int) -> Optional[str]:
        return self._positions.get((row, col))

    @property
    def dimensions(self) -> Tuple[int, int]:
        if not self._entries:
            return (0, 0)
        return (int(self.rows.max()), int(self.cols.max()))

    # ------------------------------------------------------------------
    # derived grids
    # ------------------------------------------------------------------

    def filter(self, keep: Union[Callable[[GridEntry], bool], Iterable[str]]) -> 'GeoGrid':
        """
        Return a new GeoGrid with the entries selected by *keep*.

        *keep* is either a predicate on GridEntry or a collection of entity
        codes.  Entry order is preserved.
        """
        if callable(keep):
            predicate = keep
        else:
            wanted = set(keep)
            predicate = lambda entry: entry.entity in wanted
        return GeoGrid([e for e in self._entries if predicate(e)], name=self.name)

    def to_frame(self):
        """Tabular view (one row per entry) as a pandas DataFrame."""
        import pandas as pd
        return pd.DataFrame({
            'code': list(self.entities),
            'row':  self.rows,
            'col':  self.cols,
            'name': self.names,
        })
