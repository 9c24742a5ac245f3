#!/usr/bin/env python3
"""
GridEntry – one entity placed at a (row, col) cell of a geographic grid.

Entries unpack like a 3-tuple so existing layout code can write::

    entity, row, col = entry
"""

from dataclasses import dataclass, field, asdict
from numbers import Integral
from typing import Any, Dict, Iterator, Optional, Union

from GeoFacetPlot.errors import InvalidEntityError, InvalidPositionError


def _check_entity(entity) -> str:
    if not isinstance(entity, str) or not entity.strip():
        raise InvalidEntityError(
            f"Region names cannot be empty or whitespace-only, got {entity!r}"
        )
    return entity


def _check_position(entity: str, row, col) -> None:
    for value in (row, col):
        if isinstance(value, bool) or not isinstance(value, Integral) or value < 1:
            raise InvalidPositionError(
                f"Grid positions must be positive integers (>= 1), "
                f"got ({row}, {col}) for region '{entity}'"
            )


@dataclass(frozen=True)
class GridEntry:
    """A single placed entity (state, country, …)."""
    entity: str
    row: int
    col: int
    display_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        _check_entity(self.entity)
        _check_position(self.entity, self.row, self.col)
        # numpy integers from loaders are normalised to plain ints
        object.__setattr__(self, 'row', int(self.row))
        object.__setattr__(self, 'col', int(self.col))
        name = self.display_name
        if name is None or not str(name).strip():
            object.__setattr__(self, 'display_name', self.entity)
        object.__setattr__(self, 'metadata', dict(self.metadata or {}))

    @property
    def position(self):
        return (self.row, self.col)

    def __iter__(self) -> Iterator[Union[str, int]]:
        return iter((self.entity, self.row, self.col))

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: int):
        return (self.entity, self.row, self.col)[index]

    def __hash__(self):
        return hash((self.entity, self.row, self.col))

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'GridEntry':
        """Create from dictionary."""
        return cls(**data)
