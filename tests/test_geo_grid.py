import pytest

from GeoFacetPlot import (
    GeoGrid,
    GridEntry,
    InvalidEntityError,
    InvalidPositionError,
    PositionConflictError,
    ShapeMismatchError,
)


def test_from_positions_builds_entries():
    grid = GeoGrid.from_positions({"CA": (1, 1), "NY": (1, 2), "TX": (2, 1), "FL": (2, 2)})
    assert len(grid) == 4
    assert set(grid.entities) == {"CA", "NY", "TX", "FL"}
    assert grid.entry_for("TX").position == (2, 1)
    assert all(e.display_name == e.entity for e in grid)


def test_from_arrays_with_names_and_metadata():
    grid = GeoGrid.from_arrays(
        ["CA", "NY"], [1, 1], [1, 2],
        names=["California", ""],
        metadata=[{"pop": 39538223}, {"pop": 20201249}],
    )
    assert grid.names == ["California", "NY"]
    assert grid[0].metadata == {"pop": 39538223}
    assert list(grid.rows) == [1, 1]
    assert list(grid.cols) == [1, 2]


@pytest.mark.parametrize("kwargs", [
    dict(entities=["A", "B"], rows=[1], cols=[1, 2]),
    dict(entities=["A", "B"], rows=[1, 1], cols=[1, 2], names=["a"]),
    dict(entities=["A"], rows=[1], cols=[1], metadata=[{}, {}]),
])
def test_from_arrays_rejects_unequal_lengths(kwargs):
    with pytest.raises(ShapeMismatchError):
        GeoGrid.from_arrays(**kwargs)


def test_position_conflict_names_both_entities():
    with pytest.raises(PositionConflictError) as exc:
        GeoGrid.from_positions({"CA": (1, 1), "NY": (1, 1)})
    assert set(exc.value.entities) == {"CA", "NY"}
    assert exc.value.position == (1, 1)
    assert "CA" in str(exc.value) and "NY" in str(exc.value)


def test_position_conflict_from_arrays_and_entries():
    with pytest.raises(PositionConflictError):
        GeoGrid.from_arrays(["A", "B", "C"], [1, 2, 2], [1, 3, 3])
    with pytest.raises(PositionConflictError):
        GeoGrid([GridEntry("A", 4, 4), GridEntry("B", 4, 4)])


def test_invalid_entity_and_position_abort_construction():
    with pytest.raises(InvalidEntityError):
        GeoGrid.from_positions({"": (1, 1)})
    with pytest.raises(InvalidEntityError):
        GeoGrid.from_arrays(["CA", "  "], [1, 1], [1, 2])
    with pytest.raises(InvalidPositionError) as exc:
        GeoGrid.from_positions({"CA": (0, 1)})
    assert "CA" in str(exc.value)


def test_duplicate_entity_rejected():
    with pytest.raises(InvalidEntityError):
        GeoGrid.from_arrays(["CA", "CA"], [1, 2], [1, 1])


def test_all_errors_are_value_errors():
    with pytest.raises(ValueError):
        GeoGrid.from_positions({"CA": (1, 1), "NY": (1, 1)})


def test_empty_grid():
    grid = GeoGrid()
    assert len(grid) == 0
    assert grid.dimensions == (0, 0)
    assert list(grid) == []


def test_container_protocol_and_equality():
    grid = GeoGrid.from_arrays(["A", "B"], [1, 2], [1, 1], name="tiny")
    assert "A" in grid and "Z" not in grid
    assert [entity for entity, _, _ in grid] == ["A", "B"]
    assert grid == GeoGrid.from_arrays(["A", "B"], [1, 2], [1, 1])
    assert grid != GeoGrid.from_arrays(["B", "A"], [2, 1], [1, 1])
    assert "tiny" in repr(grid)


def test_filter_returns_new_grid_and_keeps_order():
    grid = GeoGrid.from_arrays(["A", "B", "C"], [1, 1, 2], [1, 2, 1])
    subset = grid.filter({"C", "A"})
    assert [e.entity for e in subset] == ["A", "C"]
    assert len(grid) == 3
    assert subset is not grid


def test_to_frame():
    grid = GeoGrid.from_arrays(["CA", "NY"], [1, 1], [1, 2], names=["California", "New York"])
    df = grid.to_frame()
    assert list(df.columns) == ["code", "row", "col", "name"]
    assert df["name"].tolist() == ["California", "New York"]
