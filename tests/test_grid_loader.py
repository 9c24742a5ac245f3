import pytest

from GeoFacetPlot import (
    GeoGrid,
    GridFileNotFoundError,
    GridFormatError,
    InvalidOptionError,
    PositionConflictError,
    default_grid,
    has_neighbor_below,
    list_available_grids,
    load_grid,
    load_grid_from_csv,
    load_us_contiguous_grid,
    load_us_state_grid,
    load_us_state_grid_without_dc,
)


def test_bundled_grids_are_listed():
    available = list_available_grids()
    for version in (1, 2, 3):
        assert f"us_state_grid{version}" in available
        assert f"us_state_without_DC_grid{version}" in available
    assert "us_state_contiguous_grid1" in available
    assert available == sorted(available)


def test_us_state_grid():
    grid = load_us_state_grid()
    assert isinstance(grid, GeoGrid)
    assert len(grid) == 51
    assert "DC" in grid
    assert grid.name == "us_state_grid1"
    assert grid.entry_for("CA").display_name == "California"
    assert grid.entry_for("AK").position == (1, 1)
    assert grid.entry_for("ME").position == (1, 11)


def test_us_state_grid_without_dc():
    grid = load_us_state_grid_without_dc()
    assert len(grid) == 50
    assert "DC" not in grid


@pytest.mark.parametrize("version", [1, 2, 3])
def test_us_state_grid_versions(version):
    grid = load_us_state_grid(version)
    assert grid.name == f"us_state_grid{version}"
    assert len(grid) == 51 and "DC" in grid

    without_dc = load_us_state_grid_without_dc(version)
    assert without_dc.name == f"us_state_without_DC_grid{version}"
    assert len(without_dc) == 50 and "DC" not in without_dc
    assert set(without_dc.entities) == set(grid.entities) - {"DC"}


def test_grid_versions_differ():
    assert load_us_state_grid(1) != load_us_state_grid(2)
    assert load_us_state_grid(2) != load_us_state_grid(3)


def test_us_contiguous_grid():
    grid = load_us_contiguous_grid()
    assert len(grid) == 49
    assert "AK" not in grid and "HI" not in grid
    assert "DC" in grid


def test_bundled_grid_neighbours():
    grid = load_us_state_grid()
    # ME sits above NH in the same column
    assert has_neighbor_below(grid, "ME")
    assert not has_neighbor_below(grid, "FL")


@pytest.mark.parametrize("loader", [load_us_state_grid, load_us_state_grid_without_dc])
def test_unknown_version_rejected(loader):
    with pytest.raises(InvalidOptionError):
        loader(version=7)


def test_unknown_grid_name():
    with pytest.raises(GridFileNotFoundError) as exc:
        load_grid("atlantis_grid1")
    assert "us_state_grid1" in str(exc.value)


def test_default_grid_is_cached():
    first = default_grid()
    assert first is default_grid()
    assert first == load_us_state_grid()


def test_custom_csv_with_metadata(tmp_path):
    path = tmp_path / "europe.csv"
    path.write_text(
        "row,col,code_alpha3,name,region\n"
        "1,1,ISL,Iceland,Nordic\n"
        "1,4,NOR,Norway,Nordic\n"
        "2,2,IRL,Ireland,\n"
    )
    grid = load_grid_from_csv(path)
    assert grid.name == "europe"
    assert list(grid.entities) == ["ISL", "NOR", "IRL"]
    assert grid.entry_for("NOR").display_name == "Norway"
    assert grid.entry_for("ISL").metadata == {"region": "Nordic"}
    assert grid.entry_for("IRL").metadata == {"region": None}


def test_csv_suffix_and_directory_are_optional(tmp_path):
    (tmp_path / "tiny.csv").write_text("row,col,code\n1,1,A\n1,2,B\n")
    grid = load_grid_from_csv("tiny", directory=tmp_path)
    assert len(grid) == 2
    assert grid.names == ["A", "B"]


def test_missing_required_columns(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("row,code\n1,A\n")
    with pytest.raises(GridFormatError, match="col"):
        load_grid_from_csv(path)


def test_missing_code_column(tmp_path):
    path = tmp_path / "nocode.csv"
    path.write_text("row,col,name\n1,1,Alpha\n")
    with pytest.raises(GridFormatError, match="code"):
        load_grid_from_csv(path)


def test_non_integer_position(tmp_path):
    path = tmp_path / "frac.csv"
    path.write_text("row,col,code\n1.5,1,A\n")
    with pytest.raises(GridFormatError):
        load_grid_from_csv(path)


def test_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("")
    with pytest.raises(GridFormatError):
        load_grid_from_csv(path)


def test_conflicting_positions_in_csv(tmp_path):
    path = tmp_path / "clash.csv"
    path.write_text("row,col,code\n1,1,A\n1,1,B\n")
    with pytest.raises(PositionConflictError):
        load_grid_from_csv(path)


def test_missing_file(tmp_path):
    with pytest.raises(GridFileNotFoundError):
        load_grid_from_csv(tmp_path / "nope.csv")
