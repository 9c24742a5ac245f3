import warnings

import numpy as np
import pandas as pd
import pytest

from GeoFacetPlot import (
    ColumnNotFoundError,
    EmptyInputError,
    ExtraRegionsError,
    ExtraRegionsWarning,
    GeoGrid,
    InvalidOptionError,
    MissingRegionsError,
    NoLabeledPlotsWarning,
    RenderFailureWarning,
    geofacet,
)


@pytest.fixture
def pair():
    return GeoGrid.from_positions({"A": (1, 1), "B": (1, 2)})


@pytest.fixture
def square():
    return GeoGrid.from_positions({"A": (1, 1), "B": (1, 2), "C": (2, 1), "D": (2, 2)})


def _frame(*codes, n=3):
    return pd.DataFrame({
        "region": np.repeat(codes, n),
        "x": np.tile(np.arange(n), len(codes)),
        "y": np.arange(n * len(codes), dtype=float),
    })


def simple_plot(cell, data, **axis_options):
    ax = cell.add_axis(xlabel="x", ylabel="y", **axis_options)
    ax.plot(data["x"], data["y"])


def labelled_plot(cell, data, **axis_options):
    ax = cell.add_axis(**axis_options)
    ax.plot(data["x"], data["y"], label="value")


# ---------------------------------------------------------------------------
# region policies
# ---------------------------------------------------------------------------

def test_missing_regions_skip(pair):
    fig = geofacet(_frame("A"), "region", simple_plot, grid=pair)
    assert list(fig.facet_cells) == ["A"]


def test_missing_regions_placeholder(pair):
    fig = geofacet(_frame("A"), "region", simple_plot, grid=pair,
                   missing_regions="placeholder")
    assert set(fig.facet_cells) == {"A", "B"}
    assert not fig.facet_cells["A"].placeholder
    placeholder = fig.facet_cells["B"]
    assert placeholder.placeholder
    assert placeholder.axes[0].get_title() == "B"


def test_missing_regions_error(pair):
    with pytest.raises(MissingRegionsError) as exc:
        geofacet(_frame("A"), "region", simple_plot, grid=pair, missing_regions="error")
    assert exc.value.regions == ["B"]


def test_extra_regions_error_is_default(pair):
    with pytest.raises(ExtraRegionsError) as exc:
        geofacet(_frame("A", "B", "Z"), "region", simple_plot, grid=pair)
    assert exc.value.regions == ["Z"]


def test_extra_regions_warn(pair):
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        fig = geofacet(_frame("A", "B", "Z"), "region", simple_plot, grid=pair,
                       extra_regions="warn")
    extra = [w for w in caught if issubclass(w.category, ExtraRegionsWarning)]
    assert len(extra) == 1
    assert "Z" in str(extra[0].message)
    assert set(fig.facet_cells) == {"A", "B"}


def test_region_codes_match_case_insensitively(pair):
    seen = {}

    def record(cell, data, **axis_options):
        seen[cell.entity] = data["region"].unique().tolist()
        cell.add_axis(**axis_options)

    fig = geofacet(_frame("a", "B"), "region", record, grid=pair)
    assert set(fig.facet_cells) == {"A", "B"}
    assert seen["A"] == ["a"]


def test_default_grid_is_us_states():
    fig = geofacet(_frame("CA", "TX"), "region", simple_plot)
    assert set(fig.facet_cells) == {"CA", "TX"}


# ---------------------------------------------------------------------------
# input validation
# ---------------------------------------------------------------------------

def test_empty_data(pair):
    with pytest.raises(EmptyInputError):
        geofacet(pd.DataFrame({"region": [], "y": []}), "region", simple_plot, grid=pair)


def test_missing_column(pair):
    with pytest.raises(ColumnNotFoundError):
        geofacet(_frame("A"), "state", simple_plot, grid=pair)


@pytest.mark.parametrize("kwargs", [
    {"link_axes": "diagonal"},
    {"missing_regions": "ignore"},
    {"extra_regions": "skip"},
    {"common_axis_options": ["title"]},
    {"axis_options_list": [{}, "right"]},
    {"legend_options": "top"},
    {"legend_options": {"position": 3}},
])
def test_invalid_options(pair, kwargs):
    with pytest.raises(InvalidOptionError):
        geofacet(_frame("A", "B"), "region", simple_plot, grid=pair, **kwargs)


def test_invalid_option_is_value_error(pair):
    with pytest.raises(ValueError):
        geofacet(_frame("A"), "region", simple_plot, grid=pair, link_axes="all")


def test_accepts_mapping_input(pair):
    data = {"region": ["A", "B"], "x": [0, 0], "y": [1.0, 2.0]}
    fig = geofacet(data, "region", simple_plot, grid=pair)
    assert set(fig.facet_cells) == {"A", "B"}


# ---------------------------------------------------------------------------
# decorations and linking
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("entity, x_visible, y_visible", [
    ("A", False, True),
    ("B", False, False),
    ("C", True, True),
    ("D", True, False),
])
def test_inner_decorations_hidden(square, entity, x_visible, y_visible):
    fig = geofacet(_frame("A", "B", "C", "D"), "region", simple_plot,
                   grid=square, link_axes="both")
    [ax] = fig.facet_cells[entity].axes
    assert ax.xaxis.label.get_visible() is x_visible
    assert ax.yaxis.label.get_visible() is y_visible
    assert bool(ax.get_xticklabels()) is x_visible


def test_decorations_kept_without_linking(square):
    fig = geofacet(_frame("A", "B", "C", "D"), "region", simple_plot, grid=square)
    for cell in fig.facet_cells.values():
        assert cell.axes[0].xaxis.label.get_visible()
        assert cell.axes[0].yaxis.label.get_visible()


def test_skipped_regions_do_not_count_as_neighbours():
    column = GeoGrid.from_positions({"A": (1, 1), "C": (2, 1)})
    skipped = geofacet(_frame("A"), "region", simple_plot, grid=column, link_axes="x")
    assert skipped.facet_cells["A"].axes[0].xaxis.label.get_visible()

    drawn = geofacet(_frame("A"), "region", simple_plot, grid=column, link_axes="x",
                     missing_regions="placeholder")
    assert not drawn.facet_cells["A"].axes[0].xaxis.label.get_visible()


def test_linked_axes_share_range(pair):
    data = pd.DataFrame({"region": ["A", "A", "B", "B"],
                         "x": [0, 1, 0, 1], "y": [0.0, 1.0, 0.0, 50.0]})
    fig = geofacet(data, "region", simple_plot, grid=pair, link_axes="y")
    ax_a = fig.facet_cells["A"].axes[0]
    ax_b = fig.facet_cells["B"].axes[0]
    assert ax_a.get_ylim() == ax_b.get_ylim()
    assert ax_a.get_ylim()[1] >= 50.0


# ---------------------------------------------------------------------------
# callback forms
# ---------------------------------------------------------------------------

def test_single_axis_options_passed_as_keywords(pair):
    received = []

    def record(cell, data, **axis_options):
        received.append(axis_options)
        cell.add_axis(**axis_options)

    geofacet(_frame("A", "B"), "region", record, grid=pair,
             common_axis_options={"title": "T"})
    assert received == [{"title": "T"}, {"title": "T"}]


def test_declared_parameter_selects_list_form(pair):
    received = []

    def record(cell, data, axis_options_list):
        received.append(axis_options_list)
        cell.add_axis(**axis_options_list[0])

    geofacet(_frame("A", "B"), "region", record, grid=pair)
    assert all(isinstance(options, list) and len(options) == 1 for options in received)


def test_dual_axis_facets(pair):
    data = _frame("A", "B").assign(z=lambda df: df["y"] * 100)

    def dual(cell, data, axis_options_list):
        left = cell.add_axis(ylabel="y", **axis_options_list[0])
        right = cell.add_axis(ylabel="z", **axis_options_list[1])
        left.plot(data["x"], data["y"], label="y")
        right.plot(data["x"], data["z"], color="firebrick", label="z")

    fig = geofacet(data, "region", dual, grid=pair, link_axes="both",
                   axis_options_list=[{}, {"yaxis_position": "right"}])
    a_left, a_right = fig.facet_cells["A"].axes
    b_left, b_right = fig.facet_cells["B"].axes
    assert a_left.yaxis.label.get_visible()
    assert not a_right.yaxis.label.get_visible()
    assert not b_left.yaxis.label.get_visible()
    assert b_right.yaxis.label.get_visible()
    assert a_right.get_ylim() == b_right.get_ylim()
    assert [t.get_text() for t in fig.facet_legend.get_texts()] == ["y", "z"]


def test_plot_args_and_kwargs_forwarded(pair):
    received = []

    def record(cell, data, color, marker=None, **axis_options):
        received.append((color, marker))
        cell.add_axis(**axis_options).plot(data["x"], data["y"], color=color, marker=marker)

    geofacet(_frame("A", "B"), "region", record, "red", grid=pair,
             plot_kwargs={"marker": "o"})
    assert received == [("red", "o"), ("red", "o")]


def test_render_failure_is_isolated(pair):
    def flaky(cell, data, **axis_options):
        if cell.entity == "B":
            raise RuntimeError("boom")
        simple_plot(cell, data, **axis_options)

    with pytest.warns(RenderFailureWarning) as record:
        fig = geofacet(_frame("A", "B"), "region", flaky, grid=pair)
    failures = [w.message for w in record if isinstance(w.message, RenderFailureWarning)]
    assert [w.entity for w in failures] == ["B"]
    assert "boom" in str(failures[0])
    assert len(fig.facet_cells["A"].axes) == 1


# ---------------------------------------------------------------------------
# legend and figure
# ---------------------------------------------------------------------------

def test_legend_added_for_labelled_plots(pair):
    fig = geofacet(_frame("A", "B"), "region", labelled_plot, grid=pair)
    assert [t.get_text() for t in fig.facet_legend.get_texts()] == ["value"]


def test_legend_options_forwarded(pair):
    fig = geofacet(_frame("A", "B"), "region", labelled_plot, grid=pair,
                   legend_options={"title": "Metric", "position": (1, 3)})
    assert fig.facet_legend.get_title().get_text() == "Metric"


def test_legend_disabled(pair):
    fig = geofacet(_frame("A", "B"), "region", labelled_plot, grid=pair,
                   legend_options=False)
    assert fig.facet_legend is None


def test_no_legend_without_labels(pair):
    with warnings.catch_warnings():
        warnings.simplefilter("error", NoLabeledPlotsWarning)
        fig = geofacet(_frame("A", "B"), "region", simple_plot, grid=pair)
    assert fig.facet_legend is None


def test_requested_legend_without_labels_warns(pair):
    with pytest.warns(NoLabeledPlotsWarning):
        fig = geofacet(_frame("A", "B"), "region", simple_plot, grid=pair,
                       legend_options={})
    assert fig.facet_legend is None


def test_figure_options(pair):
    fig = geofacet(_frame("A", "B"), "region", simple_plot, grid=pair,
                   figure_options={"figsize": (4, 3)}, title="Two regions")
    assert tuple(fig.get_size_inches()) == (4, 3)


def test_figure_shrinks_when_legend_slot_unused(pair):
    plain = geofacet(_frame("A", "B"), "region", simple_plot, grid=pair)
    width, height = plain.get_size_inches()
    assert width == pytest.approx(2 * 2.0, abs=0.01)
    assert height == pytest.approx(1.5, abs=0.01)

    with_legend = geofacet(_frame("A", "B"), "region", labelled_plot, grid=pair)
    assert with_legend.get_size_inches()[0] == pytest.approx(2.8 * 2.0)


def test_placeholders_do_not_widen_linked_ranges():
    row = GeoGrid.from_positions({"A": (1, 1), "B": (1, 2), "C": (1, 3)})
    data = pd.DataFrame({
        "region": ["A", "A", "B", "B"],
        "x": [2000, 2010, 2000, 2010],
        "y": [100.0, 110.0, 105.0, 120.0],
    })
    skipped = geofacet(data, "region", simple_plot, grid=row, link_axes="both")
    drawn = geofacet(data, "region", simple_plot, grid=row, link_axes="both",
                     missing_regions="placeholder")
    expected = skipped.facet_cells["A"].axes[0]
    for code in ("A", "B", "C"):
        ax = drawn.facet_cells[code].axes[0]
        assert ax.get_xlim() == expected.get_xlim()
        assert ax.get_ylim() == expected.get_ylim()


def test_decoration_hiding_beats_common_options(square):
    fig = geofacet(_frame("A", "B", "C", "D"), "region", simple_plot, grid=square,
                   link_axes="both", common_axis_options={"xlabel_visible": True})
    assert not fig.facet_cells["A"].axes[0].xaxis.label.get_visible()
    assert fig.facet_cells["C"].axes[0].xaxis.label.get_visible()
