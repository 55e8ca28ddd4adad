import pytest

from chartaxis.logic.collision import ScanAnchor, axis_bounds, scan_ticks
from chartaxis.logic.ticks import AxisConfig, TextSize, ViewBox

from .conftest import fixed_width_measure, make_ticks

EVEN_COORDS = [0, 25, 50, 75, 100]
HORIZONTAL = AxisConfig(orientation="bottom", view_box=ViewBox(0.0, 0.0, 100.0, 20.0))


def _wide_labels(value, index):
    return "abc"


def _values(ticks):
    return [tick.value for tick in ticks]


def _edges(tick, config, measure):
    size = getattr(measure(str(tick.value)), config.size_key)
    return tick.tick_coord - size / 2, tick.tick_coord + size / 2


def test_end_scan_shifts_last_label_inward(measure):
    result = scan_ticks(make_ticks(EVEN_COORDS), HORIZONTAL, ScanAnchor.END, measure)

    assert _values(result) == [1, 2, 3, 4]
    assert result[-1].tick_coord == 95.0
    assert [tick.tick_coord for tick in result[:-1]] == [25.0, 50.0, 75.0]
    assert all(tick.is_show for tick in result)


def test_start_scan_shifts_first_label_inward(measure):
    result = scan_ticks(make_ticks(EVEN_COORDS), HORIZONTAL, "start", measure)

    assert _values(result) == [0, 1, 2, 3]
    assert result[0].tick_coord == 5.0
    assert result[0].coordinate == 0.0


def test_both_scan_keeps_first_and_last(measure):
    result = scan_ticks(make_ticks(EVEN_COORDS), HORIZONTAL, ScanAnchor.BOTH, measure)

    assert _values(result) == [0, 1, 2, 3, 4]
    assert result[0].tick_coord == 5.0
    assert result[-1].tick_coord == 95.0


def test_crowded_end_scan_drops_labels_that_would_overlap(measure):
    config = AxisConfig(view_box=HORIZONTAL.view_box, tick_formatter=_wide_labels)

    result = scan_ticks(make_ticks(EVEN_COORDS), config, ScanAnchor.END, measure)

    assert _values(result) == [2, 4]
    assert result[1].tick_coord == 85.0
    # 5 px between the right edge of "2" (65) and the left edge of "4" (70)
    assert (result[1].tick_coord - 15.0) - (result[0].tick_coord + 15.0) == 5.0


def test_crowded_both_scan_preserves_the_tail_first(measure):
    config = AxisConfig(view_box=HORIZONTAL.view_box, tick_formatter=_wide_labels)

    result = scan_ticks(make_ticks(EVEN_COORDS), config, ScanAnchor.BOTH, measure)

    # the tail label at 85 caps the forward scan at 65
    assert _values(result) == [0, 2, 4]
    assert result[0].tick_coord == 15.0


def test_hidden_labels_do_not_consume_space(measure):
    config = AxisConfig(view_box=HORIZONTAL.view_box, min_tick_gap=0.0)
    ticks = make_ticks([0, 10, 20, 30], values=["a", "bbbbbbbbbbbbbbbbbbbbbbbbb", "c", "d"])

    result = scan_ticks(ticks, config, ScanAnchor.START, measure)

    assert _values(result) == ["a", "c", "d"]


def test_descending_coordinates_swap_the_bounds(measure):
    config = AxisConfig(orientation="left", view_box=ViewBox(0.0, 0.0, 50.0, 100.0))
    ticks = make_ticks([100, 75, 50, 25, 0])

    result = scan_ticks(ticks, config, ScanAnchor.END, measure)

    assert _values(result) == [1, 2, 3, 4]
    assert result[-1].tick_coord == 6.0


def test_axis_bounds():
    box = ViewBox(10.0, 20.0, 100.0, 50.0)

    assert axis_bounds(box, "width", 1) == (10.0, 110.0)
    assert axis_bounds(box, "width", -1) == (110.0, 10.0)
    assert axis_bounds(box, "height", 1) == (20.0, 70.0)
    assert axis_bounds(box, "height", -1) == (70.0, 20.0)


def test_unit_widens_horizontal_labels(measure):
    ticks = make_ticks([10, 30], values=[1, 2])

    plain = scan_ticks(ticks, HORIZONTAL, ScanAnchor.START, measure)
    with_unit = scan_ticks(
        ticks, AxisConfig(view_box=HORIZONTAL.view_box, unit="%"), ScanAnchor.START, measure
    )

    assert _values(plain) == [1, 2]
    assert _values(with_unit) == [1]


def test_unit_is_ignored_on_vertical_axes(measure):
    config = AxisConfig(orientation="left", view_box=ViewBox(0.0, 0.0, 50.0, 100.0))
    ticks = make_ticks([10, 30, 50])

    plain = scan_ticks(ticks, config, ScanAnchor.START, measure)
    with_unit = scan_ticks(
        ticks,
        AxisConfig(orientation="left", view_box=config.view_box, unit="%" * 40),
        ScanAnchor.START,
        measure,
    )

    assert _values(plain) == _values(with_unit) == [0, 1, 2]


def test_formatter_indexes_follow_scan_direction(measure):
    seen = []

    def _record(value, index):
        seen.append((value, index))
        return str(value)

    config = AxisConfig(view_box=HORIZONTAL.view_box, tick_formatter=_record)
    ticks = make_ticks([10, 50, 90], values=["a", "b", "c"])

    scan_ticks(ticks, config, ScanAnchor.END, measure)
    assert seen == [("c", 0), ("b", 1), ("a", 2)]

    seen.clear()
    scan_ticks(ticks, config, ScanAnchor.BOTH, measure)
    assert seen == [("c", 2), ("a", 0), ("b", 1)]


def test_zero_size_labels_always_fit():
    def _nothing(text):
        return TextSize(0.0, 0.0)

    result = scan_ticks(make_ticks(EVEN_COORDS), HORIZONTAL, ScanAnchor.END, _nothing)

    assert _values(result) == [0, 1, 2, 3, 4]
    assert [tick.tick_coord for tick in result] == [0.0, 25.0, 50.0, 75.0, 100.0]


@pytest.mark.parametrize(
    "anchor, expected",
    [(ScanAnchor.END, [80.0]), (ScanAnchor.BOTH, [80.0]), (ScanAnchor.START, [])],
)
def test_single_candidate_at_the_end_bound(anchor, expected, measure):
    result = scan_ticks(make_ticks([100], values=["abcd"]), HORIZONTAL, anchor, measure)

    # Only the end anchors may pull the last label inside the axis.
    assert [tick.tick_coord for tick in result] == expected


@pytest.mark.parametrize("anchor", list(ScanAnchor))
def test_zero_length_axis_does_not_raise(anchor, measure):
    config = AxisConfig(view_box=ViewBox(0.0, 0.0, 0.0, 0.0))

    assert scan_ticks(make_ticks([0, 0, 0]), config, anchor, measure) == []


def test_empty_candidates(measure):
    assert scan_ticks([], HORIZONTAL, ScanAnchor.END, measure) == []


def test_unknown_anchor_is_rejected(measure):
    with pytest.raises(ValueError):
        scan_ticks(make_ticks([0]), HORIZONTAL, "middle", measure)


def test_scan_does_not_mutate_input(measure):
    ticks = make_ticks(EVEN_COORDS)
    snapshot = list(ticks)

    scan_ticks(ticks, HORIZONTAL, ScanAnchor.BOTH, measure)

    assert ticks == snapshot
    assert all(tick.tick_coord is None and not tick.is_show for tick in ticks)


def test_reversed_candidates_mirror_the_pattern(measure):
    config = AxisConfig(view_box=HORIZONTAL.view_box, tick_formatter=_wide_labels)
    ticks = make_ticks(EVEN_COORDS)
    mirrored = make_ticks(
        [100.0 - tick.coordinate for tick in reversed(ticks)],
        values=[tick.value for tick in reversed(ticks)],
    )

    from_end = scan_ticks(ticks, config, ScanAnchor.END, measure)
    from_start = scan_ticks(mirrored, config, ScanAnchor.START, measure)

    assert sorted(_values(from_end)) == sorted(_values(from_start))
    assert sorted(100.0 - tick.tick_coord for tick in from_end) == sorted(
        tick.tick_coord for tick in from_start
    )


CROWDED_LAYOUTS = [
    ([0, 12, 24, 36, 48, 60, 72, 84, 96], ["1", "22", "333", "4", "55", "666", "7", "88", "9"]),
    ([3, 9, 27, 31, 58, 64, 66, 90, 99], ["12", "3", "456", "7", "8", "90", "1", "23", "4567"]),
    ([100, 80, 60, 40, 20, 0], ["a", "bb", "ccc", "dd", "e", "ffff"]),
]


@pytest.mark.parametrize("coords, values", CROWDED_LAYOUTS)
@pytest.mark.parametrize("anchor", list(ScanAnchor))
def test_shown_labels_are_contained_and_separated(coords, values, anchor):
    config = AxisConfig(view_box=HORIZONTAL.view_box, min_tick_gap=4.0)

    result = scan_ticks(make_ticks(coords, values=values), config, anchor, fixed_width_measure)

    assert result
    edges = sorted(_edges(tick, config, fixed_width_measure) for tick in result)
    for low, high in edges:
        assert low >= 0.0
        assert high <= 100.0
    for (_, previous_high), (next_low, _) in zip(edges, edges[1:]):
        assert next_low - previous_high >= config.min_tick_gap


@pytest.mark.parametrize("anchor", list(ScanAnchor))
def test_scan_is_deterministic(anchor, measure):
    coords, values = CROWDED_LAYOUTS[1]
    ticks = make_ticks(coords, values=values)

    first = scan_ticks(ticks, HORIZONTAL, anchor, measure)
    second = scan_ticks(ticks, HORIZONTAL, anchor, measure)

    assert first == second


@pytest.mark.parametrize(
    "anchor, expected",
    [(ScanAnchor.END, [2]), (ScanAnchor.START, [0]), (ScanAnchor.BOTH, [2])],
)
def test_stacked_candidates_scan_forward_and_collide(anchor, expected, measure):
    ticks = make_ticks([50, 50, 50])

    result = scan_ticks(ticks, HORIZONTAL, anchor, measure)

    # only one of the labels drawn on top of each other survives
    assert _values(result) == expected
