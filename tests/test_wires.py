import pytest

from wiremaster.services.errors import DuplicateColor, WireTooShort
from wiremaster.services.partition import Segment, partition_path
from wiremaster.services.paths import zigzag_path
from wiremaster.services.random_source import SeededRandom
from wiremaster.services.wires import PALETTE, WIRE_COLORS, extract_wires, select_colors


def test_palette_has_twenty_unique_colors():
    assert len(PALETTE) == 20
    assert len(set(PALETTE)) == 20
    assert all(value.startswith("#") and len(value) == 7 for value in WIRE_COLORS.values())


def test_select_colors_unique_and_deterministic():
    colors = select_colors(8, SeededRandom(11))
    assert len(set(colors)) == 8
    assert set(colors) <= set(PALETTE)
    assert colors == select_colors(8, SeededRandom(11))


def test_select_colors_whole_palette():
    assert sorted(select_colors(20, SeededRandom(1))) == sorted(PALETTE)


def test_select_colors_rejects_bad_counts():
    with pytest.raises(DuplicateColor):
        select_colors(21, SeededRandom(1))
    with pytest.raises(ValueError):
        select_colors(0, SeededRandom(1))


def test_wires_follow_segments(seeds):
    path = zigzag_path(6, 6)
    for seed in seeds:
        rng = SeededRandom(seed)
        segments = partition_path(path, 3, rng)
        wires = extract_wires(segments, rng)

        assert len(wires) == 3
        assert len({w.color for w in wires}) == 3
        for wire, segment in zip(wires, segments):
            assert set(wire.solution_path) == set(segment.cells)
            assert wire.start == wire.solution_path[0]
            assert wire.end == wire.solution_path[-1]
            assert {wire.start, wire.end} == {segment.cells[0], segment.cells[-1]}


def test_flip_chance_bounds():
    segment = Segment(0, 0, ((0, 0), (0, 1), (1, 1), (1, 0)))

    never = extract_wires([segment], SeededRandom(5), flip_chance=0.0)[0]
    assert never.start == (0, 0)
    assert never.end == (1, 0)

    always = extract_wires([segment], SeededRandom(5), flip_chance=1.0)[0]
    assert always.start == (1, 0)
    assert always.end == (0, 0)
    assert always.solution_path == ((1, 0), (1, 1), (0, 1), (0, 0))


def test_segments_are_ordered_by_offset():
    first = Segment(0, 0, ((0, 0), (0, 1)))
    second = Segment(1, 2, ((1, 1), (1, 0)))
    wires = extract_wires([second, first], SeededRandom(3), flip_chance=0.0)
    assert wires[0].start == (0, 0)
    assert wires[1].start == (1, 1)


def test_single_cell_segment_is_rejected():
    with pytest.raises(WireTooShort) as exc_info:
        extract_wires([Segment(0, 0, ((0, 0),))], SeededRandom(1))
    assert exc_info.value.observed == 1
