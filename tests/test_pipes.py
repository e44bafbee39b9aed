import pytest

from pipes import Pipe, PipeField, RandomGapSource
from settings import GAP_MARGIN, PIPE_SPACING, PIPE_WIDTH, SPAWN_MARGIN, Difficulty, WorldBounds

BOUNDS = WorldBounds(800, 600, 80)


def test_first_spawn_happens_on_empty_field(fixed_gap):
    field = PipeField(BOUNDS, 180.0, gap_source=fixed_gap)
    pipe = field.maybe_spawn(BOUNDS.width)
    assert pipe is not None
    assert pipe.x == BOUNDS.width + SPAWN_MARGIN
    assert pipe.gap_top == 150.0
    assert pipe.gap_height == 180.0
    assert not pipe.scored
    assert list(field) == [pipe]


def test_next_spawn_waits_for_spacing(fixed_gap):
    field = PipeField(BOUNDS, 180.0, gap_source=fixed_gap)
    field.maybe_spawn(BOUNDS.width)

    field.advance(PIPE_SPACING - 1.0)
    assert field.maybe_spawn(BOUNDS.width) is None
    assert len(field) == 1

    field.advance(1.0)
    assert field.maybe_spawn(BOUNDS.width) is not None
    assert len(field) == 2


def test_advance_moves_and_retires(fixed_gap):
    field = PipeField(BOUNDS, 180.0, gap_source=fixed_gap)
    field.pipes = [Pipe(x=-PIPE_WIDTH + 0.5, gap_top=150, gap_height=180), Pipe(x=400.0, gap_top=150, gap_height=180)]

    field.advance(2.0, dt_scale=0.5)

    assert [p.x for p in field] == [pytest.approx(399.0)]


def test_pipe_exactly_at_negative_width_is_kept():
    field = PipeField(BOUNDS, 180.0)
    field.pipes = [Pipe(x=-PIPE_WIDTH + 2.0, gap_top=150, gap_height=180)]
    field.advance(2.0)
    assert len(field) == 1
    field.advance(0.1)
    assert len(field) == 0


@pytest.mark.parametrize("tier", list(Difficulty))
@pytest.mark.parametrize("wanted", [-1000.0, 0.0, 10_000.0])
def test_gap_stays_inside_reachable_band(tier, wanted, make_gap):
    field = PipeField(BOUNDS, tier.gap_height, gap_source=make_gap(wanted))
    pipe = field.maybe_spawn(BOUNDS.width)
    assert pipe.gap_top >= GAP_MARGIN
    assert pipe.gap_bottom <= BOUNDS.floor - GAP_MARGIN
    assert pipe.gap_height == tier.gap_height


def test_random_gap_source_is_reproducible():
    import random

    first = RandomGapSource(random.Random(7))
    second = RandomGapSource(random.Random(7))
    values = [first.next_gap_top(100, 300) for _ in range(5)]
    assert values == [second.next_gap_top(100, 300) for _ in range(5)]
    assert all(100 <= v <= 300 for v in values)


def test_scoring_fires_once_when_centre_is_passed():
    field = PipeField(BOUNDS, 180.0)
    pipe = Pipe(x=130.0, gap_top=150, gap_height=180)
    field.pipes = [pipe]

    # centre at 160, bird at 150
    assert field.check_scoring(150.0) == []
    assert not pipe.scored

    field.advance(11.0)
    assert field.check_scoring(150.0) == [pipe]
    assert pipe.scored

    field.advance(5.0)
    assert field.check_scoring(150.0) == []


def test_scoring_reports_each_passed_pipe():
    field = PipeField(BOUNDS, 180.0)
    field.pipes = [
        Pipe(x=0.0, gap_top=150, gap_height=180),
        Pipe(x=50.0, gap_top=150, gap_height=180, scored=True),
        Pipe(x=500.0, gap_top=150, gap_height=180),
    ]
    passed = field.check_scoring(150.0)
    assert [p.x for p in passed] == [0.0]


def test_tier_table():
    assert (Difficulty.EASY.gap_height, Difficulty.EASY.speed) == (220.0, 2.0)
    assert (Difficulty.MEDIUM.gap_height, Difficulty.MEDIUM.speed) == (180.0, 2.5)
    assert (Difficulty.HARD.gap_height, Difficulty.HARD.speed) == (140.0, 3.0)
    assert (Difficulty.EXTREME.gap_height, Difficulty.EXTREME.speed) == (120.0, 3.8)
