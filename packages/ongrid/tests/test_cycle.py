"""Tests for cycle progress wrap and advance."""

import pytest
from ongrid import Entity, EntityKind
from ongrid.cycle import advance, wrap


class TestWrap:
    @pytest.mark.parametrize("value", [0.0, 0.25, 0.5, 0.999])
    def test_idempotent_inside_unit_interval(self, value):
        result = value
        for _ in range(5):
            result = wrap(result)
            assert result == value

    def test_exactly_one_wraps_to_zero(self):
        assert wrap(1.0) == 0.0

    def test_multiple_cycles_removed(self):
        assert wrap(3.25) == pytest.approx(0.25)


class TestAdvance:
    def test_adds_scaled_elapsed(self):
        entity = Entity(kind=EntityKind.GENERATOR, current_rate=1.0)
        advance(entity, 500, 1000)
        assert entity.cycle_progress == 0.5

    def test_rate_scales_progress(self):
        entity = Entity(kind=EntityKind.MOTOR, current_rate=0.5)
        advance(entity, 500, 1000)
        assert entity.cycle_progress == 0.25

    def test_zero_rate_still_normalises(self):
        entity = Entity(kind=EntityKind.MOTOR, current_rate=0.0, cycle_progress=2.75)
        advance(entity, 500, 1000)
        assert entity.cycle_progress == pytest.approx(0.75)

    def test_wraps_before_adding(self):
        entity = Entity(kind=EntityKind.GENERATOR, current_rate=1.0, cycle_progress=1.5)
        advance(entity, 250, 1000)
        assert entity.cycle_progress == pytest.approx(0.75)

    def test_overflow_after_add_is_wrapped(self):
        entity = Entity(kind=EntityKind.GENERATOR, current_rate=1.0, cycle_progress=0.75)
        result = advance(entity, 500, 1000)
        assert result == pytest.approx(0.25)
        assert 0 <= entity.cycle_progress < 1

    def test_long_frame_covers_several_cycles(self):
        entity = Entity(kind=EntityKind.GENERATOR, current_rate=1.0)
        advance(entity, 3500, 1000)
        assert entity.cycle_progress == pytest.approx(0.5)

    def test_zero_elapsed_is_noop(self):
        entity = Entity(kind=EntityKind.GENERATOR, current_rate=1.0, cycle_progress=0.3)
        advance(entity, 0, 1000)
        assert entity.cycle_progress == 0.3


class TestWrapLargeValues:
    @pytest.mark.parametrize("value", [1e6 + 0.25, 2.0 ** 53, 1e17, 1e300])
    def test_huge_progress_lands_in_unit_interval(self, value):
        assert 0 <= wrap(value) < 1

    def test_huge_elapsed_in_one_step(self):
        entity = Entity(kind=EntityKind.GENERATOR, current_rate=1.0)
        advance(entity, 1e20, 1000)
        assert 0 <= entity.cycle_progress < 1

    def test_injected_huge_progress_is_normalised(self):
        entity = Entity(kind=EntityKind.MOTOR, current_rate=0.0, cycle_progress=1e17)
        advance(entity, 16, 1000)
        assert entity.cycle_progress == 0.0
