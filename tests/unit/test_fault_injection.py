from __future__ import annotations

import random

import pytest

from ecoroute.adapters.fault_injection import DEFAULT_FAULT_RATE, TransientFaultInjector, clamp_rate
from ecoroute.domain.exceptions import TransientServiceError


class _FixedRng:
    def __init__(self, value: float) -> None:
        self.value = value

    def random(self) -> float:
        return self.value


def test_default_rate_is_five_percent():
    assert DEFAULT_FAULT_RATE == 0.05
    assert TransientFaultInjector().rate == 0.05


def test_zero_rate_never_fails():
    injector = TransientFaultInjector(0.0, rng=_FixedRng(0.0))
    assert injector.enabled is False
    injector.maybe_fail()


@pytest.mark.parametrize("draw, fails", [(0.0, True), (0.049, True), (0.05, False), (0.9, False)])
def test_draw_below_rate_fails(draw: float, fails: bool):
    injector = TransientFaultInjector(0.05, rng=_FixedRng(draw))
    if fails:
        with pytest.raises(TransientServiceError) as exc_info:
            injector.maybe_fail()
        assert exc_info.value.code == "TRANSIENT_FAILURE"
        assert "try again" in exc_info.value.message
    else:
        injector.maybe_fail()


@pytest.mark.parametrize("raw, expected", [(-1, 0.0), (0.3, 0.3), (7, 1.0)])
def test_rate_is_clamped(raw, expected):
    assert clamp_rate(raw) == expected
    assert TransientFaultInjector(raw).rate == expected


def test_failure_frequency_tracks_rate():
    injector = TransientFaultInjector(0.05, rng=random.Random(2024))
    failures = 0
    for _ in range(2000):
        try:
            injector.maybe_fail()
        except TransientServiceError:
            failures += 1
    assert 40 <= failures <= 170


def test_nan_rate_uses_default():
    assert clamp_rate(float("nan")) == DEFAULT_FAULT_RATE
    assert TransientFaultInjector(float("nan")).rate == DEFAULT_FAULT_RATE
