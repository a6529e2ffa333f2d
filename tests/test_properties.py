# ruff: noqa: E402
"""Property-based tests for float64 -> float32 rounding."""

import math
import struct

import pytest

hypothesis = pytest.importorskip("hypothesis")
from hypothesis import given, strategies as st

from f32round.polyfill import float64_to_float32

# Halfway between the largest float32 and 2^128.
OVERFLOW_THRESHOLD = 2.0**128 - 2.0**103


def f2i(f: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", f))[0]


@given(st.floats(width=32))
def test_float32_values_unchanged(x: float):
    got = float64_to_float32(x)
    if math.isnan(x):
        assert math.isnan(got)
    else:
        assert f2i(got) == f2i(x)


@given(st.floats(width=64))
def test_idempotent(x: float):
    once = float64_to_float32(x)
    twice = float64_to_float32(once)
    if math.isnan(once):
        assert math.isnan(twice)
    else:
        assert f2i(twice) == f2i(once)


@given(st.floats(allow_nan=False), st.floats(allow_nan=False))
def test_monotonic(a: float, b: float):
    lo, hi = min(a, b), max(a, b)
    assert float64_to_float32(lo) <= float64_to_float32(hi)


@given(st.floats(allow_nan=False, allow_infinity=False))
def test_within_half_ulp(x: float):
    y = float64_to_float32(x)
    if math.isinf(y):
        assert abs(x) >= OVERFLOW_THRESHOLD
        return
    if y == 0.0:
        assert abs(x) <= 2.0**-150
        return
    _, e = math.frexp(y)
    half_ulp = math.ldexp(1.0, max(e, -125) - 25)
    assert abs(x - y) <= half_ulp


@given(st.floats(allow_nan=False))
def test_sign_preserved(x: float):
    assert math.copysign(1.0, float64_to_float32(x)) == math.copysign(1.0, x)
