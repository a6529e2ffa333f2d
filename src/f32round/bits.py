"""IEEE 754 layout constants and bit reinterpretation helpers."""

import struct

# ---------------------------------------------------------------------------
# Float64 layout, as seen through the high 32-bit word
# ---------------------------------------------------------------------------

MASK32: int = 0xFFFFFFFF
HIGH_SIGN_MASK: int = 0x80000000
HIGH_EXPONENT_MASK: int = 0x7FF00000
HIGH_SIGNIFICAND_MASK: int = 0x000FFFFF
HIGH_NUM_SIGNIFICAND_BITS: int = 20

FLOAT64_EXPONENT_BIAS: int = 1023
FLOAT64_MAX_BIASED_EXPONENT: int = 0x7FF
FLOAT64_NUM_SIGNIFICAND_BITS: int = 52
FLOAT64_IMPLICIT_BIT: int = 1 << 52

# ---------------------------------------------------------------------------
# Float32 layout
# ---------------------------------------------------------------------------

FLOAT32_SIGN_MASK: int = 0x80000000
FLOAT32_EXPONENT_MASK: int = 0x7F800000
FLOAT32_SIGNIFICAND_MASK: int = 0x007FFFFF
FLOAT32_QUIET_BIT: int = 0x00400000
FLOAT32_PINF_BITS: int = 0x7F800000
FLOAT32_EXPONENT_BIAS: int = 127
FLOAT32_MAX_BIASED_EXPONENT: int = 0xFF
FLOAT32_NUM_SIGNIFICAND_BITS: int = 23

# Fraction bits a float64 carries beyond a float32.
SURPLUS_BITS: int = FLOAT64_NUM_SIGNIFICAND_BITS - FLOAT32_NUM_SIGNIFICAND_BITS

# ---------------------------------------------------------------------------
# Float32 values, widened
# ---------------------------------------------------------------------------

FLOAT32_MAX: float = 3.4028234663852886e38
FLOAT32_SMALLEST_SUBNORMAL: float = 1.401298464324817e-45

_WORDS = struct.Struct(">II")
_DOUBLE = struct.Struct(">d")


# ---------------------------------------------------------------------------
# Reinterpretation
# ---------------------------------------------------------------------------


def to_words(x: float) -> tuple[int, int]:
    """Split a float64 into its (high, low) unsigned 32-bit words.

    The high word holds the sign, the 11 exponent bits and the top 20
    significand bits; the low word holds the remaining 32 significand bits.
    """
    try:
        raw = _DOUBLE.pack(x)
    except struct.error as e:
        if isinstance(x, int):
            raise OverflowError("int too large to convert to float") from e
        raise TypeError(f"must be real number, not {type(x).__name__}") from e
    return _WORDS.unpack(raw)


def from_words(high: int, low: int) -> float:
    return _DOUBLE.unpack(_WORDS.pack(high & MASK32, low & MASK32))[0]


def float32_bits_to_float64(bits: int) -> float:
    """Widen a float32 bit pattern to the float64 with the same value.

    The double's fields are rebuilt from the single's: the exponent is
    rebiased, subnormals are renormalized, and NaN payloads keep their bits.
    """
    bits = bits & MASK32
    sign: int = bits & FLOAT32_SIGN_MASK
    exp: int = (bits & FLOAT32_EXPONENT_MASK) >> FLOAT32_NUM_SIGNIFICAND_BITS
    frac: int = bits & FLOAT32_SIGNIFICAND_MASK
    if exp == FLOAT32_MAX_BIASED_EXPONENT:
        # Infinity when frac is zero, NaN otherwise.
        exp64: int = FLOAT64_MAX_BIASED_EXPONENT
        frac64: int = frac << SURPLUS_BITS
    elif exp == 0:
        if frac == 0:
            return from_words(sign, 0)
        top: int = frac.bit_length() - 1
        exp64 = (
            top
            - FLOAT32_NUM_SIGNIFICAND_BITS
            - FLOAT32_EXPONENT_BIAS
            + 1
            + FLOAT64_EXPONENT_BIAS
        )
        frac64 = (frac ^ (1 << top)) << (FLOAT64_NUM_SIGNIFICAND_BITS - top)
    else:
        exp64 = exp - FLOAT32_EXPONENT_BIAS + FLOAT64_EXPONENT_BIAS
        frac64 = frac << SURPLUS_BITS
    high: int = (
        sign
        | (exp64 << HIGH_NUM_SIGNIFICAND_BITS)
        | (frac64 >> 32)
    )
    return from_words(high, frac64 & MASK32)
