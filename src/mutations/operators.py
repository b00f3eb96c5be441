"""
Operator Catalog
================

Every per-channel function of the channel operation framework is a small
frozen dataclass carrying only its scalar parameters. A single dispatch
function, :func:`apply_operator`, maps an operator to its formula and
evaluates it for whole arrays of left and right channel values at once.

All formulas are computed on widened integers and converted back to 8 bits
at the end, so wrapping is explicit modulo-256 arithmetic:

======================  =======================================  =======================
Operator                raw                                      not raw
======================  =======================================  =======================
``Add``                 ``(L + R) mod 256``                      ``min(L + R, 255)``
``Subtract``            ``(L - R) mod 256``                      ``abs(L - R)``
``Multiply``            ``(L * R) mod 256``
``Power``               ``L ** R mod 256``
``Divide``              ``L // max(R, 1)``
``BitwiseOr/And/Xor``   bitwise op, complemented when ``negate``
``ShiftLeft``           ``(L << bits) mod 256``                  ``min(L << bits, 255)``
``ShiftRight``          ``L >> bits``
``Average``             ``(L + R) // 2``
``BloomMix``            ``min(L + L * R / 255 * intensity, 255)``
``Overlay``             ``L * R // 128`` for ``L < 128``, else ``255 - (255 - L)(255 - R) // 128``
``Screen``              ``255 - (255 - L)(255 - R) // 255``
======================  =======================================  =======================
"""

from dataclasses import dataclass
from typing import ClassVar

import numpy as np
from numpy.typing import NDArray

from container_models.base import RGBArray
from utils.constants import CHANNEL_LEVELS, CHANNEL_MAX, MAX_SHIFT_BITS

type IntArray = NDArray[np.int64]


@dataclass(frozen=True)
class Add:
    name: ClassVar[str] = "add"
    raw: bool = False


@dataclass(frozen=True)
class Subtract:
    name: ClassVar[str] = "sub"
    raw: bool = False


@dataclass(frozen=True)
class Multiply:
    name: ClassVar[str] = "mult"


@dataclass(frozen=True)
class Power:
    name: ClassVar[str] = "pow"


@dataclass(frozen=True)
class Divide:
    name: ClassVar[str] = "div"


@dataclass(frozen=True)
class BitwiseOr:
    name: ClassVar[str] = "or"
    negate: bool = False


@dataclass(frozen=True)
class BitwiseAnd:
    name: ClassVar[str] = "and"
    negate: bool = False


@dataclass(frozen=True)
class BitwiseXor:
    name: ClassVar[str] = "xor"
    negate: bool = False


def _validate_bits(bits: int) -> None:
    if not 0 <= bits <= MAX_SHIFT_BITS:
        raise ValueError(f"`bits` must be between 0 and {MAX_SHIFT_BITS}, got {bits}")


@dataclass(frozen=True)
class ShiftLeft:
    name: ClassVar[str] = "left"
    unary: ClassVar[bool] = True
    bits: int = 1
    raw: bool = False

    def __post_init__(self) -> None:
        _validate_bits(self.bits)


@dataclass(frozen=True)
class ShiftRight:
    name: ClassVar[str] = "right"
    unary: ClassVar[bool] = True
    bits: int = 1

    def __post_init__(self) -> None:
        _validate_bits(self.bits)


@dataclass(frozen=True)
class Average:
    name: ClassVar[str] = "average"


@dataclass(frozen=True)
class BloomMix:
    name: ClassVar[str] = "bloom"
    intensity: float = 1.0


@dataclass(frozen=True)
class Overlay:
    name: ClassVar[str] = "overlay"


@dataclass(frozen=True)
class Screen:
    name: ClassVar[str] = "screen"


type Operator = (
    Add
    | Subtract
    | Multiply
    | Power
    | Divide
    | BitwiseOr
    | BitwiseAnd
    | BitwiseXor
    | ShiftLeft
    | ShiftRight
    | Average
    | BloomMix
    | Overlay
    | Screen
)

OPERATORS: dict[str, type[Operator]] = {
    operator.name: operator
    for operator in (
        Add,
        Subtract,
        Multiply,
        Power,
        Divide,
        BitwiseOr,
        BitwiseAnd,
        BitwiseXor,
        ShiftLeft,
        ShiftRight,
        Average,
        BloomMix,
        Overlay,
        Screen,
    )
}


def is_unary(operator: Operator) -> bool:
    """Unary operators only read the left operand."""
    return getattr(operator, "unary", False)


def _wrap(values: IntArray) -> IntArray:
    return np.mod(values, CHANNEL_LEVELS)


def _complement(values: IntArray, negate: bool) -> IntArray:
    return ~values & CHANNEL_MAX if negate else values


def _wrapping_power(base: IntArray, exponent: IntArray) -> IntArray:
    """Square-and-multiply modulo 256 over the 8 bits of the exponent."""
    base, exponent = np.broadcast_arrays(_wrap(base), exponent)
    result = np.ones_like(base)
    for bit in range(MAX_SHIFT_BITS):
        result = np.where((exponent >> bit) & 1, _wrap(result * base), result)
        base = _wrap(base * base)
    return result


def _overlay(left: IntArray, right: IntArray) -> IntArray:
    return np.where(
        left < 128,
        left * right // 128,
        CHANNEL_MAX - (CHANNEL_MAX - left) * (CHANNEL_MAX - right) // 128,
    )


def _bloom_mix(left: IntArray, right: IntArray, intensity: float) -> IntArray:
    mixed = left + (left * right / CHANNEL_MAX) * intensity
    return np.trunc(np.clip(mixed, 0, CHANNEL_MAX)).astype(np.int64)


def apply_operator(operator: Operator, lhs: RGBArray, rhs: RGBArray) -> RGBArray:
    """
    Apply `operator` to every pair of left and right channel values.

    :param operator: The operator variant to evaluate.
    :param lhs: Left channel values, shape (..., 3).
    :param rhs: Right channel values, broadcastable to the shape of `lhs`.
        Ignored by unary operators.
    :returns: uint8 array with the shape of `lhs`.
    """
    left = lhs.astype(np.int64)
    right = np.broadcast_to(rhs, lhs.shape).astype(np.int64)

    match operator:
        case Add(raw=True):
            result = _wrap(left + right)
        case Add():
            result = np.minimum(left + right, CHANNEL_MAX)
        case Subtract(raw=True):
            result = _wrap(left - right)
        case Subtract():
            result = np.abs(left - right)
        case Multiply():
            result = _wrap(left * right)
        case Power():
            result = _wrapping_power(left, right)
        case Divide():
            result = left // np.maximum(right, 1)
        case BitwiseOr(negate=negate):
            result = _complement(left | right, negate)
        case BitwiseAnd(negate=negate):
            result = _complement(left & right, negate)
        case BitwiseXor(negate=negate):
            result = _complement(left ^ right, negate)
        case ShiftLeft(bits=bits, raw=True):
            result = _wrap(left << bits)
        case ShiftLeft(bits=bits):
            result = np.minimum(left << bits, CHANNEL_MAX)
        case ShiftRight(bits=bits):
            result = left >> bits
        case Average():
            result = (left + right) // 2
        case BloomMix(intensity=intensity):
            result = _bloom_mix(left, right, intensity)
        case Overlay():
            result = _overlay(left, right)
        case Screen():
            result = CHANNEL_MAX - (CHANNEL_MAX - left) * (CHANNEL_MAX - right) // CHANNEL_MAX
        case _:
            raise TypeError(f"Unsupported operator: {operator!r}")

    return result.astype(np.uint8)
