"""
Gray Code Model — Binary Reflected Gray Code

Pure functions behind the visualizer:
- gray_code / gray_to_binary: integer conversions
- generate_sequence: ordered n-bit Gray code strings (XOR construction)
- reflect_sequence: same sequence built by recursive reflection
- changed_bit: index of the bit that flipped between two consecutive codes
- binary_to_decimal: value shown in the "Decimal" read-out

Key invariant: every adjacent pair of a generated sequence, including the
wrap from last back to first, differs in exactly one bit.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Optional, Sequence, Tuple


def gray_code(value: int) -> int:
    """Convert a plain binary integer to its Gray code."""
    return value ^ (value >> 1)


def gray_to_binary(code: int) -> int:
    """Inverse of gray_code: fold every higher bit back in with XOR."""
    value = code
    mask = code >> 1
    while mask:
        value ^= mask
        mask >>= 1
    return value


def generate_sequence(bits: int) -> List[str]:
    """
    Generate the n-bit Gray code sequence.

    Entry i is gray_code(i) as a zero-padded binary string, so the list is
    ordered by i and not by the numeric value of the code.

    Args:
        bits: Bit width (>= 1). Widths <= 0 give an empty list.

    Returns:
        A new list of 2**bits strings on every call.
    """
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError(f"bits must be an int, got {type(bits).__name__}")
    return list(_cached_sequence(bits))


@lru_cache(maxsize=32)
def _cached_sequence(bits: int) -> Tuple[str, ...]:
    if bits <= 0:
        return ()
    return tuple(format(gray_code(i), f'0{bits}b') for i in range(1 << bits))


def reflect_sequence(bits: int) -> List[str]:
    """
    Build the sequence by reflection: prefix the (n-1)-bit list with 0,
    then its mirror image with 1.
    """
    if bits <= 0:
        return []
    result = ['0', '1']
    for _ in range(bits - 1):
        result = ['0' + code for code in result] + ['1' + code for code in reversed(result)]
    return result


def changed_bit(previous: Optional[str], current: str) -> Optional[int]:
    """
    Index of the first bit (left to right) where previous and current differ.

    Returns None when there is no previous code or the codes are equal.
    Only defined for consecutive codes from one generated sequence.
    """
    if not previous:
        return None
    for idx, (a, b) in enumerate(zip(previous, current)):
        if a != b:
            return idx
    return None


def binary_to_decimal(code: str) -> int:
    """
    Read a Gray string as an ordinary binary number ("101" -> 5).

    This is the raw value of the displayed bits, not the sequence index.
    Use code_index for the index.
    """
    return int(code, 2)


def code_index(code: str) -> int:
    """Position of a Gray string within its sequence ("111" -> 5)."""
    return gray_to_binary(int(code, 2))


def hamming_distance(a: str, b: str) -> int:
    """Number of positions at which two equal-length codes differ."""
    if len(a) != len(b):
        raise ValueError(f"Codes differ in length: {len(a)} vs {len(b)}")
    return sum(1 for x, y in zip(a, b) if x != y)


def is_gray_sequence(codes: Sequence[str]) -> bool:
    """True if every adjacent pair, including last -> first, differs in one bit."""
    if len(codes) < 2:
        return True
    for i, code in enumerate(codes):
        nxt = codes[(i + 1) % len(codes)]
        if len(code) != len(nxt) or hamming_distance(code, nxt) != 1:
            return False
    return True
