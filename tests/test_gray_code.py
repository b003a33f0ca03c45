"""
Tests for gray_visualizer/model/gray_code.py

Sequence generation, transition detection, and the conversion helpers.
"""

import pytest

from gray_visualizer.model.gray_code import (
    binary_to_decimal,
    changed_bit,
    code_index,
    generate_sequence,
    gray_code,
    gray_to_binary,
    hamming_distance,
    is_gray_sequence,
    reflect_sequence,
)


# =============================================================================
# SEQUENCE GENERATOR
# =============================================================================

class TestGenerateSequence:
    """generate_sequence() output shape and ordering."""

    def test_two_bits(self):
        assert generate_sequence(2) == ["00", "01", "11", "10"]

    def test_three_bits(self):
        assert generate_sequence(3) == ["000", "001", "011", "010", "110", "111", "101", "100"]

    def test_one_bit(self):
        assert generate_sequence(1) == ["0", "1"]

    @pytest.mark.parametrize("bits", range(1, 9))
    def test_length_is_power_of_two(self, bits):
        assert len(generate_sequence(bits)) == 2 ** bits

    @pytest.mark.parametrize("bits", range(1, 9))
    def test_codes_are_fixed_width_binary(self, bits):
        for code in generate_sequence(bits):
            assert len(code) == bits
            assert set(code) <= {"0", "1"}

    @pytest.mark.parametrize("bits", range(1, 9))
    def test_codes_are_unique(self, bits):
        seq = generate_sequence(bits)
        assert len(set(seq)) == len(seq)

    def test_zero_and_negative_bits_are_empty(self):
        assert generate_sequence(0) == []
        assert generate_sequence(-3) == []

    def test_non_int_bits_rejected(self):
        with pytest.raises(TypeError):
            generate_sequence(3.0)
        with pytest.raises(TypeError):
            generate_sequence("3")
        with pytest.raises(TypeError):
            generate_sequence(True)

    def test_repeat_calls_are_identical(self):
        assert generate_sequence(5) == generate_sequence(5)

    def test_returned_list_cannot_corrupt_cache(self):
        first = generate_sequence(3)
        first[0] = "xxx"
        first.append("junk")
        assert generate_sequence(3)[0] == "000"
        assert len(generate_sequence(3)) == 8

    def test_ordered_by_index_not_value(self):
        seq = generate_sequence(3)
        assert seq != sorted(seq)
        assert [int(code, 2) for code in seq] == [gray_code(i) for i in range(8)]


class TestSingleBitProperty:
    """Every adjacent pair, including the wrap, differs in exactly one bit."""

    @pytest.mark.parametrize("bits", range(1, 9))
    def test_adjacent_pairs(self, bits):
        seq = generate_sequence(bits)
        for i in range(len(seq) - 1):
            assert hamming_distance(seq[i], seq[i + 1]) == 1

    @pytest.mark.parametrize("bits", range(1, 9))
    def test_wraparound_pair(self, bits):
        seq = generate_sequence(bits)
        assert hamming_distance(seq[-1], seq[0]) == 1

    @pytest.mark.parametrize("bits", range(1, 9))
    def test_is_gray_sequence(self, bits):
        assert is_gray_sequence(generate_sequence(bits))

    @pytest.mark.parametrize("bits", range(1, 7))
    def test_changed_bit_matches_the_differing_index(self, bits):
        seq = generate_sequence(bits)
        for i, code in enumerate(seq):
            nxt = seq[(i + 1) % len(seq)]
            diff = [k for k in range(bits) if code[k] != nxt[k]]
            assert changed_bit(code, nxt) == diff[0]


# =============================================================================
# TRANSITION DETECTOR
# =============================================================================

class TestChangedBit:
    """changed_bit() scenarios."""

    def test_middle_bit(self):
        assert changed_bit("001", "011") == 1

    def test_wrap_from_last_to_first(self):
        assert changed_bit("100", "000") == 0

    def test_last_bit(self):
        assert changed_bit("000", "001") == 2

    def test_no_previous_returns_none(self):
        assert changed_bit(None, "010") is None

    def test_identical_codes_return_none(self):
        assert changed_bit("101", "101") is None

    def test_first_difference_wins(self):
        # Not a valid Gray step, but the scan is left to right
        assert changed_bit("000", "011") == 1


# =============================================================================
# CONVERSIONS
# =============================================================================

class TestConversions:
    """Integer conversions and the display helpers."""

    def test_gray_code_values(self):
        assert [gray_code(i) for i in range(8)] == [0, 1, 3, 2, 6, 7, 5, 4]

    @pytest.mark.parametrize("value", [0, 1, 2, 7, 100, 1023, 65535])
    def test_gray_to_binary_inverts(self, value):
        assert gray_to_binary(gray_code(value)) == value

    def test_decimal_is_literal_binary_parse(self):
        assert binary_to_decimal("101") == 5
        assert binary_to_decimal("000") == 0
        assert binary_to_decimal("100") == 4

    def test_decimal_differs_from_index(self):
        # "101" sits at index 6 in the 3-bit sequence but reads as 5
        seq = generate_sequence(3)
        assert seq.index("101") == 6
        assert binary_to_decimal("101") == 5
        assert code_index("101") == 6

    @pytest.mark.parametrize("bits", [2, 3, 4, 5])
    def test_code_index_round_trips_position(self, bits):
        for idx, code in enumerate(generate_sequence(bits)):
            assert code_index(code) == idx


class TestReflection:
    """Recursive reflection builds the same sequence as the XOR formula."""

    @pytest.mark.parametrize("bits", range(1, 9))
    def test_matches_xor_construction(self, bits):
        assert reflect_sequence(bits) == generate_sequence(bits)

    def test_zero_bits(self):
        assert reflect_sequence(0) == []


class TestHelpers:
    """hamming_distance / is_gray_sequence."""

    def test_hamming_distance(self):
        assert hamming_distance("000", "111") == 3
        assert hamming_distance("010", "010") == 0

    def test_hamming_distance_length_mismatch(self):
        with pytest.raises(ValueError):
            hamming_distance("01", "011")

    def test_plain_binary_is_not_gray(self):
        assert not is_gray_sequence(["00", "01", "10", "11"])

    def test_broken_wrap_is_not_gray(self):
        assert not is_gray_sequence(["00", "01", "11"])

    def test_trivial_sequences(self):
        assert is_gray_sequence([])
        assert is_gray_sequence(["0"])
