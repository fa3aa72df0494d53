"""Property-based tests using hypothesis."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from ubxgen import bit_range, mask, mask_value, msgtypename, notabs, parse_uint, resolve_type
from ubxgen.resolve import SCALARS

bit_indices = st.integers(min_value=0, max_value=63)


class TestScalarProperties:
    """Property-based tests for scalar type resolution."""

    @given(code=st.sampled_from(sorted(SCALARS)), length=st.integers(min_value=0, max_value=10_000))
    def test_array_size(self, code: str, length: int) -> None:
        """Test array descriptors scale the element width."""
        scalar = resolve_type(code)
        array = resolve_type(f"{code}[{length}]")

        assert array.array_len == length
        assert array.size == scalar.width * length
        assert array.name == scalar.name


class TestMaskProperties:
    """Property-based tests for bit masks."""

    @given(i=bit_indices)
    def test_single_bit(self, i: int) -> None:
        assert mask_value(str(i)) == 1 << i
        assert bin(mask_value(str(i))).count("1") == 1

    @given(a=bit_indices, b=bit_indices)
    def test_range_popcount(self, a: int, b: int) -> None:
        """Test a range sets exactly hi-lo+1 contiguous bits starting at lo."""
        hi, lo = max(a, b), min(a, b)
        value = mask_value(f"{hi}:{lo}")

        assert bin(value).count("1") == hi - lo + 1
        assert value >> lo == (1 << (hi - lo + 1)) - 1
        assert value & ((1 << lo) - 1) == 0

    @given(i=bit_indices)
    def test_degenerate_range_equals_index(self, i: int) -> None:
        assert mask(f"{i}:{i}") == mask(str(i))

    @given(a=bit_indices, b=bit_indices)
    def test_hex_rendering(self, a: int, b: int) -> None:
        hi, lo = max(a, b), min(a, b)
        text = mask(f"{hi}:{lo}")

        assert text.startswith("0x")
        assert int(text, 16) == mask_value(f"{hi}:{lo}")
        assert bit_range(f"{hi}:{lo}") == (hi, lo)

    @given(spec=st.text(max_size=8))
    def test_permissive_never_fails(self, spec: str) -> None:
        """Test lenient masks always produce a 64-bit value."""
        value = mask_value(spec, strict=False)

        assert 0 <= value < 1 << 64


class TestLiteralProperties:
    """Property-based tests for class/id literal parsing."""

    @given(value=st.integers(min_value=0, max_value=2**64 - 1))
    def test_decimal_and_hex_agree(self, value: int) -> None:
        assert parse_uint(str(value)) == value
        assert parse_uint(hex(value)) == value
        assert parse_uint(f"0x{value:X}") == value


class TestNamingProperties:
    """Property-based tests for naming helpers."""

    @given(text=st.text())
    def test_notabs_removes_tabs_and_newlines(self, text: str) -> None:
        result = notabs(text)

        assert "\t" not in result
        assert "\n" not in result
        assert len(result) == len(text)

    @given(
        category=st.from_regex(r"[A-Z]{3}", fullmatch=True),
        name=st.from_regex(r"[A-Z0-9]{1,8}", fullmatch=True),
    )
    def test_msgtypename_drops_category(self, category: str, name: str) -> None:
        result = msgtypename(f"{category}-{name}")

        assert result.lower() == name.lower()
        assert result[0] == result[0].upper()
