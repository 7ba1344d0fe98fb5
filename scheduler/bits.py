"""Immutable fixed-size bit-vector backing a parsed cron field."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class BitVector:
    """Ordered boolean flags indexed 0..size-1, stored as an int mask.

    Usage:
        bits = BitVector.from_values(60, [0, 15, 30, 45])
        bits.test(15)          # True
        bits.next_set_bit(16)  # 30
        list(bits)             # [0, 15, 30, 45]
    """

    size: int
    mask: int = 0

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"Bit-vector size must be non-negative, got {self.size}")
        if self.mask < 0 or self.mask >> self.size:
            raise ValueError(f"Mask {self.mask:#x} does not fit in {self.size} bits")

    @classmethod
    def from_values(cls, size: int, values: Iterable[int]) -> BitVector:
        mask = 0
        for value in values:
            if not 0 <= value < size:
                raise ValueError(f"Bit index {value} outside [0, {size})")
            mask |= 1 << value
        return cls(size=size, mask=mask)

    def test(self, index: int) -> bool:
        """True if ``index`` is set. Indices outside the vector are unset."""
        if index < 0 or index >= self.size:
            return False
        return bool(self.mask >> index & 1)

    def next_set_bit(self, index: int) -> int | None:
        """First set index ``>= index``, or None past the last set bit.

        Scans forward only; wrapping back to the start is up to the caller.
        """
        if index < 0:
            raise ValueError(f"Scan index must be non-negative, got {index}")
        remaining = self.mask >> index
        if not remaining:
            return None
        # lowest set bit of the shifted mask
        return index + (remaining & -remaining).bit_length() - 1

    def to_list(self) -> list[int]:
        return list(self)

    def __iter__(self) -> Iterator[int]:
        index = self.next_set_bit(0)
        while index is not None:
            yield index
            index = self.next_set_bit(index + 1)

    def __contains__(self, index: object) -> bool:
        return isinstance(index, int) and self.test(index)

    def __len__(self) -> int:
        return bin(self.mask).count("1")

    def __str__(self) -> str:
        return "".join("1" if self.test(i) else "0" for i in range(self.size))
