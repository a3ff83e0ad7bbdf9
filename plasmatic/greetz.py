"""The one-bit greetings bitmap and its bit-packed storage."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from functools import lru_cache

WORD_BITS = 64
_WORD_MASK = (1 << WORD_BITS) - 1

GREETZ_WIDTH = 256
GREETZ_HEIGHT = 136

_LEADING_BLANK_ROWS = 31

# Each entry is one image row of 256 pixels, packed as four 64-bit words,
# least significant bit first.
_GREETZ_ROWS: tuple[tuple[int, int, int, int], ...] = (
    (0x0000000000000000, 0x0000000000000000, 0x0000002FFFC00000, 0x0000000000000000),
    (0x003FC00000001FF0, 0x00000001FF000000, 0xF80003FFFFFE0000, 0x1FFC03FF8000000F),
    (0x007FC00000000FF0, 0x00000001FF000000, 0xF8001FFFFFFF0000, 0x0FFC01FF80000007),
    (0x003FE00000000FF0, 0x00000001FF800000, 0xF8007FFFFFFFE000, 0x0FFC00FFC0000007),
    (0x003FC00000001FF0, 0x00000003FF800000, 0xF8007FFFFFFFF800, 0x0FF8007FE000000F),
    (0x007FC00000000FF0, 0x00000003FF800000, 0xF8003FFFFFFFFC00, 0x0FFC003FF0000007),
    (0x003FC00000001FF0, 0x00000007FFC00000, 0xF8003FFFFFFFFE00, 0x0FF8001FF800000F),
    (0x003FE00000000FF0, 0x00000007FFC00000, 0xF8003FF800BFFF80, 0x0FFC000FFC000007),
    (0x007FC00000001FF0, 0x00000007FFC00000, 0xF8001F80000FFF80, 0x0FF80007FC00000F),
    (0x003FC00000000FF0, 0x0000000FFFE00000, 0xF8000C000003FFE0, 0x0FF80003FF000007),
    (0x003FC00000001FF0, 0x0000000FFFE00000, 0xF80000000000FFE0, 0x0FF80003FF00000F),
    (0x003FC00000000FF0, 0x0000000FEFF00000, 0xF800000000007FF0, 0x0FF80000FF800007),
    (0x007FC00000001FF0, 0x0000001FEFF00000, 0xF800000000003FF8, 0x0FF80000FFC0000F),
    (0x003FE00000000FF0, 0x0000001FE7F80000, 0xF800000000001FFC, 0x0FF800007FE00007),
    (0x003FC00000001FF0, 0x0000003FC7F80000, 0xF800000000000FFC, 0x0FF800003FF0000F),
    (0x007FC00000000FF0, 0x0000003FC7F80000, 0xF8000000000007FE, 0x0FF800001FF80007),
    (0x003FC00000001FF0, 0x0000007FC7F80000, 0xF8000000000007FE, 0x0FF800000FFC000F),
    (0x003FC00000000FF0, 0x0000003F83FC0000, 0xF8000000000003FF, 0x07F8000007FE0007),
    (0x007FC00000001FF0, 0x0000007F83FC0000, 0xF8000000000003FF, 0x0FF8000003FE000F),
    (0x003FE00000000FF0, 0x000000FF81FE0000, 0xF8000000000001FF, 0x07F8000001FF8007),
    (0x003FC00000001FF0, 0x800000FF01FE0000, 0xF8000000000001FF, 0x0FF8000001FF800F),
    (0x003FC00000000FF0, 0x800000FF01FF0000, 0xF8000000000000FF, 0x07F80000007FC007),
    (0x007FC00000001FF0, 0x800001FF01FF0000, 0xF8000000000000FF, 0x0FF00000007FE00F),
    (0x003FC00000000FF0, 0xC00001FE00FF8000, 0xF8000000000000FF, 0x07F80000001FF007),
    (0x003FC00000001FF0, 0x800003FE00FF0000, 0xF8000000000000FF, 0x07F00000001FF80F),
    (0x007FE00000000FF0, 0xC00003FE007F8000, 0xF80000000000007F, 0x07F80000000FFC07),
    (0x003FC00000001FF0, 0xC00003FC007FC000, 0xF80000000000007F, 0x07F000000007FE0F),
    (0x003FC00000000FF0, 0xC00007FC003FC000, 0xF80000000000007F, 0x07F800000003FF07),
    (0x007FFFFFFFFFFFF0, 0xC00007F8003FC000, 0xF80000000000007F, 0x07F000000001FF0F),
    (0x003FFFFFFFFFFFF0, 0xE0000FF8003FE000, 0xF80000000000007F, 0x07F000000000FFC7),
    (0x003FFFFFFFFFFFF0, 0xC0000FF8001FE000, 0xF80000000000007F, 0x07F000000001FFCF),
    (0x003FFFFFFFFFFFF0, 0xE0000FF0001FF000, 0xF80000000000003F, 0x07F000000001FFE7),
    (0x007FFFFFFFFFFFF0, 0xC0001FF0001FF000, 0xF80000000000007F, 0x07F000000003FFFF),
    (0x003FFFFFFFFFFFF0, 0xE0001FE0000FF000, 0xF80000000000003F, 0x07F000000007FFFF),
    (0x003FFFFFFFFFFFF0, 0xC0003FE0000FF800, 0xF80000000000007F, 0x07F00000000FFFFF),
    (0x007FC00000000FF0, 0xE0003FE00007F800, 0xF80000000000003F, 0x07F00000000FFFFF),
    (0x003FC00000001FF0, 0xC0003FC00007F800, 0xF80000000000007F, 0x07F00000001FF8FF),
    (0x003FC00000000FF0, 0xE0007FC00007FC00, 0xF80000000000007F, 0x03F00000003FF87F),
    (0x007FC00000001FF0, 0xC0007F800003FC00, 0xF80000000000007F, 0x07F00000007FF07F),
    (0x003FC00000000FF0, 0xC0007FFFFFFFFE00, 0xF80000000000007F, 0x03F00000007FE01F),
    (0x003FC00000001FF0, 0xC000FFFFFFFFFE00, 0xF80000000000007F, 0x07F0000000FFC00F),
    (0x003FE00000000FF0, 0xC000FFFFFFFFFF00, 0xF80000000000007F, 0x03F0000001FFC007),
    (0x007FC00000001FF0, 0xC001FFFFFFFFFF00, 0xF8000000000000FF, 0x07E0000003FF800F),
    (0x003FC00000000FF0, 0x8001FFFFFFFFFF00, 0xF80000000000007F, 0x03F0000003FF0007),
    (0x003FC00000001FF0, 0x8003FFFFFFFFFF80, 0xF8000000000000FF, 0x03E0000007FE000F),
    (0x007FC00000000FF0, 0x8001FFFFFFFFFF80, 0xF8000000000000FF, 0x03F000000FFE0007),
    (0x003FC00000001FF0, 0x8003FE0000007F80, 0xF8000000000001FF, 0x03E000001FFC000F),
    (0x003FE00000000FF0, 0x8007FC0000007FC0, 0xF8000000000001FF, 0x03F000001FF80007),
    (0x007FC00000001FF0, 0x0007FC0000003FC0, 0xF8000000000003FF, 0x000000003FF0000F),
    (0x003FC00000000FF0, 0x0007FC0000003FE0, 0xF8000000000003FF, 0x000000007FF00007),
    (0x003FC00000001FF0, 0x000FF80000003FE0, 0xF8000000000007FE, 0x00000000FFE0000F),
    (0x003FC00000000FF0, 0x000FF80000001FF0, 0xF8000000000007FE, 0x00000000FFC00007),
    (0x007FC00000001FF0, 0x001FF00000001FF0, 0xF800000000000FFC, 0x00000001FF80000F),
    (0x003FE00000000FF0, 0x001FF00000000FF0, 0xF800000000000FFC, 0x00000003FF000007),
    (0x003FC00000001FF0, 0x001FE00000000FF0, 0xF800000000003FF8, 0x00000007FF00000F),
    (0x007FC00000000FF0, 0x003FE00000000FF8, 0xF800000000003FF8, 0x03F00007FE000007),
    (0x003FC00000001FF0, 0x003FE000000007F8, 0xF80000000000FFF0, 0x0FF8000FFC00000F),
    (0x003FC00000000FF0, 0x007FC000000007FC, 0xF80010000001FFE0, 0x0FFC001FF8000007),
    (0x007FC00000001FF0, 0x007FC000000007FC, 0xF8001D00000FFFC0, 0x1FFC003FF800000F),
    (0x003FE00000000FF0, 0x007FC000000003FE, 0xF8001FE8007FFF80, 0x1FFE003FF0000007),
    (0x003FC00000001FF0, 0x00FF8000000003FE, 0xF8001FFFFFFFFF00, 0x1FFC007FE000000F),
    (0x003FC00000000FF0, 0x00FF8000000001FF, 0xF8001FFFFFFFFE00, 0x1FFE00FFC0000007),
    (0x007FC00000001FF0, 0x01FF0000000001FE, 0xF8001FFFFFFFFC00, 0x1FFC01FFC000000F),
    (0x003FC00000000FF0, 0x01FF0000000000FF, 0xF8001FFFFFFFF000, 0x1FFC01FF80000007),
    (0x803FC00000001FF0, 0x01FF0000000000FF, 0xF8001FFFFFFFC000, 0x0FFC03FF0000000F),
    (0x807FE00000000FF0, 0x03FE0000000000FF, 0xF80001FFFFFD0000, 0x0FF807FE00000007),
    (0x0000000000000000, 0x0000000000000000, 0x00000017FFD00000, 0x03E0000000000000),
)


class Bitmap:
    """A one-bit image packed row-major into 64-bit words, least significant bit first."""

    def __init__(self, width: int, height: int, words: Sequence[int]) -> None:
        if width < 0 or height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        needed = -(-(width * height) // WORD_BITS)
        words = tuple(words)
        if len(words) != needed:
            raise ValueError(
                f"a {width}x{height} bitmap needs {needed} words, got {len(words)}"
            )
        if any(word < 0 or word > _WORD_MASK for word in words):
            raise ValueError("every word must fit in 64 unsigned bits")
        self.width = width
        self.height = height
        self.words = words

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y) as 0 or 1; positions outside the image are 0."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0
        index = y * self.width + x
        word, bit = divmod(index, WORD_BITS)
        return (self.words[word] >> bit) & 1

    def pixels(self) -> Iterator[tuple[int, ...]]:
        """Yield the image one row at a time, each row a tuple of 0s and 1s."""
        for y in range(self.height):
            yield tuple(self.get_pixel(x, y) for x in range(self.width))

    def __repr__(self) -> str:
        return f"Bitmap(width={self.width}, height={self.height})"


@lru_cache(maxsize=1)
def greetz_bitmap() -> Bitmap:
    """The 256x136 greetings text shown over the plasma."""
    words_per_row = GREETZ_WIDTH // WORD_BITS
    trailing = GREETZ_HEIGHT - _LEADING_BLANK_ROWS - len(_GREETZ_ROWS)
    words: list[int] = [0] * (_LEADING_BLANK_ROWS * words_per_row)
    for row in _GREETZ_ROWS:
        words.extend(row)
    words.extend([0] * (trailing * words_per_row))
    return Bitmap(GREETZ_WIDTH, GREETZ_HEIGHT, words)