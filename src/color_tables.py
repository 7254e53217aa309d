"""
Color Tables - Fixed SGR color code to hex lookups
Foreground and background share the same 16-color palette
"""

from types import MappingProxyType
from typing import Mapping


# Standard colors (0-7) followed by bright colors (8-15)
PALETTE = (
    '#000000', '#cc0000', '#4e9a06', '#c4a000',
    '#3465a4', '#75507b', '#06989a', '#d3d7cf',
    '#555753', '#ef2929', '#8ae234', '#fce94f',
    '#729fcf', '#ad7fa8', '#34e2e2', '#eeeeec',
)


def _build_table(standard_base: int, bright_base: int) -> Mapping[int, str]:
    """Map the 8 standard and 8 bright codes onto the palette"""
    table = {}
    for offset in range(8):
        table[standard_base + offset] = PALETTE[offset]
        table[bright_base + offset] = PALETTE[offset + 8]
    return MappingProxyType(table)


FOREGROUND_COLORS = _build_table(30, 90)
BACKGROUND_COLORS = _build_table(40, 100)
