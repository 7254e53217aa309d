"""
Style State - Cumulative SGR attribute snapshot
Each SGR code folds into a new immutable StyleState value
"""

from dataclasses import dataclass, replace
from typing import Iterable, List, Optional

from color_tables import FOREGROUND_COLORS, BACKGROUND_COLORS


@dataclass(frozen=True)
class StyleState:
    """All text attributes still active at a point in the scan"""
    foreground: Optional[str] = None
    background: Optional[str] = None
    bold: bool = False
    dim: bool = False
    italic: bool = False
    underline: bool = False

    def is_empty(self) -> bool:
        """True when no attribute is set"""
        return self == EMPTY_STYLE

    def apply(self, code: int) -> 'StyleState':
        """Return the state after a single SGR code"""
        if code == 0:
            return EMPTY_STYLE
        if code == 1:
            return replace(self, bold=True)
        if code == 2:
            return replace(self, dim=True)
        if code == 3:
            return replace(self, italic=True)
        if code == 4:
            return replace(self, underline=True)
        if code in FOREGROUND_COLORS:
            return replace(self, foreground=FOREGROUND_COLORS[code])
        if code == 39:
            return replace(self, foreground=None)
        if code in BACKGROUND_COLORS:
            return replace(self, background=BACKGROUND_COLORS[code])
        if code == 49:
            return replace(self, background=None)

        # Unknown codes (including 38/48 extended color introducers) are no-ops
        return self

    def apply_codes(self, codes: Iterable[int]) -> 'StyleState':
        """Fold codes left to right; a 0 only clears what came before it"""
        state = self
        for code in codes:
            state = state.apply(code)
        return state


EMPTY_STYLE = StyleState()


def parse_sgr_params(params: str) -> List[int]:
    """Parse an SGR parameter list; empty or non-numeric fields count as 0"""
    codes = []
    for field in params.split(';'):
        try:
            codes.append(int(field))
        except ValueError:
            codes.append(0)
    return codes
