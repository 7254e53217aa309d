"""
Escape Normalizer - Prepares raw terminal text for SGR scanning
Rewrites the document-escaped "#x1B[" form into a real ESC and drops
every control sequence that is not SGR
"""

import re


ESC = '\x1b'

# Some log viewers store ESC as the literal text "#x1B[" inside the page
LITERAL_ESCAPE_REGEX = re.compile(r'#x1[Bb]\[')

# Cursor movement, erase, scroll, report and mode sequences
NON_SGR_REGEX = re.compile(r'\x1b\[\??[0-9;]*[A-HJKSTfnsulh]')

# Window title (OSC) sequences terminated by BEL
OSC_TITLE_REGEX = re.compile(r'\x1b\][^\x07\x1b]*\x07')


def normalize_escapes(text: str) -> str:
    """Rewrite literal escapes and strip non-SGR control sequences"""
    text = LITERAL_ESCAPE_REGEX.sub(ESC + '[', text)
    text = NON_SGR_REGEX.sub('', text)
    return OSC_TITLE_REGEX.sub('', text)


def has_ansi_codes(text: str) -> bool:
    """Cheap check for any escape sequence, real or literal"""
    return '#x1B[' in text or '#x1b[' in text or ESC + '[' in text
