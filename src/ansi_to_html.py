#!/usr/bin/env python3
"""
ANSI to HTML Converter - Single-pass SGR to inline-styled HTML
Each wrapper span carries one fixed style; spans never nest
"""

import html
from typing import Iterator, List, Tuple, Union

from escape_normalizer import ESC, normalize_escapes
from style_state import EMPTY_STYLE, StyleState, parse_sgr_params


# Reset rules used when the hosting page's CSS would otherwise restyle spans
AGGRESSIVE_BASE = (
    'display:inline !important;margin:0 !important;padding:0 !important;'
    'border:0 !important;line-height:inherit !important;white-space:pre !important;'
)
DEFAULT_BASE = 'display:contents;'

Token = Tuple[str, Union[str, List[int]]]


def _find_sgr_end(text: str, start: int) -> int:
    """Index of the terminating 'm' for an SGR sequence at start, or -1"""
    if text[start + 1:start + 2] != '[':
        return -1

    j = start + 2
    # Stray characters become 0 fields; a sequence never runs past a line or another escape
    while j < len(text) and text[j] not in 'm\n\x1b':
        j += 1

    if j < len(text) and text[j] == 'm':
        return j
    return -1


def scan(text: str) -> Iterator[Token]:
    """Split normalized text into ('text', chunk) and ('sgr', codes) tokens

    An ESC that does not start a complete SGR sequence is dropped and the
    characters after it are scanned as ordinary text.
    """
    i = 0
    length = len(text)

    while i < length:
        esc = text.find(ESC, i)
        end = length if esc == -1 else esc

        if end > i:
            yield ('text', text[i:end])
            i = end
            continue

        sequence_end = _find_sgr_end(text, i)
        if sequence_end == -1:
            i += 1
            continue

        yield ('sgr', parse_sgr_params(text[i + 2:sequence_end]))
        i = sequence_end + 1


class AnsiToHtml:
    """Convert ANSI SGR sequences to HTML spans with inline styles"""

    def __init__(self, aggressive: bool = False):
        self.aggressive = aggressive

    def build_style(self, state: StyleState) -> str:
        """Render a style state into an inline style declaration"""
        suffix = ' !important' if self.aggressive else ''
        rules = [AGGRESSIVE_BASE if self.aggressive else DEFAULT_BASE]

        if state.foreground:
            rules.append(f'color:{state.foreground}{suffix};')
        if state.background:
            rules.append(f'background-color:{state.background}{suffix};')
        if state.bold:
            rules.append(f'font-weight:bold{suffix};')
        if state.dim:
            rules.append(f'opacity:0.7{suffix};')
        if state.italic:
            rules.append(f'font-style:italic{suffix};')
        if state.underline:
            rules.append(f'text-decoration:underline{suffix};')

        return ''.join(rules)

    def convert(self, text: str) -> str:
        """Convert ANSI text to an HTML fragment"""
        result = []
        state = EMPTY_STYLE
        in_span = False

        for kind, value in scan(normalize_escapes(text)):
            if kind == 'sgr':
                # A style change always starts a fresh span
                if in_span:
                    result.append('</span>')
                    in_span = False
                state = state.apply_codes(value)
                continue

            if not state.is_empty() and not in_span:
                result.append(f'<span style="{self.build_style(state)}">')
                in_span = True
            elif state.is_empty() and in_span:
                result.append('</span>')
                in_span = False

            result.append(html.escape(value, quote=False))

        if in_span:
            result.append('</span>')

        return ''.join(result)

    def strip(self, text: str) -> str:
        """Plain text with every escape sequence removed"""
        return ''.join(value for kind, value in scan(normalize_escapes(text)) if kind == 'text')


# Shared converter; it keeps no state between calls
default_converter = AnsiToHtml()


def convert(text: str) -> str:
    """Convert with the default converter"""
    return default_converter.convert(text)
