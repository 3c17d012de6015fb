"""Character classes, escape decoding and scalar post-processing for the scanner."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

HORIZONTAL_SPACE: Final = frozenset(" \t")
LINE_BREAKS: Final = frozenset("\r\n")
QUOTES: Final = frozenset("'\"")

_NAME_CHARACTER: Final = re.compile(r"[A-Za-z0-9_-]", re.ASCII)
_BARE_IDENTIFIER: Final = re.compile(r"[A-Za-z0-9_]+", re.ASCII)
_NUMBER_START: Final = re.compile(r"[\d.]", re.ASCII)
_ESCAPE: Final = re.compile(r"\\(.)")
_NUMBER: Final = re.compile(r"[+-]?(?:\d+)?(?:\.\d+)?", re.ASCII)
_TRUE: Final = re.compile(r"y(?:es)?|true|on", re.IGNORECASE)
_FALSE: Final = re.compile(r"no?|false|off", re.IGNORECASE)
_FOLD_BREAK: Final = re.compile(r"(\n\s*\Z)|(?:\n([^ \t]))")
_PADDED_LINE_START: Final = re.compile(r"(^|\n(?=\s*\S))")

_ESCAPES: Final = {
    "n": "\n",
    "t": "\t",
    "f": "\f",
    "v": "\v",
}


class FoldStyle(Enum):
    """Line handling of a multi-line block scalar."""

    LITERAL = "|"
    FOLDED = ">"


class Chomping(Enum):
    """Trailing newline policy of a multi-line block scalar."""

    CLIP = ""
    STRIP = "-"
    KEEP = "+"


@dataclass(frozen=True)
class FoldMarker:
    """Parsed `|`/`>` marker including its optional chomping indicator."""

    style: FoldStyle
    chomping: Chomping

    def __str__(self) -> str:
        return self.style.value + self.chomping.value


FOLD_MARKERS: Final = {
    str(marker): marker
    for marker in (
        FoldMarker(style, chomping)
        for style in FoldStyle
        for chomping in Chomping
    )
}


def is_whitespace(ch: str) -> bool:
    return ch.isspace()


def is_name_character(ch: str) -> bool:
    return _NAME_CHARACTER.fullmatch(ch) is not None


def is_bare_identifier(text: str) -> bool:
    """Checks whether text may serve as key of a compact nested mapping."""
    return _BARE_IDENTIFIER.fullmatch(text) is not None


def is_number_start(ch: str) -> bool:
    return _NUMBER_START.fullmatch(ch) is not None


def leading_space_width(text: str) -> int:
    return len(text) - len(text.lstrip())


def decode_escapes(text: str) -> str:
    """
    Replaces backslash escapes in quoted names and values.

    Only `\\n`, `\\t`, `\\f` and `\\v` have special meaning, any other escaped
    character is taken literally (which covers quotes and backslashes).
    """
    return _ESCAPE.sub(lambda m: _ESCAPES.get(m.group(1), m.group(1)), text)


def is_number(text: str) -> bool:
    """Checks for optional sign, integer part and fraction with 1+ digits."""
    unsigned = text[1:] if text[:1] in ("+", "-") else text
    return len(unsigned) > 0 and _NUMBER.fullmatch(text) is not None


def coerce_scalar(
    text: str, parse_float: Callable[[str], Any] | None = None
) -> Any:
    """
    Converts an unquoted scalar into null, boolean, number or string.

    Numbers are always floating point unless `parse_float` takes over.
    """
    trimmed = text.strip()

    if trimmed == "null":
        return None
    if _TRUE.fullmatch(trimmed):
        return True
    if _FALSE.fullmatch(trimmed):
        return False
    if is_number(trimmed):
        if parse_float is not None:
            return parse_float(trimmed)
        return float(trimmed)
    return trimmed


def fold_block(value: str, marker: FoldMarker) -> str:
    """
    Applies fold style and chomping to the collected lines of a block scalar.

    The trailing run of newlines is stripped, kept or reduced to a single one.
    Inside the block literal style keeps every newline, folded style joins
    lines with a space and turns a blank line into a single newline.
    """

    def replace(match: re.Match[str]) -> str:
        end, inner = match.group(1), match.group(2)
        if end is not None:
            if marker.chomping is Chomping.KEEP:
                return end
            if marker.chomping is Chomping.STRIP:
                return ""
            return "\n"

        if marker.style is FoldStyle.LITERAL:
            return "\n" + inner
        return ("" if inner == "\n" else " ") + inner

    return _FOLD_BREAK.sub(replace, value)


def pad_block(value: str, padding: str) -> str:
    """Indents every non-trailing line of a partially collected block."""
    return _PADDED_LINE_START.sub(lambda m: m.group(1) + padding, value)
