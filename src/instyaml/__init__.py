"""
Single-pass parser for a restricted, block-style subset of YAML.

Converts YAML text into dicts, lists and scalars with one character-level
state machine and an explicit indentation stack. There is no separate
tokenizer pass and no recursive descent, so nesting depth is not bounded by
the interpreter's call stack.
"""

import math
import os
import re
import time
from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import IO
from typing import Any

from instyaml._scalars import FOLD_MARKERS
from instyaml._scalars import HORIZONTAL_SPACE
from instyaml._scalars import LINE_BREAKS
from instyaml._scalars import QUOTES
from instyaml._scalars import Chomping
from instyaml._scalars import FoldMarker
from instyaml._scalars import FoldStyle
from instyaml._scalars import coerce_scalar
from instyaml._scalars import decode_escapes
from instyaml._scalars import fold_block
from instyaml._scalars import is_bare_identifier
from instyaml._scalars import is_name_character
from instyaml._scalars import is_number
from instyaml._scalars import is_number_start
from instyaml._scalars import is_whitespace
from instyaml._scalars import leading_space_width
from instyaml._scalars import pad_block

__version__ = "0.1.0"

# Type aliases for domain concepts - recursive definition
YamlValue = (
    str | float | bool | None | dict[str, "YamlValue"] | list["YamlValue"]
)
type Position = int

# More permissive type for internal/test use
YamlValueLoose = Any

ParseFloatHook = Callable[[str], Any] | None
DefaultHook = Callable[[Any], Any] | None

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "INSTYAML_PROFILE" in os.environ


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during parsing."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


class ParserMode(Enum):
    """
    States of the character-level scanner.

    Every input character is classified according to the current mode.
    """

    LEADING_SPACE = "leading_space"
    LF = "lf"
    NAME = "name"
    QUOTED_NAME = "quoted_name"
    ESCAPED_QUOTED_NAME = "escaped_quoted_name"
    COLON = "colon"
    VALUE = "value"
    FOLDED_VALUE = "folded_value"
    QUOTED_VALUE = "quoted_value"
    ESCAPED_QUOTED_VALUE = "escaped_quoted_value"
    COMMENT = "comment"
    LINEBREAK = "linebreak"
    GOT_DASH = "got_dash"


class ErrorReason(Enum):
    """Machine-stable reasons reported by `ParserError`."""

    CHARACTER = "invalid character"
    INDENTATION = "invalid indentation"
    LINEBREAK = "invalid linebreak"
    COMMENT = "invalid comment"
    DEPTH = "invalid depth of hierarchy"
    # reserved, duplicate keys replace the previous value
    EXISTS = "replacing existing property of same object"
    COLLECTION = "invalid mix of collections"
    SCALAR = "collection expected, but got scalar"
    FOLDED = "invalid folded value"
    QUOTE = "missing closing quote"
    EOF = "unexpected end of file"


_QUOTED_MODES = frozenset(
    {
        ParserMode.QUOTED_NAME,
        ParserMode.ESCAPED_QUOTED_NAME,
        ParserMode.QUOTED_VALUE,
        ParserMode.ESCAPED_QUOTED_VALUE,
    }
)
_NAME_MODES = frozenset({ParserMode.NAME, ParserMode.COLON})
_STOP_MODES = frozenset(
    {
        ParserMode.VALUE,
        ParserMode.LINEBREAK,
        ParserMode.LEADING_SPACE,
        ParserMode.COMMENT,
    }
)


if PROFILE_HOT_PATHS:
    _hot_path_stats: dict[str, HotPathStats] = {}

    class ProfileContext:
        """Context manager for profiling hot paths."""

        def __init__(self, func_name: str, chars_to_process: int = 0):
            self.func_name = func_name
            self.chars = chars_to_process
            self.start_time = 0

        def __enter__(self) -> "ProfileContext":
            self.start_time = time.perf_counter_ns()
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            duration = time.perf_counter_ns() - self.start_time
            if self.func_name not in _hot_path_stats:
                _hot_path_stats[self.func_name] = HotPathStats(self.func_name)
            _hot_path_stats[self.func_name].record_call(duration, self.chars)

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        """Returns current profiling statistics."""
        return _hot_path_stats.copy()

    def clear_hot_path_stats() -> None:
        """Clears profiling statistics."""
        _hot_path_stats.clear()

else:
    # Zero-cost in production - ignore arguments to nullcontext
    class ProfileContext:  # type: ignore[no-redef]
        def __init__(self, func_name: str, chars: int = 0) -> None:
            pass

        def __enter__(self) -> "ProfileContext":
            return self

        def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
            pass

    def get_hot_path_stats() -> dict[str, HotPathStats]:
        return {}

    def clear_hot_path_stats() -> None:
        pass


class ParserError(ValueError):
    """
    Handles YAML parsing failures with reason and source position.

    `reason` is one of the `ErrorReason` strings, `lineno` and `colno` are
    1-based and point at the offending character or at the start of the
    offending node.
    """

    def __init__(
        self,
        reason: ErrorReason | str,
        lineno: Position = 1,
        colno: Position = 1,
    ) -> None:
        if isinstance(reason, ErrorReason):
            reason = reason.value
        if not isinstance(reason, str):
            raise TypeError("reason must be a string")
        if not isinstance(lineno, int) or lineno < 1:
            raise ValueError("lineno must be a positive integer")
        if not isinstance(colno, int) or colno < 1:
            raise ValueError("colno must be a positive integer")

        self.reason = reason
        self.lineno = lineno
        self.colno = colno

        super().__init__(f"{reason} in line {lineno}, column {colno}")


class NodeValue(Enum):
    """
    Out-of-band node values.

    A node either carries scalar text or one of these markers: the start of a
    nested mapping or sequence whose children follow on the next lines, or a
    block scalar whose first content line has not been read yet.
    """

    PENDING_MAPPING = "pending_mapping"
    PENDING_SEQUENCE = "pending_sequence"
    FOLD_PENDING = "fold_pending"


_PENDING_COLLECTIONS = (NodeValue.PENDING_MAPPING, NodeValue.PENDING_SEQUENCE)


@dataclass
class Node:
    """
    One scanned unit of input: a property, a sequence item or a marker.

    `value` is None while the scanner is still reading the node. Once the
    collector has stored it, `value` holds the final, coerced value.
    """

    depth: int
    line: Position
    column: Position
    is_property: bool = False
    is_array_item: bool = False
    property_name: str | None = None
    value: str | NodeValue | YamlValueLoose = None
    folded: FoldMarker | None = None
    folded_indentation: int = 0
    # offset of opening quote in source, None for unquoted values
    quoted_value: Position | None = None


class ContainerKind(Enum):
    """Concrete type a frame's container has committed to."""

    UNDETERMINED = "undetermined"
    MAPPING = "mapping"
    SEQUENCE = "sequence"


@dataclass
class Frame:
    """
    One level of the hierarchy stack.

    `depth` is None right after the frame was opened and is adopted from the
    first child node. `selector` is the key or index of `container` in the
    parent frame's container.
    """

    depth: int | None
    selector: str | int | None
    container: dict[str, Any] | list[Any]
    kind: ContainerKind = ContainerKind.UNDETERMINED


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures YAML parsing behavior with immutable settings.

    `parse_float` replaces `float()` for numeric scalars, `coerce_scalars`
    disables null/boolean/number detection when False.
    """

    parse_float: ParseFloatHook = None
    coerce_scalars: bool = True

    def __post_init__(self) -> None:
        if self.parse_float is not None and not callable(self.parse_float):
            raise TypeError("parse_float must be callable")
        if not isinstance(self.coerce_scalars, bool):
            raise TypeError("coerce_scalars must be a boolean")


@dataclass(frozen=True)
class EncodeConfig:
    """
    Configures YAML encoding behavior with immutable settings.

    Centralized configuration for serialization options including
    indentation, key handling and custom encoders.
    """

    indent: int = 2
    sort_keys: bool = False
    skipkeys: bool = False
    default: DefaultHook = None

    def __post_init__(self) -> None:
        if isinstance(self.indent, bool) or not isinstance(self.indent, int):
            raise TypeError("indent must be an integer")
        if self.indent < 1:
            raise ValueError("indent must be at least 1")
        if not isinstance(self.sort_keys, bool):
            raise TypeError("sort_keys must be a boolean")
        if not isinstance(self.skipkeys, bool):
            raise TypeError("skipkeys must be a boolean")


class Collector:
    """
    Integrates completed nodes into the result tree.

    Keeps one frame per active indentation level on an explicit stack, the
    innermost frame last. The root frame starts as an empty mapping and may
    still turn into a sequence while empty.
    """

    def __init__(self, config: ParseConfig, tokens: list[Node]) -> None:
        self.config = config
        self.tokens = tokens
        self.stack: list[Frame] = [Frame(0, None, {})]

    @property
    def root(self) -> dict[str, Any] | list[Any]:
        return self.stack[0].container

    def consume(self, node: Node) -> None:
        """Stores a node's value at the level selected by its depth."""
        with ProfileContext("consume"):
            frame = self._select_frame(node)

            if node.value in _PENDING_COLLECTIONS:
                self._open_collection(frame, node)
            else:
                container = self._commit_kind(frame, node)
                node.value = self._finish_value(node)

                if isinstance(container, list):
                    container.append(node.value)
                else:
                    container[node.property_name] = node.value  # type: ignore[index]

            self.tokens.append(node)

    def _select_frame(self, node: Node) -> Frame:
        """Pops frames until one accepts the node's depth."""
        stack = self.stack
        depth = node.depth

        while True:
            if not stack:
                raise ParserError(ErrorReason.DEPTH, node.line, node.column)

            frame = stack[-1]

            if frame.depth is None:
                parent_depth = stack[-2].depth if len(stack) > 1 else None
                if parent_depth is not None and parent_depth < depth:
                    # first child defines indentation of just opened level
                    frame.depth = depth
                    return frame
            elif frame.depth == depth:
                return frame
            elif frame.depth < depth:
                raise ParserError(
                    ErrorReason.INDENTATION, node.line, node.column
                )

            stack.pop()

    def _commit_kind(self, frame: Frame, node: Node) -> dict[str, Any] | list[Any]:
        """
        Fixes the frame's container type according to the node's kind.

        An empty container is replaced if it has the wrong type, patching the
        parent's slot. A populated container of the other kind is an error.
        """
        if node.is_array_item:
            wanted = ContainerKind.SEQUENCE
        elif node.is_property:
            wanted = ContainerKind.MAPPING
        else:
            raise ParserError(ErrorReason.SCALAR, node.line, node.column)

        if frame.kind is wanted:
            return frame.container
        if frame.kind is not ContainerKind.UNDETERMINED:
            raise ParserError(ErrorReason.COLLECTION, node.line, node.column)

        is_sequence = wanted is ContainerKind.SEQUENCE
        if is_sequence != isinstance(frame.container, list):
            frame.container = [] if is_sequence else {}
            if frame.selector is not None and len(self.stack) > 1:
                self.stack[-2].container[frame.selector] = frame.container  # type: ignore[index]

        frame.kind = wanted
        return frame.container

    def _open_collection(self, frame: Frame, node: Node) -> None:
        container = self._commit_kind(frame, node)
        child: dict[str, Any] | list[Any] = (
            [] if node.value is NodeValue.PENDING_SEQUENCE else {}
        )

        selector: str | int | None
        if isinstance(container, list):
            selector = len(container)
            container.append(child)
        else:
            selector = node.property_name
            container[node.property_name] = child  # type: ignore[index]

        self.stack.append(Frame(None, selector, child))

    def _finish_value(self, node: Node) -> YamlValueLoose:
        """Turns the node's collected text into its final value."""
        text = node.value

        if node.folded is not None:
            if not isinstance(text, str):
                raise ParserError(ErrorReason.FOLDED, node.line, node.column)
            with ProfileContext("fold_block", len(text)):
                return fold_block(text, node.folded)

        if node.quoted_value is not None:
            return text

        if not self.config.coerce_scalars:
            return text.strip()

        with ProfileContext("coerce_scalar", len(text)):
            return coerce_scalar(text, self.config.parse_float)


class Scanner:
    """
    Character-level state machine reading the input exactly once.

    Hands every completed node to the collector as soon as it is known. A
    synthetic trailing linebreak makes sure the last line is terminated.
    """

    def __init__(self, text: str, collector: Collector) -> None:
        self.text = text
        self.length = len(text)
        self.collector = collector

        self.mode = ParserMode.LEADING_SPACE
        self.node: Node | None = None
        self.line: Position = 1
        self.column: Position = 1
        self.cursor: Position = 0
        self.block_start: Position = 0
        self.line_start: Position = 0

        self._handlers: dict[ParserMode, Callable[[str], None]] = {
            ParserMode.LEADING_SPACE: self._scan_leading_space,
            ParserMode.LF: self._scan_lf,
            ParserMode.NAME: self._scan_name,
            ParserMode.QUOTED_NAME: self._scan_quoted_name,
            ParserMode.ESCAPED_QUOTED_NAME: self._scan_escaped_quoted_name,
            ParserMode.COLON: self._scan_colon,
            ParserMode.VALUE: self._scan_value,
            ParserMode.FOLDED_VALUE: self._scan_folded_value,
            ParserMode.QUOTED_VALUE: self._scan_quoted_value,
            ParserMode.ESCAPED_QUOTED_VALUE: self._scan_escaped_quoted_value,
            ParserMode.COMMENT: self._scan_comment,
            ParserMode.LINEBREAK: self._scan_linebreak,
            ParserMode.GOT_DASH: self._scan_got_dash,
        }

    def run(self) -> None:
        """Scans the whole input and flushes the pending node."""
        with ProfileContext("scan", self.length):
            text = self.text
            length = self.length
            handlers = self._handlers

            for cursor in range(length + 1):
                self.cursor = cursor

                if cursor < length:
                    ch = text[cursor]
                else:
                    ch = "\n"
                    self._check_truncation()

                handlers[self.mode](ch)

                if ch == "\n":
                    self.line_start = cursor + 1
                    if cursor < length:
                        node = self.node
                        if (
                            node is not None
                            and node.folded is not None
                            and isinstance(node.value, str)
                        ):
                            node.value += "\n"

                        self.line += 1
                        self.column = 0

                self.column += 1

            self._finish()

    def _error(self, reason: ErrorReason) -> ParserError:
        return ParserError(reason, self.line, self.column)

    def _check_truncation(self) -> None:
        if self.mode in _QUOTED_MODES:
            raise self._error(ErrorReason.QUOTE)
        if self.mode in _NAME_MODES:
            raise self._error(ErrorReason.EOF)

    def _finish(self) -> None:
        if self.mode not in _STOP_MODES:
            raise self._error(ErrorReason.EOF)

        if self.node is not None:
            self._emit()

    def _current(self) -> Node:
        """Returns the node being scanned, modes past a key or dash have one."""
        node = self.node
        if node is None:
            raise self._error(ErrorReason.CHARACTER)
        return node

    def _emit(self) -> None:
        """Passes the current node to the collector."""
        node = self._current()
        self.node = None
        self.collector.consume(node)

    def _passed(self) -> str:
        return self.text[self.block_start : self.cursor]

    def _start_nested(self, passed: str, **kwargs: Any) -> Node:
        """Starts a node in the middle of a line, at the first non-space of passed."""
        depth = self.block_start + leading_space_width(passed) - self.line_start
        self.node = Node(depth=depth, line=self.line, column=depth + 1, **kwargs)
        return self.node

    def _end_of_line(self, ch: str) -> None:
        if ch == "\r":
            self.mode = ParserMode.LF
        else:
            self.mode = ParserMode.LEADING_SPACE
            self.block_start = self.cursor + 1

    def _scan_leading_space(self, ch: str) -> None:
        if ch in HORIZONTAL_SPACE:
            return
        if ch == "\r":
            self.mode = ParserMode.LF
            return
        if ch == "\n":
            self.block_start = self.cursor + 1
            return

        indentation = self.cursor - self.line_start
        node = self.node

        if node is not None and node.folded is not None:
            if indentation > node.depth:
                # continuation line of block scalar
                if node.value is NodeValue.FOLD_PENDING:
                    node.folded_indentation = indentation - node.depth

                self.block_start = self.line_start + node.depth
                self.mode = ParserMode.FOLDED_VALUE
                return

            # block scalar has ended at most recently passed linebreak
            self._emit()

        if ch == "#":
            self.mode = ParserMode.COMMENT
            return

        self.node = Node(depth=indentation, line=self.line, column=self.column)
        self.block_start = self.cursor

        if ch in QUOTES:
            self.mode = ParserMode.QUOTED_NAME
        elif ch == "-":
            self.mode = ParserMode.GOT_DASH
        else:
            self.mode = ParserMode.NAME
            self._scan_name(ch)

    def _scan_got_dash(self, ch: str) -> None:
        node = self._current()

        if is_whitespace(ch):
            if node.is_array_item or node.is_property:
                # another dash after key or item opens a nested sequence
                passed = self._passed()
                node.value = NodeValue.PENDING_SEQUENCE
                self._emit()
                node = self._start_nested(passed, is_array_item=True)
            else:
                node.is_array_item = True

            if ch in LINE_BREAKS:
                node.value = NodeValue.PENDING_SEQUENCE
                self._emit()
                self._end_of_line(ch)
            elif ch in HORIZONTAL_SPACE:
                self.mode = ParserMode.VALUE
                self.block_start = self.cursor + 1
            else:
                raise self._error(ErrorReason.CHARACTER)
        elif node.is_property or (node.is_array_item and is_number_start(ch)):
            # negative number
            self.mode = ParserMode.VALUE
        else:
            raise self._error(ErrorReason.CHARACTER)

    def _scan_lf(self, ch: str) -> None:
        if ch != "\n":
            raise self._error(ErrorReason.LINEBREAK)

        self.mode = ParserMode.LEADING_SPACE
        self.block_start = self.cursor + 1

    def _mark_property(self, name: str) -> None:
        node = self._current()
        node.is_property = True
        node.property_name = name

    def _scan_name(self, ch: str) -> None:
        if ch == ":":
            self._mark_property(self._passed().strip())
            self.mode = ParserMode.VALUE
            self.block_start = self.cursor + 1
        elif ch in HORIZONTAL_SPACE:
            self._mark_property(self._passed().strip())
            self.mode = ParserMode.COLON
        elif ch in LINE_BREAKS:
            raise self._error(ErrorReason.LINEBREAK)
        elif ch == "#":
            raise self._error(ErrorReason.COMMENT)
        elif not is_name_character(ch):
            raise self._error(ErrorReason.CHARACTER)

    def _scan_quoted_name(self, ch: str) -> None:
        if ch == "\\":
            self.mode = ParserMode.ESCAPED_QUOTED_NAME
        elif ch in LINE_BREAKS:
            raise self._error(ErrorReason.LINEBREAK)
        elif ch == self.text[self.block_start]:
            name = self.text[self.block_start + 1 : self.cursor]
            self._mark_property(decode_escapes(name))
            self.mode = ParserMode.COLON

    def _scan_escaped_quoted_name(self, ch: str) -> None:
        if ch in LINE_BREAKS:
            raise self._error(ErrorReason.LINEBREAK)
        self.mode = ParserMode.QUOTED_NAME

    def _scan_colon(self, ch: str) -> None:
        if ch == ":":
            self.mode = ParserMode.VALUE
            self.block_start = self.cursor + 1
        elif ch in HORIZONTAL_SPACE:
            return
        elif ch in LINE_BREAKS:
            raise self._error(ErrorReason.LINEBREAK)
        elif ch == "#":
            raise self._error(ErrorReason.COMMENT)
        else:
            raise self._error(ErrorReason.CHARACTER)

    def _scan_value(self, ch: str) -> None:
        node = self._current()

        if ch == "#":
            node.value = self._passed().strip()
            self.mode = ParserMode.COMMENT
        elif ch in QUOTES:
            if not self._passed().strip():
                self.mode = ParserMode.QUOTED_VALUE
                self.block_start = node.quoted_value = self.cursor
        elif ch in LINE_BREAKS:
            node.value = self._passed().strip() or NodeValue.PENDING_MAPPING
            self._end_of_line(ch)
        elif ch == ":":
            if node.is_array_item or node.is_property:
                passed = self._passed()
                name = passed.strip()

                if is_bare_identifier(name):
                    # compact notation `a: b: c` of nested mapping
                    node.value = NodeValue.PENDING_MAPPING
                    self._emit()
                    node = self._start_nested(
                        passed, is_property=True, property_name=name
                    )
                    self.block_start = self.cursor + 1
        elif ch == "-":
            if node.is_array_item or node.is_property:
                if not self._passed().strip():
                    self.mode = ParserMode.GOT_DASH

        self._settle_value(node)

    def _settle_value(self, node: Node) -> None:
        """Emits the node once its value is known, or marks a block scalar."""
        value = node.value

        if value is None or value is NodeValue.FOLD_PENDING:
            return

        if isinstance(value, str):
            marker = FOLD_MARKERS.get(value)
            if marker is not None:
                # content of block scalar starts in next line
                node.folded = marker
                node.value = NodeValue.FOLD_PENDING
                return

            if not value:
                node.value = NodeValue.PENDING_MAPPING

        self._emit()

    def _scan_quoted_value(self, ch: str) -> None:
        if ch == "\\":
            self.mode = ParserMode.ESCAPED_QUOTED_VALUE
        elif ch in LINE_BREAKS:
            raise self._error(ErrorReason.LINEBREAK)
        elif ch == self.text[self.block_start]:
            node = self._current()
            node.value = decode_escapes(
                self.text[self.block_start + 1 : self.cursor]
            )

            self.mode = ParserMode.LINEBREAK
            self.block_start = self.cursor + 1

    def _scan_escaped_quoted_value(self, ch: str) -> None:
        if ch in LINE_BREAKS:
            raise self._error(ErrorReason.LINEBREAK)
        self.mode = ParserMode.QUOTED_VALUE

    def _scan_folded_value(self, ch: str) -> None:
        if ch not in LINE_BREAKS:
            return

        node = self._current()

        start = self.block_start
        indentation = node.folded_indentation
        prefix = self.text[start : min(start + indentation, self.cursor)]
        line = self.text[start + indentation : self.cursor]

        content = prefix.lstrip()
        if content:
            # line is less indented than the block so far, re-baseline
            shift = len(prefix) - len(content)
            if isinstance(node.value, str):
                node.value = pad_block(node.value, " " * (indentation - shift))
            node.folded_indentation = shift
            line = content + line

        if isinstance(node.value, str):
            node.value += line
        else:
            node.value = line

        self._end_of_line(ch)

    def _scan_comment(self, ch: str) -> None:
        if ch in LINE_BREAKS:
            self._end_of_line(ch)

    def _scan_linebreak(self, ch: str) -> None:
        if ch in HORIZONTAL_SPACE:
            return

        if ch in LINE_BREAKS:
            self._emit()
            self._end_of_line(ch)
        elif ch == "#":
            self._emit()
            self.mode = ParserMode.COMMENT
        elif ch == ":":
            node = self._current()
            name = self._quoted_item_name(node)
            if name is None or node.quoted_value is None:
                raise self._error(ErrorReason.CHARACTER)

            # compact notation `- "a": b` of mapping in sequence
            depth = node.quoted_value - self.line_start

            node.value = NodeValue.PENDING_MAPPING
            self._emit()

            self.node = Node(
                depth=depth,
                line=self.line,
                column=depth + 1,
                is_property=True,
                property_name=name,
            )
            self.mode = ParserMode.VALUE
            self.block_start = self.cursor + 1
        else:
            raise self._error(ErrorReason.CHARACTER)

    @staticmethod
    def _quoted_item_name(node: Node) -> str | None:
        """Returns quoted text of an item if usable as compact key."""
        if (
            node.is_array_item
            and isinstance(node.value, str)
            and is_bare_identifier(node.value)
        ):
            return node.value
        return None


def loads(
    s: str | YamlValueLoose, tokens: list[Node] | None = None, **kwargs: Any
) -> YamlValueLoose:
    """
    Parses YAML text into dicts, lists and scalars.

    Already structured input (a dict or list) is returned unchanged. When
    `tokens` is given, every node is appended to it in discovery order.
    """
    if isinstance(s, dict | list):
        return s
    if not isinstance(s, str):
        raise TypeError(
            f"the YAML document must be str, not {type(s).__name__}"
        )
    if tokens is not None and not isinstance(tokens, list):
        raise TypeError("tokens must be a list")

    config = ParseConfig(**kwargs)
    collector = Collector(config, tokens if tokens is not None else [])
    Scanner(s, collector).run()

    return collector.root


def load(
    fp: IO[str], tokens: list[Node] | None = None, **kwargs: Any
) -> YamlValueLoose:
    """
    Parses YAML from file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp.read(), tokens, **kwargs)


_BARE_KEY = re.compile(r"[A-Za-z0-9_][A-Za-z0-9_-]*", re.ASCII)
_UNSAFE_CHARACTERS = frozenset("#:\r\n")
_UNSAFE_START = frozenset("'\"-")
_STRING_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\t": "\\t",
    "\f": "\\f",
    "\v": "\\v",
}


def _quote_string(s: str) -> str:
    """Encode string with the escape sequences understood by the scanner."""
    if "\r" in s:
        raise ValueError("carriage returns cannot be represented in YAML")
    return '"' + "".join(_STRING_ESCAPES.get(char, char) for char in s) + '"'


def _encode_string(s: str) -> str:
    """Writes string bare if it reads back unchanged, quoted otherwise."""
    if (
        s
        and s == s.strip()
        and s[0] not in _UNSAFE_START
        and s not in FOLD_MARKERS
        and not _UNSAFE_CHARACTERS.intersection(s)
    ):
        coerced = coerce_scalar(s)
        if isinstance(coerced, str) and coerced == s:
            return s
    return _quote_string(s)


def _encode_number(n: int | float) -> str:
    """Encode numeric values in plain decimal notation."""
    if isinstance(n, float):
        if math.isnan(n) or math.isinf(n):
            msg = "Out of range float values are not YAML compliant"
            raise ValueError(msg)
        text = repr(n)
        if not is_number(text):
            # no exponent notation in this subset
            text = format(Decimal(text), "f")
        return text
    return str(n)


def _encode_key(key: Any, config: EncodeConfig) -> str | None:
    if not isinstance(key, str):
        if isinstance(key, bool):
            key = "true" if key else "false"
        elif isinstance(key, int | float):
            key = str(key)
        elif config.skipkeys:
            return None
        else:
            msg = f"keys must be strings, not {type(key).__name__}"
            raise TypeError(msg)

    if _BARE_KEY.fullmatch(key):
        return key
    return _quote_string(key)


def _encode_scalar(obj: YamlValueLoose, config: EncodeConfig) -> str:  # noqa: PLR0911
    if obj is None:
        return "null"
    elif obj is True:
        return "true"
    elif obj is False:
        return "false"
    elif isinstance(obj, str):
        return _encode_string(obj)
    elif isinstance(obj, int | float):
        return _encode_number(obj)
    else:
        msg = f"Object of type {type(obj).__name__} is not YAML serializable"
        raise TypeError(msg)


def _resolve(obj: YamlValueLoose, config: EncodeConfig) -> YamlValueLoose:
    """Applies the default hook to objects that are no collection or scalar."""
    if isinstance(obj, dict | list | tuple | str | int | float) or obj is None:
        return obj
    if config.default is not None:
        return _resolve(config.default(obj), config)
    msg = f"Object of type {type(obj).__name__} is not YAML serializable"
    raise TypeError(msg)


def _encode_dict(
    d: dict[Any, Any], config: EncodeConfig, level: int
) -> list[str]:
    """Encode dictionary as one line per scalar property."""
    items = []
    for key, value in d.items():
        encoded_key = _encode_key(key, config)
        if encoded_key is not None:
            items.append((encoded_key, value))

    if config.sort_keys:
        items.sort(key=lambda x: x[0])

    indent_str = _get_indent_string(config.indent, level)
    lines = []
    for encoded_key, value in items:
        value = _resolve(value, config)
        prefix = f"{indent_str}{encoded_key}:"

        if isinstance(value, dict):
            lines.append(prefix)
            lines.extend(_encode_dict(value, config, level + 1))
        elif isinstance(value, list | tuple):
            if not value:
                msg = "empty sequences can only be encoded as sequence items"
                raise ValueError(msg)
            lines.append(prefix)
            lines.extend(_encode_array(value, config, level + 1))
        else:
            lines.append(f"{prefix} {_encode_scalar(value, config)}")

    return lines


def _encode_array(
    arr: list[Any] | tuple[Any, ...], config: EncodeConfig, level: int
) -> list[str]:
    """Encode array as one dash-prefixed line per item."""
    indent_str = _get_indent_string(config.indent, level)
    lines = []
    for item in arr:
        item = _resolve(item, config)

        if isinstance(item, dict):
            if item:
                lines.append(f"{indent_str}-")
                lines.extend(_encode_dict(item, config, level + 1))
            else:
                # dash followed by blank value opens an empty mapping
                lines.append(f"{indent_str}- ")
        elif isinstance(item, list | tuple):
            lines.append(f"{indent_str}-")
            lines.extend(_encode_array(item, config, level + 1))
        else:
            lines.append(f"{indent_str}- {_encode_scalar(item, config)}")

    return lines


def _get_indent_string(indent: int, level: int) -> str:
    """Generate indentation string for given level."""
    return " " * (indent * level)


def dumps(obj: YamlValueLoose, **kwargs: Any) -> str:
    """
    Serializes dicts and lists to block-style YAML text.

    The result parses back with `loads` into an equal structure. Numbers
    read back as floats.
    """
    config = EncodeConfig(**kwargs)
    obj = _resolve(obj, config)

    if isinstance(obj, dict):
        lines = _encode_dict(obj, config, 0)
    elif isinstance(obj, list | tuple):
        if not obj:
            raise ValueError("empty sequence cannot be encoded as document")
        lines = _encode_array(obj, config, 0)
    else:
        msg = f"top-level value must be dict or list, not {type(obj).__name__}"
        raise TypeError(msg)

    return "".join(line + "\n" for line in lines)


def dump(obj: YamlValueLoose, fp: IO[str], **kwargs: Any) -> None:
    """
    Serializes dicts and lists as YAML to file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    fp.write(dumps(obj, **kwargs))


__all__ = [
    "Chomping",
    "Collector",
    "ContainerKind",
    "EncodeConfig",
    "ErrorReason",
    "FoldMarker",
    "FoldStyle",
    "Frame",
    "HotPathStats",
    "Node",
    "NodeValue",
    "ParseConfig",
    "ParserError",
    "ParserMode",
    "Scanner",
    "clear_hot_path_stats",
    "dump",
    "dumps",
    "get_hot_path_stats",
    "load",
    "loads",
]
