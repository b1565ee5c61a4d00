"""
Strict JSON tokenizer and canonical pretty-printer.

Re-emits valid JSON documents in an indented canonical form and, on malformed
input, reports the first offending token with its line, column, source context
and the formatted output produced up to the failure.
"""

import logging
import os
import sys
import time
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import IO
from typing import Any
from typing import TypeAlias

from ._source_context import SourceContext

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

Position: TypeAlias = int

# Profiling infrastructure - zero-cost when disabled
PROFILE_HOT_PATHS = __debug__ and "JSONFMT_PROFILE" in os.environ

DEFAULT_INDENT_SIZE = 2
DEFAULT_MAX_DEPTH = 256

# Interpreter frames held per nesting level: _parse_value and the container
_FRAMES_PER_LEVEL = 2
_RECURSION_HEADROOM = 200

_WHITESPACE = " \t\n\r"
_DIGITS = "0123456789"
_HEX_DIGITS = "0123456789abcdefABCDEF"

# Decoded character for each single-character escape
_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

# Escape written back for each character that needs one on output
_REVERSE_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


@dataclass
class HotPathStats:
    """Statistics for profiling hot paths during formatting."""

    function_name: str
    call_count: int = 0
    total_time_ns: int = 0
    chars_processed: int = 0

    def record_call(self, duration_ns: int, chars: int = 0) -> None:
        """Records a function call with timing and character processing info."""
        self.call_count += 1
        self.total_time_ns += duration_ns
        self.chars_processed += chars


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


class JSONFormatError(ValueError):
    """
    Reports the first violation found while formatting a JSON document.

    Carries the 1-based line and column of the failure, the source line with
    a caret under the failing column, and the formatted output produced
    before the failure so callers can show how far formatting progressed.
    """

    def __init__(
        self,
        msg: str,
        lineno: int,
        colno: int,
        partial_output: str = "",
        context_line: str | None = None,
        caret_line: str | None = None,
        pos: Position = 0,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(lineno, int) or lineno < 1:
            raise ValueError("lineno must be a positive integer")
        if not isinstance(colno, int) or colno < 1:
            raise ValueError("colno must be a positive integer")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.lineno = lineno
        self.colno = colno
        self.partial_output = partial_output or ""
        self.context_line = context_line
        self.caret_line = caret_line
        self.pos = pos

        super().__init__(f"{msg} at line {lineno}, column {colno}")

    @property
    def line(self) -> int:
        return self.lineno

    @property
    def column(self) -> int:
        return self.colno

    def with_partial_output(self, partial_output: str) -> "JSONFormatError":
        """Returns an equivalent error of the same class with other output."""
        return type(self)(
            self.msg,
            self.lineno,
            self.colno,
            partial_output,
            self.context_line,
            self.caret_line,
            self.pos,
        )


class JSONLexicalError(JSONFormatError):
    """Malformed token: bad escape, number, literal or unterminated string."""


class JSONStructureError(JSONFormatError):
    """Well-formed token in a position the JSON grammar does not allow."""


class TokenKind(Enum):
    """Token classes produced by the lexer."""

    BRACE_OPEN = "{"
    BRACE_CLOSE = "}"
    BRACKET_OPEN = "["
    BRACKET_CLOSE = "]"
    COLON = ":"
    COMMA = ","
    STRING = "string"
    NUMBER = "number"
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    END = "end of input"


_STRUCTURAL = {
    "{": TokenKind.BRACE_OPEN,
    "}": TokenKind.BRACE_CLOSE,
    "[": TokenKind.BRACKET_OPEN,
    "]": TokenKind.BRACKET_CLOSE,
    ":": TokenKind.COLON,
    ",": TokenKind.COMMA,
}

_KEYWORDS = {
    "t": ("true", TokenKind.TRUE),
    "f": ("false", TokenKind.FALSE),
    "n": ("null", TokenKind.NULL),
}

_VALUE_STARTS = frozenset(
    {
        TokenKind.BRACE_OPEN,
        TokenKind.BRACKET_OPEN,
        TokenKind.STRING,
        TokenKind.NUMBER,
        TokenKind.TRUE,
        TokenKind.FALSE,
        TokenKind.NULL,
    }
)


@dataclass(frozen=True)
class JsonToken:
    """
    Represents a JSON token with position information.

    ``text`` holds the decoded content of strings and the raw lexeme of
    numbers; it is None for punctuation, literals and end of input.
    """

    kind: TokenKind
    text: str | None
    line: int
    column: int
    start: Position
    end: Position


class JsonLexer:
    """
    Tokenizes JSON input one token per pull.

    Character-by-character scanning with line and column tracking. Lexical
    errors are reported at the cursor, not at the start of the token.
    """

    def __init__(self, text: str):
        if not isinstance(text, str):
            raise TypeError(
                f"the JSON document must be str, not {type(text).__name__}"
            )
        self.text = text
        self.pos = 0
        self.length = len(text)
        self.line = 1
        self.col = 0
        self.context = SourceContext(text)

    @property
    def column(self) -> int:
        """Returns the 1-based column of the cursor."""
        return self.col + 1

    def at_end(self) -> bool:
        return self.pos >= self.length

    def peek(self) -> str:
        """Returns current character without advancing."""
        return self.text[self.pos] if self.pos < self.length else "\0"

    def advance(self) -> str:
        """Returns current character and advances position."""
        if self.pos >= self.length:
            raise self.error("Unexpected end of input")
        char = self.text[self.pos]
        self.pos += 1
        if char == "\n":
            self.line += 1
            self.col = 0
        else:
            self.col += 1
        return char

    def error(self, msg: str) -> JSONLexicalError:
        """Builds a lexical error positioned at the cursor."""
        context_line, caret_line = self.context.render(self.line, self.column)
        return JSONLexicalError(
            msg, self.line, self.column, "", context_line, caret_line, self.pos
        )

    def skip_whitespace(self) -> None:
        """Skips whitespace characters according to RFC 8259."""
        with ProfileContext("skip_whitespace"):
            while self.pos < self.length and self.text[self.pos] in _WHITESPACE:
                self.advance()

    def next_token(self) -> JsonToken:
        """Returns the next token; END repeats once input is exhausted."""
        self.skip_whitespace()

        line, column, start = self.line, self.column, self.pos
        if self.at_end():
            return JsonToken(TokenKind.END, None, line, column, start, start)

        char = self.peek()

        if char in _STRUCTURAL:
            self.advance()
            return JsonToken(
                _STRUCTURAL[char], None, line, column, start, self.pos
            )
        elif char == '"':
            return self.scan_string()
        elif char == "-" or char in _DIGITS:
            return self.scan_number()
        elif char in _KEYWORDS:
            keyword, kind = _KEYWORDS[char]
            return self.scan_literal(keyword, kind)
        elif char == "\ufeff":
            raise self.error(
                "JSON input should not contain BOM (Byte Order Mark)"
            )
        else:
            raise self.error(f"Unexpected character {char!r}")

    def __iter__(self) -> Iterator[JsonToken]:
        """Yields tokens up to and including the first END token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.END:
                return

    def scan_string(self) -> JsonToken:
        """Scans a JSON string token and decodes its escape sequences."""
        with ProfileContext("scan_string"):
            line, column, start = self.line, self.column, self.pos
            self.advance()

            chunks: list[str] = []
            while not self.at_end():
                char = self.advance()
                if char == '"':
                    return JsonToken(
                        TokenKind.STRING,
                        "".join(chunks),
                        line,
                        column,
                        start,
                        self.pos,
                    )
                elif char == "\\":
                    chunks.append(self._scan_escape())
                elif char in "\r\n":
                    raise self.error("Unescaped line break in string")
                else:
                    chunks.append(char)

            raise self.error("Unexpected end of input: unterminated string")

    def _scan_escape(self) -> str:
        """Decodes the escape sequence following a backslash."""
        if self.at_end():
            raise self.error("Unexpected end of input in escape sequence")

        char = self.advance()
        if char in _ESCAPES:
            return _ESCAPES[char]
        if char != "u":
            shown = char if char.isprintable() else repr(char)[1:-1]
            raise self.error(f"Invalid escape sequence '\\{shown}'")

        high = self._read_hex4()
        if not 0xD800 <= high <= 0xDBFF:
            return chr(high)

        # A high surrogate must be completed by a \uXXXX low surrogate
        for expected in "\\u":
            if self.at_end():
                raise self.error("Unexpected end of input after high surrogate")
            if self.peek() != expected:
                raise self.error(
                    "High surrogate must be followed by a low surrogate "
                    "\\uXXXX escape"
                )
            self.advance()

        low = self._read_hex4()
        if not 0xDC00 <= low <= 0xDFFF:
            raise self.error("Invalid low surrogate after high surrogate")

        return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))

    def _read_hex4(self) -> int:
        """Reads the four hex digits of a \\uXXXX escape."""
        value = 0
        for _ in range(4):
            if self.at_end():
                raise self.error("Unexpected end of input in \\uXXXX escape")
            char = self.advance()
            if char not in _HEX_DIGITS:
                raise self.error("Invalid hex digit in \\uXXXX escape")
            value = (value << 4) | int(char, 16)
        return value

    def _require_digit(self, msg: str) -> None:
        if self.at_end():
            raise self.error("Unexpected end of input in number")
        if self.peek() not in _DIGITS:
            raise self.error(msg)

    def _scan_digits(self) -> None:
        while self.peek() in _DIGITS:
            self.advance()

    def _scan_integer_part(self) -> None:
        """Scans the integer part of a JSON number."""
        self._require_digit("Invalid number: missing integer part")

        if self.advance() == "0":
            if self.peek() in _DIGITS:
                raise self.error("Leading zeros are not allowed")
        else:
            self._scan_digits()

    def _scan_decimal_part(self) -> None:
        """Scans the decimal part of a JSON number if present."""
        if self.peek() == ".":
            self.advance()
            self._require_digit(
                "Invalid number: missing digit after decimal point"
            )
            self._scan_digits()

    def _scan_exponent_part(self) -> None:
        """Scans the exponent part of a JSON number if present."""
        if self.peek() in "eE":
            self.advance()
            if self.peek() in "+-":
                self.advance()
            self._require_digit("Invalid number: missing digit in exponent")
            self._scan_digits()

    def scan_number(self) -> JsonToken:
        """Scans a JSON number token, keeping the lexeme verbatim."""
        with ProfileContext("scan_number"):
            line, column, start = self.line, self.column, self.pos

            if self.peek() == "-":
                self.advance()

            self._scan_integer_part()
            self._scan_decimal_part()
            self._scan_exponent_part()

            return JsonToken(
                TokenKind.NUMBER,
                self.text[start : self.pos],
                line,
                column,
                start,
                self.pos,
            )

    def scan_literal(self, keyword: str, kind: TokenKind) -> JsonToken:
        """Scans literal tokens: true, false, null."""
        with ProfileContext("scan_literal"):
            line, column, start = self.line, self.column, self.pos

            for expected in keyword:
                if self.at_end():
                    raise self.error(
                        f"Unexpected end of input; expected '{keyword}'"
                    )
                if self.peek() != expected:
                    raise self.error(f"Invalid literal; expected '{keyword}'")
                self.advance()

            return JsonToken(kind, None, line, column, start, self.pos)


def max_safe_depth() -> int:
    """Returns the deepest nesting the interpreter recursion limit allows."""
    return max(
        (sys.getrecursionlimit() - _RECURSION_HEADROOM) // _FRAMES_PER_LEVEL, 1
    )


@dataclass(frozen=True)
class FormatConfig:
    """
    Configures formatting behavior with immutable settings.

    ``max_depth`` bounds container nesting so adversarial input cannot
    exhaust the interpreter stack. ``escape_strings`` re-escapes decoded
    string content on output; disable it to write decoded text back raw.
    """

    indent_size: int = DEFAULT_INDENT_SIZE
    max_depth: int = DEFAULT_MAX_DEPTH
    escape_strings: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.indent_size, int) or isinstance(
            self.indent_size, bool
        ):
            raise TypeError("indent_size must be an integer")
        if self.indent_size < 0:
            raise ValueError("indent_size must be non-negative")
        if not isinstance(self.max_depth, int) or isinstance(
            self.max_depth, bool
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be positive")
        ceiling = max_safe_depth()
        if self.max_depth > ceiling:
            raise ValueError(
                f"max_depth must not exceed {ceiling} under the current "
                f"recursion limit of {sys.getrecursionlimit()}"
            )
        if not isinstance(self.escape_strings, bool):
            raise TypeError("escape_strings must be a boolean")


class ObjectState(Enum):
    """What an open object expects next."""

    EXPECT_KEY_OR_END = "expect_key_or_end"
    EXPECT_COLON = "expect_colon"
    EXPECT_VALUE = "expect_value"
    EXPECT_COMMA_OR_END = "expect_comma_or_end"


class ArrayState(Enum):
    """What an open array expects next."""

    EXPECT_VALUE_OR_END = "expect_value_or_end"
    EXPECT_COMMA_OR_END = "expect_comma_or_end"


@dataclass(frozen=True)
class ObjectFrame:
    state: ObjectState = ObjectState.EXPECT_KEY_OR_END


@dataclass(frozen=True)
class ArrayFrame:
    state: ArrayState = ArrayState.EXPECT_VALUE_OR_END


Frame: TypeAlias = ObjectFrame | ArrayFrame


def _encode_string(s: str) -> str:
    """Encode string with escape sequences, keeping non-ASCII text as is."""
    result = ['"']
    for char in s:
        if char in _REVERSE_ESCAPES:
            result.append(_REVERSE_ESCAPES[char])
        elif char < " " or "\ud800" <= char <= "\udfff":
            result.append(f"\\u{ord(char):04x}")
        else:
            result.append(char)
    result.append('"')
    return "".join(result)


def _escape_surrogates(s: str) -> str:
    """Escape lone surrogates, which no Unicode encoding can write out."""
    return "".join(
        f"\\u{ord(char):04x}" if "\ud800" <= char <= "\udfff" else char
        for char in s
    )


def _describe(token: JsonToken) -> str:
    if token.kind in (TokenKind.STRING, TokenKind.NUMBER):
        return token.kind.value
    return f"'{token.kind.value}'"


class JsonFormatter:
    """
    Pretty-prints a JSON document while validating it token by token.

    Recursive descent over a pull-based token stream. An explicit stack of
    object and array frames records what each open container expects next,
    and output is written as structure is recognized so that the prefix
    produced before a failure travels with the error.
    """

    def __init__(
        self,
        source: str,
        indent_size: int = DEFAULT_INDENT_SIZE,
        **kwargs: Any,
    ) -> None:
        if not isinstance(source, str):
            raise TypeError(
                f"the JSON document must be str, not {type(source).__name__}"
            )
        self.source = source
        self.config = FormatConfig(indent_size=indent_size, **kwargs)
        self._lexer: JsonLexer
        self._token: JsonToken
        self._out: list[str] = []
        self._stack: list[Frame] = []

    def format(self) -> str:
        """Returns the formatted document or raises JSONFormatError."""
        with ProfileContext("format", len(self.source)):
            self._lexer = JsonLexer(self.source)
            self._out = []
            self._stack = []
            logger.debug(
                f"Formatting {len(self.source)} characters "
                f"with indent size {self.config.indent_size}"
            )

            try:
                self._format_root()
            except JSONFormatError as exc:
                logger.debug(
                    f"Formatting failed at line {exc.lineno}, column "
                    f"{exc.colno}: {exc.msg}"
                )
                raise
            finally:
                self._stack.clear()

            output = self._buffer()
            logger.debug(f"Formatted document into {len(output)} characters")
            return output

    def _format_root(self) -> None:
        self._advance()
        if self._token.kind not in (
            TokenKind.BRACE_OPEN,
            TokenKind.BRACKET_OPEN,
        ):
            raise self._structure_error(
                "JSON document must start with '{' or '['"
            )

        try:
            self._parse_value()
        except RecursionError:
            # The caller's own stack can leave less room than max_depth
            raise self._structure_error(
                "Maximum nesting depth exceeded: interpreter recursion limit "
                "reached"
            ) from None
        self._write("\n")

        if self._token.kind is not TokenKind.END:
            raise self._structure_error("Extra data after valid JSON")

    def _advance(self) -> None:
        """Pulls the next token, attaching the output so far to lexer errors."""
        try:
            self._token = self._lexer.next_token()
        except JSONFormatError as exc:
            if exc.partial_output:
                raise
            raise exc.with_partial_output(self._buffer()) from exc

    def _buffer(self) -> str:
        return "".join(self._out)

    def _write(self, text: str) -> None:
        self._out.append(text)

    def _write_indent(self) -> None:
        self._out.append(" " * (len(self._stack) * self.config.indent_size))

    def _write_string(self, text: str) -> None:
        if self.config.escape_strings:
            self._write(_encode_string(text))
        else:
            self._write(f'"{_escape_surrogates(text)}"')

    def _structure_error(self, msg: str) -> JSONStructureError:
        """Builds a structural error positioned at the current token."""
        token = self._token
        context_line, caret_line = self._lexer.context.render(
            token.line, token.column
        )
        return JSONStructureError(
            msg,
            token.line,
            token.column,
            self._buffer(),
            context_line,
            caret_line,
            token.start,
        )

    def _unexpected(self, expecting: str) -> JSONStructureError:
        if self._token.kind is TokenKind.END:
            return self._structure_error(
                f"Unexpected end of input, expecting {expecting}"
            )
        return self._structure_error(
            f"Unexpected {_describe(self._token)}, expecting {expecting}"
        )

    # Context stack

    def _top(self) -> Frame | None:
        return self._stack[-1] if self._stack else None

    def _push(self, frame: Frame) -> None:
        if len(self._stack) >= self.config.max_depth:
            raise self._structure_error(
                f"Maximum nesting depth of {self.config.max_depth} exceeded"
            )
        self._stack.append(frame)

    def _set_state(self, frame: Frame) -> None:
        self._stack[-1] = frame

    def _expect_state(self, expected: Frame, msg: str) -> None:
        if self._top() != expected:
            raise self._structure_error(msg)

    def _require_value_position(self) -> None:
        """Checks that the enclosing container, if any, expects a value."""
        frame = self._top()
        if frame is None:
            return
        if isinstance(frame, ObjectFrame):
            if frame.state is ObjectState.EXPECT_VALUE:
                return
        elif frame.state is ArrayState.EXPECT_VALUE_OR_END:
            return
        raise self._structure_error("Value not expected here")

    def _complete_value(self) -> None:
        frame = self._top()
        if isinstance(frame, ObjectFrame):
            if frame.state is ObjectState.EXPECT_VALUE:
                self._set_state(ObjectFrame(ObjectState.EXPECT_COMMA_OR_END))
        elif isinstance(frame, ArrayFrame):
            if frame.state is ArrayState.EXPECT_VALUE_OR_END:
                self._set_state(ArrayFrame(ArrayState.EXPECT_COMMA_OR_END))

    def _on_scalar_value_completed(self) -> None:
        self._complete_value()

    def _on_container_closed(self) -> None:
        # The closed container's own frame is already popped
        self._complete_value()

    # Grammar

    def _parse_value(self) -> None:
        """Formats any JSON value based on the current token."""
        kind = self._token.kind
        if kind not in _VALUE_STARTS:
            raise self._unexpected("a value")

        self._require_value_position()
        if isinstance(self._top(), ArrayFrame):
            self._write_indent()

        if kind is TokenKind.BRACE_OPEN:
            self._parse_object()
        elif kind is TokenKind.BRACKET_OPEN:
            self._parse_array()
        else:
            self._parse_scalar()

    def _parse_scalar(self) -> None:
        token = self._token
        if token.kind is TokenKind.STRING:
            self._write_string(token.text or "")
        elif token.kind is TokenKind.NUMBER:
            self._write(token.text or "")
        else:
            self._write(token.kind.value)

        self._advance()
        self._on_scalar_value_completed()

    def _close_container(self, closer: str, *, empty: bool = False) -> None:
        self._stack.pop()
        if not empty:
            self._write("\n")
            self._write_indent()
        self._write(closer)
        self._advance()
        self._on_container_closed()

    def _parse_object(self) -> None:
        """Formats a JSON object with the object state machine."""
        with ProfileContext("parse_object"):
            self._push(ObjectFrame())
            self._write("{")
            self._advance()

            if self._token.kind is TokenKind.BRACE_CLOSE:
                self._close_container("}", empty=True)
                return

            self._write("\n")

            while True:
                self._expect_state(
                    ObjectFrame(ObjectState.EXPECT_KEY_OR_END),
                    "Object expects a string key",
                )
                key = self._token
                if key.kind is TokenKind.END:
                    raise self._unexpected("an object key")
                if key.kind is not TokenKind.STRING:
                    raise self._structure_error("Object key must be a string")

                self._write_indent()
                self._write_string(key.text or "")
                self._set_state(ObjectFrame(ObjectState.EXPECT_COLON))
                self._advance()

                if self._token.kind is not TokenKind.COLON:
                    raise self._structure_error("Missing ':' after object key")
                self._write(": ")
                self._set_state(ObjectFrame(ObjectState.EXPECT_VALUE))
                self._advance()

                self._parse_value()

                self._expect_state(
                    ObjectFrame(ObjectState.EXPECT_COMMA_OR_END),
                    "Object expects ',' or '}'",
                )
                if self._token.kind is TokenKind.COMMA:
                    self._write(",\n")
                    self._set_state(ObjectFrame(ObjectState.EXPECT_KEY_OR_END))
                    self._advance()
                elif self._token.kind is TokenKind.BRACE_CLOSE:
                    self._close_container("}")
                    return
                else:
                    raise self._unexpected("',' or '}' in object")

    def _parse_array(self) -> None:
        """Formats a JSON array with the array state machine."""
        with ProfileContext("parse_array"):
            self._push(ArrayFrame())
            self._write("[")
            self._advance()

            if self._token.kind is TokenKind.BRACKET_CLOSE:
                self._close_container("]", empty=True)
                return

            self._write("\n")

            while True:
                self._expect_state(
                    ArrayFrame(ArrayState.EXPECT_VALUE_OR_END),
                    "Array expects a value",
                )
                self._parse_value()

                self._expect_state(
                    ArrayFrame(ArrayState.EXPECT_COMMA_OR_END),
                    "Array expects ',' or ']'",
                )
                if self._token.kind is TokenKind.COMMA:
                    self._write(",\n")
                    self._set_state(ArrayFrame(ArrayState.EXPECT_VALUE_OR_END))
                    self._advance()
                    if self._token.kind is TokenKind.BRACKET_CLOSE:
                        raise self._structure_error(
                            "Illegal trailing comma before end of array"
                        )
                elif self._token.kind is TokenKind.BRACKET_CLOSE:
                    self._close_container("]")
                    return
                else:
                    raise self._unexpected("',' or ']' in array")


@dataclass(frozen=True)
class FormatResult:
    """
    Outcome of a formatting call: the output on success, the error otherwise.
    """

    output: str | None = None
    error: JSONFormatError | None = None

    def __post_init__(self) -> None:
        if (self.output is None) == (self.error is None):
            raise ValueError("exactly one of output or error must be set")

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def partial_output(self) -> str:
        """Returns the output produced, complete or up to the failure."""
        if self.error is not None:
            return self.error.partial_output
        return self.output or ""

    def unwrap(self) -> str:
        """Returns the output or raises the carried error."""
        if self.error is not None:
            raise self.error
        return self.output or ""


def format_json(
    source: str, indent_size: int = DEFAULT_INDENT_SIZE, **kwargs: Any
) -> str:
    """
    Formats a JSON document into canonical indented text.

    Raises JSONFormatError with position, context and partial output on the
    first lexical or structural violation.
    """
    return JsonFormatter(source, indent_size, **kwargs).format()


def format_file(
    fp: IO[str], indent_size: int = DEFAULT_INDENT_SIZE, **kwargs: Any
) -> str:
    """
    Formats the JSON document read from a file-like object.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return format_json(fp.read(), indent_size, **kwargs)


def try_format(
    source: str, indent_size: int = DEFAULT_INDENT_SIZE, **kwargs: Any
) -> FormatResult:
    """
    Formats a JSON document, returning the outcome instead of raising.
    """
    try:
        return FormatResult(output=format_json(source, indent_size, **kwargs))
    except JSONFormatError as exc:
        return FormatResult(error=exc)


__all__ = [
    "ArrayFrame",
    "ArrayState",
    "FormatConfig",
    "FormatResult",
    "Frame",
    "HotPathStats",
    "JSONFormatError",
    "JSONLexicalError",
    "JSONStructureError",
    "JsonFormatter",
    "JsonLexer",
    "JsonToken",
    "ObjectFrame",
    "ObjectState",
    "TokenKind",
    "clear_hot_path_stats",
    "format_file",
    "format_json",
    "get_hot_path_stats",
    "max_safe_depth",
    "try_format",
]
