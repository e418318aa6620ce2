"""
Properties file I/O — line-oriented ``key=value`` persistence.

Reads and writes the flat key/value format used by Java-style
``.properties`` files: ``#``/``!`` comments, backslash line
continuations, ``=``/``:``/whitespace separators and ``\\uXXXX``
escapes.  File bytes are ISO-8859-1; anything outside printable ASCII is
written as a unicode escape so the output is always plain ASCII.

The file-level helpers never raise for I/O problems.  They return a
:class:`PropertiesResult` whose ``status`` tells the caller what went
wrong, leaving the decision to log or ignore it at the call site.
"""
from __future__ import annotations

import re
import string
import time
from dataclasses import dataclass, field
from enum import Enum, auto

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

_UNESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ESCAPES = {"\\": "\\\\", "\t": "\\t", "\n": "\\n", "\r": "\\r", "\f": "\\f"}


class PropertiesFormatError(ValueError):
    """Raised when a properties document contains a malformed escape."""


class IOStatus(Enum):
    """Outcome of reading or writing a properties file."""
    OK = auto()
    MISSING = auto()
    PERMISSION_DENIED = auto()
    MALFORMED = auto()
    IO_ERROR = auto()


@dataclass
class PropertiesResult:
    """Properties read from (or written to) disk, plus how it went."""
    status: IOStatus
    properties: dict[str, str] = field(default_factory=dict)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is IOStatus.OK


# ══════════════════════════════════════════
#  Parsing
# ══════════════════════════════════════════

def _logical_lines(text: str):
    """Yield logical lines, joining continuations and skipping comments."""
    pending = None
    for raw in _LINE_BREAK.split(text):
        line = raw.lstrip(_WHITESPACE)
        if pending is None and (not line or line[0] in "#!"):
            continue
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending = (pending or "") + line[:-1]
            continue
        yield (pending or "") + line
        pending = None
    if pending is not None:
        yield pending


def _join_surrogates(text: str) -> str:
    if not any("\ud800" <= ch <= "\udfff" for ch in text):
        return text
    return text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def _unescape(text: str) -> str:
    out = []
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if ch != "\\":
            out.append(ch)
            i += 1
            continue
        i += 1
        if i >= n:
            break
        ch = text[i]
        if ch == "u":
            digits = text[i + 1:i + 5]
            if len(digits) != 4 or any(d not in string.hexdigits for d in digits):
                raise PropertiesFormatError(f"Malformed \\uxxxx encoding: {text!r}")
            out.append(chr(int(digits, 16)))
            i += 5
            continue
        out.append(_UNESCAPES.get(ch, ch))
        i += 1
    return _join_surrogates("".join(out))


def _split_entry(line: str) -> tuple[str, str]:
    n = len(line)
    end = 0
    while end < n:
        ch = line[end]
        if ch == "\\":
            end += 2
            continue
        if ch in _SEPARATORS or ch in _WHITESPACE:
            break
        end += 1
    end = min(end, n)

    start = end
    while start < n and line[start] in _WHITESPACE:
        start += 1
    if start < n and line[start] in _SEPARATORS:
        start += 1
        while start < n and line[start] in _WHITESPACE:
            start += 1
    return _unescape(line[:end]), _unescape(line[start:])


def loads(text: str) -> dict[str, str]:
    """Parse a properties document.  Later duplicates win."""
    props: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        props[key] = value
    return props


# ══════════════════════════════════════════
#  Serialisation
# ══════════════════════════════════════════

def _unicode_escape(ch: str) -> str:
    code = ord(ch)
    if code > 0xFFFF:
        code -= 0x10000
        return "\\u%04X\\u%04X" % (0xD800 + (code >> 10), 0xDC00 + (code & 0x3FF))
    return "\\u%04X" % code


def _escape(text: str, is_key: bool) -> str:
    out = []
    for idx, ch in enumerate(text):
        if ch == " ":
            out.append("\\ " if is_key or idx == 0 else " ")
        elif ch in _ESCAPES:
            out.append(_ESCAPES[ch])
        elif ch in "=:#!":
            out.append("\\" + ch)
        elif " " < ch < "\x7f":
            out.append(ch)
        else:
            out.append(_unicode_escape(ch))
    return "".join(out)


def _comment_lines(comment: str) -> list[str]:
    lines = []
    for line in _LINE_BREAK.split(comment):
        escaped = "".join(
            ch if " " <= ch < "\x7f" else _unicode_escape(ch) for ch in line
        )
        lines.append("#" + escaped)
    return lines


def dumps(props: dict[str, str], comment: str | None = None, timestamp: bool = True) -> str:
    """Serialise *props* in insertion order, with an optional header comment."""
    lines = []
    if comment is not None:
        lines.extend(_comment_lines(comment))
    if timestamp:
        lines.append("#" + time.strftime("%a %b %d %H:%M:%S %Z %Y"))
    for key, value in props.items():
        lines.append(f"{_escape(str(key), True)}={_escape(str(value), False)}")
    return "\n".join(lines) + "\n"


# ══════════════════════════════════════════
#  File access
# ══════════════════════════════════════════

def _failure(exc: OSError) -> PropertiesResult:
    if isinstance(exc, FileNotFoundError):
        status = IOStatus.MISSING
    elif isinstance(exc, PermissionError):
        status = IOStatus.PERMISSION_DENIED
    else:
        status = IOStatus.IO_ERROR
    return PropertiesResult(status, error=str(exc))


def read_properties(path: str) -> PropertiesResult:
    """Load *path*; a missing file yields ``IOStatus.MISSING``."""
    try:
        with open(path, "r", encoding="latin-1", newline="") as f:
            text = f.read()
    except OSError as exc:
        return _failure(exc)

    try:
        props = loads(text)
    except PropertiesFormatError as exc:
        return PropertiesResult(IOStatus.MALFORMED, error=str(exc))
    return PropertiesResult(IOStatus.OK, props)


def write_properties(path: str, props: dict[str, str], comment: str | None = None) -> PropertiesResult:
    """Truncate and rewrite *path* with *props* in one pass."""
    text = dumps(props, comment)
    try:
        with open(path, "w", encoding="latin-1", newline="\n") as f:
            f.write(text)
    except OSError as exc:
        return _failure(exc)
    return PropertiesResult(IOStatus.OK, dict(props))
