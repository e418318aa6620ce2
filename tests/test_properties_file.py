"""
Tests for the properties file codec.

Covers:
- Parsing separators, comments, continuations and escapes
- Serialisation order, header comment and escaping
- File-level results for missing, unreadable and malformed files
"""
import sys, os
import tempfile
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from data_io.properties_file import (
    IOStatus, PropertiesFormatError, dumps, loads,
    read_properties, write_properties,
)


# ══════════════════════════════════════════
#  Parsing Tests
# ══════════════════════════════════════════

def test_loads_separators():
    """'=', ':' and plain whitespace all separate key from value."""
    props = loads("a=1\nb: 2\nc   3\nd\n")
    assert props == {"a": "1", "b": "2", "c": "3", "d": ""}
    print("[PASS] Separators parsed")


def test_loads_skips_comments_and_blank_lines():
    text = "#Recent Postman Clone Projects\n! bang comment\n\n   \n  theme = light\n"
    assert loads(text) == {"theme": "light"}
    print("[PASS] Comments and blank lines skipped")


def test_loads_continuation_lines():
    """A trailing odd backslash joins the next line, minus its indent."""
    props = loads("paths=/a,\\\n        /b\nnext=1\n")
    assert props == {"paths": "/a,/b", "next": "1"}
    print("[PASS] Continuation joined")


def test_loads_even_backslashes_do_not_continue():
    props = loads("dir=C:\\\\\nother=x\n")
    assert props == {"dir": "C:\\", "other": "x"}
    print("[PASS] Escaped backslash at end of line kept")


def test_loads_escapes():
    props = loads(r"key\ with\ spaces=tab\there\u00e9\=\:")
    assert props == {"key with spaces": "tab\there\u00e9=:"}
    print("[PASS] Escapes decoded")


def test_loads_surrogate_pair():
    assert loads("emoji=\\uD83D\\uDE00") == {"emoji": "\U0001f600"}
    print("[PASS] Surrogate pair joined")


def test_loads_mixed_line_endings():
    assert loads("a=1\r\nb=2\rc=3\n") == {"a": "1", "b": "2", "c": "3"}
    print("[PASS] CRLF / CR / LF handled")


def test_loads_later_duplicate_wins():
    assert loads("theme=dark\ntheme=light\n") == {"theme": "light"}


def test_loads_malformed_unicode_escape():
    with pytest.raises(PropertiesFormatError):
        loads("bad=\\u12G4\n")
    print("[PASS] Malformed \\u escape rejected")


# ══════════════════════════════════════════
#  Serialisation Tests
# ══════════════════════════════════════════

def test_dumps_header_and_order():
    text = dumps({"recent.0": "/a", "recent.1": "/b", "theme": "dark"},
                 "Recent Postman Clone Projects", timestamp=False)
    assert text == "#Recent Postman Clone Projects\nrecent.0=/a\nrecent.1=/b\ntheme=dark\n"
    print("[PASS] Header and insertion order preserved")


def test_dumps_timestamp_line():
    lines = dumps({}, "Postman Clone Preferences").splitlines()
    assert lines[0] == "#Postman Clone Preferences"
    assert len(lines) == 2 and lines[1].startswith("#")
    print("[PASS] Timestamp line written")


def test_dumps_escapes_special_characters():
    text = dumps({"a key": " lead=x:y#!"}, timestamp=False)
    assert text == "a\\ key=\\ lead\\=x\\:y\\#\\!\n"
    print("[PASS] Special characters escaped")


def test_dumps_non_ascii_is_escaped_and_reloads():
    value = "C:\\Users\\Zo\u00eb\\\U0001f600 project\ttab"
    text = dumps({"recent.0": value}, timestamp=False)
    assert text.isascii()
    assert "\\u00EB" in text and "\\uD83D\\uDE00" in text
    assert loads(text) == {"recent.0": value}
    print("[PASS] Non-ASCII written as \\u escapes")


# ══════════════════════════════════════════
#  File Access Tests
# ══════════════════════════════════════════

def test_read_missing_file():
    with tempfile.TemporaryDirectory() as tmp:
        result = read_properties(os.path.join(tmp, "absent.properties"))
    assert result.status is IOStatus.MISSING
    assert not result.ok
    assert result.properties == {}
    print("[PASS] Missing file reported")


def test_write_then_read():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "prefs.properties")
        written = write_properties(path, {"theme": "light", "recent.0": "/p"}, "Postman Clone Preferences")
        assert written.ok
        with open(path, encoding="latin-1") as f:
            assert f.readline() == "#Postman Clone Preferences\n"
        result = read_properties(path)
    assert result.ok
    assert result.properties == {"theme": "light", "recent.0": "/p"}
    print("[PASS] Written file reloads")


def test_write_into_missing_directory():
    with tempfile.TemporaryDirectory() as tmp:
        result = write_properties(os.path.join(tmp, "nope", "prefs.properties"), {"a": "1"})
    assert result.status is IOStatus.MISSING
    assert result.error
    print("[PASS] Write failure reported, not raised")


def test_read_directory_is_an_error():
    with tempfile.TemporaryDirectory() as tmp:
        result = read_properties(tmp)
    assert result.status in (IOStatus.IO_ERROR, IOStatus.PERMISSION_DENIED)
    print("[PASS] Unreadable path reported")


def test_read_malformed_file():
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "prefs.properties")
        with open(path, "w", encoding="latin-1") as f:
            f.write("recent.0=/a\nbroken=\\uZZZZ\n")
        result = read_properties(path)
    assert result.status is IOStatus.MALFORMED
    assert result.properties == {}
    print("[PASS] Malformed file reported")


# ══════════════════════════════════════════
#  Run all tests
# ══════════════════════════════════════════

if __name__ == '__main__':
    sys.exit(pytest.main([__file__, "-v"]))
