"""Loading of the external SystemJS config file.

Two shapes are understood:

* a SystemJS config script made of ``System.config({...})`` calls, where each
  call's object literal is read as a YAML flow mapping and successive calls
  are merged in order, and
* a plain YAML (or JSON) document holding the loader config as any value.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterator, List, Mapping, Tuple

import yaml

from .errors import ConfigFileError

logger = logging.getLogger(__name__)

_CALL_PATTERN = re.compile(r"System\.config\s*\(")
_QUOTES = "'\"`"
_IDENT_CHARS = "_$"
_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


def load_config_file(path: str | Path) -> Any:
    """Read and evaluate the config file at ``path``."""

    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigFileError(config_path, "config_file_malformed") from exc
    except OSError as exc:
        raise ConfigFileError(config_path, "config_file_unreadable") from exc
    try:
        value = parse_config_text(text)
    except yaml.YAMLError as exc:
        raise ConfigFileError(config_path, "config_file_malformed") from exc
    logger.debug("loaded systemjs config file %s", config_path)
    return value


def parse_config_text(text: str) -> Any:
    payloads = list(_iter_config_calls(text))
    if not payloads:
        return yaml.safe_load(text)
    merged: Any = None
    for payload in payloads:
        merged = _deep_merge(merged, yaml.safe_load(_to_flow_yaml(payload)))
    return merged


def _iter_config_calls(text: str) -> Iterator[str]:
    # Calls inside comments and string literals are not code.
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in _QUOTES:
            try:
                _, i = _read_string(text, i)
            except yaml.YAMLError:
                # not a script, e.g. an apostrophe in a YAML document
                return
            continue
        if text.startswith(("//", "/*"), i):
            i = _comment_end(text, i)
            continue
        match = _CALL_PATTERN.match(text, i)
        if match and (i == 0 or not (text[i - 1].isalnum() or text[i - 1] in _IDENT_CHARS)):
            start = match.end()
            end = _closing_paren(text, start)
            if end is None:
                raise yaml.YAMLError("unbalanced System.config call")
            yield text[start:end]
            i = end + 1
            continue
        i += 1


def _read_string(text: str, start: int) -> Tuple[str, int]:
    """Decode the JavaScript string literal opening at ``start``.

    Returns the decoded value and the index just past the closing quote.
    """

    quote = text[start]
    chunks: List[str] = []
    i = start + 1
    n = len(text)
    while i < n:
        ch = text[i]
        if ch == quote:
            return "".join(chunks), i + 1
        if ch != "\\":
            chunks.append(ch)
            i += 1
            continue
        if i + 1 >= n:
            break
        esc = text[i + 1]
        i += 2
        if esc in _SIMPLE_ESCAPES:
            chunks.append(_SIMPLE_ESCAPES[esc])
        elif esc == "x":
            chunks.append(chr(_hex(text[i : i + 2], 2)))
            i += 2
        elif esc == "u" and text.startswith("{", i):
            close = text.find("}", i)
            if close == -1:
                break
            chunks.append(chr(_hex(text[i + 1 : close])))
            i = close + 1
        elif esc == "u":
            code = _hex(text[i : i + 4], 4)
            i += 4
            # surrogate pair written as two escapes
            if 0xD800 <= code < 0xDC00 and text.startswith("\\u", i):
                low = _hex(text[i + 2 : i + 6], 4)
                if 0xDC00 <= low < 0xE000:
                    code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
                    i += 6
            chunks.append(chr(code))
        elif esc == "\r":  # line continuation
            if text.startswith("\n", i):
                i += 1
        elif esc in "\n\u2028\u2029":
            pass
        else:
            chunks.append(esc)
    raise yaml.YAMLError("unterminated string literal")


def _hex(digits: str, width: int | None = None) -> int:
    if not digits or (width is not None and len(digits) != width):
        raise yaml.YAMLError(f"invalid escape sequence: {digits!r}")
    try:
        return int(digits, 16)
    except ValueError as exc:
        raise yaml.YAMLError(f"invalid escape sequence: {digits!r}") from exc


def _closing_paren(text: str, start: int) -> int | None:
    depth = 1
    i = start
    while i < len(text):
        ch = text[i]
        if ch in _QUOTES:
            _, i = _read_string(text, i)
            continue
        if text.startswith(("//", "/*"), i):
            i = _comment_end(text, i)
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return None


def _comment_end(text: str, start: int) -> int:
    if text.startswith("//", start):
        newline = text.find("\n", start)
        return len(text) if newline == -1 else newline
    close = text.find("*/", start + 2)
    return len(text) if close == -1 else close + 2


def _skip_blank(text: str, start: int) -> int:
    j = start
    while j < len(text):
        if text[j].isspace():
            j += 1
        elif text.startswith(("//", "/*"), j):
            j = _comment_end(text, j)
        else:
            break
    return j


def _to_flow_yaml(literal: str) -> str:
    """Normalise a JavaScript object literal into YAML flow syntax.

    String literals are decoded and written back as double-quoted scalars.
    Comments and trailing commas are dropped and every key separator gets a
    trailing space.
    """

    out: List[str] = []
    i = 0
    n = len(literal)
    while i < n:
        ch = literal[i]
        if ch in _QUOTES:
            value, i = _read_string(literal, i)
            out.append(json.dumps(value, ensure_ascii=False))
            continue
        if literal.startswith(("//", "/*"), i):
            i = _comment_end(literal, i)
            continue
        if ch == ",":
            j = _skip_blank(literal, i + 1)
            if j < n and literal[j] in "}]":
                i += 1
                continue
        out.append(ch)
        if ch == ":":
            out.append(" ")
        i += 1
    return "".join(out).strip()


def _deep_merge(base: Any, update: Any) -> Any:
    if isinstance(base, Mapping) and isinstance(update, Mapping):
        merged = dict(base)
        for key, value in update.items():
            merged[key] = _deep_merge(merged.get(key), value)
        return merged
    return update


__all__ = ["load_config_file", "parse_config_text"]
