from __future__ import annotations
import os, re, tempfile
from typing import Tuple

def js_single_quote(s: str) -> str:
    return "'" + s.replace("\\", "\\\\").replace("'", "\\'") + "'"

def split_outer_whitespace(raw: str) -> Tuple[str, str, str]:
    """Split raw text into (leading whitespace, trimmed core, trailing whitespace)."""
    core = raw.strip()
    if not core:
        return raw, "", ""
    lead = raw[: len(raw) - len(raw.lstrip())]
    trail = raw[len(raw.rstrip()):]
    return lead, core, trail

_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}
_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])")

def unescape_js_string(body: str) -> str:
    # body is the text between the quotes
    def _sub(m):
        esc = m.group(1)
        if esc.startswith("u{"):
            return chr(int(esc[2:-1], 16))
        if esc[0] in "ux" and len(esc) > 1:
            return chr(int(esc[1:], 16))
        if esc in ("\n", "\r\n", "\r", "\u2028", "\u2029"):
            return ""  # line continuation
        return _SIMPLE_ESCAPES.get(esc, esc)
    return _ESCAPE_RE.sub(_sub, body)

def detect_newline(text: str) -> str:
    if "\r\n" in text:
        return "\r\n"
    return "\n"

def line_indent_before(text: str, offset: int) -> str | None:
    """Whitespace between the start of the line and offset, or None if anything else is there."""
    line_start = text.rfind("\n", 0, offset) + 1
    prefix = text[line_start:offset]
    return prefix if prefix.strip() == "" else None

def load_text(path: str) -> str:
    # read and remove BOMs anywhere (utf-8-sig only strips a leading BOM)
    with open(path, "r", encoding="utf-8-sig", newline="") as f:
        text = f.read()
    return text.replace("\ufeff", "")

def save_text_atomic(path: str, text: str) -> None:
    """Write text next to path and move it into place, so readers never see a partial file."""
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(prefix=".i18n-wrap-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        if os.path.exists(path):
            os.chmod(tmp_path, os.stat(path).st_mode & 0o7777)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
