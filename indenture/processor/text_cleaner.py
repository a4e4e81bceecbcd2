"""Cleanup of raw PDF text before it is sent to the AI calls."""

import re

_HORIZONTAL_WS_RE = re.compile(r"[^\S\n]+")
_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\n]")
_PAGE_OF_RE = re.compile(r"Page \d+ of \d+", re.IGNORECASE)
_NUMERIC_LINE_RE = re.compile(r"\d+")
_CAPS_LINE_RE = re.compile(r"[A-Z ]{10,}")
_BLANK_LINES_RE = re.compile(r"\n{3,}")


def clean_text(text: str) -> str:
    """Strip extraction noise from ``text``.

    Collapses whitespace and blank lines, drops non-printable characters,
    "Page N of M" markers, bare page-number lines and all-caps header/footer
    lines. Rules are reapplied until the text stops changing, so the result
    is a fixed point: ``clean_text(clean_text(x)) == clean_text(x)``.
    """
    while True:
        cleaned = _clean_once(text)
        if cleaned == text:
            return cleaned
        text = cleaned


def _clean_once(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _HORIZONTAL_WS_RE.sub(" ", text)
    text = _NON_PRINTABLE_RE.sub("", text)
    text = _PAGE_OF_RE.sub("", text)

    lines: list[str] = []
    for line in text.split("\n"):
        line = _HORIZONTAL_WS_RE.sub(" ", line).strip()
        if _NUMERIC_LINE_RE.fullmatch(line) or _CAPS_LINE_RE.fullmatch(line):
            line = ""
        lines.append(line)

    return _BLANK_LINES_RE.sub("\n\n", "\n".join(lines)).strip()
