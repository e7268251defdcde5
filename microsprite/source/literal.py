from __future__ import annotations

import re
from typing import Optional, Tuple

_LINE_BREAKS_RE = re.compile(r"[\r\n\t]")
_WHITESPACE_RE = re.compile(r"\s+")
# Block comments are non-greedy; an unterminated "/*" simply never matches.
_COMMENT_RE = re.compile(r"//[^\n]*|/\*.*?\*/", re.DOTALL)

_CLOSERS = {"{": "}", "[": "]"}


def strip_comments(text: str) -> str:
    """Blank out line and block comments, keeping every column in place."""
    return _COMMENT_RE.sub(lambda match: " " * len(match.group(0)), text)


def initializer_span(text: str) -> Optional[Tuple[int, int]]:
    """Indices of the opening and closing bracket of the first ``= {...}`` block.

    ``text`` should already be comment-free; brackets inside comments count.
    """
    eq = text.find("=")
    while eq != -1:
        start = eq + 1
        while start < len(text) and text[start].isspace():
            start += 1
        if start < len(text) and text[start] in _CLOSERS:
            end = _matching_close(text, start)
            if end is None:
                return None
            return start, end
        eq = text.find("=", eq + 1)
    return None


def array_initializer_content(statement: str) -> str:
    """Return the body of the first ``= {...}`` or ``= [...]`` block.

    Whitespace inside the block is collapsed to single spaces. When no
    block is found (or it is empty or unclosed) the statement is returned
    unchanged.
    """
    text = _LINE_BREAKS_RE.sub(" ", statement)
    span = initializer_span(text)
    if span is None:
        return statement
    start, end = span
    content = _WHITESPACE_RE.sub(" ", text[start + 1 : end]).strip()
    return content or statement


def clean_literal(statement: str) -> str:
    """Comment-free initializer body of ``statement``, ready for tokenizing."""
    return array_initializer_content(strip_comments(statement))


def _matching_close(text: str, start: int) -> Optional[int]:
    depth = 0
    for i in range(start, len(text)):
        ch = text[i]
        if ch in "{[":
            depth += 1
        elif ch in "}]":
            depth -= 1
            if depth == 0:
                return i
    return None
