from __future__ import annotations

import logging
from typing import List

from .literal import strip_comments
from .scanner import find_array_name

logger = logging.getLogger(__name__)


def split_statements(text: str) -> List[str]:
    """Split C source into the array declarations that carry an initializer.

    Semicolons inside braces, string or character literals and comments do
    not end a statement. A comment on the same line after a ``;`` belongs to
    that statement; comments on later lines stay attached to the statement
    that follows them, so ``// w: 16`` above an array still reaches its
    parser.
    """
    statements: List[str] = []
    start = 0
    depth = 0
    quote = ""
    esc = False
    i = 0
    while i < len(text):
        ch = text[i]
        if quote:
            if esc:
                esc = False
            elif ch == "\\":
                esc = True
            elif ch == quote:
                quote = ""
        elif text.startswith("//", i):
            i = _line_comment_end(text, i)
            continue
        elif text.startswith("/*", i):
            i = _block_comment_end(text, i)
            continue
        elif ch in ("'", '"'):
            quote = ch
        elif ch in "{[(":
            depth += 1
        elif ch in "}])":
            depth = max(0, depth - 1)
        elif ch == ";" and depth == 0:
            end = _trailing_comment_end(text, i + 1)
            statements.append(text[start:end])
            start = end
            i = end
            continue
        i += 1
    tail = text[start:]
    if tail.strip():
        statements.append(tail)
    arrays = [stmt.strip() for stmt in statements if _declares_array(stmt)]
    logger.debug("Found %d array declaration(s) in %d statement(s)", len(arrays), len(statements))
    return arrays


def _line_comment_end(text: str, pos: int) -> int:
    end = text.find("\n", pos)
    return len(text) if end == -1 else end


def _block_comment_end(text: str, pos: int) -> int:
    end = text.find("*/", pos + 2)
    return len(text) if end == -1 else end + 2


def _trailing_comment_end(text: str, pos: int) -> int:
    """End of the comments sharing a line with the ``;`` just before ``pos``."""
    end = pos
    i = pos
    while i < len(text):
        if text[i] in " \t":
            i += 1
        elif text.startswith("//", i):
            return _line_comment_end(text, i)
        elif text.startswith("/*", i):
            block_end = _block_comment_end(text, i)
            if "\n" in text[i:block_end]:
                return end
            i = end = block_end
        else:
            break
    return end


def _declares_array(statement: str) -> bool:
    return find_array_name(strip_comments(statement)) is not None
