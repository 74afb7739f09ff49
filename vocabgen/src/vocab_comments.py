"""
vocab_comments.py
-----------------

Formats rdfs:comment text as a documentation comment in the target language.
Whitespace is collapsed, a literal backslash-n in the text starts a new line,
and long lines are wrapped at the first space past COMMENT_LENGTH_LIMIT.
"""

from dataclasses import dataclass
from typing import Optional

COMMENT_LENGTH_LIMIT = 80
INDENT_STEP = 4


@dataclass(frozen=True)
class CommentStyle:
    opening: str
    line_prefix: str
    closing: str = ""
    terminator: Optional[str] = None


JAVADOC_STYLE = CommentStyle(opening="/** <p>", line_prefix=" *  ", closing="</p>", terminator=" */")
PYTHON_STYLE = CommentStyle(opening="#: ", line_prefix="#: ")


def format_comment(comment: str, style: CommentStyle, indent: int = 1,
                   limit: int = COMMENT_LENGTH_LIMIT) -> str:
    """
    The first line carries no indentation (the caller writes it at `indent`);
    continuation lines are indented here.
    """
    pad = " " * (indent * INDENT_STEP)
    buf = [style.opening]
    pos = len(style.opening)
    single_line = True
    in_space = False

    def new_line():
        nonlocal pos, single_line
        buf.append("\n" + pad + style.line_prefix)
        pos = len(pad) + len(style.line_prefix)
        single_line = False

    i = 0
    while i < len(comment):
        c = comment[i]
        i += 1

        if c.isspace():
            if in_space:
                continue
            in_space = True
            # wrap instead of writing the space
            if pos > limit:
                new_line()
                continue
            c = " "
        else:
            in_space = False

        if c == "\\":
            esc = comment[i] if i < len(comment) else ""
            i += 1
            if esc == "n":
                new_line()
                in_space = True
            continue

        buf.append(c)
        pos += 1

    buf.append(style.closing)
    if style.terminator is not None:
        if single_line:
            buf.append(style.terminator)
        else:
            buf.append("\n" + pad + style.terminator)
    return "".join(buf)
