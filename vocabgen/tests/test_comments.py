from vocab_comments import JAVADOC_STYLE, PYTHON_STYLE, format_comment


def test_single_line_javadoc():
    assert format_comment("A person.", JAVADOC_STYLE) == "/** <p>A person.</p> */"


def test_whitespace_is_collapsed():
    text = "A   very\t\tspaced\n  comment"
    assert format_comment(text, JAVADOC_STYLE) == "/** <p>A very spaced comment</p> */"


def test_newline_escape_starts_a_line():
    result = format_comment("First.\\nSecond.", JAVADOC_STYLE, indent=1)
    assert result == "/** <p>First.\n     *  Second.</p>\n     */"


def test_unknown_escapes_are_dropped():
    assert format_comment("a\\tb", JAVADOC_STYLE) == "/** <p>ab</p> */"


def test_long_comment_is_wrapped_at_whitespace():
    text = " ".join(["word"] * 30)
    lines = format_comment(text, JAVADOC_STYLE, indent=1).split("\n")

    assert lines[0] == "/** <p>" + " ".join(["word"] * 15)
    assert lines[1].startswith("     *  word")
    assert lines[-1] == "     */"
    # no words lost or split
    body = " ".join(line.replace("/** <p>", "").replace(" *  ", "").replace("</p>", "").strip()
                    for line in lines[:-1])
    assert body.split() == ["word"] * 30


def test_python_style():
    assert format_comment("A person.", PYTHON_STYLE) == "#: A person."
    assert format_comment("a\\nb", PYTHON_STYLE, indent=1) == "#: a\n    #: b"
