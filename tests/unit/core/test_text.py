"""Unit tests for core/utils/text.py"""

from mdcontent.core.utils.text import auto_summary, prose_blocks, reading_time, word_count


def test_prose_blocks_drop_inline_markup():
    """Emphasis and inline code markers are removed from block text."""
    assert prose_blocks("Some **bold** and `code` here.\n") == ["Some bold and code here."]


def test_word_count_ignores_code_fences():
    """Words inside fenced code blocks are not counted."""
    md = "One two three.\n\n```java\npublic class Greeting {}\n```\n"
    assert word_count(md) == 3


def test_word_count_includes_headings_and_lists():
    md = "# Getting started\n\n- install the CLI\n- run it\n"
    assert word_count(md) == 2 + 3 + 2


def test_reading_time_rounds_up():
    """Any non-empty body takes at least a minute."""
    assert reading_time(1, 213) == 1
    assert reading_time(213, 213) == 1
    assert reading_time(214, 213) == 2


def test_reading_time_empty():
    assert reading_time(0, 213) == 0


def test_auto_summary_uses_more_marker():
    """Text before <!--more--> becomes the summary, across paragraphs."""
    md = "First part.\n\nSecond part.\n\n<!--more-->\n\nHidden tail.\n"
    assert auto_summary(md) == "First part. Second part."


def test_auto_summary_first_paragraph():
    """Without a marker the first paragraph is used; headings are skipped."""
    md = "# Title\n\nOpening paragraph.\n\nLater paragraph.\n"
    assert auto_summary(md) == "Opening paragraph."


def test_auto_summary_truncates():
    md = " ".join(f"w{i}" for i in range(10)) + "\n"
    assert auto_summary(md, max_words=3) == "w0 w1 w2..."


def test_auto_summary_empty_body():
    assert auto_summary("") == ""
