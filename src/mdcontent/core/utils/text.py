"""Plain-text statistics over a Markdown body: word count, reading time, auto summary"""

import math

from markdown_it import MarkdownIt


MORE_MARKER = "<!--more-->"


def _make_parser(preset: str) -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def _inline_text(token) -> str:
    """Flatten an inline token to its visible text (emphasis and link markup dropped)."""
    parts = []
    for child in token.children or []:
        if child.type in ("text", "code_inline"):
            parts.append(child.content)
        elif child.type in ("softbreak", "hardbreak"):
            parts.append(" ")
    return "".join(parts).strip()


def prose_blocks(markdown: str, preset: str = "gfm-like") -> list[str]:
    """Return the plain text of each prose block; code fences and raw HTML carry no inline text."""
    tokens = _make_parser(preset).parse(markdown)
    return [text for tok in tokens if tok.type == "inline" and (text := _inline_text(tok))]


def word_count(markdown: str, preset: str = "gfm-like") -> int:
    return sum(len(block.split()) for block in prose_blocks(markdown, preset))


def reading_time(words: int, words_per_minute: int) -> int:
    """Minutes to read, rounded up; 0 only for an empty body."""
    return math.ceil(words / words_per_minute) if words else 0


def _truncate(text: str, max_words: int) -> str:
    words = text.split()
    if len(words) <= max_words:
        return " ".join(words)
    return " ".join(words[:max_words]) + "..."


def auto_summary(markdown: str, max_words: int = 70, preset: str = "gfm-like") -> str:
    """Summary from the text before <!--more-->, else from the first paragraph."""
    if MORE_MARKER in markdown:
        head = markdown.split(MORE_MARKER, 1)[0]
        return _truncate(" ".join(prose_blocks(head, preset)), max_words)

    tokens = _make_parser(preset).parse(markdown)
    for i, tok in enumerate(tokens):
        if tok.type == "inline" and i and tokens[i - 1].type == "paragraph_open":
            text = _inline_text(tok)
            if text:
                return _truncate(text, max_words)
    return ""
