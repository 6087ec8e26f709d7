"""
Turns generated story HTML into a title and plain-text message chunks.

The text service is asked for ``<h1>`` and ``<p>`` markup but does not always
comply, so parsing is deliberately shallow: only paragraph and line-break tags
are recognised and everything else passes through as text.
"""

import re
from dataclasses import dataclass
from typing import Union

from ..config.generation import DEFAULT_TITLE, MESSAGE_CHUNK_SIZE

_TITLE_PATTERN = re.compile(r"<h1>(.*?)</h1>")
_TAG_PATTERN = re.compile(r"<p>|</p>|<br\s*/?>")


# =============================================================================
# Markup nodes
# =============================================================================


@dataclass(frozen=True)
class TextNode:
    text: str


@dataclass(frozen=True)
class ParagraphBreak:
    pass


@dataclass(frozen=True)
class LineBreak:
    pass


MarkupNode = Union[TextNode, ParagraphBreak, LineBreak]


@dataclass
class FormattedStory:
    """A generated story ready for delivery."""

    title: str
    body: str

    def chunks(self, size: int = MESSAGE_CHUNK_SIZE) -> list[str]:
        return chunk_text(self.body, size)


# =============================================================================
# Parsing
# =============================================================================


def extract_title(html: str) -> tuple[str, str]:
    """
    Split the first ``<h1>`` heading from the markup.

    Returns:
        Tuple of (title, remaining markup). The title falls back to
        DEFAULT_TITLE when no heading is found.
    """
    match = _TITLE_PATTERN.search(html)
    if not match:
        return DEFAULT_TITLE, html
    return match.group(1), html[: match.start()] + html[match.end():]


def parse_markup(html: str) -> list[MarkupNode]:
    """Parse paragraph markup into text, paragraph-break and line-break nodes.

    ``<p>`` opens a paragraph and produces no node. Unrecognised tags are kept
    verbatim inside text nodes.
    """
    nodes: list[MarkupNode] = []
    position = 0
    for match in _TAG_PATTERN.finditer(html):
        if match.start() > position:
            nodes.append(TextNode(html[position:match.start()]))
        tag = match.group(0)
        if tag == "</p>":
            nodes.append(ParagraphBreak())
        elif tag.startswith("<br"):
            nodes.append(LineBreak())
        position = match.end()
    if position < len(html):
        nodes.append(TextNode(html[position:]))
    return nodes


def render_plain(nodes: list[MarkupNode]) -> str:
    """Render parsed nodes as plain text."""
    parts = []
    for node in nodes:
        if isinstance(node, TextNode):
            parts.append(node.text)
        elif isinstance(node, ParagraphBreak):
            parts.append("\n\n")
        elif isinstance(node, LineBreak):
            parts.append("\n")
    return "".join(parts)


def format_story(html: str) -> FormattedStory:
    """Extract the title and convert the rest of the markup to plain text."""
    title, remainder = extract_title(html)
    return FormattedStory(title=title, body=render_plain(parse_markup(remainder)))


def chunk_text(text: str, size: int = MESSAGE_CHUNK_SIZE) -> list[str]:
    """Split text into consecutive slices of at most ``size`` characters."""
    if size < 1:
        raise ValueError("Chunk size must be positive")
    return [text[start:start + size] for start in range(0, len(text), size)]
