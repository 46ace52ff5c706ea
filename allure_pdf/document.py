"""Render-agnostic document tree.

Nodes are frozen and hold tuples only, so a node is never shared or changed once
it has been attached to its parent.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

type TextStyle = Literal["title", "heading", "subheading", "body"]
type Alignment = Literal["left", "center"]


@dataclass(frozen=True, kw_only=True)
class StyledText:
    """A run of text in one of the four text styles."""

    text: str
    style: TextStyle = "body"
    bold: bool = False


@dataclass(frozen=True, kw_only=True)
class Paragraph:
    """A single line of styled runs; a paragraph without runs is a blank line."""

    runs: Sequence[StyledText] = ()

    @property
    def is_blank(self) -> bool:
        """Check if the paragraph is a blank separator line."""
        return not self.runs

    @property
    def text(self) -> str:
        """Plain text of all runs."""
        return "".join(run.text for run in self.runs)


@dataclass(frozen=True, kw_only=True)
class ListItem:
    """A list entry, optionally holding nested lists."""

    text: StyledText
    children: Sequence["OrderedList | UnorderedList"] = ()


@dataclass(frozen=True, kw_only=True)
class OrderedList:
    """Numbered list."""

    items: Sequence[ListItem] = ()


@dataclass(frozen=True, kw_only=True)
class UnorderedList:
    """Bulleted list."""

    items: Sequence[ListItem] = ()


@dataclass(frozen=True, kw_only=True)
class Section:
    """A group of blocks with an optional heading."""

    heading: Paragraph | None = None
    children: Sequence["Block"] = ()
    align: Alignment = "left"
    new_page: bool = False


type Block = Section | Paragraph | OrderedList | UnorderedList


@dataclass(frozen=True, kw_only=True)
class Document:
    """Root of the document tree."""

    title: str
    sections: Sequence[Section] = ()


def blank_lines(count: int) -> tuple[Paragraph, ...]:
    """Return ``count`` blank separator paragraphs."""
    return tuple(Paragraph() for _ in range(count))
