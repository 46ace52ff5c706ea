"""Plain-text renderer, mostly useful for previews and diffs."""

import textwrap
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from allure_pdf.document import (
    Alignment,
    Block,
    ListItem,
    OrderedList,
    Paragraph,
    Section,
    UnorderedList,
)
from allure_pdf.renderers.base import ReportRenderer
from allure_pdf.renderers.text.config import TextRendererConfig

PAGE_BREAK = "\f"


@dataclass(frozen=True, kw_only=True)
class TextRenderer(ReportRenderer):
    """Renders the document tree as wrapped UTF-8 text.

    Sections starting a new page are preceded by a form feed, including one
    that opens the document.
    """

    config: TextRendererConfig
    stream: TextIO = field(repr=False)

    @classmethod
    @contextmanager
    def from_config(
        cls, config: TextRendererConfig, output_path: Path
    ) -> Generator["TextRenderer"]:
        """Create renderer writing to ``output_path``, closing it on exit."""
        with output_path.open("w", encoding="utf-8", newline="\n") as stream:
            yield cls(config=config, stream=stream)

    def start_document(self, title: str) -> None:
        """Nothing to write before the first block."""

    def add_block(self, block: Block) -> None:
        """Write a block to the stream."""
        self.stream.writelines(self._block(block, "left"))

    def end_document(self) -> None:
        """Flush the stream."""
        self.stream.flush()

    def _block(self, block: Block, align: Alignment) -> list[str]:
        match block:
            case Section():
                return self._section(block)
            case Paragraph():
                return [self._paragraph(block, align)]
            case OrderedList() | UnorderedList():
                return self._list(block, 0)

    def _section(self, section: Section) -> list[str]:
        lines: list[str] = []
        if section.new_page:
            lines.append(PAGE_BREAK)
        if section.heading is not None:
            lines.append(self._paragraph(section.heading, section.align))
        for child in section.children:
            lines.extend(self._block(child, section.align))
        return lines

    def _paragraph(self, paragraph: Paragraph, align: Alignment) -> str:
        text = paragraph.text
        if align == "center":
            text = text.center(self.config.width).rstrip()
        return f"{text}\n"

    def _list(self, node: OrderedList | UnorderedList, level: int) -> list[str]:
        lines: list[str] = []
        for number, item in enumerate(node.items, start=1):
            marker = f"{number}." if isinstance(node, OrderedList) else "-"
            lines.extend(self._list_item(item, marker, level))
        return lines

    def _list_item(self, item: ListItem, marker: str, level: int) -> list[str]:
        prefix = " " * (self.config.indent * level) + marker + " "
        wrapped = textwrap.wrap(
            item.text.text,
            width=self.config.width,
            initial_indent=prefix,
            subsequent_indent=" " * len(prefix),
        ) or [prefix.rstrip()]
        lines = [f"{line}\n" for line in wrapped]
        for child in item.children:
            lines.extend(self._list(child, level + 1))
        return lines
