"""PDF renderer built on reportlab platypus."""

import logging
from collections.abc import Generator, Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from xml.sax.saxutils import escape

from reportlab.lib import pagesizes
from reportlab.lib.enums import TA_CENTER, TA_LEFT
from reportlab.lib.styles import ParagraphStyle
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.platypus import Flowable, PageBreak, SimpleDocTemplate, Spacer
from reportlab.platypus import Paragraph as PdfParagraph

from allure_pdf.document import (
    Alignment,
    Block,
    ListItem,
    OrderedList,
    Paragraph,
    Section,
    StyledText,
    TextStyle,
    UnorderedList,
)
from allure_pdf.renderers.base import ReportRenderer
from allure_pdf.renderers.pdf.config import PdfRendererConfig

log = logging.getLogger(__name__)

PAGE_SIZES: Mapping[str, tuple[float, float]] = {
    "A3": pagesizes.A3,
    "A4": pagesizes.A4,
    "A5": pagesizes.A5,
    "LETTER": pagesizes.LETTER,
    "LEGAL": pagesizes.LEGAL,
}

ALIGNMENTS: Mapping[Alignment, int] = {"left": TA_LEFT, "center": TA_CENTER}

# Bullet per nesting level of unordered lists, cycling past the end.
BULLETS = ("•", "-")

LIST_INDENT = 20.0


def register_fonts(config: PdfRendererConfig) -> None:
    """Register the configured TrueType fonts with reportlab."""
    if config.font_path is not None:
        pdfmetrics.registerFont(TTFont(config.font_name, str(config.font_path)))
    if config.bold_font_path is not None:
        pdfmetrics.registerFont(
            TTFont(config.bold_font_name, str(config.bold_font_path))
        )


def build_styles(config: PdfRendererConfig) -> Mapping[TextStyle, ParagraphStyle]:
    """Build one paragraph style per text style."""
    sizes: Mapping[TextStyle, float] = {
        "title": config.title_font_size,
        "heading": config.heading_font_size,
        "subheading": config.subheading_font_size,
        "body": config.body_font_size,
    }
    return {
        name: ParagraphStyle(
            name,
            fontName=config.font_name if name == "body" else config.bold_font_name,
            fontSize=size,
            leading=size * 1.2,
        )
        for name, size in sizes.items()
    }


@dataclass(frozen=True, kw_only=True)
class PdfRenderer(ReportRenderer):
    """Renders the document tree to PDF.

    Blocks are collected into a platypus story and typeset on
    ``end_document``; reportlab handles page breaks and line wrapping.
    """

    config: PdfRendererConfig
    doc: SimpleDocTemplate = field(repr=False)
    styles: Mapping[TextStyle, ParagraphStyle] = field(repr=False)
    story: list[Flowable] = field(default_factory=list, repr=False)

    @classmethod
    @contextmanager
    def from_config(
        cls, config: PdfRendererConfig, output_path: Path
    ) -> Generator["PdfRenderer"]:
        """Create renderer writing to ``output_path``, closing it on exit."""
        register_fonts(config)
        with output_path.open("wb") as stream:
            doc = SimpleDocTemplate(
                stream,
                pagesize=PAGE_SIZES[config.page_size],
                leftMargin=config.margin,
                rightMargin=config.margin,
                topMargin=config.margin,
                bottomMargin=config.margin,
                invariant=1,
            )
            yield cls(config=config, doc=doc, styles=build_styles(config))

    def start_document(self, title: str) -> None:
        """Reset the story and set the document title."""
        self.story.clear()
        self.doc.title = title

    def add_block(self, block: Block) -> None:
        """Convert a block to flowables and append them to the story."""
        self.story.extend(self._block(block, "left"))

    def end_document(self) -> None:
        """Typeset the story and write the PDF."""
        log.debug("Building PDF from %d flowable(s)", len(self.story))
        self.doc.build(self.story)

    def _block(self, block: Block, align: Alignment) -> list[Flowable]:
        match block:
            case Section():
                return self._section(block)
            case Paragraph():
                return [self._paragraph(block, align)]
            case OrderedList() | UnorderedList():
                return self._list(block, 0)

    def _section(self, section: Section) -> list[Flowable]:
        flowables: list[Flowable] = []
        if section.new_page and self.story:
            flowables.append(PageBreak())
        if section.heading is not None:
            flowables.append(self._paragraph(section.heading, section.align))
        for child in section.children:
            flowables.extend(self._block(child, section.align))
        return flowables

    def _paragraph(self, paragraph: Paragraph, align: Alignment) -> Flowable:
        if paragraph.is_blank:
            return Spacer(1, self.styles["body"].leading)

        base = max(
            (self.styles[run.style] for run in paragraph.runs),
            key=lambda style: style.fontSize,
        )
        style = ParagraphStyle(
            f"{base.name}-{align}", parent=base, alignment=ALIGNMENTS[align]
        )
        return PdfParagraph(self._markup(paragraph.runs), style)

    def _markup(self, runs: Sequence[StyledText]) -> str:
        return "".join(
            '<font name="{}" size="{}">{}</font>'.format(
                self.config.bold_font_name
                if run.bold
                else self.styles[run.style].fontName,
                self.styles[run.style].fontSize,
                escape(run.text),
            )
            for run in runs
        )

    def _list(self, node: OrderedList | UnorderedList, level: int) -> list[Flowable]:
        # Items become sibling paragraphs, nesting is shown by indentation only.
        flowables: list[Flowable] = []
        for number, item in enumerate(node.items, start=1):
            if isinstance(node, OrderedList):
                bullet = f"{number}."
            else:
                bullet = BULLETS[level % len(BULLETS)]
            flowables.append(self._list_item(item, bullet, level))
            for child in item.children:
                flowables.extend(self._list(child, level + 1))
        return flowables

    def _list_item(self, item: ListItem, bullet: str, level: int) -> Flowable:
        style = ParagraphStyle(
            f"list-{level}",
            parent=self.styles["body"],
            bulletFontName=self.styles["body"].fontName,
            bulletFontSize=self.styles["body"].fontSize,
            bulletIndent=LIST_INDENT * level,
            leftIndent=LIST_INDENT * (level + 1),
        )
        return PdfParagraph(self._markup((item.text,)), style, bulletText=bullet)
