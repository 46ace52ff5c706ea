"""Abstract base class for report renderers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from allure_pdf.document import Block, Document


@dataclass(frozen=True, kw_only=True)
class ReportRenderer(ABC):
    """Abstract base for output backends.

    A renderer is handed a document one block at a time, in tree order. Page
    geometry, fonts and pagination are owned by the backend.
    """

    @abstractmethod
    def start_document(self, title: str) -> None:
        """Begin a new output document.

        Args:
            title: Report name, used for document metadata

        """

    @abstractmethod
    def add_block(self, block: Block) -> None:
        """Append a top-level block to the output document."""

    @abstractmethod
    def end_document(self) -> None:
        """Finish the document and flush it to the sink."""

    def render(self, document: Document) -> None:
        """Render a whole document tree."""
        self.start_document(document.title)
        for section in document.sections:
            self.add_block(section)
        self.end_document()
