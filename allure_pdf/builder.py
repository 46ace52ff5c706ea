"""Compose the report document tree from parsed test results."""

from collections.abc import Callable, Mapping, Sequence
from datetime import datetime

from allure_pdf.document import (
    Block,
    Document,
    ListItem,
    OrderedList,
    Paragraph,
    Section,
    StyledText,
    UnorderedList,
    blank_lines,
)
from allure_pdf.models.result import Attachment, Label, StepResult, TestResult

REPORT_TITLE = "Allure Report"
DETAILS_HEADING = "Test Details"
LABELS_HEADING = "Labels"
SCENARIO_HEADING = "Scenario"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S%z"

type AttachmentReader = Callable[[Attachment], Sequence[str]]


def format_timestamp(value: datetime, pattern: str = TIMESTAMP_FORMAT) -> str:
    """Format the report generation time, e.g. ``2024-05-01 10:00:00+0200``."""
    return value.strftime(pattern)


def format_status(status: str) -> str:
    """Format a status for display (``passed`` -> ``PASSED``)."""
    return status.upper()


def group_labels(labels: Sequence[Label]) -> Mapping[str, str]:
    """Group label values by name.

    Values sharing a name are joined with ``", "`` in order of occurrence.
    Groups are ordered by first appearance of their name.
    """
    grouped: dict[str, list[str]] = {}
    for label in labels:
        grouped.setdefault(label.name, []).append(label.value)
    return {name: ", ".join(values) for name, values in grouped.items()}


def build_document(
    title: str,
    generated_at: datetime,
    results: Sequence[TestResult],
    read_attachment: AttachmentReader,
) -> Document:
    """Build the full report tree.

    Args:
        title: Report name shown on the title page
        generated_at: Generation time shown on the title page
        results: Test results, rendered in the given order
        read_attachment: Returns the text lines of an attachment

    Returns:
        Document with a title section and a details section

    """
    return Document(
        title=title,
        sections=(
            build_title_section(title, generated_at),
            build_details_section(results, read_attachment),
        ),
    )


def build_title_section(title: str, generated_at: datetime) -> Section:
    """Build the centered title page."""
    return Section(
        align="center",
        children=(
            *blank_lines(5),
            Paragraph(runs=(StyledText(text=REPORT_TITLE, style="title"),)),
            *blank_lines(3),
            Paragraph(runs=(StyledText(text=title, style="subheading"),)),
            *blank_lines(2),
            Paragraph(
                runs=(
                    StyledText(text="Date: ", bold=True),
                    StyledText(text=format_timestamp(generated_at)),
                )
            ),
        ),
    )


def build_details_section(
    results: Sequence[TestResult], read_attachment: AttachmentReader
) -> Section:
    """Build the details section holding one block per test result."""
    return Section(
        new_page=True,
        heading=Paragraph(runs=(StyledText(text=DETAILS_HEADING, style="heading"),)),
        children=(
            *blank_lines(2),
            *(build_result_block(result, read_attachment) for result in results),
        ),
    )


def build_result_block(
    result: TestResult, read_attachment: AttachmentReader
) -> Section:
    """Build the detail block of a single test result."""
    children: list[Block] = [Paragraph(), build_result_header(result), Paragraph()]
    if result.labels:
        children.extend(build_labels_block(result.labels))
    children.append(Paragraph())
    if result.steps is not None:
        children.extend(build_scenario_block(result.steps, read_attachment))
    return Section(children=tuple(children))


def build_result_header(result: TestResult) -> Paragraph:
    """Test name followed by its status."""
    return Paragraph(
        runs=(
            StyledText(text=result.name, style="subheading"),
            StyledText(text=f" [{format_status(result.status)}]"),
        )
    )


def build_labels_block(labels: Sequence[Label]) -> tuple[Block, ...]:
    """Labels heading and one list entry per label name."""
    return (
        _subheading(LABELS_HEADING),
        UnorderedList(
            items=tuple(
                ListItem(text=StyledText(text=f"{name}: {value}"))
                for name, value in group_labels(labels).items()
            )
        ),
    )


def build_scenario_block(
    steps: Sequence[StepResult], read_attachment: AttachmentReader
) -> tuple[Block, ...]:
    """Scenario heading and the numbered step list."""
    return (
        _subheading(SCENARIO_HEADING),
        OrderedList(
            items=tuple(build_step_item(step, read_attachment) for step in steps)
        ),
    )


def build_step_item(step: StepResult, read_attachment: AttachmentReader) -> ListItem:
    """Step entry with its attachments nested underneath."""
    text = StyledText(text=f"{step.name} [{format_status(step.status)}]")
    if not step.attachments:
        return ListItem(text=text)
    return ListItem(
        text=text,
        children=(
            UnorderedList(
                items=tuple(
                    build_attachment_item(attachment, read_attachment)
                    for attachment in step.attachments
                )
            ),
        ),
    )


def build_attachment_item(
    attachment: Attachment, read_attachment: AttachmentReader
) -> ListItem:
    """Attachment entry with its content lines nested underneath."""
    lines = read_attachment(attachment)
    return ListItem(
        text=StyledText(text=f"{attachment.name} ({attachment.type or 'unknown'})"),
        children=(
            UnorderedList(
                items=tuple(
                    ListItem(text=StyledText(text=line.replace("\t", " ")))
                    for line in lines
                )
            ),
        ),
    )


def _subheading(text: str) -> Paragraph:
    return Paragraph(runs=(StyledText(text=text, style="subheading"),))
