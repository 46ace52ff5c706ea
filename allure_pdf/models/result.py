"""Models for Allure test result records (``*-result.json``)."""

from collections.abc import Sequence
from typing import Literal

from pydantic import Field

from allure_pdf.models.base import Model

Status = Literal["passed", "failed", "broken", "skipped", "unknown"]


class Label(Model):
    """Name/value metadata tag attached to a test result."""

    name: str = Field(..., description="Label name (e.g. feature, owner, tag)")
    value: str = Field(..., description="Label value")


class Attachment(Model):
    """Reference to auxiliary content captured during a step."""

    name: str = Field(..., description="Display name")
    type: str | None = Field(default=None, description="Declared media type")
    source: str = Field(..., description="Path relative to the results directory")


class StepResult(Model):
    """One step within a test's execution scenario."""

    name: str = Field(..., description="Step display name")
    status: Status = Field(default="unknown", description="Step outcome")
    attachments: Sequence[Attachment] | None = Field(
        default=None, description="Attachments (None means absent from the record)"
    )


class TestResult(Model):
    """One executed test case."""

    __test__ = False

    name: str = Field(..., description="Test display name")
    status: Status = Field(default="unknown", description="Test outcome")
    labels: Sequence[Label] | None = Field(
        default=None, description="Labels (None means absent from the record)"
    )
    steps: Sequence[StepResult] | None = Field(
        default=None, description="Steps (None means absent from the record)"
    )
