"""Tests for report orchestrator."""

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from unittest.mock import MagicMock, Mock

import pytest

from allure_pdf.document import Document, Section
from allure_pdf.errors import (
    AttachmentReadError,
    ResultParseError,
    ResultsDirectoryError,
)
from allure_pdf.orchestrator import ReportOrchestrator
from allure_pdf.renderers.manifest import RendererManifest
from allure_pdf.renderers.pdf import pdf_manifest
from allure_pdf.renderers.text import TextRendererConfig, text_manifest

GENERATED_AT = datetime(2024, 5, 1, 10, 30, 0, tzinfo=UTC)


@pytest.fixture
def renderer_mock() -> Mock:
    """Create mock renderer."""
    return Mock()


@pytest.fixture
def manifest(renderer_mock: Mock) -> RendererManifest[TextRendererConfig]:
    """Create manifest whose factory yields the mock renderer."""
    factory = MagicMock()
    factory.return_value.__enter__.return_value = renderer_mock
    return RendererManifest(config_cls=TextRendererConfig, renderer_factory=factory)


def rendered_document(renderer_mock: Mock) -> Document:
    """Return the document passed to the mock renderer."""
    renderer_mock.render.assert_called_once()
    document: Document = renderer_mock.render.call_args.args[0]
    return document


def test_renders_one_block_per_result_file(
    results_dir: Path,
    write_result: Callable[..., Path],
    manifest: RendererManifest[TextRendererConfig],
    renderer_mock: Mock,
    tmp_path: Path,
) -> None:
    """Detail block count equals matching file count at any depth."""
    write_result("1-result.json", name="one", status="passed")
    write_result("a/2-result.json", name="two", status="failed")
    write_result("a/b/c/3-result.json", name="three", status="skipped")
    write_result("a/4-container.json", name="container", status="passed")
    orchestrator = ReportOrchestrator(manifest=manifest, config=TextRendererConfig())

    count = orchestrator.generate(
        results_dir, tmp_path / "out.txt", "Run", GENERATED_AT
    )

    document = rendered_document(renderer_mock)
    details = document.sections[1]
    assert count == 3
    assert len([c for c in details.children if isinstance(c, Section)]) == 3


def test_passes_config_and_output_to_factory(
    results_dir: Path,
    manifest: RendererManifest[TextRendererConfig],
    tmp_path: Path,
) -> None:
    """Opens the renderer with the configured backend settings."""
    config = TextRendererConfig(width=50)
    output = tmp_path / "out.txt"
    orchestrator = ReportOrchestrator(manifest=manifest, config=config)

    orchestrator.generate(results_dir, output, "Run", GENERATED_AT)

    factory: Mock = manifest.renderer_factory  # type: ignore[assignment]
    factory.assert_called_once_with(config, output)


def test_missing_directory_does_not_create_output(
    manifest: RendererManifest[TextRendererConfig],
    renderer_mock: Mock,
    tmp_path: Path,
) -> None:
    """Configuration errors are raised before the output is opened."""
    output = tmp_path / "out.txt"
    orchestrator = ReportOrchestrator(manifest=manifest, config=TextRendererConfig())

    with pytest.raises(ResultsDirectoryError):
        orchestrator.generate(tmp_path / "missing", output, "Run", GENERATED_AT)

    manifest.renderer_factory.assert_not_called()  # type: ignore[attr-defined]
    renderer_mock.render.assert_not_called()
    assert not output.exists()


def test_parse_error_aborts_by_default(
    results_dir: Path,
    write_result: Callable[..., Path],
    manifest: RendererManifest[TextRendererConfig],
    tmp_path: Path,
) -> None:
    """A malformed result aborts the run."""
    write_result("1-result.json", name="one", status="passed")
    (results_dir / "2-result.json").write_text("{")
    orchestrator = ReportOrchestrator(manifest=manifest, config=TextRendererConfig())

    with pytest.raises(ResultParseError):
        orchestrator.generate(results_dir, tmp_path / "out.txt", "Run", GENERATED_AT)


def test_skip_invalid(
    results_dir: Path,
    write_result: Callable[..., Path],
    manifest: RendererManifest[TextRendererConfig],
    tmp_path: Path,
) -> None:
    """Malformed results are skipped when configured."""
    write_result("1-result.json", name="one", status="passed")
    (results_dir / "2-result.json").write_text("{")
    orchestrator = ReportOrchestrator(
        manifest=manifest, config=TextRendererConfig(), skip_invalid=True
    )

    count = orchestrator.generate(
        results_dir, tmp_path / "out.txt", "Run", GENERATED_AT
    )

    assert count == 1


def test_missing_attachment_aborts_by_default(
    results_dir: Path,
    write_result: Callable[..., Path],
    manifest: RendererManifest[TextRendererConfig],
    tmp_path: Path,
) -> None:
    """A missing attachment aborts the run."""
    write_result(
        "1-result.json",
        name="one",
        status="passed",
        steps=[
            {
                "name": "s",
                "status": "passed",
                "attachments": [
                    {"name": "log", "type": "text/plain", "source": "missing.txt"}
                ],
            }
        ],
    )
    orchestrator = ReportOrchestrator(manifest=manifest, config=TextRendererConfig())

    with pytest.raises(AttachmentReadError, match="missing.txt"):
        orchestrator.generate(results_dir, tmp_path / "out.txt", "Run", GENERATED_AT)


def test_text_report_end_to_end(
    results_dir: Path, write_result: Callable[..., Path], tmp_path: Path
) -> None:
    """Resolves attachments relative to the results directory."""
    (results_dir / "attachments").mkdir()
    (results_dir / "attachments" / "log.txt").write_text("a\tb\nc")
    write_result(
        "1-result.json",
        name="one",
        status="passed",
        steps=[
            {
                "name": "s",
                "status": "passed",
                "attachments": [
                    {
                        "name": "log.txt",
                        "type": "text/plain",
                        "source": "attachments/log.txt",
                    }
                ],
            }
        ],
    )
    output = tmp_path / "out.txt"
    orchestrator = ReportOrchestrator(
        manifest=text_manifest, config=TextRendererConfig()
    )

    orchestrator.generate(results_dir, output, "Run", GENERATED_AT)

    assert "    - a b\n    - c\n" in output.read_text(encoding="utf-8")


def test_lenient_attachments_end_to_end(
    results_dir: Path, write_result: Callable[..., Path], tmp_path: Path
) -> None:
    """Renders a placeholder line for a missing attachment when lenient."""
    write_result(
        "1-result.json",
        name="one",
        status="passed",
        steps=[
            {
                "name": "s",
                "status": "passed",
                "attachments": [
                    {"name": "log", "type": "text/plain", "source": "gone.txt"}
                ],
            }
        ],
    )
    output = tmp_path / "out.txt"
    orchestrator = ReportOrchestrator(
        manifest=text_manifest,
        config=TextRendererConfig(),
        strict_attachments=False,
    )

    orchestrator.generate(results_dir, output, "Run", GENERATED_AT)

    assert "- Attachment not available: gone.txt" in output.read_text(
        encoding="utf-8"
    )


def test_pdf_report_is_deterministic(
    results_dir: Path, write_result: Callable[..., Path], tmp_path: Path
) -> None:
    """Two runs with a frozen timestamp produce identical files."""
    write_result(
        "1-result.json",
        name="one",
        status="passed",
        labels=[{"name": "owner", "value": "alice"}],
        steps=[{"name": "s", "status": "passed"}],
    )
    write_result("2-result.json", name="two", status="broken")
    orchestrator = ReportOrchestrator(
        manifest=pdf_manifest, config=pdf_manifest.config_cls()
    )

    orchestrator.generate(results_dir, tmp_path / "a.pdf", "Run", GENERATED_AT)
    orchestrator.generate(results_dir, tmp_path / "b.pdf", "Run", GENERATED_AT)

    assert (tmp_path / "a.pdf").read_bytes() == (tmp_path / "b.pdf").read_bytes()
