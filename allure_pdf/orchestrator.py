"""Report orchestrator sequencing loading, composition and rendering."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from allure_pdf.attachments import AttachmentResolver
from allure_pdf.builder import build_document
from allure_pdf.loader import load_test_results
from allure_pdf.renderers.manifest import RendererManifest

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ReportOrchestrator:
    """Generates one report from a results directory with a single renderer."""

    manifest: RendererManifest[Any]
    config: BaseModel
    skip_invalid: bool = False
    strict_attachments: bool = True

    def generate(
        self,
        results_dir: Path,
        output_path: Path,
        report_name: str,
        generated_at: datetime,
    ) -> int:
        """Write the report for ``results_dir`` to ``output_path``.

        The results directory is validated before the output file is touched.

        Args:
            results_dir: Directory holding ``*-result.json`` files
            output_path: Report file, created or overwritten
            report_name: Name shown on the title page
            generated_at: Generation time shown on the title page

        Returns:
            Number of test results included in the report

        """
        results = load_test_results(results_dir, skip_invalid=self.skip_invalid)

        resolver = AttachmentResolver(
            results_dir=results_dir, strict=self.strict_attachments
        )
        document = build_document(
            report_name, generated_at, results, resolver.read_lines
        )

        if not output_path.exists():
            log.info("Creating output file [%s] ...", output_path.absolute())
        log.info("Writing report to %s", output_path)
        with self.manifest.renderer_factory(self.config, output_path) as renderer:
            renderer.render(document)

        log.info("Report written with %d test result(s)", len(results))
        return len(results)
