"""CLI entry point for exporting Allure results to a paginated report."""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from allure_pdf.errors import ReportError
from allure_pdf.orchestrator import ReportOrchestrator
from allure_pdf.renderers.loading import RendererNotFoundError, load_renderer_manifest

DEFAULT_OUTPUT = Path("export.pdf")
DEFAULT_NAME = "Generated report"
DEFAULT_RENDERER = "pdf"


def run(
    results_dir: Path,
    output_path: Path,
    report_name: str,
    renderer_key: str = DEFAULT_RENDERER,
    renderer_config_json: str = "{}",
    skip_invalid: bool = False,
    lenient_attachments: bool = False,
    generated_at: datetime | None = None,
) -> int:
    """Generate the report and return exit code."""
    log = logging.getLogger("allure_pdf")

    try:
        manifest = load_renderer_manifest(renderer_key)
        config = manifest.config_cls(**json.loads(renderer_config_json))
    except RendererNotFoundError as e:
        log.error("%s", e)
        return 1
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        log.error("Invalid renderer configuration for '%s': %s", renderer_key, e)
        return 1

    orchestrator = ReportOrchestrator(
        manifest=manifest,
        config=config,
        skip_invalid=skip_invalid,
        strict_attachments=not lenient_attachments,
    )

    try:
        orchestrator.generate(
            results_dir=results_dir,
            output_path=output_path,
            report_name=report_name,
            generated_at=generated_at or datetime.now().astimezone(),
        )
    except ReportError as e:
        log.error("%s", e)
        return 1
    except OSError as e:
        log.error("Cannot write report to %s: %s", output_path, e)
        return 1

    return 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="allure-pdf",
        description="Export Allure result files to a paginated report",
    )
    parser.add_argument(
        "results_dir",
        type=Path,
        help="The directory with allure result files",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Export output file (default: {DEFAULT_OUTPUT})",
    )
    parser.add_argument(
        "-n",
        "--name",
        default=DEFAULT_NAME,
        help=f"Report name (default: {DEFAULT_NAME!r})",
    )
    parser.add_argument(
        "-r",
        "--renderer",
        default=DEFAULT_RENDERER,
        help="Renderer key (pdf, text)",
    )
    parser.add_argument(
        "--renderer-config",
        default="{}",
        help="JSON configuration for the renderer",
    )
    parser.add_argument(
        "--skip-invalid",
        action="store_true",
        help="Skip result files that fail to parse instead of aborting",
    )
    parser.add_argument(
        "--lenient-attachments",
        action="store_true",
        help="Render a placeholder for unreadable attachments instead of aborting",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = run(
        results_dir=args.results_dir,
        output_path=args.output,
        report_name=args.name,
        renderer_key=args.renderer,
        renderer_config_json=args.renderer_config,
        skip_invalid=args.skip_invalid,
        lenient_attachments=args.lenient_attachments,
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
