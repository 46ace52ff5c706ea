"""Discover and parse Allure result records from a results directory."""

import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from allure_pdf.errors import ResultParseError, ResultsDirectoryError
from allure_pdf.models.result import TestResult

log = logging.getLogger(__name__)

RESULT_SUFFIX = "-result.json"


def check_results_dir(root: Path) -> None:
    """Raise ResultsDirectoryError unless ``root`` is an existing directory."""
    if not root.exists():
        raise ResultsDirectoryError(
            f"Results directory [{root.absolute()}] does not exist"
        )
    if not root.is_dir():
        raise ResultsDirectoryError(f"Input [{root.absolute()}] is not a directory")


def list_result_files(root: Path) -> Sequence[Path]:
    """List result files under ``root`` at any depth, sorted by path."""
    return sorted(
        path
        for path in root.rglob(f"*{RESULT_SUFFIX}")
        if path.is_file()
    )


def load_test_result(path: Path) -> TestResult:
    """Parse a single result file.

    Raises:
        ResultParseError: If the file cannot be read, is not valid JSON or does
            not match the result record schema.

    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ResultParseError(path, e.strerror or str(e)) from e

    try:
        return TestResult.model_validate_json(data)
    except ValidationError as e:
        raise ResultParseError(path, f"{e.error_count()} validation error(s)") from e


def load_test_results(
    root: Path, *, skip_invalid: bool = False
) -> Sequence[TestResult]:
    """Load every result record found under ``root``.

    Args:
        root: Results directory
        skip_invalid: Log and skip files that fail to parse instead of aborting

    Returns:
        Parsed results in path order

    Raises:
        ResultsDirectoryError: If ``root`` is missing or not a directory
        ResultParseError: If a file fails to parse and ``skip_invalid`` is off

    """
    check_results_dir(root)

    files = list_result_files(root)
    log.info("Found %d test result file(s) in %s", len(files), root)

    results: list[TestResult] = []
    for path in files:
        try:
            results.append(load_test_result(path))
        except ResultParseError as e:
            if not skip_invalid:
                raise
            log.warning("Skipping invalid result file: %s", e)
    return results
