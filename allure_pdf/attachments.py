"""Read attachment content referenced by result steps."""

import logging
import re
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from allure_pdf.errors import AttachmentReadError
from allure_pdf.models.result import Attachment

log = logging.getLogger(__name__)

LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> Sequence[str]:
    """Split on CR, LF and CRLF only; a trailing line break adds no line."""
    lines = LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return tuple(lines)


@dataclass(frozen=True, kw_only=True)
class AttachmentResolver:
    """Resolves attachment sources against the results directory.

    Sources are joined to ``results_dir`` as-is; paths escaping the directory
    are not rejected.
    """

    results_dir: Path
    strict: bool = True

    def resolve(self, attachment: Attachment) -> Path:
        """Return the path of the attachment file."""
        return self.results_dir / attachment.source

    def read_lines(self, attachment: Attachment) -> Sequence[str]:
        """Return the attachment content as UTF-8 text lines.

        In strict mode a missing or unreadable file raises AttachmentReadError.
        Otherwise a warning is logged and a single placeholder line is returned.
        """
        path = self.resolve(attachment)
        try:
            data = path.read_bytes()
        except OSError as e:
            if self.strict:
                raise AttachmentReadError(path, e.strerror or str(e)) from e
            log.warning(
                "Attachment %r not available at %s: %s", attachment.name, path, e
            )
            return (f"Attachment not available: {attachment.source}",)

        return split_lines(data.decode("utf-8", errors="replace"))
