"""Copy and download support for the rendered documents."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import ExportBlockedError
from .logger import configure_logging
from .manager.challenge_form import ChallengeFormManager
from .render import DOCUMENT_FILENAMES, DocumentKind, render_document

_LOG = configure_logging()


@dataclass(frozen=True, slots=True)
class ExportedDocument:
    kind: str
    filename: str
    content: str


class ExportSurface:
    """Hands the current documents to the UI's clipboard and download actions."""

    def __init__(self, form: ChallengeFormManager) -> None:
        self.form = form

    @property
    def enabled(self) -> bool:
        return self.form.can_export

    def current(self, kind: DocumentKind) -> ExportedDocument:
        """Render ``kind`` for preview; never blocked by field errors."""
        content = render_document(self.form.config, kind)
        return ExportedDocument(kind=kind, filename=DOCUMENT_FILENAMES[kind], content=content)

    def copy_text(self, kind: DocumentKind) -> str:
        document = self._checked(kind)
        _LOG.info("Copied %s to clipboard", document.filename)
        return document.content

    def write_to(self, directory: Path, kind: DocumentKind) -> Path:
        document = self._checked(kind)
        directory.mkdir(parents=True, exist_ok=True)
        destination = directory / document.filename
        destination.write_text(document.content, encoding="utf-8")
        _LOG.info("Exported %s to %s", document.filename, destination)
        return destination

    def _checked(self, kind: DocumentKind) -> ExportedDocument:
        if not self.enabled:
            errors = self.form.field_errors()
            errors.pop("hint", None)
            _LOG.info("Export blocked: %s", ", ".join(sorted(errors)))
            raise ExportBlockedError(errors)
        return self.current(kind)
