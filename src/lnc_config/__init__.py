"""Challenge config generator core: form state in, chall.json and README.md out."""

from __future__ import annotations

from .config import APP_VERSION as __version__
from .errors import (
    ConfigGeneratorError,
    ExportBlockedError,
    FieldValidationError,
    ItemValidationError,
    UnknownDocumentKind,
    ValidationError,
)
from .export import ExportedDocument, ExportSurface
from .manager import ChallengeConfig, ChallengeFormManager, EditingAt, Hint, Idle
from .render import RenderedDocuments, render_document, render_structured, render_summary

__all__ = [
    "__version__",
    "ChallengeConfig",
    "ChallengeFormManager",
    "ConfigGeneratorError",
    "EditingAt",
    "ExportBlockedError",
    "ExportSurface",
    "ExportedDocument",
    "FieldValidationError",
    "Hint",
    "Idle",
    "ItemValidationError",
    "RenderedDocuments",
    "UnknownDocumentKind",
    "ValidationError",
    "render_document",
    "render_structured",
    "render_summary",
]
