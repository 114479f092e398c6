"""Exceptions raised by the config generator core."""

from __future__ import annotations

from typing import Dict, Optional


class ConfigGeneratorError(Exception):
    """Base class for every error raised by :mod:`lnc_config`."""


class FieldValidationError(ConfigGeneratorError):
    """A scalar field edit that cannot be applied."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class ItemValidationError(ConfigGeneratorError):
    """A hint add/update rejected because its input is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


ValidationError = ItemValidationError


class ExportBlockedError(ConfigGeneratorError):
    """Copy or download attempted while the form still has field errors."""

    def __init__(self, errors: Optional[Dict[str, str]] = None) -> None:
        self.errors = dict(errors or {})
        detail = "; ".join(f"{field}: {message}" for field, message in sorted(self.errors.items()))
        super().__init__(f"Please fix the highlighted errors before exporting ({detail})")


class UnknownDocumentKind(ConfigGeneratorError):
    def __init__(self, kind: object) -> None:
        super().__init__(f"unknown document kind: {kind!r}")
        self.kind = kind
