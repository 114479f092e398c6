"""Rendering of a challenge config into ``chall.json`` and ``README.md`` text."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Literal, Optional

from .config import (
    AUTHOR_PLACEHOLDER,
    DESCRIPTION_PLACEHOLDER,
    DIST_PREFIX,
    DISCORD_PLACEHOLDER,
    EMPTY_SECTION,
    FLAG_PLACEHOLDER,
    JSON_INDENT,
    NAME_PLACEHOLDER,
    STRUCTURED_FILENAME,
    SUMMARY_FILENAME,
)
from .errors import UnknownDocumentKind
from .manager.models import ChallengeConfig
from .manager.validation import port_number

DocumentKind = Literal["structured", "summary"]

DOCUMENT_FILENAMES: Dict[str, str] = {
    "structured": STRUCTURED_FILENAME,
    "summary": SUMMARY_FILENAME,
}


def structured_payload(config: ChallengeConfig) -> Dict[str, Any]:
    """Build the ``chall.json`` object, key order included."""
    payload: Dict[str, Any] = {
        "name": config.name,
        "author": config.author,
        "category": config.category,
        "difficulty": config.difficulty,
        "description": config.description,
        "discord": config.discord,
        "flag": config.flag,
    }
    if config.port:
        payload["port"] = port_number(config.port)
    if config.hints:
        payload["hints"] = [hint.to_dict() for hint in config.hints]
    if config.requirements:
        payload["requirements"] = list(config.requirements)
    return payload


def render_structured(config: ChallengeConfig, files: Optional[Iterable[str]] = None) -> str:
    # files are not part of chall.json; accepted so both renderers share a signature
    return json.dumps(structured_payload(config), indent=JSON_INDENT, ensure_ascii=False)


def _bullets(lines: Iterable[str]) -> str:
    rendered = "\n".join(lines)
    return rendered or EMPTY_SECTION


def render_summary(config: ChallengeConfig, files: Optional[Iterable[str]] = None) -> str:
    """Render the Markdown summary shipped alongside the challenge."""
    file_list = list(config.files if files is None else files)

    hints = _bullets(f"- `{hint.description}` ({hint.cost} pts)" for hint in config.hints)
    dist = _bullets(f"- [`{name}`](./{DIST_PREFIX}/{name})" for name in file_list)
    services = f"- Runs on port `{config.port}`" if config.port else EMPTY_SECTION

    return (
        f"# {config.name or NAME_PLACEHOLDER}\n"
        "\n"
        f"{config.description or DESCRIPTION_PLACEHOLDER}\n"
        "\n"
        "## Summary\n"
        f"- **Author:** {config.author or AUTHOR_PLACEHOLDER}\n"
        f"- **Discord:** {config.discord or DISCORD_PLACEHOLDER}\n"
        f"- **Category:** {config.category}\n"
        f"- **Difficulty:** {config.difficulty}\n"
        "\n"
        "## Hints\n"
        f"{hints}\n"
        "\n"
        "## Files\n"
        f"{dist}\n"
        "\n"
        "## Services\n"
        f"{services}\n"
        "\n"
        "## Flag\n"
        f"- `{config.flag or FLAG_PLACEHOLDER}`\n"
    )


def render_document(config: ChallengeConfig, kind: DocumentKind, files: Optional[Iterable[str]] = None) -> str:
    if kind == "structured":
        return render_structured(config, files)
    if kind == "summary":
        return render_summary(config, files)
    raise UnknownDocumentKind(kind)


@dataclass(frozen=True, slots=True)
class RenderedDocuments:
    """Both outputs for one state of the form, plus whether they may be exported."""

    structured: str
    summary: str
    valid: bool

    @classmethod
    def from_config(cls, config: ChallengeConfig, *, valid: bool) -> RenderedDocuments:
        return cls(
            structured=render_structured(config),
            summary=render_summary(config),
            valid=valid,
        )

    def get(self, kind: DocumentKind) -> str:
        if kind == "structured":
            return self.structured
        if kind == "summary":
            return self.summary
        raise UnknownDocumentKind(kind)
