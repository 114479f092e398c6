"""Form state management for a single challenge config."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Union

from ..config import CATEGORIES, DIFFICULTIES, FLAG_ERROR, HINT_ERROR
from ..errors import FieldValidationError, ItemValidationError
from ..logger import configure_logging
from . import validation
from .models import IDLE, SCALAR_FIELDS, ChallengeConfig, EditCursor, EditingAt, Hint

if TYPE_CHECKING:  # pragma: no cover
    from ..render import RenderedDocuments

_LOG = configure_logging()


class ChallengeFormManager:
    """High-level API over the in-memory challenge form.

    Owns the :class:`ChallengeConfig`, the staging inputs for the hint and file
    editors, and one edit cursor per list. Every operation applies immediately.
    """

    def __init__(self, config: Optional[ChallengeConfig] = None) -> None:
        self.config = config or ChallengeConfig()
        self.hint_text = ""
        self.hint_cost: Union[str, int] = ""
        self.hint_error = ""
        self.file_input = ""
        self.hint_cursor: EditCursor = IDLE
        self.file_cursor: EditCursor = IDLE
        self.flag_valid = validation.flag_valid(self.config.flag)
        self.port_error = validation.port_error(self.config.port)

    # ------------------------------------------------------------------
    # Scalar fields
    # ------------------------------------------------------------------
    def set_field(self, name: str, value: str) -> None:
        if name not in SCALAR_FIELDS:
            _LOG.info("Rejected edit of unknown field %r", name)
            raise FieldValidationError(name, "unknown field")
        if name == "category" and not validation.is_category(value):
            raise FieldValidationError(name, f"must be one of {', '.join(CATEGORIES)}")
        if name == "difficulty" and not validation.is_difficulty(value):
            raise FieldValidationError(name, f"must be one of {', '.join(DIFFICULTIES)}")

        setattr(self.config, name, value)
        if name == "flag":
            self.flag_valid = validation.flag_valid(value)
        elif name == "port":
            self.port_error = validation.port_error(value)
        _LOG.debug("Set %s", name)

    @property
    def can_export(self) -> bool:
        return self.flag_valid and not self.port_error

    def field_errors(self) -> Dict[str, str]:
        """Inline error messages keyed by the field they belong to."""
        errors: Dict[str, str] = {}
        if not self.flag_valid:
            errors["flag"] = FLAG_ERROR
        if self.port_error:
            errors["port"] = self.port_error
        if self.hint_error:
            errors["hint"] = self.hint_error
        return errors

    # ------------------------------------------------------------------
    # Hints
    # ------------------------------------------------------------------
    @property
    def hints(self) -> List[Hint]:
        return self.config.hints

    def add_or_update_hint(
        self,
        description: Optional[str] = None,
        cost: Union[str, int, None] = None,
    ) -> Hint:
        """Append a hint, or replace the one under edit.

        Arguments default to the staged ``hint_text`` and ``hint_cost``.
        """
        if description is None:
            description = self.hint_text
        if cost is None:
            cost = self.hint_cost

        parsed_cost = validation.parse_hint_cost(cost)
        if not description or parsed_cost is None:
            self.hint_error = HINT_ERROR
            _LOG.info("Rejected hint (description=%r, cost=%r)", description, cost)
            raise ItemValidationError(HINT_ERROR)

        self.hint_error = ""
        hint = Hint(description=description, cost=parsed_cost)
        if isinstance(self.hint_cursor, EditingAt):
            self.config.hints[self.hint_cursor.index] = hint
            _LOG.debug("Updated hint %s", self.hint_cursor.index)
            self.hint_cursor = IDLE
        else:
            self.config.hints.append(hint)
            _LOG.debug("Added hint %s", len(self.config.hints) - 1)
        self.hint_text = ""
        self.hint_cost = ""
        return hint

    def edit_hint(self, index: int) -> None:
        hint = self.config.hints[_checked(index, self.config.hints)]
        self.hint_text = hint.description
        self.hint_cost = hint.cost
        self.hint_cursor = EditingAt(index)

    def delete_hint(self, index: int) -> None:
        del self.config.hints[_checked(index, self.config.hints)]
        self.hint_cursor = _after_delete(self.hint_cursor, index)
        _LOG.debug("Deleted hint %s", index)

    def cancel_hint_edit(self) -> None:
        self.hint_cursor = IDLE
        self.hint_text = ""
        self.hint_cost = ""

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------
    @property
    def files(self) -> List[str]:
        return self.config.files

    def add_or_update_file(self, filename: Optional[str] = None) -> None:
        if filename is None:
            filename = self.file_input
        if not filename:
            return

        if isinstance(self.file_cursor, EditingAt):
            self.config.files[self.file_cursor.index] = filename
            _LOG.debug("Updated file %s", self.file_cursor.index)
            self.file_cursor = IDLE
        else:
            self.config.files.append(filename)
            _LOG.debug("Added file %s", len(self.config.files) - 1)
        self.file_input = ""

    def edit_file(self, index: int) -> None:
        self.file_input = self.config.files[_checked(index, self.config.files)]
        self.file_cursor = EditingAt(index)

    def delete_file(self, index: int) -> None:
        del self.config.files[_checked(index, self.config.files)]
        self.file_cursor = _after_delete(self.file_cursor, index)
        _LOG.debug("Deleted file %s", index)

    def cancel_file_edit(self) -> None:
        self.file_cursor = IDLE
        self.file_input = ""

    # ------------------------------------------------------------------
    # Outputs
    # ------------------------------------------------------------------
    def documents(self) -> RenderedDocuments:
        from ..render import RenderedDocuments

        return RenderedDocuments.from_config(self.config, valid=self.can_export)


def _checked(index: int, items: list) -> int:
    # Negative indices would silently address from the end.
    if not 0 <= index < len(items):
        raise IndexError(f"list index out of range: {index}")
    return index


def _after_delete(cursor: EditCursor, deleted: int) -> EditCursor:
    if not isinstance(cursor, EditingAt):
        return cursor
    if cursor.index == deleted:
        return IDLE
    if cursor.index > deleted:
        return EditingAt(cursor.index - 1)
    return cursor
