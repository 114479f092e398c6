"""Data models for the challenge form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from ..config import CATEGORIES, DEFAULT_CATEGORY, DEFAULT_DIFFICULTY, DIFFICULTIES, HINT_ERROR
from ..errors import FieldValidationError, ItemValidationError
from . import validation

SCALAR_FIELDS = ("name", "author", "category", "difficulty", "description", "discord", "flag", "port")


@dataclass(slots=True)
class Hint:
    description: str
    cost: int

    def to_dict(self) -> Dict[str, Any]:
        return {"description": self.description, "cost": self.cost}


@dataclass(slots=True)
class ChallengeConfig:
    """In-memory state of one challenge being described."""

    name: str = ""
    author: str = ""
    category: str = DEFAULT_CATEGORY
    difficulty: str = DEFAULT_DIFFICULTY
    description: str = ""
    discord: str = ""
    flag: str = ""
    port: str = ""
    hints: List[Hint] = field(default_factory=list)
    requirements: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the config to a plain dictionary, lists copied."""
        return {
            "name": self.name,
            "author": self.author,
            "category": self.category,
            "difficulty": self.difficulty,
            "description": self.description,
            "discord": self.discord,
            "flag": self.flag,
            "port": self.port,
            "hints": [hint.to_dict() for hint in self.hints],
            "requirements": list(self.requirements),
            "files": list(self.files),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ChallengeConfig:
        """Create a config from a dictionary such as a parsed ``chall.json``.

        Missing keys fall back to the defaults. An integer port is stored in
        its string form, the way the form holds it. Hints, category and
        difficulty get the same checks the form applies to edits.
        """
        category = data.get("category", DEFAULT_CATEGORY)
        if not validation.is_category(category):
            raise FieldValidationError("category", f"must be one of {', '.join(CATEGORIES)}")
        difficulty = data.get("difficulty", DEFAULT_DIFFICULTY)
        if not validation.is_difficulty(difficulty):
            raise FieldValidationError("difficulty", f"must be one of {', '.join(DIFFICULTIES)}")

        hints = []
        for item in data.get("hints", []):
            description = item.get("description", "")
            cost = validation.parse_hint_cost(item.get("cost"))
            if not description or cost is None:
                raise ItemValidationError(HINT_ERROR)
            hints.append(Hint(description=description, cost=cost))

        port = data.get("port")
        return cls(
            name=data.get("name", ""),
            author=data.get("author", ""),
            category=category,
            difficulty=difficulty,
            description=data.get("description", ""),
            discord=data.get("discord", ""),
            flag=data.get("flag", ""),
            port="" if port is None else str(port),
            hints=hints,
            requirements=list(data.get("requirements", [])),
            files=list(data.get("files", [])),
        )


@dataclass(frozen=True, slots=True)
class Idle:
    """No list item is being edited."""

    @property
    def index(self) -> None:
        return None


@dataclass(frozen=True, slots=True)
class EditingAt:
    """The list item at ``index`` is loaded into the staging fields."""

    index: int


EditCursor = Union[Idle, EditingAt]

IDLE = Idle()
