"""Todo value objects.

Immutable, self-validating wrappers around the primitives a todo is made
of. Construction with an invalid value raises a typed error from
``todokit.domain.todo.exceptions``; a constructed value object is always
valid.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar
from uuid import uuid4

from .exceptions import InvalidTodoIdError, InvalidTodoPriorityError, InvalidTodoTitleError

TITLE_MIN_LENGTH = 2
TITLE_MAX_LENGTH = 255


@dataclass(frozen=True)
class TodoTitle:
    """Title of a todo.

    The stored value is the trimmed input. Its length must be between
    ``TITLE_MIN_LENGTH`` and ``TITLE_MAX_LENGTH`` characters.

    Example:
        TodoTitle("  Buy milk ").value  # -> "Buy milk"
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidTodoTitleError("cannot be empty")

        trimmed = self.value.strip()
        if len(trimmed) > TITLE_MAX_LENGTH:
            raise InvalidTodoTitleError(f"cannot exceed {TITLE_MAX_LENGTH} characters")
        if len(trimmed) < TITLE_MIN_LENGTH:
            raise InvalidTodoTitleError(f"must be at least {TITLE_MIN_LENGTH} characters long")

        # Frozen dataclass: bypass __setattr__ to store the normalized form
        object.__setattr__(self, "value", trimmed)

    def equals(self, other: "TodoTitle") -> bool:
        return self.value == other.value

    def __str__(self) -> str:
        return self.value


class PriorityLevel(str, Enum):
    """Allowed priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


_PRIORITY_RANK = {
    PriorityLevel.LOW: 1,
    PriorityLevel.MEDIUM: 2,
    PriorityLevel.HIGH: 3,
}


@dataclass(frozen=True)
class TodoPriority:
    """Priority of a todo, defaulting to medium.

    Accepts either a ``PriorityLevel`` or its string value. Ordering between
    priorities is rank-based through ``numeric_value``, never lexical.
    """

    level: PriorityLevel = PriorityLevel.MEDIUM

    def __post_init__(self) -> None:
        try:
            level = PriorityLevel(self.level)
        except ValueError:
            raise InvalidTodoPriorityError(self.level) from None
        object.__setattr__(self, "level", level)

    @property
    def numeric_value(self) -> int:
        """Rank of the priority: low=1, medium=2, high=3."""
        return _PRIORITY_RANK[self.level]

    def is_high(self) -> bool:
        return self.level is PriorityLevel.HIGH

    def equals(self, other: "TodoPriority") -> bool:
        return self.level == other.level

    def __str__(self) -> str:
        return self.level.value


@dataclass(frozen=True)
class IdFormat:
    """An accepted identifier format.

    Attributes:
        name: Short name reported by ``TodoId.id_type`` (e.g. "uuid").
        matcher: Predicate returning True when a string has this format.
    """

    name: str
    matcher: Callable[[str], bool]

    @classmethod
    def from_regex(cls, name: str, pattern: str) -> "IdFormat":
        """Build a format from a full-match regular expression.

        Args:
            name: Format name.
            pattern: Regex the whole identifier must match (case-insensitive).

        Returns:
            New IdFormat using the compiled pattern as matcher
        """
        compiled = re.compile(pattern, re.IGNORECASE)
        return cls(name=name, matcher=lambda value: compiled.fullmatch(value) is not None)


UUID_FORMAT = IdFormat.from_regex("uuid", r"[0-9a-f]{32}")
MONGO_OBJECT_ID_FORMAT = IdFormat.from_regex("mongodb", r"[0-9a-f]{24}")


@dataclass(frozen=True)
class TodoId:
    """Opaque todo identifier.

    The value must match one of the registered formats, tried in
    registration order. The first match is recorded in ``id_type`` so
    storage adapters can dispatch on it. New formats can be added at
    startup with ``TodoId.register_format``.

    Example:
        TodoId.register_format(IdFormat.from_regex("numeric", r"\\d+"))
        TodoId("42").id_type  # -> "numeric"
    """

    value: str
    id_type: str = field(init=False, compare=False)

    _formats: ClassVar[list[IdFormat]] = [UUID_FORMAT, MONGO_OBJECT_ID_FORMAT]

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise InvalidTodoIdError("must be a non-empty string")

        matched = self._match_format(self.value)
        if matched is None:
            raise InvalidTodoIdError(
                f"must be a valid format. Supported formats: {', '.join(self.supported_formats())}"
            )
        object.__setattr__(self, "id_type", matched.name)

    @classmethod
    def _match_format(cls, value: str) -> IdFormat | None:
        for fmt in cls._formats:
            if fmt.matcher(value):
                return fmt
        return None

    @classmethod
    def register_format(cls, fmt: IdFormat) -> None:
        """Append an accepted format; it is tried after the existing ones."""
        cls._formats.append(fmt)

    @classmethod
    def supported_formats(cls) -> list[str]:
        return [fmt.name for fmt in cls._formats]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check a raw string without raising."""
        return isinstance(value, str) and cls._match_format(value) is not None

    def is_uuid(self) -> bool:
        return self.id_type == UUID_FORMAT.name

    def is_mongo_object_id(self) -> bool:
        return self.id_type == MONGO_OBJECT_ID_FORMAT.name

    def equals(self, other: "TodoId") -> bool:
        return self.value == other.value

    def __str__(self) -> str:
        return self.value


def generate_todo_id() -> str:
    """Generate a fresh identifier in the default ``uuid`` format."""
    return uuid4().hex
