"""Shape validation for inbound command payloads.

Schemas check the structure of raw transport data (required fields, string
lengths, enum membership, date parseability) before any use case runs.
Business invariants are checked later by the entity itself.

A schema failure raises ``CommandValidationError``, which is separate from
the domain's ``TodoValidationError`` so the two can be caught
independently. Any other exception raised while parsing propagates
unchanged.

Example usage:
    >>> service = TodoValidationService()
    >>> command = service.validate_create_command({"title": "Buy milk"})
    >>> command.priority
    <PriorityLevel.MEDIUM: 'medium'>
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Annotated, Any, ClassVar, Generic, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StringConstraints,
    field_validator,
)
from pydantic import ValidationError as PydanticValidationError

from todokit.domain.shared import Err, Ok, Result
from todokit.domain.todo import TITLE_MAX_LENGTH, TITLE_MIN_LENGTH, DomainError, PriorityLevel

from .dto import (
    CompleteTodoCommand,
    CreateTodoCommand,
    DeleteTodoCommand,
    ToggleTodoCommand,
    UpdateTodoCommand,
)

CommandT = TypeVar("CommandT")


# =============================================================================
# Errors
# =============================================================================


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in a payload.

    Attributes:
        code: Machine-readable issue type (e.g. "string_too_short").
        path: Location of the offending field, outermost first.
        message: Human-readable description.
    """

    code: str
    path: tuple[str, ...]
    message: str

    @property
    def field_path(self) -> str:
        return ".".join(self.path) or "root"


class CommandValidationError(DomainError):
    """A command payload failed shape validation."""

    code = "VALIDATION_ERROR"
    status_code = 400

    def __init__(self, issues: list[ValidationIssue], summary: str = "Validation failed") -> None:
        super().__init__(summary)
        self.summary = summary
        self.issues = issues

    @classmethod
    def from_pydantic(cls, error: PydanticValidationError, summary: str) -> "CommandValidationError":
        issues = [
            ValidationIssue(
                code=detail["type"],
                path=tuple(str(part) for part in detail["loc"]),
                message=detail["msg"],
            )
            for detail in error.errors()
        ]
        return cls(issues, summary)

    def formatted_message(self) -> str:
        """Return the summary followed by one line per issue."""
        lines = [f"{issue.message} at {'.'.join(issue.path)}" if issue.path else issue.message for issue in self.issues]
        return "\n".join([f"{self.summary}:", *lines])

    def issues_by_field(self) -> dict[str, list[str]]:
        """Group issue messages by dotted field path ("root" for the payload itself)."""
        grouped: dict[str, list[str]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.field_path, []).append(issue.message)
        return grouped

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.issues_by_field()}


# =============================================================================
# Schemas
# =============================================================================


Title = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH),
]
TodoIdField = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class CommandSchema(BaseModel):
    """Base for command schemas. Accepts camelCase or snake_case keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("due_date", mode="before", check_fields=False)
    @classmethod
    def _require_iso_string(cls, value: Any) -> Any:
        # Pydantic would also accept numbers as unix timestamps; only ISO-8601 is allowed
        if value is None or isinstance(value, (str, datetime)):
            return value
        raise ValueError("must be an ISO-8601 date string")

    def to_command(self) -> Any:
        raise NotImplementedError


class CreateTodoSchema(CommandSchema):
    title: Title
    priority: PriorityLevel = PriorityLevel.MEDIUM
    due_date: datetime | None = Field(default=None, alias="dueDate")

    def to_command(self) -> CreateTodoCommand:
        return CreateTodoCommand(title=self.title, priority=self.priority, due_date=self.due_date)


class UpdateTodoSchema(CommandSchema):
    """Update payload. An explicit ``"dueDate": null`` clears the due date."""

    id: TodoIdField
    title: Title | None = None
    completed: StrictBool | None = None
    priority: PriorityLevel | None = None
    due_date: datetime | None = Field(default=None, alias="dueDate")

    def to_command(self) -> UpdateTodoCommand:
        return UpdateTodoCommand(
            id=self.id,
            title=self.title,
            completed=self.completed,
            priority=self.priority,
            due_date=self.due_date,
            clear_due_date="due_date" in self.model_fields_set and self.due_date is None,
        )


class DeleteTodoSchema(CommandSchema):
    id: TodoIdField

    def to_command(self) -> DeleteTodoCommand:
        return DeleteTodoCommand(id=self.id)


class ToggleTodoSchema(CommandSchema):
    id: TodoIdField

    def to_command(self) -> ToggleTodoCommand:
        return ToggleTodoCommand(id=self.id)


class CompleteTodoSchema(CommandSchema):
    id: TodoIdField

    def to_command(self) -> CompleteTodoCommand:
        return CompleteTodoCommand(id=self.id)


# =============================================================================
# Services
# =============================================================================


class ValidationService(Generic[CommandT]):
    """Validates raw payloads against one schema and builds the command."""

    schema: ClassVar[type[CommandSchema]]

    def validate(self, data: Mapping[str, Any] | Any) -> CommandT:
        """Validate a payload.

        Raises:
            CommandValidationError: If the payload does not fit the schema.
        """
        try:
            parsed = self.schema.model_validate(data)
        except PydanticValidationError as e:
            raise CommandValidationError.from_pydantic(e, f"Validation failed for {type(self).__name__}") from e
        return parsed.to_command()

    def safe_validate(self, data: Mapping[str, Any] | Any) -> Result[CommandT, CommandValidationError]:
        """Like ``validate``, but return schema failures as ``Err``."""
        try:
            return Ok(self.validate(data))
        except CommandValidationError as e:
            return Err(e)


class CreateTodoValidationService(ValidationService[CreateTodoCommand]):
    schema = CreateTodoSchema


class UpdateTodoValidationService(ValidationService[UpdateTodoCommand]):
    schema = UpdateTodoSchema


class DeleteTodoValidationService(ValidationService[DeleteTodoCommand]):
    schema = DeleteTodoSchema


class ToggleTodoValidationService(ValidationService[ToggleTodoCommand]):
    schema = ToggleTodoSchema


class CompleteTodoValidationService(ValidationService[CompleteTodoCommand]):
    schema = CompleteTodoSchema


class TodoValidationService:
    """Facade over the per-command validation services."""

    def __init__(self) -> None:
        self.create = CreateTodoValidationService()
        self.update = UpdateTodoValidationService()
        self.delete = DeleteTodoValidationService()
        self.toggle = ToggleTodoValidationService()
        self.complete = CompleteTodoValidationService()

    def validate_create_command(self, data: Any) -> CreateTodoCommand:
        return self.create.validate(data)

    def validate_update_command(self, data: Any) -> UpdateTodoCommand:
        return self.update.validate(data)

    def validate_delete_command(self, data: Any) -> DeleteTodoCommand:
        return self.delete.validate(data)

    def validate_toggle_command(self, data: Any) -> ToggleTodoCommand:
        return self.toggle.validate(data)

    def validate_complete_command(self, data: Any) -> CompleteTodoCommand:
        return self.complete.validate(data)

    def safe_validate_create_command(self, data: Any) -> Result[CreateTodoCommand, CommandValidationError]:
        return self.create.safe_validate(data)

    def safe_validate_update_command(self, data: Any) -> Result[UpdateTodoCommand, CommandValidationError]:
        return self.update.safe_validate(data)

    def safe_validate_delete_command(self, data: Any) -> Result[DeleteTodoCommand, CommandValidationError]:
        return self.delete.safe_validate(data)

    def safe_validate_toggle_command(self, data: Any) -> Result[ToggleTodoCommand, CommandValidationError]:
        return self.toggle.safe_validate(data)

    def safe_validate_complete_command(self, data: Any) -> Result[CompleteTodoCommand, CommandValidationError]:
        return self.complete.safe_validate(data)
