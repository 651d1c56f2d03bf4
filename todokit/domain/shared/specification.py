"""Composable predicate objects.

A specification answers one question about a candidate: does it match?
Specifications are independent of storage, so a repository can always
evaluate one in memory by filtering a full fetch.

Example usage:
    >>> from todokit.domain.todo.specifications import (
    ...     ActiveTodoSpecification,
    ...     HighPriorityTodoSpecification,
    ... )
    >>> urgent = ActiveTodoSpecification() & HighPriorityTodoSpecification()
    >>> [todo for todo in todos if urgent.is_satisfied_by(todo)]
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """Base class for all specifications.

    Subclasses implement ``is_satisfied_by``. Composition methods return
    new specification objects; operands are left untouched.
    """

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool:
        """Return True if the candidate matches this specification."""

    def and_(self, other: "Specification[T]") -> "Specification[T]":
        return AndSpecification(self, other)

    def or_(self, other: "Specification[T]") -> "Specification[T]":
        return OrSpecification(self, other)

    def not_(self) -> "Specification[T]":
        return NotSpecification(self)

    def __and__(self, other: "Specification[T]") -> "Specification[T]":
        return self.and_(other)

    def __or__(self, other: "Specification[T]") -> "Specification[T]":
        return self.or_(other)

    def __invert__(self) -> "Specification[T]":
        return self.not_()

    def filter(self, candidates: Iterable[T]) -> list[T]:
        """Return the candidates that satisfy this specification, in order."""
        return [candidate for candidate in candidates if self.is_satisfied_by(candidate)]


class AndSpecification(Specification[T]):
    """Satisfied when both operands are satisfied."""

    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)


class OrSpecification(Specification[T]):
    """Satisfied when either operand is satisfied."""

    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        self.left = left
        self.right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)


class NotSpecification(Specification[T]):
    """Satisfied when the wrapped specification is not."""

    def __init__(self, spec: Specification[T]) -> None:
        self.spec = spec

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.spec.is_satisfied_by(candidate)


class PredicateSpecification(Specification[T]):
    """Adapts a plain callable into a specification.

    Lets calling code express ad-hoc criteria without a subclass:

        PredicateSpecification(lambda todo: "milk" in todo.title_value)
    """

    def __init__(self, predicate: Callable[[T], bool]) -> None:
        self.predicate = predicate

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self.predicate(candidate))
