"""Shared domain building blocks for todokit.

This package provides primitives used across the domain and application
layers:

- Result monad for failures returned as values
- Specification base classes for composable predicates

Example usage:
    >>> from todokit.domain.shared import Ok, Err, is_ok, PredicateSpecification
    >>>
    >>> short = PredicateSpecification(lambda todo: len(todo.title_value) < 10)
"""

from todokit.domain.shared.result import (
    Err,
    Ok,
    Result,
    flat_map,
    is_err,
    is_ok,
)
from todokit.domain.shared.specification import (
    AndSpecification,
    NotSpecification,
    OrSpecification,
    PredicateSpecification,
    Specification,
)

__all__ = [
    # Result monad
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "flat_map",
    # Specifications
    "Specification",
    "AndSpecification",
    "OrSpecification",
    "NotSpecification",
    "PredicateSpecification",
]
