"""The single validation entry point for every contract representation.

``evaluate`` normalizes whatever it is given as a contract and checks the
value against it, in this order:

1. Predicate objects: any ``Contract``, any object with an
   ``is_valid(value)`` method, or a class whose ``is_valid`` is a
   classmethod/staticmethod.
2. Classes: ``isinstance(value, contract)``, subclasses included.
3. Compiled regular expressions: searched in ``str(value)``.
4. List/tuple literals: positional check of a same-length list or tuple.
5. Dict literals: each key of the literal checked against ``value.get(key)``.
6. Plain functions, lambdas and partials: truthiness of ``contract(value)``.
7. Anything else: ``value == contract``.

Combinators recurse through ``evaluate``, so nesting works everywhere.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from functools import partial
from re import Pattern as RegexPattern
from typing import Any

from .base import Contract
from .result import EvaluationResult


def evaluate(value: Any, contract: Any) -> EvaluationResult:
    """Evaluate a value against a contract.

    Args:
        value: Value to check
        contract: Any contract representation

    Returns:
        EvaluationResult; on failure it names ``contract`` as the failing contract
    """
    if _check(value, contract):
        return EvaluationResult.success(value)
    return EvaluationResult.failure(value, contract)


def is_valid(value: Any, contract: Any) -> bool:
    """Boolean shorthand for ``evaluate(value, contract).passed``."""
    return _check(value, contract)


def _check(value: Any, contract: Any) -> bool:
    if isinstance(contract, Contract):
        return bool(contract.is_valid(value))

    predicate = _predicate_of(contract)
    if predicate is not None:
        return bool(predicate(value))

    if isinstance(contract, type):
        return isinstance(value, contract)

    if isinstance(contract, RegexPattern):
        return contract.search(str(value)) is not None

    if isinstance(contract, (list, tuple)):
        return (
            isinstance(value, (list, tuple))
            and len(value) == len(contract)
            and all(_check(v, c) for v, c in zip(value, contract))
        )

    if isinstance(contract, dict):
        return isinstance(value, Mapping) and all(
            _check(value.get(key), c) for key, c in contract.items()
        )

    if inspect.isroutine(contract) or isinstance(contract, partial):
        return bool(contract(value))

    return _equals(value, contract)


def _predicate_of(contract: Any) -> Any:
    """Return the ``is_valid`` check a user-defined contract offers, if any."""
    if isinstance(contract, type):
        raw = inspect.getattr_static(contract, "is_valid", None)
        if isinstance(raw, (classmethod, staticmethod)):
            return getattr(contract, "is_valid")
        return None
    predicate = getattr(contract, "is_valid", None)
    return predicate if callable(predicate) else None


def _equals(value: Any, contract: Any) -> bool:
    result = value == contract
    try:
        return bool(result)
    except ValueError:
        # Element-wise comparisons (e.g. numpy arrays) have no single truth value
        return False
