"""Logical combinators: Or, Xor, And, Not and Maybe.

Every combinator takes one or more child contracts (any representation
``evaluate`` accepts) and checks them through the evaluator, so children
can themselves be combinators, classes, patterns, or literals.

Example:
    ```python
    from dataknobs_contracts import And, Maybe, Nat, Or, evaluate

    port = And(Nat, lambda v: v < 65536)
    evaluate(8080, port).passed           # True
    evaluate(None, Maybe(port)).passed    # True
    evaluate("x", Or(int, float)).passed  # False
    ```
"""

from __future__ import annotations

from typing import Any

from .base import Contract
from .description import describe_list, join_descriptions
from .evaluator import is_valid
from .exceptions import MalformedContractError


class CompositeContract(Contract):
    """A contract built from a non-empty, ordered sequence of children."""

    connective = ""

    def __init__(self, *contracts: Any):
        """Initialize with child contracts.

        Args:
            *contracts: Child contracts, in evaluation and rendering order

        Raises:
            MalformedContractError: If no children are given
        """
        if not contracts:
            raise MalformedContractError(
                f"{type(self).__name__} requires at least one contract",
                context={"contract": type(self).__name__},
            )
        self._contracts = tuple(contracts)
        self._seal()

    @property
    def contracts(self) -> tuple[Any, ...]:
        return self._contracts

    def __str__(self) -> str:
        return join_descriptions(self._contracts, self.connective)


class Or(CompositeContract):
    """At least one contract must pass.

    Children are tried in construction order and evaluation stops at the
    first one that accepts the value.
    Example: ``Or[int, float]``
    """

    connective = "or"

    def is_valid(self, value: Any) -> bool:
        return any(is_valid(value, contract) for contract in self._contracts)


class Xor(CompositeContract):
    """Exactly one contract must pass.

    Every child is evaluated, since the number of acceptances decides.
    Example: ``Xor[Pos, Neg]``
    """

    connective = "xor"

    def is_valid(self, value: Any) -> bool:
        results = [is_valid(value, contract) for contract in self._contracts]
        return results.count(True) == 1


class And(CompositeContract):
    """All contracts must pass; evaluation stops at the first rejection.

    Example: ``And[Nat, Or[int, float]]``
    """

    connective = "and"

    def is_valid(self, value: Any) -> bool:
        return all(is_valid(value, contract) for contract in self._contracts)


class Not(CompositeContract):
    """Every contract must fail for the value.

    Example: ``Not[None]``
    """

    def is_valid(self, value: Any) -> bool:
        return not any(is_valid(value, contract) for contract in self._contracts)

    def __str__(self) -> str:
        return f"a value that is none of {describe_list(self._contracts)}"


class Maybe(Or):
    """The contracts pass, or the value is None.

    ``Maybe(Num)`` is ``Or(Num, None)``: the absent branch is appended as
    the last child and evaluated by ``Or``.
    """

    def __init__(self, *contracts: Any):
        if not contracts:
            raise MalformedContractError(
                "Maybe requires at least one contract", context={"contract": "Maybe"}
            )
        super().__init__(*contracts, None)
