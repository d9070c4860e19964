"""Evaluation result type returned by the contract evaluator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one value against one contract.

    A failed result carries the contract responsible for the failure so
    callers can build a precise message with ``describe``. The result is
    truthy when the value passed, and unpacks as a ``(passed, contract)``
    pair:

        passed, failing = evaluate(value, ArrayOf[Num])
    """

    passed: bool
    value: Any
    contract: Any = None  # The failing contract, None on success

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check acceptance."""
        return self.passed

    def __iter__(self) -> Iterator[Any]:
        return iter((self.passed, self.contract))

    @property
    def failed(self) -> bool:
        return not self.passed

    @classmethod
    def success(cls, value: Any) -> EvaluationResult:
        """Create a successful evaluation result.

        Args:
            value: The accepted value

        Returns:
            Successful EvaluationResult
        """
        return cls(passed=True, value=value)

    @classmethod
    def failure(cls, value: Any, contract: Any) -> EvaluationResult:
        """Create a failed evaluation result.

        Args:
            value: The rejected value
            contract: The contract that rejected it

        Returns:
            Failed EvaluationResult
        """
        return cls(passed=False, value=value, contract=contract)
