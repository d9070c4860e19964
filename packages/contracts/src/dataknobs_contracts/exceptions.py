"""Exception hierarchy for the dataknobs_contracts package.

Only construction-time defects are raised as exceptions. A value that
fails a contract is never an exception inside this package: ``evaluate``
returns a failed :class:`~dataknobs_contracts.result.EvaluationResult` and
the caller decides whether to raise, log, or abort.

Example:
    ```python
    from dataknobs_contracts import Or, MalformedContractError

    try:
        Or()
    except MalformedContractError as e:
        logger.error(f"Bad contract: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from typing import Any, Dict


class ContractsError(Exception):
    """Base exception for the contracts package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (contract kind, names, etc.)
        details: Alternative to context (both are supported)
    """

    def __init__(
        self,
        message: str,
        context: Dict[str, Any] | None = None,
        details: Dict[str, Any] | None = None,
    ):
        """Initialize the exception with optional context.

        Args:
            message: Error message
            context: Optional context dictionary
            details: Optional details dictionary (takes precedence over context)
        """
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class MalformedContractError(ContractsError, ValueError):
    """Raised when a contract is built from invalid parts.

    Common scenarios include:
    - A combinator constructed with no children (``Or()``, ``And()``)
    - A ``HashOf`` literal with zero or several entries
    - A collection factory bound to something that is not an iterable class
    - ``Send`` probing a capability the value does not have

    Example:
        ```python
        raise MalformedContractError(
            "Or requires at least one contract",
            context={"contract": "Or"}
        )
        ```
    """

    pass


class ContractConfigError(ContractsError):
    """Raised when a contract definition in configuration cannot be built.

    Example:
        ```python
        raise ContractConfigError(
            "Unknown contract type: 'nmu'",
            context={"type": "nmu", "available": ["Num", "Pos"]}
        )
        ```
    """

    pass
