"""Runtime value contracts: atomic predicates and composable combinators.

This package provides:
- Atomic contracts (Num, Pos, Neg, Nat, Bool, Any, Nothing)
- Logical combinators (Or, Xor, And, Not, Maybe) with |, & and ~ operators
- Structural combinators (CollectionOf, ArrayOf, SetOf, HashOf, Args, Func)
- A single evaluation entry point and canonical descriptions for diagnostics
- A factory that builds contracts from YAML/dict configuration

Example:
    ```python
    from dataknobs_contracts import ArrayOf, HashOf, Maybe, Num, describe, evaluate

    contract = HashOf[str: Maybe(ArrayOf[Num])]
    passed, failing = evaluate({"scores": [1, 2.5]}, contract)
    if not passed:
        raise ValueError(f"Expected {describe(failing)}")
    ```
"""

from .base import Contract, ContractBase
from .builtin import (
    Any,
    AtomicContract,
    Bool,
    Eq,
    Exactly,
    Nat,
    Neg,
    Nothing,
    Num,
    Pos,
    RespondTo,
    Send,
)
from .combinators import And, CompositeContract, Maybe, Not, Or, Xor
from .description import describe
from .evaluator import evaluate, is_valid
from .exceptions import ContractConfigError, ContractsError, MalformedContractError
from .factory import ContractFactory, contract_factory
from .result import EvaluationResult
from .structural import (
    Args,
    ArrayOf,
    CollectionFactory,
    CollectionOf,
    Func,
    HashOf,
    NDArrayOf,
    SetOf,
    TupleOf,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Entry points
    "evaluate",
    "is_valid",
    "describe",
    "EvaluationResult",
    # Base classes
    "ContractBase",
    "Contract",
    "AtomicContract",
    "CompositeContract",
    # Atomic contracts
    "Num",
    "Pos",
    "Neg",
    "Nat",
    "Bool",
    "Any",
    "Nothing",
    # Value checks
    "RespondTo",
    "Send",
    "Exactly",
    "Eq",
    # Logical combinators
    "Or",
    "Xor",
    "And",
    "Not",
    "Maybe",
    # Structural combinators
    "CollectionOf",
    "CollectionFactory",
    "ArrayOf",
    "SetOf",
    "TupleOf",
    "NDArrayOf",
    "HashOf",
    "Args",
    "Func",
    # Exceptions
    "ContractsError",
    "MalformedContractError",
    "ContractConfigError",
    # Factories
    "ContractFactory",
    "contract_factory",
]
