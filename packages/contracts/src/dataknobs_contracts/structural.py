"""Structural combinators: contracts over the contents of containers.

``CollectionOf`` checks every element of a collection, ``HashOf`` every key
and value of a mapping. ``Args`` and ``Func`` are markers that carry
contracts for a call-site adapter (variadic tails and callable shapes).

Example:
    ```python
    from dataknobs_contracts import ArrayOf, HashOf, Num, evaluate

    evaluate([1, 2.5, 3], ArrayOf[Num]).passed       # True
    evaluate({"a": 1}, HashOf[str: Num]).passed      # True
    evaluate({"a": "1"}, HashOf({str: Num})).passed  # False
    ```
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .base import Contract
from .description import describe
from .evaluator import is_valid
from .exceptions import MalformedContractError
from .loader import load_class

logger = logging.getLogger(__name__)

_MISSING = object()


def _check_collection_class(collection_class: Any) -> type:
    if not isinstance(collection_class, type) or not issubclass(collection_class, Iterable):
        raise MalformedContractError(
            f"Collection kind must be an iterable class, got {collection_class!r}",
            context={"contract": "CollectionOf", "kind": repr(collection_class)},
        )
    return collection_class


def _load_class(class_path: str) -> type:
    try:
        cls = load_class(class_path)
    except ImportError as e:
        raise MalformedContractError(
            f"Unrecognized collection kind {class_path!r}: {e}",
            context={"contract": "CollectionOf", "kind": class_path},
        ) from e
    return _check_collection_class(cls)


class CollectionOf(Contract):
    """Value is a collection of the given kind whose elements all pass.

    The kind check comes first: a tuple is not an ``ArrayOf[Num]`` even if
    every element is a number.
    Example: ``CollectionOf[list, Num]``
    """

    def __init__(self, collection_class: type, contract: Any):
        """Initialize with a collection kind and an element contract.

        Args:
            collection_class: Iterable class the value must be an instance of
            contract: Contract every element must satisfy

        Raises:
            MalformedContractError: If collection_class is not an iterable class
        """
        self._collection_class = _check_collection_class(collection_class)
        self._contract = contract
        self._seal()

    @property
    def collection_class(self) -> type:
        return self._collection_class

    @property
    def contract(self) -> Any:
        return self._contract

    def is_valid(self, value: Any) -> bool:
        if not isinstance(value, self._collection_class):
            return False
        return all(is_valid(element, self._contract) for element in value)

    def __str__(self) -> str:
        return f"a collection {self._collection_class.__name__} of {describe(self._contract)}"


class CollectionFactory:
    """Builds ``CollectionOf`` contracts for one fixed collection kind.

    The kind may be a class or a dotted import path. A path is resolved,
    and the optional ``before_new`` hook is run, exactly once before the
    first contract is built, even when several threads build contracts at
    the same time. If either fails, the error propagates and the next call
    tries again; a hook that already succeeded is not run a second time.

    Example:
        ```python
        ArrayOf = CollectionFactory(list)
        ArrayOf[Num]            # same as CollectionOf(list, Num)
        NDArrayOf = CollectionFactory("numpy.ndarray")
        ```
    """

    def __init__(
        self,
        collection_class: type | str,
        before_new: Callable[[], Any] | None = None,
    ):
        """Initialize the factory.

        Args:
            collection_class: Iterable class, or dotted path resolved on first use
            before_new: Optional hook run once before the first construction

        Raises:
            MalformedContractError: If a class is given that is not iterable
        """
        if not isinstance(collection_class, str):
            _check_collection_class(collection_class)
        self._collection_class = collection_class
        self._before_new = before_new
        self._lock = threading.Lock()
        self._hook_done = False
        self._initialized = False

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def collection_class(self) -> type | str:
        """The collection kind; still a dotted path until first construction."""
        return self._collection_class

    def _initialize(self) -> None:
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            if self._before_new is not None and not self._hook_done:
                self._before_new()
                self._hook_done = True
            if isinstance(self._collection_class, str):
                self._collection_class = _load_class(self._collection_class)
                logger.info(f"Resolved collection kind: {self._collection_class.__name__}")
            self._initialized = True

    def new(self, contract: Any) -> CollectionOf:
        """Build a ``CollectionOf`` for this factory's kind.

        Args:
            contract: Contract every element must satisfy

        Returns:
            CollectionOf contract
        """
        self._initialize()
        return CollectionOf(self._collection_class, contract)

    __call__ = new

    def __getitem__(self, contract: Any) -> CollectionOf:
        return self.new(contract)

    def __repr__(self) -> str:
        kind = self._collection_class
        name = kind if isinstance(kind, str) else kind.__name__
        return f"<CollectionFactory: {name}>"


CollectionOf.Factory = CollectionFactory

ArrayOf = CollectionFactory(list)
SetOf = CollectionFactory(set)
TupleOf = CollectionFactory(tuple)
NDArrayOf = CollectionFactory("numpy.ndarray")


class HashOf(Contract):
    """Value is a mapping whose keys and values all pass their contracts.

    Accepts two contracts, or one single-entry dict literal naming both:
    ``HashOf(str, Num)``, ``HashOf({str: Num})`` and ``HashOf[str: Num]``
    are the same contract.
    """

    def __init__(self, key: Any, value: Any = _MISSING):
        """Initialize with key and value contracts.

        Args:
            key: Key contract, or a one-entry dict ``{key_contract: value_contract}``
            value: Value contract (omit when passing a dict)

        Raises:
            MalformedContractError: If a dict literal does not have exactly one entry
        """
        if value is _MISSING:
            if not isinstance(key, dict) or len(key) != 1:
                raise MalformedContractError(
                    "HashOf needs a key and a value contract, or a single-entry dict",
                    context={"contract": "HashOf", "given": repr(key)},
                )
            ((key, value),) = key.items()
        self._key = key
        self._value = value
        self._seal()

    def __class_getitem__(cls, params: Any) -> HashOf:
        if isinstance(params, slice):
            if params.step is not None:
                raise MalformedContractError(
                    "HashOf[key: value] takes exactly one key and one value contract",
                    context={"contract": "HashOf"},
                )
            return cls(params.start, params.stop)
        if isinstance(params, tuple):
            if any(isinstance(p, slice) for p in params):
                raise MalformedContractError(
                    "HashOf[key: value] takes exactly one key and one value contract",
                    context={"contract": "HashOf"},
                )
            return cls(*params)
        return cls(params)

    @property
    def key(self) -> Any:
        return self._key

    @property
    def value(self) -> Any:
        return self._value

    def is_valid(self, value: Any) -> bool:
        if not isinstance(value, Mapping):
            return False
        keys_match = all(is_valid(k, self._key) for k in value.keys())
        return keys_match and all(is_valid(v, self._value) for v in value.values())

    def __str__(self) -> str:
        return f"Hash<{describe(self._key)}, {describe(self._value)}>"


class Args(Contract):
    """Marks a contract as applying to each element of a variadic tail.

    The marker adds no checking of its own: a value evaluated against
    ``Args[c]`` is evaluated against ``c``.
    Example: ``Args[Or[str, Num]]``
    """

    def __init__(self, contract: Any):
        self._contract = contract
        self._seal()

    @property
    def contract(self) -> Any:
        return self._contract

    def is_valid(self, value: Any) -> bool:
        return is_valid(value, self._contract)

    def __str__(self) -> str:
        return f"Args[{describe(self._contract)}]"


class Func(Contract):
    """Carries the parameter and return contracts of a callable.

    The last contract describes the return value, the others the
    parameters in order. The callable is never invoked here; as a contract
    on its own ``Func`` accepts any callable value.
    Example: ``Func[Num, Num]`` (takes a number, returns a number)
    """

    def __init__(self, *contracts: Any):
        if not contracts:
            raise MalformedContractError(
                "Func requires at least a return contract", context={"contract": "Func"}
            )
        self._contracts = tuple(contracts)
        self._seal()

    @property
    def contracts(self) -> tuple[Any, ...]:
        return self._contracts

    @property
    def parameter_contracts(self) -> tuple[Any, ...]:
        return self._contracts[:-1]

    @property
    def return_contract(self) -> Any:
        return self._contracts[-1]

    def is_valid(self, value: Any) -> bool:
        return callable(value)

    def __str__(self) -> str:
        return "Func[" + ", ".join(describe(c) for c in self._contracts) + "]"
