"""Atomic contracts and value checks.

Atomic contracts take no parameters and are exported as ready-made
instances::

    evaluate(3, Nat)                 # passes
    evaluate(-1.5, Pos)              # fails
    evaluate(True, Num)              # fails, booleans are not numbers here

The value checks (``RespondTo``, ``Send``, ``Exactly``, ``Eq``) are built with the
names, class, or reference they check against.
"""

from __future__ import annotations

import inspect
import logging
from decimal import Decimal
from numbers import Integral, Number, Real
from typing import Any as AnyType

from .base import Contract
from .exceptions import MalformedContractError

logger = logging.getLogger(__name__)

_MISSING = object()


def _is_number(value: AnyType) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _is_ordered_number(value: AnyType) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return not value.is_nan()
    return isinstance(value, Real)


class AtomicContract(Contract):
    """A parameterless contract rendered by its name."""

    name = ""

    def __init__(self) -> None:
        self._seal()

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return self.name


class NumContract(AtomicContract):
    """Value is a number of any kind."""

    name = "Num"

    def is_valid(self, value: AnyType) -> bool:
        return _is_number(value)


class PosContract(AtomicContract):
    """Value is a number strictly greater than zero."""

    name = "Pos"

    def is_valid(self, value: AnyType) -> bool:
        return _is_ordered_number(value) and value > 0


class NegContract(AtomicContract):
    """Value is a number strictly less than zero."""

    name = "Neg"

    def is_valid(self, value: AnyType) -> bool:
        return _is_ordered_number(value) and value < 0


class NatContract(AtomicContract):
    """Value is a natural number (a non-negative integer)."""

    name = "Nat"

    def is_valid(self, value: AnyType) -> bool:
        return (
            value is not None
            and isinstance(value, Integral)
            and not isinstance(value, bool)
            and value >= 0
        )


class BoolContract(AtomicContract):
    """Value is exactly True or False."""

    name = "Bool"

    def is_valid(self, value: AnyType) -> bool:
        return value is True or value is False


class AnyContract(AtomicContract):
    """Passes for any value."""

    name = "Any"

    def is_valid(self, value: AnyType) -> bool:
        return True


class NothingContract(AtomicContract):
    """Fails for any value."""

    name = "None"

    def is_valid(self, value: AnyType) -> bool:
        return False


Num = NumContract()
Pos = PosContract()
Neg = NegContract()
Nat = NatContract()
Bool = BoolContract()
Any = AnyContract()
Nothing = NothingContract()


def _check_names(kind: str, names: tuple[AnyType, ...]) -> tuple[str, ...]:
    if not names:
        raise MalformedContractError(
            f"{kind} requires at least one name", context={"contract": kind}
        )
    bad = [n for n in names if not isinstance(n, str)]
    if bad:
        raise MalformedContractError(
            f"{kind} names must be strings, got {bad!r}",
            context={"contract": kind, "names": list(names)},
        )
    return names


class RespondTo(Contract):
    """Value exposes every named attribute or method.

    Example: ``RespondTo["read", "close"]``
    """

    def __init__(self, *names: str):
        self._names = _check_names("RespondTo", names)
        self._seal()

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def is_valid(self, value: AnyType) -> bool:
        return all(hasattr(value, name) for name in self._names)

    def __str__(self) -> str:
        return f"a value that responds to {list(self._names)!r}"


class Send(Contract):
    """Every named zero-argument query on the value returns a truthy result.

    Each name is looked up on the value; callables are invoked with no
    arguments and plain attributes are used as they are. A name the value
    does not have raises ``MalformedContractError``.

    Example: ``Send["is_valid"]``
    """

    def __init__(self, *names: str):
        self._names = _check_names("Send", names)
        self._seal()

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def is_valid(self, value: AnyType) -> bool:
        for name in self._names:
            # Existence is checked without running getters; getter errors propagate
            if inspect.getattr_static(value, name, _MISSING) is _MISSING and not hasattr(
                value, name
            ):
                raise MalformedContractError(
                    f"Send[{name!r}] cannot query {type(value).__name__}: no such attribute",
                    context={"contract": "Send", "name": name, "type": type(value).__name__},
                )
            attr = getattr(value, name)
            result = attr() if callable(attr) else attr
            if not isinstance(result, bool):
                logger.debug(
                    f"Send[{name!r}] returned {type(result).__name__}, using its truthiness"
                )
            if not result:
                return False
        return True

    def __str__(self) -> str:
        return f"a value that returns true for all of {list(self._names)!r}"


class Exactly(Contract):
    """Value's type is exactly the given class; subclasses are rejected.

    Example: ``Exactly[int]`` rejects ``True`` while ``int`` accepts it.
    """

    def __init__(self, cls: type):
        if not isinstance(cls, type):
            raise MalformedContractError(
                f"Exactly requires a class, got {cls!r}", context={"contract": "Exactly"}
            )
        self._cls = cls
        self._seal()

    @property
    def cls(self) -> type:
        return self._cls

    def is_valid(self, value: AnyType) -> bool:
        return type(value) is self._cls

    def __str__(self) -> str:
        return f"exactly {self._cls.__name__}"


class Eq(Contract):
    """Value is the very same object as the reference (identity, not equality).

    Example: ``Eq[SENTINEL]``
    """

    def __init__(self, reference: AnyType):
        self._reference = reference
        self._seal()

    def __class_getitem__(cls, reference: AnyType) -> Eq:
        # A tuple reference is one value, not several arguments
        return cls(reference)

    @property
    def reference(self) -> AnyType:
        return self._reference

    def is_valid(self, value: AnyType) -> bool:
        return value is self._reference

    def __str__(self) -> str:
        return f"to be equal to {self._reference!r}"


__all__ = [
    "AtomicContract",
    "Num",
    "Pos",
    "Neg",
    "Nat",
    "Bool",
    "Any",
    "Nothing",
    "RespondTo",
    "Send",
    "Exactly",
    "Eq",
]
