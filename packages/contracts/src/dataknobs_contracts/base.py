"""Base classes shared by every contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ContractBase:
    """Common behavior for every contract object.

    Provides the bracket construction shorthand (``Or[Num, str]`` is the
    same as ``Or(Num, str)``) and seals instances once ``__init__`` has
    finished, so a contract never changes after construction.
    """

    _sealed = False

    def __class_getitem__(cls, params: Any) -> ContractBase:
        if isinstance(params, tuple):
            return cls(*params)
        return cls(params)

    def __setattr__(self, name: str, value: Any) -> None:
        if self._sealed:
            raise AttributeError(
                f"{type(self).__name__} contracts are immutable; cannot set '{name}'"
            )
        object.__setattr__(self, name, value)

    def _seal(self) -> None:
        object.__setattr__(self, "_sealed", True)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}: {self}>"


class Contract(ContractBase, ABC):
    """A predicate over a single value, composable with ``|``, ``&`` and ``~``."""

    @abstractmethod
    def is_valid(self, value: Any) -> bool:
        """Check a value against this contract.

        Args:
            value: Value to check

        Returns:
            True if the value satisfies the contract
        """
        pass

    @abstractmethod
    def __str__(self) -> str:
        """Canonical description used in diagnostics."""
        pass

    def __or__(self, other: Any) -> Contract:
        """Combine with OR: at least one contract must pass."""
        from .combinators import Or

        if type(self) is Or:
            return Or(*self.contracts, other)
        if type(other) is Or:
            return Or(self, *other.contracts)
        return Or(self, other)

    def __ror__(self, other: Any) -> Contract:
        from .combinators import Or

        if type(self) is Or:
            return Or(other, *self.contracts)
        return Or(other, self)

    def __and__(self, other: Any) -> Contract:
        """Combine with AND: both contracts must pass."""
        from .combinators import And

        if type(self) is And:
            return And(*self.contracts, other)
        if type(other) is And:
            return And(self, *other.contracts)
        return And(self, other)

    def __rand__(self, other: Any) -> Contract:
        from .combinators import And

        if type(self) is And:
            return And(other, *self.contracts)
        return And(other, self)

    def __invert__(self) -> Contract:
        """Negate this contract."""
        from .combinators import Not

        return Not(self)
