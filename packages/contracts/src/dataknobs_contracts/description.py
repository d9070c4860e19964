"""Canonical description strings for contracts.

Every contract, including plain values used as contracts, renders to a
short string used when building violation messages:

    describe(Or(int, float))       # 'int or float'
    describe(ArrayOf[Maybe(Num)])  # 'a collection list of Num or None'
    describe(re.compile("^a"))     # '/^a/'
"""

from __future__ import annotations

from collections.abc import Iterable
from re import Pattern as RegexPattern
from typing import Any

from .base import ContractBase


def describe(contract: Any) -> str:
    """Render the canonical description of a contract.

    Args:
        contract: Any contract representation accepted by ``evaluate``

    Returns:
        Human-readable description
    """
    if isinstance(contract, ContractBase):
        return str(contract)
    if isinstance(contract, type):
        return contract.__name__
    if isinstance(contract, RegexPattern):
        return f"/{contract.pattern}/"
    if isinstance(contract, (list, tuple)):
        return describe_list(contract)
    if isinstance(contract, dict):
        pairs = ", ".join(f"{describe(k)}: {describe(v)}" for k, v in contract.items())
        return "{" + pairs + "}"
    if callable(getattr(contract, "is_valid", None)):
        # User-defined predicate object
        if type(contract).__str__ is not object.__str__:
            return str(contract)
        return type(contract).__name__
    if callable(contract):
        return getattr(contract, "__name__", None) or repr(contract)
    return repr(contract)


def describe_list(contracts: Iterable[Any]) -> str:
    """Render contracts as a bracketed list, e.g. ``[Num, str]``."""
    return "[" + ", ".join(describe(c) for c in contracts) + "]"


def join_descriptions(contracts: tuple[Any, ...], connective: str) -> str:
    """Join descriptions, putting the connective before the last one.

    ``join_descriptions((int, float, str), "or")`` gives ``'int, float or str'``.
    """
    descriptions = [describe(c) for c in contracts]
    if len(descriptions) == 1:
        return descriptions[0]
    return ", ".join(descriptions[:-1]) + f" {connective} " + descriptions[-1]
