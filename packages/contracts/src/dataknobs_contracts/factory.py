"""Build contracts from configuration.

Contract definitions are plain dicts, typically loaded from YAML::

    contracts:
      port:
        type: and
        contracts: [Nat, {type: pattern, pattern: "^[0-9]{1,5}$"}]
      tags:
        type: array_of
        contract: str
      settings:
        type: hash_of
        key: str
        value: {type: maybe, contracts: [port, str]}

A bare string is a contract name: an atomic contract (``Num``, ``Nat``),
a builtin type (``int``, ``str``), or a name registered earlier.
"""

from __future__ import annotations

import builtins
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from . import builtin
from .combinators import And, Maybe, Not, Or, Xor
from .exceptions import ContractConfigError, MalformedContractError
from .loader import load_class
from .structural import ArrayOf, Args, CollectionOf, Func, HashOf, SetOf, TupleOf

logger = logging.getLogger(__name__)

ATOMIC_CONTRACTS: dict[str, Any] = {
    "Num": builtin.Num,
    "Pos": builtin.Pos,
    "Neg": builtin.Neg,
    "Nat": builtin.Nat,
    "Bool": builtin.Bool,
    "Any": builtin.Any,
    "Nothing": builtin.Nothing,
}

BUILTIN_TYPES: dict[str, type] = {
    name: getattr(builtins, name)
    for name in (
        "int", "float", "complex", "str", "bytes", "bool",
        "list", "tuple", "dict", "set", "frozenset", "object",
    )
}
BUILTIN_TYPES["NoneType"] = type(None)

_LOGICAL = {"or": Or, "xor": Xor, "and": And, "not": Not, "maybe": Maybe}
_COLLECTIONS = {"array_of": ArrayOf, "set_of": SetOf, "tuple_of": TupleOf}


class ContractFactory:
    """Factory for creating contracts from configuration.

    Configuration Options:
        type (str): Contract type (or, xor, and, not, maybe, array_of,
            set_of, tuple_of, collection_of, hash_of, respond_to, send,
            exactly, instance_of, eq, equal, pattern, args, func) or a
            contract name
        contracts (list): Children for logical combinators and func
        contract: Element/wrapped definition for collections and args
        kind (str): Collection class for collection_of
        key, value: Definitions for hash_of
        names (list): Attribute names for respond_to and send
        class (str): Builtin type name or dotted class path for exactly/instance_of
        value: Reference for eq (identity) or literal for equal (==)
        pattern (str): Regular expression; ignore_case (bool) adds re.IGNORECASE
    """

    def __init__(self) -> None:
        self._named: dict[str, Any] = {}

    def register(self, name: str, contract: Any, allow_overwrite: bool = False) -> None:
        """Register a named contract usable by later definitions.

        Args:
            name: Name to refer to the contract by
            contract: The contract
            allow_overwrite: Whether to replace an existing registration

        Raises:
            ContractConfigError: If the name is taken and allow_overwrite is False
        """
        if not allow_overwrite and name in self._named:
            raise ContractConfigError(
                f"Contract '{name}' already registered", context={"name": name}
            )
        self._named[name] = contract

    def get(self, name: str) -> Any:
        """Look up a contract by name.

        Raises:
            ContractConfigError: If no contract has that name
        """
        if name in self._named:
            return self._named[name]
        if name in ATOMIC_CONTRACTS:
            return ATOMIC_CONTRACTS[name]
        if name in BUILTIN_TYPES:
            return BUILTIN_TYPES[name]
        raise ContractConfigError(
            f"Unknown contract type: '{name}'",
            context={"type": name, "available": self.names()},
        )

    def names(self) -> list[str]:
        return sorted(set(self._named) | set(ATOMIC_CONTRACTS) | set(BUILTIN_TYPES))

    def create(self, **config: Any) -> Any:
        """Create a contract from a definition.

        Args:
            **config: Contract definition

        Returns:
            The contract
        """
        logger.info(f"Creating contract: {config.get('type')}")
        return self.build(config)

    def build(self, definition: Any) -> Any:
        """Build a contract from a definition, recursing into children.

        Strings are contract names, dicts are typed definitions and any
        other value (numbers, None, ...) is a literal equality contract.
        """
        if isinstance(definition, str):
            logger.debug(f"Looking up contract: {definition}")
            return self.get(definition)
        if not isinstance(definition, dict):
            return definition

        contract_type = definition.get("type")
        if not isinstance(contract_type, str):
            raise ContractConfigError(
                "Contract definition requires a 'type'", context={"definition": definition}
            )
        try:
            return self._build_typed(contract_type, definition)
        except MalformedContractError as e:
            raise ContractConfigError(
                f"Invalid '{contract_type}' definition: {e}",
                context={"type": contract_type, **e.context},
            ) from e

    def _build_typed(self, contract_type: str, definition: dict[str, Any]) -> Any:
        key = contract_type.lower()

        if key in _LOGICAL:
            children = self._build_list(definition, "contracts")
            return _LOGICAL[key](*children)

        if key in _COLLECTIONS:
            return _COLLECTIONS[key](self.build(self._require(definition, "contract")))

        if key == "collection_of":
            kind = self._load_class(self._require(definition, "kind"))
            return CollectionOf(kind, self.build(self._require(definition, "contract")))

        if key == "hash_of":
            return HashOf(
                self.build(self._require(definition, "key")),
                self.build(self._require(definition, "value")),
            )

        if key in ("respond_to", "send"):
            names = self._require(definition, "names")
            if isinstance(names, str):
                names = [names]
            if not isinstance(names, list):
                raise ContractConfigError(
                    "'names' must be a string or a list of strings",
                    context={"type": contract_type, "names": repr(names)},
                )
            cls = builtin.RespondTo if key == "respond_to" else builtin.Send
            return cls(*names)

        if key == "exactly":
            return builtin.Exactly(self._load_class(self._require(definition, "class")))

        if key == "instance_of":
            return self._load_class(self._require(definition, "class"))

        if key == "eq":
            return builtin.Eq(self._require(definition, "value"))

        if key == "equal":
            return self._require(definition, "value")

        if key == "pattern":
            flags = re.IGNORECASE if definition.get("ignore_case", False) else 0
            pattern = self._require(definition, "pattern")
            if not isinstance(pattern, str):
                raise ContractConfigError(
                    "'pattern' must be a string", context={"pattern": repr(pattern)}
                )
            try:
                return re.compile(pattern, flags)
            except re.error as e:
                raise ContractConfigError(
                    f"Invalid pattern: {e}", context={"pattern": definition.get("pattern")}
                ) from e

        if key == "args":
            return Args(self.build(self._require(definition, "contract")))

        if key == "func":
            return Func(*self._build_list(definition, "contracts"))

        extra = set(definition) - {"type"}
        if extra:
            logger.warning(f"Ignoring keys {sorted(extra)} for contract '{contract_type}'")
        return self.get(contract_type)

    def _build_list(self, definition: dict[str, Any], key: str) -> list[Any]:
        items = self._require(definition, key)
        if not isinstance(items, list):
            raise ContractConfigError(
                f"'{key}' must be a list", context={"type": definition.get("type")}
            )
        return [self.build(item) for item in items]

    @staticmethod
    def _require(definition: dict[str, Any], key: str) -> Any:
        if key not in definition:
            raise ContractConfigError(
                f"Contract '{definition.get('type')}' requires '{key}'",
                context={"type": definition.get("type"), "missing": key},
            )
        return definition[key]

    @staticmethod
    def _load_class(class_path: Any) -> type:
        """Resolve a builtin type name or a dotted class path."""
        if not isinstance(class_path, str):
            raise ContractConfigError(
                f"Class must be a type name or dotted path, got {class_path!r}",
                context={"class": repr(class_path)},
            )
        if class_path in BUILTIN_TYPES:
            return BUILTIN_TYPES[class_path]
        try:
            return load_class(class_path)
        except ImportError as e:
            raise ContractConfigError(
                f"Cannot resolve class {class_path}: {e}", context={"class": class_path}
            ) from e

    def from_yaml(self, source: str | Path) -> Any:
        """Build a single contract from a YAML definition document.

        Args:
            source: YAML text, or the path of a file holding it

        Returns:
            The contract
        """
        if isinstance(source, Path) or (
            isinstance(source, str) and "\n" not in source and os.path.isfile(source)
        ):
            source = self._read_text(source)
        return self.build(self._parse_yaml(source))

    def load_yaml(self, path: str | Path) -> dict[str, Any]:
        """Load and register the named contracts of a YAML file.

        The file holds a top-level ``contracts`` mapping of name to
        definition. Definitions are built in file order, so each one can
        refer to the names defined before it.

        Args:
            path: YAML file path

        Returns:
            Mapping of name to built contract
        """
        document = self._parse_yaml(self._read_text(path)) or {}
        definitions = document.get("contracts") if isinstance(document, dict) else None
        if not isinstance(definitions, dict):
            raise ContractConfigError(
                "Contract file requires a top-level 'contracts' mapping",
                context={"path": str(path)},
            )

        loaded: dict[str, Any] = {}
        for name, definition in definitions.items():
            contract = self.build(definition)
            self.register(name, contract)
            loaded[name] = contract
        logger.info(f"Loaded {len(loaded)} contracts from {path}")
        return loaded

    @staticmethod
    def _read_text(path: str | Path) -> str:
        try:
            return Path(path).read_text()
        except OSError as e:
            raise ContractConfigError(
                f"Cannot read contract file: {e}", context={"path": str(path)}
            ) from e

    @staticmethod
    def _parse_yaml(text: str) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ContractConfigError(f"Invalid YAML: {e}") from e


# Create singleton instance for shared use
contract_factory = ContractFactory()
