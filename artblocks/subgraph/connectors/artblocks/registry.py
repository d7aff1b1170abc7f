"""Registry of the core contracts the client fans out over."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType

from artblocks.subgraph.core.exceptions import ValidationError

from .config import CORE_CONTRACTS_FILE

logger = logging.getLogger(__name__)


class ContractRegistry:
    """Immutable, ordered mapping of contract name to address.

    Iterating the registry yields addresses in insertion order; that order
    decides which contract wins a first-match lookup. Addresses are stored
    lower-cased, the form the subgraph uses for entity ids.
    """

    def __init__(self, contracts: Mapping[str, str]) -> None:
        normalized: dict[str, str] = {}
        for name, address in contracts.items():
            if not isinstance(address, str) or not address.strip():
                raise ValidationError(f"Contract {name!r} has no address")
            normalized[name] = address.strip().lower()
        self._contracts = MappingProxyType(normalized)

    @classmethod
    def from_mapping(cls, contracts: Mapping[str, str]) -> ContractRegistry:
        return cls(contracts)

    @classmethod
    def from_json(cls, path: str | Path) -> ContractRegistry:
        """Load a registry from a JSON object of ``{name: address}``."""
        path = Path(path)
        with path.open(encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValidationError(f"{path} must contain a JSON object of name -> address")
        logger.debug("contract_registry_loaded", extra={"path": str(path), "contracts": len(data)})
        return cls(data)

    @classmethod
    def default(cls) -> ContractRegistry:
        """Registry of the Art Blocks flagship core contracts."""
        return cls.from_json(CORE_CONTRACTS_FILE)

    @property
    def addresses(self) -> tuple[str, ...]:
        return tuple(self._contracts.values())

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._contracts.items())

    def __iter__(self) -> Iterator[str]:
        return iter(self._contracts.values())

    def __len__(self) -> int:
        return len(self._contracts)

    def __repr__(self) -> str:
        return f"ContractRegistry({dict(self._contracts)!r})"
