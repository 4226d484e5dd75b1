"""Named registry of CreateX deployments for a single deployer and factory."""

import logging
import re
import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from eth_typing import ChecksumAddress, HexAddress

from ._exceptions import (
    AddressCollisionError,
    ContractNotFoundError,
    DependencyCycleError,
    DuplicateNameError,
    UnresolvedArgumentError,
)
from .addresses import AddressLike, normalize_address, to_checksum
from .constants import CREATEX_ADDRESS
from .predict import describe_contract
from .salt import SaltLike, salt_matches_deployer
from .types import ContractDescriptor, ContractRecord, Primitive, RegistrySnapshot

logger = logging.getLogger(__name__)

# Constructor argument resolved from per-chain configuration: ${chain.weth}
CHAIN_ARG_PATTERN = re.compile(r"^\$\{chain\.(\w+)\}$")


class ContractRegistry:
    """
    Ordered mapping of contract names to salts and predicted addresses.

    Invariants:
    - names are unique
    - no two entries resolve to the same address under this registry's
      factory and deployer

    add() and remove() are serialised by a lock and either fully succeed or
    leave the registry untouched. Each mutation publishes a new read-only
    mapping, so get() and list() always see a consistent snapshot without
    taking the lock.

    Example:
        >>> registry = ContractRegistry(deployer="0x" + "11" * 20)
        >>> registry.add("SpritzPayCore", mint_salt(registry.deployer))
        >>> registry.add("SpritzRouter", mint_salt(registry.deployer), ["SpritzPayCore"])
        >>> registry.deployment_order()
        ['SpritzPayCore', 'SpritzRouter']
    """

    def __init__(
        self,
        deployer: AddressLike,
        factory: AddressLike = CREATEX_ADDRESS,
        chain_id: int | None = None,
    ) -> None:
        self._deployer = normalize_address(deployer)
        self._factory = normalize_address(factory)
        self._chain_id = chain_id
        self._lock = threading.RLock()
        self._entries: Mapping[str, ContractDescriptor] = MappingProxyType({})

    @classmethod
    def from_snapshot(cls, snapshot: RegistrySnapshot) -> "ContractRegistry":
        """
        Build a registry from its persisted form.

        Raises:
            DuplicateNameError: If two records share a name
            AddressCollisionError: If two records resolve to the same address
        """
        registry = cls(snapshot.deployer, snapshot.factory, snapshot.chain_id)
        for record in snapshot.contracts:
            registry.add(record.name, record.salt, record.constructor_args)
        return registry

    def to_snapshot(self) -> RegistrySnapshot:
        """Export the registry in its persisted form."""
        entries = self._entries
        return RegistrySnapshot(
            deployer=self._deployer,
            factory=self._factory,
            chain_id=self._chain_id,
            contracts=tuple(
                ContractRecord(
                    name=d.name,
                    salt=d.salt.hex,
                    constructor_args=d.constructor_args,
                )
                for d in entries.values()
            ),
        )

    @property
    def deployer(self) -> HexAddress:
        return self._deployer

    @property
    def factory(self) -> HexAddress:
        return self._factory

    @property
    def chain_id(self) -> int | None:
        return self._chain_id

    # -- core operations ------------------------------------------------------

    def add(
        self,
        name: str,
        salt: SaltLike,
        constructor_args: tuple[Primitive, ...] | list[Primitive] = (),
    ) -> ContractDescriptor:
        """
        Register a contract and compute its address.

        Raises:
            DuplicateNameError: If name is already registered
            AddressCollisionError: If another entry resolves to the same address
            InvalidSaltError: If salt is malformed
        """
        with self._lock:
            entries = self._entries
            if name in entries:
                raise DuplicateNameError(name)

            descriptor = describe_contract(
                name,
                salt,
                constructor_args,
                factory=self._factory,
                deployer=self._deployer,
                chain_id=self._chain_id,
            )

            for other in entries.values():
                if other.derived_address == descriptor.derived_address:
                    raise AddressCollisionError(name, other.name, descriptor.derived_address)

            updated = dict(entries)
            updated[name] = descriptor
            self._entries = MappingProxyType(updated)

        logger.debug("Registered %s at %s", name, descriptor.derived_address)
        return descriptor

    def get(self, name: str) -> ContractDescriptor:
        """
        Look up a contract by name.

        Raises:
            ContractNotFoundError: If name is not registered
        """
        return _lookup(self._entries, name)

    def names(self) -> tuple[str, ...]:
        """Registered names in insertion order."""
        return tuple(self._entries)

    def remove(self, name: str) -> ContractDescriptor:
        """
        Remove a contract by name and return its descriptor.

        Raises:
            ContractNotFoundError: If name is not registered
        """
        with self._lock:
            entries = self._entries
            if name not in entries:
                raise ContractNotFoundError(name)

            updated = dict(entries)
            descriptor = updated.pop(name)
            self._entries = MappingProxyType(updated)

        logger.debug("Removed %s", name)
        return descriptor

    def address_of(self, name: str) -> ChecksumAddress:
        """Checksummed predicted address of a registered contract."""
        return to_checksum(self.get(name).derived_address)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    # -- deployment helpers ---------------------------------------------------

    def deployer_mismatches(self) -> list[str]:
        """
        Names whose salt embeds a different deployer than this registry's.

        CreateX does not apply sender protection to such salts, so their
        deployment would not land at the cross-chain address the deployer
        expects.
        """
        return [
            name
            for name, d in self._entries.items()
            if not salt_matches_deployer(d.salt, self._deployer)
        ]

    def dependencies(self, name: str) -> list[str]:
        """Constructor arguments of name that refer to other registered contracts."""
        entries = self._entries
        descriptor = _lookup(entries, name)
        return [arg for arg in descriptor.constructor_args if isinstance(arg, str) and arg in entries]

    def has_chain_specific_args(self, name: str) -> bool:
        """Check if any constructor argument of name is a ${chain.<key>} placeholder."""
        return any(
            isinstance(arg, str) and CHAIN_ARG_PATTERN.match(arg)
            for arg in self.get(name).constructor_args
        )

    def resolve_constructor_args(
        self,
        name: str,
        chain_addresses: Mapping[str, str] | None = None,
    ) -> list[Primitive]:
        """
        Resolve constructor arguments for deployment.

        - "${chain.<key>}" is looked up in chain_addresses
        - the name of another registered contract becomes its checksummed address
        - anything else is passed through unchanged

        Raises:
            ContractNotFoundError: If name is not registered
            UnresolvedArgumentError: If a chain placeholder has no value
        """
        entries = self._entries
        descriptor = _lookup(entries, name)
        resolved: list[Primitive] = []

        for arg in descriptor.constructor_args:
            if not isinstance(arg, str):
                resolved.append(arg)
                continue

            match = CHAIN_ARG_PATTERN.match(arg)
            if match:
                key = match.group(1)
                if chain_addresses is None:
                    raise UnresolvedArgumentError(
                        f"Cannot resolve chain-specific arg {arg!r} without chain addresses. "
                        f"Contract {name} requires chain context."
                    )
                if key not in chain_addresses:
                    raise UnresolvedArgumentError(f"Chain address {key!r} is not configured (needed by {name})")
                resolved.append(chain_addresses[key])
            elif arg in entries:
                resolved.append(to_checksum(entries[arg].derived_address))
            else:
                resolved.append(arg)

        return resolved

    def deployment_order(self) -> list[str]:
        """
        Names ordered so every contract follows the contracts it references.

        Independent contracts keep registry order.

        Raises:
            DependencyCycleError: If constructor-argument references form a cycle
        """
        entries = self._entries
        order: list[str] = []
        done: set[str] = set()
        path: list[str] = []

        def visit(name: str) -> None:
            if name in done:
                return
            if name in path:
                raise DependencyCycleError(path[path.index(name) :] + [name])

            path.append(name)
            for arg in entries[name].constructor_args:
                if isinstance(arg, str) and arg in entries:
                    visit(arg)
            path.pop()

            done.add(name)
            order.append(name)

        for name in entries:
            visit(name)

        return order

    # Bound last: the name shadows the builtin for the rest of the class body.
    list = names


def _lookup(entries: Mapping[str, ContractDescriptor], name: str) -> ContractDescriptor:
    try:
        return entries[name]
    except KeyError:
        raise ContractNotFoundError(name) from None


def load_registry(data: Mapping[str, object]) -> ContractRegistry:
    """
    Build a registry from already-parsed persisted data (e.g. decoded JSON).

    Raises:
        pydantic.ValidationError: If the data does not match RegistrySnapshot
    """
    return ContractRegistry.from_snapshot(RegistrySnapshot.model_validate(data))
