"""Custom exceptions for createx-salts."""


class CreateXSaltsError(Exception):
    """Base exception for createx-salts."""


class InvalidAddressError(CreateXSaltsError, ValueError):
    """Malformed or wrong-length 20-byte identity."""

    def __init__(self, value: object, reason: str = "expected 20 bytes or 0x + 40 hex chars") -> None:
        super().__init__(f"Invalid address {value!r}: {reason}")
        self.value = value


class InvalidSaltError(CreateXSaltsError, ValueError):
    """Wrong-length or unparsable salt."""


class ContractNotFoundError(CreateXSaltsError):
    """No registry entry with the given name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Contract not configured: {name}")
        self.name = name


class DuplicateNameError(CreateXSaltsError):
    """Registry already holds an entry with the given name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Contract already configured: {name}")
        self.name = name


class AddressCollisionError(CreateXSaltsError):
    """Two distinct registry entries derive the same address."""

    def __init__(self, name: str, existing: str, address: str) -> None:
        super().__init__(f"{name} resolves to {address}, already taken by {existing}")
        self.name = name
        self.existing = existing
        self.address = address


class UnresolvedArgumentError(CreateXSaltsError):
    """A constructor argument placeholder could not be resolved."""


class DependencyCycleError(CreateXSaltsError):
    """Constructor-argument references form a cycle."""

    def __init__(self, cycle: list[str]) -> None:
        super().__init__(f"Dependency cycle: {' -> '.join(cycle)}")
        self.cycle = cycle
