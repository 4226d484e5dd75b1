"""Type definitions for createx-salts."""

from typing import Any

from eth_typing import HexAddress
from pydantic import AliasChoices, BaseModel, Field, field_validator

from .addresses import normalize_address
from .constants import ADDRESS_LENGTH, CREATEX_ADDRESS, SALT_LENGTH

# Constructor arguments are kept as plain values; registry names and
# ${chain.<key>} placeholders are resolved by the registry.
Primitive = str | int | bool

SALT_PATTERN = r"^0x[0-9a-fA-F]{64}$"


class Salt(BaseModel):
    """
    A CreateX salt: 32 bytes laid out as deployer, protection flag, entropy.

        [deployer: 20 bytes][protection flag: 1 byte][entropy: 11 bytes]

    Flag 0x00 yields the same address on every chain. Use mint_salt() to
    create one and decode_salt() to parse external input.

    Example:
        Salt(raw=bytes.fromhex("11" * 20 + "00" + "ab" * 11))
    """

    raw: bytes

    model_config = {"frozen": True}

    @field_validator("raw")
    @classmethod
    def _check_length(cls, value: bytes) -> bytes:
        if len(value) != SALT_LENGTH:
            raise ValueError(f"Salt must be {SALT_LENGTH} bytes, got {len(value)}")
        return value

    @property
    def deployer(self) -> HexAddress:
        """Deployer address embedded in the first 20 bytes."""
        return normalize_address(self.raw[:ADDRESS_LENGTH])

    @property
    def protection_flag(self) -> int:
        return self.raw[ADDRESS_LENGTH]

    @property
    def entropy(self) -> bytes:
        return self.raw[ADDRESS_LENGTH + 1 :]

    @property
    def hex(self) -> str:
        """Lowercase 0x-prefixed text form."""
        return "0x" + self.raw.hex()

    def __str__(self) -> str:
        return self.hex


class ContractDescriptor(BaseModel):
    """
    A named contract with its salt and predicted deployment address.

    derived_address is a cache: it depends only on factory, deployer and
    salt, never on the contract's bytecode or constructor_args.
    """

    name: str = Field(min_length=1)
    salt: Salt
    constructor_args: tuple[Primitive, ...] = ()
    derived_address: HexAddress

    model_config = {"frozen": True}


class ContractRecord(BaseModel):
    """Persisted form of a registry entry."""

    name: str = Field(min_length=1)
    salt: str = Field(pattern=SALT_PATTERN)
    constructor_args: tuple[Primitive, ...] = Field(
        default=(),
        validation_alias=AliasChoices("constructor_args", "constructorArgs", "args"),
    )

    model_config = {"frozen": True}


class RegistrySnapshot(BaseModel):
    """
    Persisted form of a whole registry.

    contracts may be given as a list of records or, as in a deployment
    config file, as a mapping of name to {"salt": ..., "args": [...]}.
    """

    deployer: HexAddress
    factory: HexAddress = HexAddress(CREATEX_ADDRESS.lower())
    chain_id: int | None = None
    contracts: tuple[ContractRecord, ...] = ()

    model_config = {"frozen": True}

    @field_validator("deployer", "factory", mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> HexAddress:
        return normalize_address(value)

    @field_validator("contracts", mode="before")
    @classmethod
    def _from_mapping(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return [{"name": name, **entry} for name, entry in value.items()]
        return value
