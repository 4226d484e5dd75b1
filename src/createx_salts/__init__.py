"""
createx-salts

Deterministic cross-chain deployment addresses for CreateX (CREATE3).
Mint and parse structured salts, predict deployment addresses offline, and
keep a named registry of a protocol's contracts.

Usage:
    from createx_salts import CREATEX_ADDRESS, ContractRegistry, mint_salt, predict_address

    deployer = "0x1111111111111111111111111111111111111111"

    salt = mint_salt(deployer)
    address = predict_address(CREATEX_ADDRESS, deployer, salt)

    registry = ContractRegistry(deployer)
    registry.add("SpritzPayCore", salt)
    registry.add("SpritzRouter", mint_salt(deployer), ["SpritzPayCore"])

    for name in registry.deployment_order():
        print(name, registry.address_of(name), registry.resolve_constructor_args(name))

Loading persisted state (already parsed by the caller):
    from createx_salts import load_registry

    registry = load_registry(json.loads(config_text))
"""

from ._exceptions import (
    AddressCollisionError,
    ContractNotFoundError,
    CreateXSaltsError,
    DependencyCycleError,
    DuplicateNameError,
    InvalidAddressError,
    InvalidSaltError,
    UnresolvedArgumentError,
)
from ._version import __version__

# Addresses
from .addresses import is_valid_address, normalize_address, to_checksum

# Constants
from .constants import (
    CHAIN_BOUND_FLAG,
    CREATEX_ADDRESS,
    CROSS_CHAIN_FLAG,
    PROXY_INIT_CODE_HASH,
)

# Address prediction
from .predict import (
    compute_create_address,
    compute_proxy_address,
    describe_contract,
    guarded_salt,
    predict_address,
)

# Registry
from .registry import ContractRegistry, load_registry

# Salt codec
from .salt import decode_salt, encode_salt, mint_salt, salt_deployer, salt_matches_deployer

# Types
from .types import ContractDescriptor, ContractRecord, RegistrySnapshot, Salt

__all__ = [
    # Version
    "__version__",
    # Salt codec
    "mint_salt",
    "decode_salt",
    "encode_salt",
    "salt_deployer",
    "salt_matches_deployer",
    # Address prediction
    "predict_address",
    "guarded_salt",
    "compute_proxy_address",
    "compute_create_address",
    "describe_contract",
    # Registry
    "ContractRegistry",
    "load_registry",
    # Types
    "Salt",
    "ContractDescriptor",
    "ContractRecord",
    "RegistrySnapshot",
    # Addresses
    "normalize_address",
    "to_checksum",
    "is_valid_address",
    # Constants
    "CREATEX_ADDRESS",
    "PROXY_INIT_CODE_HASH",
    "CROSS_CHAIN_FLAG",
    "CHAIN_BOUND_FLAG",
    # Exceptions
    "CreateXSaltsError",
    "InvalidAddressError",
    "InvalidSaltError",
    "ContractNotFoundError",
    "DuplicateNameError",
    "AddressCollisionError",
    "UnresolvedArgumentError",
    "DependencyCycleError",
]
