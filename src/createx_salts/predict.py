"""
Offline prediction of CreateX CREATE3 deployment addresses.

CreateX deploys in two stages:

1. The salt is guarded (mixed with the caller and optionally the chain id),
   then a fixed proxy is CREATE2-deployed at
       keccak256(0xff ++ factory ++ guardedSalt ++ keccak256(proxyInitCode))[12:]
2. The proxy CREATE-deploys the contract with its first nonce (1), so
       address = keccak256(rlp([proxy, 1]))[12:]

The final address therefore depends on factory, deployer and salt only,
never on the deployed bytecode or constructor arguments.

Reference: https://github.com/pcaversaccio/createx
"""

import rlp
from eth_abi import encode
from eth_typing import HexAddress
from web3 import Web3

from ._exceptions import InvalidSaltError
from .addresses import AddressLike, address_bytes, normalize_address
from .constants import (
    ADDRESS_LENGTH,
    CHAIN_BOUND_FLAG,
    CROSS_CHAIN_FLAG,
    PROXY_DEPLOY_NONCE,
    PROXY_INIT_CODE_HASH,
)
from .salt import SaltLike, decode_salt
from .types import ContractDescriptor, Primitive

_ZERO_PREFIX = bytes(ADDRESS_LENGTH)


def _keccak(data: bytes) -> bytes:
    return bytes(Web3.keccak(data))


def guarded_salt(deployer: AddressLike, salt: SaltLike, chain_id: int | None = None) -> bytes:
    """
    Apply the CreateX salt guard for a deployment sent by `deployer`.

    Prefix equal to deployer:
        flag 0x00 -> keccak256(abi.encode(deployer, salt))          (cross-chain)
        flag 0x01 -> keccak256(abi.encode(deployer, chainid, salt))
        other     -> rejected by the factory
    Zero prefix:
        flag 0x01 -> keccak256(abi.encode(chainid, salt))
        flag 0x00 -> keccak256(abi.encode(salt))
        other     -> rejected by the factory
    Any other prefix:
        keccak256(abi.encode(salt))

    Raises:
        InvalidAddressError: If deployer is malformed
        InvalidSaltError: If the salt is malformed, the factory would reject
            it, or a chain-bound salt is given without chain_id
    """
    sender = address_bytes(deployer)
    raw = decode_salt(salt).raw
    prefix = raw[:ADDRESS_LENGTH]
    flag = raw[ADDRESS_LENGTH]

    if prefix == sender:
        if flag == CROSS_CHAIN_FLAG:
            return _keccak(encode(["address", "bytes32"], [sender, raw]))
        if flag == CHAIN_BOUND_FLAG:
            return _keccak(
                encode(["address", "uint256", "bytes32"], [sender, _require_chain_id(chain_id), raw])
            )
        raise InvalidSaltError(f"Invalid protection flag 0x{flag:02x} for a sender-protected salt")

    if prefix == _ZERO_PREFIX:
        if flag == CHAIN_BOUND_FLAG:
            return _keccak(encode(["uint256", "bytes32"], [_require_chain_id(chain_id), raw]))
        if flag != CROSS_CHAIN_FLAG:
            raise InvalidSaltError(f"Invalid protection flag 0x{flag:02x} for a zero-prefix salt")

    return _keccak(encode(["bytes32"], [raw]))


def _require_chain_id(chain_id: int | None) -> int:
    if chain_id is None:
        raise InvalidSaltError("Salt is chain-bound (flag 0x01); chain_id is required")
    return chain_id


def compute_proxy_address(factory: AddressLike, guarded: bytes) -> HexAddress:
    """
    Compute the stage-one CREATE3 proxy address (CREATE2 from the factory).

    Raises:
        InvalidAddressError: If factory is malformed
        ValueError: If guarded is not 32 bytes
    """
    if len(guarded) != 32:
        raise ValueError(f"Guarded salt must be 32 bytes, got {len(guarded)}")

    preimage = b"\xff" + address_bytes(factory) + guarded + PROXY_INIT_CODE_HASH
    return normalize_address(_keccak(preimage)[12:])


def compute_create_address(sender: AddressLike, nonce: int) -> HexAddress:
    """
    Compute a CREATE (nonce-based) contract address: keccak256(rlp([sender, nonce]))[12:].

    Raises:
        InvalidAddressError: If sender is malformed
    """
    encoded = rlp.encode([address_bytes(sender), nonce])
    return normalize_address(_keccak(encoded)[12:])


def predict_address(
    factory: AddressLike,
    deployer: AddressLike,
    salt: SaltLike,
    *,
    chain_id: int | None = None,
) -> HexAddress:
    """
    Predict the address CreateX's deployCreate3 will produce.

    Pure function: no network access and no dependence on contract code.

    Args:
        factory: CreateX factory address (see constants.CREATEX_ADDRESS)
        deployer: Account that will send the deployment transaction
        salt: Salt, 32 raw bytes or 0x + 64 hex characters
        chain_id: Only needed for chain-bound salts (flag 0x01)

    Returns:
        Lowercase 0x-prefixed address

    Raises:
        InvalidAddressError: If factory or deployer is malformed
        InvalidSaltError: If the salt is malformed or rejected by the guard

    Example:
        >>> deployer = "0x" + "11" * 20
        >>> salt = mint_salt(deployer)
        >>> predict_address(CREATEX_ADDRESS, deployer, salt)
        '0x...'
    """
    factory_bytes = address_bytes(factory)
    proxy = compute_proxy_address(factory_bytes, guarded_salt(deployer, salt, chain_id))
    return compute_create_address(proxy, PROXY_DEPLOY_NONCE)


def describe_contract(
    name: str,
    salt: SaltLike,
    constructor_args: tuple[Primitive, ...] | list[Primitive] = (),
    *,
    factory: AddressLike,
    deployer: AddressLike,
    chain_id: int | None = None,
) -> ContractDescriptor:
    """Build a ContractDescriptor, computing its derived address."""
    decoded = decode_salt(salt)
    return ContractDescriptor(
        name=name,
        salt=decoded,
        constructor_args=tuple(constructor_args),
        derived_address=predict_address(factory, deployer, decoded, chain_id=chain_id),
    )
