"""
Normalisation of 20-byte account identities (deployers, factories, proxies).
"""

from eth_typing import ChecksumAddress, HexAddress
from eth_utils import decode_hex, is_hex_address
from web3 import Web3

from ._exceptions import InvalidAddressError
from .constants import ADDRESS_LENGTH

# Anything accepted where a deployer or factory identity is expected.
AddressLike = str | bytes


def address_bytes(value: AddressLike) -> bytes:
    """
    Return the raw 20 bytes of an address.

    Args:
        value: 20 raw bytes, or ``0x`` followed by 40 hex characters (any case)

    Raises:
        InvalidAddressError: If the value is not a 20-byte identity
    """
    if isinstance(value, (bytes, bytearray)):
        if len(value) != ADDRESS_LENGTH:
            raise InvalidAddressError(value, f"expected {ADDRESS_LENGTH} bytes, got {len(value)}")
        return bytes(value)

    if isinstance(value, str):
        if not value.startswith("0x") or not is_hex_address(value):
            raise InvalidAddressError(value)
        return decode_hex(value)

    raise InvalidAddressError(value, f"unsupported type {type(value).__name__}")


def normalize_address(value: AddressLike) -> HexAddress:
    """Return the lowercase ``0x``-prefixed text form of an address."""
    return HexAddress("0x" + address_bytes(value).hex())


def to_checksum(value: AddressLike) -> ChecksumAddress:
    """Return the EIP-55 checksummed form of an address, for display."""
    return Web3.to_checksum_address(normalize_address(value))


def is_valid_address(value: object) -> bool:
    """Check if a value is a well-formed 20-byte identity."""
    try:
        address_bytes(value)  # type: ignore[arg-type]
    except InvalidAddressError:
        return False
    return True
