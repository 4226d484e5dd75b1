"""
Salt codec: mint, decode and encode CreateX salts.

Salts are 32 bytes:

    [deployer: 20 bytes][protection flag: 1 byte][entropy: 11 bytes]

The codec is purely structural. It never checks that the embedded deployer
matches the account that will deploy; use salt_matches_deployer() for that.
"""

import secrets

from eth_typing import HexAddress
from eth_utils import decode_hex, is_hex

from ._exceptions import InvalidSaltError
from .addresses import AddressLike, address_bytes
from .constants import ADDRESS_LENGTH, CROSS_CHAIN_FLAG, ENTROPY_LENGTH, SALT_LENGTH
from .types import Salt

# Anything accepted where a salt is expected.
SaltLike = Salt | bytes | str


def mint_salt(deployer: AddressLike) -> Salt:
    """
    Mint a fresh cross-chain salt for a deployer.

    The protection flag is always 0x00 so the resulting address is identical
    on every chain. Entropy comes from the OS CSPRNG via secrets, which is
    safe to call from any number of threads.

    An all-zero entropy draw has probability 2**-88. It is still rejected and
    redrawn rather than returned, so a minted salt never has zero entropy.

    Raises:
        InvalidAddressError: If deployer is not a 20-byte identity
    """
    prefix = address_bytes(deployer)

    entropy = secrets.token_bytes(ENTROPY_LENGTH)
    while not any(entropy):
        entropy = secrets.token_bytes(ENTROPY_LENGTH)

    return Salt(raw=prefix + bytes([CROSS_CHAIN_FLAG]) + entropy)


def decode_salt(raw: SaltLike) -> Salt:
    """
    Parse a salt from 32 raw bytes or 0x + 64 hex characters (any case).

    The deployer and flag segments are taken as-is; external salts with any
    flag value or all-zero entropy are accepted.

    Raises:
        InvalidSaltError: If the input has the wrong length or is not hex
    """
    if isinstance(raw, Salt):
        return raw

    if isinstance(raw, str):
        if not raw.startswith(("0x", "0X")) or not is_hex(raw):
            raise InvalidSaltError(f"Salt must be 0x-prefixed hex, got {raw!r}")
        if len(raw) != 2 + 2 * SALT_LENGTH:
            raise InvalidSaltError(f"Salt must be 0x + {2 * SALT_LENGTH} hex chars, got {len(raw) - 2}")
        data = decode_hex(raw)
    elif isinstance(raw, (bytes, bytearray)):
        data = bytes(raw)
    else:
        raise InvalidSaltError(f"Unsupported salt type {type(raw).__name__}")

    if len(data) != SALT_LENGTH:
        raise InvalidSaltError(f"Salt must be {SALT_LENGTH} bytes, got {len(data)}")

    return Salt(raw=data)


def encode_salt(salt: SaltLike) -> str:
    """Return the lowercase 0x + 64 hex character text form of a salt."""
    return decode_salt(salt).hex


def salt_deployer(salt: SaltLike) -> HexAddress:
    """Deployer address embedded in a salt."""
    return decode_salt(salt).deployer


def salt_matches_deployer(salt: SaltLike, deployer: AddressLike) -> bool:
    """
    Check whether a salt's embedded deployer is the given account.

    CreateX only applies sender protection when the two agree.
    """
    return decode_salt(salt).raw[:ADDRESS_LENGTH] == address_bytes(deployer)
