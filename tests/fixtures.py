"""Shared identities and salt builders for createx-salts tests."""

from createx_salts import Salt, decode_salt

# Well-known identities used throughout the tests
DEPLOYER = "0x" + "11" * 20
FACTORY = "0x" + "22" * 20
OTHER_DEPLOYER = "0x" + "33" * 20

# Anvil's first pre-funded account (same as Hardhat/Foundry)
ANVIL_DEPLOYER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"


def make_salt(deployer: str = DEPLOYER, flag: int = 0x00, entropy: bytes = b"\x01" * 11) -> Salt:
    """Build a salt with explicit segments."""
    return decode_salt(bytes.fromhex(deployer[2:]) + bytes([flag]) + entropy)
