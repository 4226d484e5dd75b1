"""Unit tests for address helpers and constants."""

import pytest

from createx_salts import (
    CREATEX_ADDRESS,
    PROXY_INIT_CODE_HASH,
    InvalidAddressError,
    is_valid_address,
    normalize_address,
    to_checksum,
)

from tests.fixtures import ANVIL_DEPLOYER


class TestConstants:
    """Tests for factory constants."""

    def test_createx_address(self) -> None:
        """CreateX address is checksummed and canonical."""
        assert CREATEX_ADDRESS == "0xba5Ed099633D3B313e4D5F7bdc1305d3c28ba5Ed"
        assert to_checksum(CREATEX_ADDRESS) == CREATEX_ADDRESS

    def test_proxy_init_code_hash(self) -> None:
        """Proxy init code hash is 32 bytes."""
        assert len(PROXY_INIT_CODE_HASH) == 32
        assert PROXY_INIT_CODE_HASH.hex().startswith("21c35dbe")


class TestAddresses:
    """Tests for address normalisation."""

    def test_normalize_lowercases(self) -> None:
        """Text form is lowercase."""
        assert normalize_address(ANVIL_DEPLOYER) == ANVIL_DEPLOYER.lower()

    def test_normalize_bytes(self) -> None:
        """20 raw bytes normalise to text."""
        assert normalize_address(b"\xab" * 20) == "0x" + "ab" * 20

    def test_checksum(self) -> None:
        """EIP-55 form round-trips a known address."""
        assert to_checksum(ANVIL_DEPLOYER.lower()) == ANVIL_DEPLOYER

    def test_invalid(self) -> None:
        """Wrong lengths, missing prefix and non-hex are rejected."""
        for value in ("0x1234", "ab" * 20, "0x" + "gg" * 20, b"\x00" * 19, b"\x00" * 21, 42):
            assert not is_valid_address(value)
            with pytest.raises(InvalidAddressError):
                normalize_address(value)  # type: ignore[arg-type]

    def test_invalid_is_value_error(self) -> None:
        """InvalidAddressError can be caught as ValueError."""
        with pytest.raises(ValueError):
            normalize_address("0x1234")

    def test_valid(self) -> None:
        """Checksummed, lowercase and raw forms are accepted."""
        assert is_valid_address(ANVIL_DEPLOYER)
        assert is_valid_address(ANVIL_DEPLOYER.lower())
        assert is_valid_address(b"\x00" * 20)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
