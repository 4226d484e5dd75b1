"""Pytest configuration and fixtures for createx-salts tests."""

import pytest

from createx_salts import CREATEX_ADDRESS, ContractRegistry

from tests.fixtures import ANVIL_DEPLOYER, DEPLOYER, FACTORY


@pytest.fixture
def registry() -> ContractRegistry:
    """Empty registry for DEPLOYER behind a test factory."""
    return ContractRegistry(DEPLOYER, FACTORY)


@pytest.fixture
def createx_registry() -> ContractRegistry:
    """Empty registry for the Anvil deployer behind the real CreateX address."""
    return ContractRegistry(ANVIL_DEPLOYER, CREATEX_ADDRESS)
