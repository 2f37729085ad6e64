"""Pytest configuration and shared fixtures for dspcore tests.

This module provides:
- A deterministic numpy RNG fixture
- Reset of library-wide state (configuration, debug mode) between tests
"""

import os

import numpy as np
import pytest

from dspcore.config import get_config, set_config


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.
    
    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.
    
    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set the global numpy seed for reproducibility."""
    np.random.seed(int(os.environ.get("TEST_RNG_SEED", "0")))


@pytest.fixture(scope="function", autouse=True)
def restore_global_state():
    """Restore the configuration (including the debug flag) after each test."""
    config = get_config()
    yield
    set_config(config)
