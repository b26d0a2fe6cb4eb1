"""Shared test fixtures and configuration."""

import pytest
import torch

from lobenet import Lobe


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure reproducible tests by seeding torch.

    This fixture runs automatically for every test.
    """
    torch.manual_seed(42)


@pytest.fixture
def dtype():
    """Amount dtype used across the suite."""
    return torch.float64


@pytest.fixture
def breadth():
    """Standard neurons per column for tests."""
    return 5


@pytest.fixture
def width():
    """Standard thresholded column count for tests."""
    return 3


@pytest.fixture
def inert_lobe(breadth, width):
    """Zero-initialized lobe."""
    return Lobe.new(breadth, width, falloff=0.0)


@pytest.fixture
def random_lobe(breadth, width, dtype):
    """Lobe with random non-negative parameters and a small falloff."""
    n_params = breadth * width * 5 + 1
    params = torch.rand(n_params, dtype=dtype)
    params[-1] = 0.1
    return Lobe.from_parameters((width, breadth), params)


@pytest.fixture
def single_link_lobe():
    """breadth=1, width=1 lobe forwarding only along the same-index link."""
    params = torch.tensor(
        # thresholds, weights (below, same, above), strengths, falloff
        [0.0, 0.0, 1.0, 0.0, 1.0, 0.0],
        dtype=torch.float64,
    )
    return Lobe.from_parameters((1, 1), params)
