"""
Base Configuration Classes.

Dataclass configs shared by lobenet components. Every component config
inherits device and dtype handling from ``BaseConfig``.

Author: Lobenet Project
Date: October 2026
"""

from __future__ import annotations

from dataclasses import dataclass

import torch

from lobenet.errors import ConfigurationError, validate_finite, validate_positive


@dataclass
class BaseConfig:
    """Base configuration with common fields for all components.

    This provides standard fields that appear in every config:
    - device: Hardware device (cpu/cuda)
    - dtype: Tensor data type used for every amount
    """

    device: str = "cpu"
    """Device to run on: 'cpu', 'cuda', 'cuda:0', etc."""

    dtype: str = "float64"
    """Data type for amounts: 'float64', 'float32', 'float16', 'bfloat16'"""

    def get_torch_device(self) -> torch.device:
        """Get PyTorch device object."""
        return torch.device(self.device)

    def get_torch_dtype(self) -> torch.dtype:
        """Get PyTorch dtype object."""
        dtype_map = {
            "float64": torch.float64,
            "float32": torch.float32,
            "float16": torch.float16,
            "bfloat16": torch.bfloat16,
        }
        if self.dtype not in dtype_map:
            raise ConfigurationError(
                f"Unknown dtype '{self.dtype}'. "
                f"Choose from: {list(dtype_map.keys())}"
            )
        return dtype_map[self.dtype]


@dataclass
class LobeConfig(BaseConfig):
    """Configuration for a rectangular lobe of neurons.

    A lobe has ``width`` thresholded columns of ``breadth`` neurons each,
    plus one extra output column. Every neuron shares a single ``falloff``.

    Example:
        config = LobeConfig(breadth=16, width=4, falloff=0.1)
        lobe = Lobe(config)
    """

    breadth: int = 8
    """Neurons per column."""

    width: int = 4
    """Number of internal (thresholded) columns, excluding the output column."""

    falloff: float = 0.0
    """Decay rate per second applied to every neuron's value."""

    def __post_init__(self):
        validate_positive(self.breadth, "breadth")
        validate_positive(self.width, "width")
        validate_finite(self.falloff, "falloff")
        # Fail on bad dtype at construction, not at first tensor allocation
        self.get_torch_dtype()


__all__ = [
    "BaseConfig",
    "LobeConfig",
]
