"""Unit types for lobe computations.

Uses Python's NewType for zero-runtime-cost type checking with mypy/pyright.

Example usage:
    from lobenet.units import Amount, Seconds

    def decay(value: Amount, falloff: Amount, duration: Seconds) -> Amount:
        return value - value * falloff * duration
"""

from typing import NewType

import torch

# =============================================================================
# SCALAR UNITS
# =============================================================================

Amount = NewType("Amount", float)
"""Any stored lobe quantity: activation, threshold, strength, weight, falloff.

Amounts are dimensionless. Activation is only meaningful relative to the
thresholds of the same lobe.
"""

Seconds = NewType("Seconds", float)
"""Simulated time elapsed in one tick. Must be non-negative."""

# =============================================================================
# TENSOR TYPES
# =============================================================================

AmountTensor = NewType("AmountTensor", torch.Tensor)
"""1-D tensor of amounts, usually a view into one of a lobe's buffers."""


__all__ = [
    "Amount",
    "Seconds",
    "AmountTensor",
]
