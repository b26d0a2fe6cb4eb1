"""
Type Aliases for lobenet

Example:
    from lobenet.typing import Dims, NeuralBlock, ParameterVector

Author: Lobenet Project
Date: October 2026
"""

from typing import TYPE_CHECKING, Sequence, Tuple, Union

import torch

if TYPE_CHECKING:
    from lobenet.core.lobe import Lobe
    from lobenet.core.synchronized import SynchronizedUnit

# ============================================================================
# Block Variants
# ============================================================================

NeuralBlock = Union["Lobe", "SynchronizedUnit"]
"""Every concrete block a composer may hold. Extend when adding a variant."""

BlockSequence = Sequence[NeuralBlock]
"""Ordered, heterogeneous blocks processed front to back."""

# ============================================================================
# Shapes and Buffers
# ============================================================================

Dims = Tuple[int, int]
"""Lobe dimensions as ``(width, breadth)``."""

ParameterVector = torch.Tensor
"""Flat ``[thresholds, weights, strengths, falloff]`` vector."""


__all__ = [
    "NeuralBlock",
    "BlockSequence",
    "Dims",
    "ParameterVector",
]
