"""Lobe - a rectangular cluster of integrate-and-reset neurons.

A lobe stores ``width + 1`` columns of ``breadth`` neurons. Column 0 receives
input, columns ``1..width`` are internal and column ``width`` is the output
column. Every neuron in columns ``0..width-1`` owns a threshold, a strength
and three weights for its links into the next column (banded connectivity):

    column c                column c+1
    ────────                ──────────
    neuron i   ──w[0]──►    neuron i-1
               ──w[1]──►    neuron i
               ──w[2]──►    neuron i+1

Storage:
========
All state lives in flat 1-D tensors. Neuron ``i`` of column ``c`` is at flat
index ``c * breadth + i``; its three weights at ``(c * breadth + i) * 3``.
Column accessors return views into these buffers, never copies.

    values      breadth * (width + 1)
    thresholds  breadth * width
    strengths   breadth * width
    weights     breadth * width * 3
    falloff     1

Tick:
=====
Each ``tick(duration)`` runs three phases in order:

1. **Propagation**: every neuron at or above threshold sends
   ``value * weight * strength * duration`` along each of its links.
2. **Firing reset**: neurons at or above threshold drop to zero.
3. **Integration and decay**: propagated signal is added to columns
   ``1..width``, then every value decays by ``value * falloff * duration``.

Example:
    lobe = Lobe.new(breadth=1, width=1, falloff=0.0)
    slices = lobe.all_parameters_slices()
    slices.weights.copy_(torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64))
    slices.strengths.fill_(1.0)

    lobe.apply_input([5.0])
    lobe.tick(1.0)
    lobe.get_output()  # tensor([5.])

Author: Lobenet Project
Date: October 2026
"""

from __future__ import annotations

import logging
from typing import Any, Dict, NamedTuple, Optional, Sequence, Union

import torch

from lobenet.config import LobeConfig
from lobenet.core.diagnostics_keys import DiagnosticKeys as DK
from lobenet.core.parameter_layout import LINKS_PER_NEURON, ParameterLayout
from lobenet.core.reward import NullRewardRule, RewardRule
from lobenet.errors import ShapeMismatchError, validate_column, validate_finite, validate_length
from lobenet.typing import Dims, ParameterVector
from lobenet.units import Amount, AmountTensor, Seconds

logger = logging.getLogger(__name__)


class ParameterSlices(NamedTuple):
    """Mutable views into a lobe's parameter buffers.

    Writing into these tensors changes the lobe directly. ``falloff`` is a
    single-element view.
    """

    weights: torch.Tensor
    thresholds: torch.Tensor
    strengths: torch.Tensor
    falloff: torch.Tensor


class Lobe:
    """Rectangular lobe of neurons with banded next-column connectivity.

    Satisfies the ``NeuralUnit`` protocol.

    Args:
        config: Dimensions, initial falloff, device and dtype
        reward_rule: Receives every ``reward()`` call (default: no-op)
    """

    def __init__(
        self,
        config: LobeConfig,
        reward_rule: Optional[RewardRule] = None,
    ):
        self.config = config
        self.breadth = config.breadth
        self.width = config.width
        self.device = config.get_torch_device()
        self.dtype = config.get_torch_dtype()
        self.layout = ParameterLayout(self.breadth, self.width)
        self.reward_rule: RewardRule = reward_rule or NullRewardRule()

        area = self.breadth * self.width
        kwargs = {"dtype": self.dtype, "device": self.device}
        self.values = torch.zeros(self.breadth * (self.width + 1), **kwargs)
        self.thresholds = torch.zeros(area, **kwargs)
        self.strengths = torch.zeros(area, **kwargs)
        self.weights = torch.zeros(area * LINKS_PER_NEURON, **kwargs)
        self._falloff = torch.full((1,), float(config.falloff), **kwargs)

        logger.debug(
            "Created lobe breadth=%d width=%d falloff=%s on %s",
            self.breadth, self.width, config.falloff, self.device,
        )

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def new(
        cls,
        breadth: int,
        width: int,
        falloff: float,
        device: str = "cpu",
        dtype: str = "float64",
        reward_rule: Optional[RewardRule] = None,
    ) -> "Lobe":
        """Create a zero-initialized (inert) lobe."""
        config = LobeConfig(
            breadth=breadth, width=width, falloff=falloff, device=device, dtype=dtype,
        )
        return cls(config, reward_rule=reward_rule)

    @classmethod
    def from_parameters(
        cls,
        dims: Dims,
        params: Union[ParameterVector, Sequence[float]],
        device: str = "cpu",
        dtype: str = "float64",
        reward_rule: Optional[RewardRule] = None,
    ) -> "Lobe":
        """Rebuild a lobe from a flat parameter vector.

        Args:
            dims: ``(width, breadth)``, as returned by ``get_dims()``
            params: ``[thresholds, weights, strengths, falloff]`` of length
                ``breadth * width * 5 + 1``

        Values always start at zero; activation is never part of the vector.

        Raises:
            ShapeMismatchError: If ``params`` has the wrong length or shape
        """
        width, breadth = dims
        layout = ParameterLayout(breadth, width)
        config = LobeConfig(breadth=breadth, width=width, device=device, dtype=dtype)

        flat = torch.as_tensor(
            params, dtype=config.get_torch_dtype(), device=config.get_torch_device()
        )
        try:
            named = layout.split(flat)
        except ShapeMismatchError:
            logger.warning(
                "Rejected parameter vector of shape %s for dims %s (need %d values)",
                tuple(flat.shape), dims, layout.total_size,
            )
            raise

        config.falloff = float(named["falloff"][0])
        validate_finite(config.falloff, "falloff")

        lobe = cls(config, reward_rule=reward_rule)
        lobe.thresholds.copy_(named["thresholds"])
        lobe.weights.copy_(named["weights"])
        lobe.strengths.copy_(named["strengths"])
        lobe._falloff.copy_(named["falloff"])
        logger.debug("Rebuilt lobe from %d parameters", layout.total_size)
        return lobe

    # =========================================================================
    # Data Layout & Accessors
    # =========================================================================

    def value_column(self, which: int) -> AmountTensor:
        """View of the ``breadth`` values in column ``which`` (``0..width``)."""
        validate_column(which, self.width, "value column")
        return self.value_columns()[which]

    def value_columns(self) -> torch.Tensor:
        """2-D view ``[width + 1, breadth]``; iterating yields columns in order."""
        return self.values.view(self.width + 1, self.breadth)

    def strength_column(self, which: int) -> torch.Tensor:
        validate_column(which, self.width - 1, "strength column")
        return self.strength_columns()[which]

    def strength_columns(self) -> torch.Tensor:
        return self.strengths.view(self.width, self.breadth)

    def threshold_column(self, which: int) -> torch.Tensor:
        validate_column(which, self.width - 1, "threshold column")
        return self.threshold_columns()[which]

    def threshold_columns(self) -> torch.Tensor:
        return self.thresholds.view(self.width, self.breadth)

    def weight_column(self, which: int) -> torch.Tensor:
        """Flat view of the ``3 * breadth`` weights leaving column ``which``."""
        validate_column(which, self.width - 1, "weight column")
        return self.weight_columns()[which]

    def weight_columns(self) -> torch.Tensor:
        return self.weights.view(self.width, self.breadth * LINKS_PER_NEURON)

    def weight_links(self, which: int) -> torch.Tensor:
        """View ``[breadth, 3]`` of column ``which``: one row of links per neuron."""
        return self.weight_column(which).view(self.breadth, LINKS_PER_NEURON)

    @property
    def falloff(self) -> Amount:
        return float(self._falloff.item())

    @falloff.setter
    def falloff(self, value: float) -> None:
        validate_finite(value, "falloff")
        self._falloff.fill_(float(value))

    def get_dims(self) -> Dims:
        """Return ``(width, breadth)``."""
        return (self.width, self.breadth)

    # =========================================================================
    # Neural Unit
    # =========================================================================

    def input_size(self) -> int:
        return self.breadth

    def apply_input(self, inputs: Union[torch.Tensor, Sequence[float]]) -> None:
        """Add ``inputs`` element-wise onto the input column.

        Raises:
            ShapeMismatchError: If ``len(inputs) != breadth``
        """
        inputs = torch.as_tensor(inputs, dtype=self.dtype, device=self.device)
        validate_length(inputs, self.breadth, name="input")
        self.value_column(0).add_(inputs)

    def tick(self, duration: Seconds) -> None:
        """Advance simulated time by ``duration`` seconds.

        ``duration`` must be non-negative; a negative value is not rejected
        and turns decay into growth.
        """
        duration = float(duration)
        values = self.value_columns()
        sources = values[:self.width]
        thresholds = self.threshold_columns()
        strengths = self.strength_columns()
        links = self.weights.view(self.width, self.breadth, LINKS_PER_NEURON)

        # Propagation reads pre-reset values
        fired = sources >= thresholds
        outputs = torch.zeros_like(sources)
        zero = torch.zeros((), dtype=self.dtype, device=self.device)
        for offset in range(LINKS_PER_NEURON):
            signal = torch.where(
                fired, sources * links[:, :, offset] * strengths * duration, zero
            )
            if offset == 0:
                outputs[:, :-1] += signal[:, 1:]
            elif offset == 1:
                outputs += signal
            else:
                outputs[:, 1:] += signal[:, :-1]

        # Firing reset
        sources.masked_fill_(fired, 0.0)

        # Integration and decay
        values[1:] += outputs
        self.values.sub_(self.values * self._falloff * duration)

    def get_output(self) -> AmountTensor:
        """Copy of the output column (column ``width``)."""
        return self.value_column(self.width).clone()

    def reward(self, amount: Amount) -> None:
        """Forward a reward to ``reward_rule``. No effect with the default rule."""
        self.reward_rule.apply(self, amount)

    def reset_state(self) -> None:
        """Zero every value. Parameters are kept."""
        self.values.zero_()
        self.reward_rule.reset_state()

    # =========================================================================
    # Parameters
    # =========================================================================

    def parameter_layout(self) -> ParameterLayout:
        return self.layout

    def all_parameters_owned(self) -> ParameterVector:
        """Fresh flat copy ``[thresholds, weights, strengths, falloff]``."""
        return self.layout.pack(
            {
                "thresholds": self.thresholds,
                "weights": self.weights,
                "strengths": self.strengths,
                "falloff": self._falloff,
            },
            dtype=self.dtype,
            device=self.device,
        )

    def all_parameters_slices(self) -> ParameterSlices:
        """Disjoint mutable views into the parameter buffers."""
        return ParameterSlices(
            weights=self.weights,
            thresholds=self.thresholds,
            strengths=self.strengths,
            falloff=self._falloff[0:1],
        )

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def get_diagnostics(self) -> Dict[str, Any]:
        """Summary statistics of current activity and parameters."""
        sources = self.value_columns()[:self.width]
        armed = (sources >= self.threshold_columns()).to(self.dtype)
        return {
            DK.ACTIVATION_MEAN: self.values.mean().item(),
            DK.ACTIVATION_MAX: self.values.max().item(),
            DK.ARMED_FRACTION: armed.mean().item(),
            DK.OUTPUT_MEAN: self.value_column(self.width).mean().item(),
            DK.WEIGHT_MEAN: self.weights.mean().item(),
            DK.WEIGHT_STD: self.weights.std().item(),
            DK.THRESHOLD_MEAN: self.thresholds.mean().item(),
            DK.STRENGTH_MEAN: self.strengths.mean().item(),
            DK.FALLOFF: self.falloff,
        }

    def __repr__(self) -> str:
        return (
            f"Lobe(breadth={self.breadth}, width={self.width}, "
            f"falloff={self.falloff}, dtype={self.dtype})"
        )


__all__ = [
    "Lobe",
    "ParameterSlices",
]
