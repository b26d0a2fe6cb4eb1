"""
Unified protocol for composable neural blocks.

This module defines the common interface every lobe-like block implements,
so that a network composer can hold heterogeneous blocks behind a single
contract.

Design Philosophy
=================
The contract is structural: a block satisfies ``NeuralUnit`` by providing
the methods, not by inheriting from a base class. ``isinstance(block,
NeuralUnit)`` works at runtime because the protocol is ``runtime_checkable``.

The concrete variants are enumerated in ``lobenet.typing.NeuralBlock``.

Author: Lobenet Project
Date: October 2026
"""

from __future__ import annotations

from typing import Protocol, Sequence, Union, runtime_checkable

import torch


@runtime_checkable
class NeuralUnit(Protocol):
    """
    Capability set shared by every composable block.

    Core Capabilities
    =================
    1. **Input**: ``input_size()`` reports the expected input width and
       ``apply_input()`` accumulates an input vector.
    2. **Time**: ``tick()`` advances internal state by a duration in seconds.
    3. **Output**: ``get_output()`` exposes the current readout.
    4. **Reward**: ``reward()`` accepts a scalar reinforcement signal. Blocks
       may ignore it.

    Usage Example
    =============
    ```python
    def step(blocks: Sequence[NeuralUnit], stimulus, duration: float):
        signal = stimulus
        for block in blocks:
            block.apply_input(signal)
            block.tick(duration)
            signal = block.get_output()
        return signal
    ```
    """

    def input_size(self) -> int:
        """Number of amounts ``apply_input`` expects."""
        ...

    def apply_input(self, inputs: Union[torch.Tensor, Sequence[float]]) -> None:
        """Add ``inputs`` element-wise onto the block's input layer."""
        ...

    def tick(self, duration: float) -> None:
        """Advance simulated time by ``duration`` seconds (non-negative)."""
        ...

    def get_output(self) -> torch.Tensor:
        """Return the block's current output as a read-only snapshot."""
        ...

    def reward(self, amount: float) -> None:
        """Receive a scalar reward signal."""
        ...


__all__ = ["NeuralUnit"]
