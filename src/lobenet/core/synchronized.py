"""
Exclusive-access guard and concurrent ticking for neural units.

A single lobe's phases mutate shared buffers in dependent passes, so calls on
one lobe must never interleave. Distinct lobes share nothing and can be
advanced in parallel.

Architecture:
=============

    tick_all(units, duration)
            │
            ├── worker ──► unit 0 .tick(duration)
            ├── worker ──► unit 1 .tick(duration)
            └── worker ──► unit 2 .tick(duration)
            │
    barrier: wait for every future, re-raise the first failure

Usage Example:
==============
    guarded = SynchronizedUnit(Lobe.new(8, 4, 0.1))
    guarded.apply_input(stimulus)
    guarded.tick(0.01)

    # Trainer mutating parameters while other threads tick
    with guarded.locked() as lobe:
        lobe.all_parameters_slices().weights.mul_(0.5)

Author: Lobenet Project
Date: October 2026
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from typing import Iterator, List, Optional, Sequence, Union

import torch

from lobenet.core.neural_unit import NeuralUnit
from lobenet.errors import LobeError
from lobenet.typing import BlockSequence

logger = logging.getLogger(__name__)


class SynchronizedUnit:
    """Wrap a ``NeuralUnit`` so every call holds one re-entrant lock.

    Satisfies ``NeuralUnit`` itself, so guarded and unguarded blocks can be
    mixed in one sequence.
    """

    def __init__(self, unit: NeuralUnit):
        if not isinstance(unit, NeuralUnit):
            raise LobeError(
                f"{type(unit).__name__} does not implement the NeuralUnit protocol"
            )
        self.unit = unit
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator[NeuralUnit]:
        """Hold the lock and yield the wrapped unit."""
        with self._lock:
            yield self.unit

    def input_size(self) -> int:
        with self._lock:
            return self.unit.input_size()

    def apply_input(self, inputs: Union[torch.Tensor, Sequence[float]]) -> None:
        with self._lock:
            self.unit.apply_input(inputs)

    def tick(self, duration: float) -> None:
        with self._lock:
            self.unit.tick(duration)

    def get_output(self) -> torch.Tensor:
        with self._lock:
            return self.unit.get_output()

    def reward(self, amount: float) -> None:
        with self._lock:
            self.unit.reward(amount)

    def __repr__(self) -> str:
        return f"SynchronizedUnit({self.unit!r})"


def tick_all(
    units: BlockSequence,
    duration: float,
    max_workers: Optional[int] = None,
) -> None:
    """Advance every unit by ``duration`` on a thread pool.

    Args:
        units: Distinct units; the same object may not appear twice
        duration: Seconds to advance each unit
        max_workers: Thread pool size (default: executor's choice)

    Raises:
        LobeError: If a unit appears more than once
        Exception: The first exception raised by any worker
    """
    seen = set()
    for unit in units:
        target = unit.unit if isinstance(unit, SynchronizedUnit) else unit
        if id(target) in seen:
            raise LobeError(
                f"{target!r} passed to tick_all more than once; "
                "a unit cannot be ticked concurrently with itself"
            )
        seen.add(id(target))

    if not units:
        return

    logger.debug("Ticking %d units by %ss", len(units), duration)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures: List = [executor.submit(unit.tick, duration) for unit in units]
        errors = [f.exception() for f in futures]

    for error in errors:
        if error is not None:
            raise error


__all__ = [
    "SynchronizedUnit",
    "tick_all",
]
