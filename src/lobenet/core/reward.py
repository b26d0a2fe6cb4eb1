"""
Reward handling extension point.

A lobe forwards every ``reward(amount)`` call to its ``RewardRule``. The
default rule does nothing; how a scalar reward should feed back into
thresholds, weights and strengths is left to rules supplied by the caller.

Example:
    class LoggingRule:
        def __init__(self):
            self.history = []

        def apply(self, lobe, amount):
            self.history.append(amount)

        def reset_state(self):
            self.history.clear()

    lobe = Lobe.new(8, 4, 0.1, reward_rule=LoggingRule())

Author: Lobenet Project
Date: October 2026
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from lobenet.core.lobe import Lobe


@runtime_checkable
class RewardRule(Protocol):
    """Protocol for reward rules attached to a lobe."""

    def apply(self, lobe: "Lobe", amount: float) -> None:
        """Respond to a reward delivered to ``lobe``.

        Rules may mutate the lobe's parameter buffers in place (see
        ``Lobe.all_parameters_slices``).
        """
        ...

    def reset_state(self) -> None:
        """Clear any traces the rule keeps between rewards."""
        ...


class NullRewardRule:
    """Reward rule with no observable effect."""

    def apply(self, lobe: "Lobe", amount: float) -> None:
        return None

    def reset_state(self) -> None:
        return None


__all__ = [
    "RewardRule",
    "NullRewardRule",
]
