"""
Core lobe machinery.

    from lobenet.core.lobe import Lobe
    from lobenet.core.neural_unit import NeuralUnit
    from lobenet.core.parameter_layout import ParameterLayout
"""

from lobenet.core.diagnostics_keys import DiagnosticKeys
from lobenet.core.lobe import Lobe, ParameterSlices
from lobenet.core.neural_unit import NeuralUnit
from lobenet.core.parameter_layout import (
    LINKS_PER_NEURON,
    PARAMETER_LAYOUT_VERSION,
    ParameterLayout,
    ParameterSegment,
)
from lobenet.core.reward import NullRewardRule, RewardRule
from lobenet.core.synchronized import SynchronizedUnit, tick_all

__all__ = [
    "DiagnosticKeys",
    "Lobe",
    "ParameterSlices",
    "NeuralUnit",
    "LINKS_PER_NEURON",
    "PARAMETER_LAYOUT_VERSION",
    "ParameterLayout",
    "ParameterSegment",
    "NullRewardRule",
    "RewardRule",
    "SynchronizedUnit",
    "tick_all",
]
