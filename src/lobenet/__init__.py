"""
LOBENET - Banded integrate-and-reset lobes for composable spiking networks.

Quick Start:
============

    from lobenet import Lobe

    lobe = Lobe.new(breadth=16, width=4, falloff=0.1)
    lobe.apply_input(stimulus)
    lobe.tick(0.01)
    readout = lobe.get_output()

    # Trainer side: flat parameter vector round-trip
    params = lobe.all_parameters_owned()
    clone = Lobe.from_parameters(lobe.get_dims(), params)

Internal code should use explicit imports:

    from lobenet.core.lobe import Lobe
    from lobenet.core.parameter_layout import ParameterLayout
"""

__version__ = "0.1.0"

from lobenet.config import BaseConfig, LobeConfig
from lobenet.core.diagnostics_keys import DiagnosticKeys
from lobenet.core.lobe import Lobe, ParameterSlices
from lobenet.core.neural_unit import NeuralUnit
from lobenet.core.parameter_layout import PARAMETER_LAYOUT_VERSION, ParameterLayout
from lobenet.core.reward import NullRewardRule, RewardRule
from lobenet.core.synchronized import SynchronizedUnit, tick_all
from lobenet.errors import (
    ColumnRangeError,
    ConfigurationError,
    LobeError,
    ParameterLayoutError,
    ShapeMismatchError,
)

__all__ = [
    "__version__",
    # Configuration
    "BaseConfig",
    "LobeConfig",
    # Blocks
    "Lobe",
    "ParameterSlices",
    "NeuralUnit",
    "SynchronizedUnit",
    "tick_all",
    # Parameters
    "PARAMETER_LAYOUT_VERSION",
    "ParameterLayout",
    # Reward
    "RewardRule",
    "NullRewardRule",
    # Diagnostics
    "DiagnosticKeys",
    # Errors
    "LobeError",
    "ConfigurationError",
    "ShapeMismatchError",
    "ColumnRangeError",
    "ParameterLayoutError",
]
