"""Standard diagnostic key names for consistent metrics reporting.

This module defines canonical key names for the dictionaries returned by
``get_diagnostics()``.

Usage:
======
    from lobenet.core.diagnostics_keys import DiagnosticKeys as DK

    diagnostics = lobe.get_diagnostics()
    print(diagnostics[DK.ACTIVATION_MEAN])

Author: Lobenet Project
Date: October 2026
"""

from __future__ import annotations


class DiagnosticKeys:
    """Standard diagnostic key names."""

    # =========================================================================
    # Activity Metrics
    # =========================================================================
    ACTIVATION_MEAN = "activation_mean"
    """Mean value over every neuron, output column included."""

    ACTIVATION_MAX = "activation_max"
    """Largest value over every neuron."""

    ARMED_FRACTION = "armed_fraction"
    """Fraction of thresholded neurons whose value is at or above threshold (0-1)."""

    OUTPUT_MEAN = "output_mean"
    """Mean value of the output column."""

    # =========================================================================
    # Parameter Metrics
    # =========================================================================
    WEIGHT_MEAN = "weight_mean"
    """Mean link weight."""

    WEIGHT_STD = "weight_std"
    """Standard deviation of link weights."""

    THRESHOLD_MEAN = "threshold_mean"
    """Mean firing threshold."""

    STRENGTH_MEAN = "strength_mean"
    """Mean forwarding strength."""

    FALLOFF = "falloff"
    """Global decay rate."""


__all__ = ["DiagnosticKeys"]
