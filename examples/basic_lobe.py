#!/usr/bin/env python3
"""
Example: Basic Lobe Simulation

Demonstrates creating a lobe from a flat parameter vector, driving it with
input, observing the output column, and nudging parameters in place the way
a gradient-free trainer would.
"""

import torch

from lobenet import DiagnosticKeys as DK
from lobenet import Lobe, SynchronizedUnit, tick_all


def main():
    breadth = 16
    width = 4
    duration = 0.01  # seconds per tick
    n_ticks = 200

    # Random parameters: low thresholds, modest weights, unit strengths
    layout_size = breadth * width * 5 + 1
    params = torch.rand(layout_size, dtype=torch.float64) * 0.5
    params[-1] = 2.0  # falloff per second

    print(f"Creating lobe: breadth={breadth}, width={width}")
    lobe = Lobe.from_parameters((width, breadth), params)
    slices = lobe.all_parameters_slices()
    slices.strengths.fill_(1.0)

    print(f"Running {n_ticks} ticks of {duration}s...")
    for _ in range(n_ticks):
        lobe.apply_input(torch.rand(breadth, dtype=torch.float64))
        lobe.tick(duration)

    diagnostics = lobe.get_diagnostics()
    print("\n" + "=" * 50)
    print("Results:")
    print("=" * 50)
    print(f"  Output mean:     {diagnostics[DK.OUTPUT_MEAN]:.4f}")
    print(f"  Activation max:  {diagnostics[DK.ACTIVATION_MAX]:.4f}")
    print(f"  Armed fraction:  {diagnostics[DK.ARMED_FRACTION]:.2%}")

    # Mutate a copy in place and advance both side by side
    mutant = Lobe.from_parameters(lobe.get_dims(), lobe.all_parameters_owned())
    mutant.all_parameters_slices().weights.add_(
        torch.randn(breadth * width * 3, dtype=torch.float64) * 0.05
    )

    units = [SynchronizedUnit(lobe), SynchronizedUnit(mutant)]
    for _ in range(n_ticks):
        stimulus = torch.rand(breadth, dtype=torch.float64)
        for unit in units:
            unit.apply_input(stimulus)
        tick_all(units, duration)

    print("\nOriginal vs mutant output mean: "
          f"{lobe.get_output().mean().item():.4f} vs {mutant.get_output().mean().item():.4f}")


if __name__ == "__main__":
    main()
