"""
Parameter Layout - Named, versioned description of a lobe's flat parameter vector.

Trainers exchange lobe parameters as one flat vector. This module pins down
what lives where in that vector, so reordering segments is a version bump
instead of silent corruption.

Layout (version 1):
    [THRESHOLDS]  breadth * width
    [WEIGHTS]     breadth * width * 3
    [STRENGTHS]   breadth * width
    [FALLOFF]     1

Usage Example:
==============
    layout = ParameterLayout(breadth=8, width=4)
    named = layout.split(flat)          # {"thresholds": view, ...}
    flat_again = layout.pack(named)     # new tensor

Author: Lobenet Project
Date: October 2026
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Sequence, Union

import torch

from lobenet.errors import (
    ParameterLayoutError,
    validate_length,
    validate_positive,
)

logger = logging.getLogger(__name__)

# Layout version
PARAMETER_LAYOUT_VERSION = 1

# Segment order for each supported version
SEGMENT_ORDER: Dict[int, tuple] = {
    1: ("thresholds", "weights", "strengths", "falloff"),
}

# Links per neuron into the next column: below, same, above
LINKS_PER_NEURON = 3


@dataclass(frozen=True)
class ParameterSegment:
    """One named, contiguous run of the flat parameter vector."""

    name: str
    offset: int
    length: int

    @property
    def stop(self) -> int:
        return self.offset + self.length


@dataclass(frozen=True)
class ParameterLayout:
    """Layout of the flat parameter vector for a lobe of given dimensions.

    Attributes:
        breadth: Neurons per column
        width: Number of thresholded columns
        version: Layout version (see ``SEGMENT_ORDER``)
    """

    breadth: int
    width: int
    version: int = PARAMETER_LAYOUT_VERSION

    def __post_init__(self):
        validate_positive(self.breadth, "breadth")
        validate_positive(self.width, "width")
        if self.version not in SEGMENT_ORDER:
            raise ParameterLayoutError(
                f"Parameter layout version {self.version} not supported. "
                f"Supported versions: {sorted(SEGMENT_ORDER)}"
            )

    @property
    def area(self) -> int:
        """Number of thresholded neurons (``breadth * width``)."""
        return self.breadth * self.width

    def segment_lengths(self) -> Dict[str, int]:
        return {
            "thresholds": self.area,
            "weights": self.area * LINKS_PER_NEURON,
            "strengths": self.area,
            "falloff": 1,
        }

    def segments(self) -> List[ParameterSegment]:
        """Segments in vector order."""
        lengths = self.segment_lengths()
        segments = []
        offset = 0
        for name in SEGMENT_ORDER[self.version]:
            segments.append(ParameterSegment(name, offset, lengths[name]))
            offset += lengths[name]
        return segments

    def segment(self, name: str) -> ParameterSegment:
        for segment in self.segments():
            if segment.name == name:
                return segment
        raise ParameterLayoutError(
            f"Unknown parameter segment '{name}'. "
            f"Known segments: {list(SEGMENT_ORDER[self.version])}"
        )

    @property
    def total_size(self) -> int:
        """Length of the flat vector (``breadth * width * 5 + 1``)."""
        return sum(self.segment_lengths().values())

    def split(self, flat: torch.Tensor) -> Dict[str, torch.Tensor]:
        """Split a flat vector into named views (no copy).

        Raises:
            ShapeMismatchError: If ``flat`` is not 1-D of length ``total_size``
        """
        validate_length(flat, self.total_size, name="parameters")
        return {
            segment.name: flat[segment.offset:segment.stop]
            for segment in self.segments()
        }

    def pack(
        self,
        named: Mapping[str, Union[torch.Tensor, Sequence[float]]],
        dtype: torch.dtype = torch.float64,
        device: Union[str, torch.device] = "cpu",
    ) -> torch.Tensor:
        """Concatenate named segments into a new flat vector.

        Tensors keep their own dtype unless it differs from ``dtype``, in
        which case they are converted.

        Raises:
            ParameterLayoutError: If a segment is missing
            ShapeMismatchError: If a segment has the wrong length
        """
        parts = []
        for segment in self.segments():
            if segment.name not in named:
                raise ParameterLayoutError(
                    f"Missing parameter segment '{segment.name}'"
                )
            part = torch.as_tensor(named[segment.name], dtype=dtype, device=device)
            part = part.reshape(-1) if part.dim() == 0 else part
            validate_length(part, segment.length, name=segment.name)
            parts.append(part)
        return torch.cat(parts)

    def describe(self) -> Dict[str, Any]:
        """JSON-friendly description, suitable for storing beside a vector."""
        return {
            "version": self.version,
            "breadth": self.breadth,
            "width": self.width,
            "total_size": self.total_size,
            "segments": [
                {"name": s.name, "offset": s.offset, "length": s.length}
                for s in self.segments()
            ],
        }

    @classmethod
    def from_description(cls, description: Mapping[str, Any]) -> "ParameterLayout":
        """Rebuild a layout from ``describe()`` output.

        Raises:
            ParameterLayoutError: If the description is incomplete or its
                recorded total size disagrees with its dimensions
        """
        try:
            layout = cls(
                breadth=int(description["breadth"]),
                width=int(description["width"]),
                version=int(description.get("version", PARAMETER_LAYOUT_VERSION)),
            )
        except KeyError as e:
            raise ParameterLayoutError(f"Layout description missing {e}") from e

        recorded = description.get("total_size")
        if recorded is not None and int(recorded) != layout.total_size:
            raise ParameterLayoutError(
                f"Layout description total_size {recorded} does not match "
                f"{layout.total_size} for breadth={layout.breadth}, width={layout.width}"
            )
        logger.debug("Loaded parameter layout v%d (%d values)", layout.version, layout.total_size)
        return layout


__all__ = [
    "PARAMETER_LAYOUT_VERSION",
    "SEGMENT_ORDER",
    "LINKS_PER_NEURON",
    "ParameterSegment",
    "ParameterLayout",
]
