"""
Configuration for lobenet components.

Usage:
    from lobenet.config import LobeConfig

    config = LobeConfig(breadth=16, width=4, falloff=0.1)
"""

from .base import BaseConfig, LobeConfig

__all__ = [
    "BaseConfig",
    "LobeConfig",
]
