from __future__ import annotations

from .directional import DirectionalSweepPolicy
from .interface import Decision, DirectionPolicy, DispatchSnapshot

__all__ = [
    "Decision",
    "DirectionPolicy",
    "DirectionalSweepPolicy",
    "DispatchSnapshot",
]
