"""Application layer - use cases and orchestration."""

from .commands import GenerateFacadeCommand, Stage, stages_for
from .dtos import DesignInput, DesignOutput, HoleSettings, ImageAdjustments

__all__ = [
    "DesignInput",
    "DesignOutput",
    "GenerateFacadeCommand",
    "HoleSettings",
    "ImageAdjustments",
    "Stage",
    "stages_for",
]
