"""Data models for the storyboard prompt generator."""

from .scene import Scene, SceneEnvelope
from .request import Tone, Complexity, FocusPreset, Provider, GenerationRequest
from .project import GeneratedProject

__all__ = [
    "Scene",
    "SceneEnvelope",
    "Tone",
    "Complexity",
    "FocusPreset",
    "Provider",
    "GenerationRequest",
    "GeneratedProject",
]
