"""Generated project model."""

import uuid
from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from .request import Complexity, FocusPreset, GenerationRequest, Provider, Tone
from .scene import Scene


class GeneratedProject(BaseModel):
    """A generation result as kept in the history log."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex[:12], description="Project identifier")
    title: str = Field(..., description="Project title")
    timestamp: datetime = Field(default_factory=datetime.now, description="Creation time")
    provider: Provider = Field(..., description="Provider that generated the scenes")
    model: str = Field(..., description="Model that generated the scenes")
    tone: Tone = Field(..., description="Story tone")
    complexity: Complexity = Field(..., description="Complexity level")
    focus: FocusPreset = Field(..., description="Cultural focus theme")
    scene_count: int = Field(..., description="Requested number of scenes")
    scenes: List[Scene] = Field(default_factory=list, description="Generated scenes")

    class Config:
        """Pydantic config."""
        frozen = False

    @classmethod
    def from_request(cls, request: GenerationRequest, scenes: List[Scene]) -> "GeneratedProject":
        """Build a project from the request that produced the scenes."""
        return cls(
            title=request.title,
            provider=request.provider,
            model=request.model,
            tone=request.tone,
            complexity=request.complexity,
            focus=request.focus,
            scene_count=request.scene_count,
            scenes=scenes,
        )
