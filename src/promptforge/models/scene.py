"""Scene data model."""

from typing import List
from pydantic import BaseModel, Field


class Scene(BaseModel):
    """One storyboard Masterprompt.

    Attribute names are snake_case; the camelCase aliases are the names the
    providers are asked to return and the names used for export.
    """

    number: int = Field(..., description="Scene number as given by the provider")
    style_lock: str = Field(..., alias="styleLock", description="Style-lock statement")
    characters: str = Field(..., description="Characters, attire and expressions")
    setup: str = Field(..., description="Action following 2D animation principles")
    movement: str = Field(..., description="Camera movement and character blocking")
    background: str = Field(..., description="Watercolor setting details")
    lighting: str = Field(..., description="Time of day and tones")
    mood: str = Field(..., description="Emotional core of the scene")
    final_check: str = Field(..., alias="finalCheck", description="2D and cultural verification")

    class Config:
        """Pydantic config."""
        frozen = False
        populate_by_name = True


class SceneEnvelope(BaseModel):
    """Object wrapper some chat providers put around the scene array."""

    scenes: List[Scene]
