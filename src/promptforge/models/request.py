"""Generation request model and its enumerations."""

from enum import Enum
from pydantic import BaseModel, Field


class Tone(str, Enum):
    """Story tone."""
    FUNNY = "Funny"
    EMOTIONAL = "Emotional"
    ADVENTURE = "Adventure"


class Complexity(str, Enum):
    """Story complexity level."""
    SIMPLE = "Simple"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class FocusPreset(str, Enum):
    """Cultural focus theme."""
    VILLAGE_LIFE = "Village Life"
    MONSOON = "Monsoon"
    FESTIVALS = "Festivals"
    ANIMALS = "Animals"
    CITY_LIFE = "City Life"


class Provider(str, Enum):
    """Remote generation service."""
    GEMINI = "Gemini"
    OPENAI = "OpenAI"
    DEEPSEEK = "DeepSeek"


class GenerationRequest(BaseModel):
    """Parameters of a single generation call."""

    provider: Provider = Field(..., description="Provider to call")
    credential: str = Field(default="", description="API key", repr=False)
    model: str = Field(..., description="Provider model identifier")
    title: str = Field(..., description="Project title")
    tone: Tone = Field(default=Tone.FUNNY, description="Story tone")
    complexity: Complexity = Field(default=Complexity.INTERMEDIATE, description="Complexity level")
    focus: FocusPreset = Field(default=FocusPreset.VILLAGE_LIFE, description="Cultural focus theme")
    scene_count: int = Field(default=80, description="Requested number of scenes")

    class Config:
        """Pydantic config."""
        frozen = False
