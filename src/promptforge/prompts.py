"""Prompt text, response schema and catalogs shared by all providers."""

from dataclasses import dataclass
from typing import Dict, List

from google.genai import types

from .models import FocusPreset, GenerationRequest, Provider

STYLE_LOCK = "Classic 2D Bangladeshi Cartoon Style - No 3D"

SYSTEM_INSTRUCTION = f"""You are a world-class 2D animation storyboard director specializing in classic Bangladeshi animation (similar to Meena Cartoon style).
Your task is to generate detailed scene-by-scene prompts for a 2D cartoon.

STRICT STYLE LOCK:
- Thick black outlines for all characters.
- Flat colors with minimal cell shading.
- Hand-drawn watercolor-style backgrounds.
- Exaggerated cartoon facial expressions.
- ABSOLUTELY NO 3D, photorealistic textures, or CGI elements.

CULTURAL ACCURACY (MANDATORY):
- Clothing: Lungi, Saree, Panjabi, Salwar Kameez, barefoot kids, gamcha around the neck.
- Environment: Bamboo huts (kucha ghar), Rickshaws with art, mud paths, Banana trees, Banyan trees, local bazars (haat), jute fields.
- Props: Clay pots (kolshi), hand fans (paka), fishing nets (jal), wooden boats (nouka).

OUTPUT FORMAT:
Return a JSON array of objects. Each scene must be a Masterprompt with these keys:
- "number": integer (scene number)
- "styleLock": string (always "{STYLE_LOCK}")
- "characters": string (Specific characters, their Bangladeshi attire, and current emotional expression)
- "setup": string (Detailed action following classic 2D animation principles of squash and stretch/exaggeration)
- "movement": string (Camera movement: e.g., pan, tilt, zoom, and character blocking)
- "background": string (Culturally accurate setting details in watercolor texture)
- "lighting": string (Time of day, soft shadows, warm or cool tones)
- "mood": string (The emotional core of the scene)
- "finalCheck": string (Verification that the scene strictly follows 2D rules and Bangladeshi cultural norms)

Input will include title, tone, complexity, focus, and scene count."""

# Wire names, in schema order
SCENE_FIELDS = [
    "number",
    "styleLock",
    "characters",
    "setup",
    "movement",
    "background",
    "lighting",
    "mood",
    "finalCheck",
]

SCENE_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.ARRAY,
    items=types.Schema(
        type=types.Type.OBJECT,
        properties={
            name: types.Schema(
                type=types.Type.INTEGER if name == "number" else types.Type.STRING
            )
            for name in SCENE_FIELDS
        },
        required=list(SCENE_FIELDS),
        property_ordering=list(SCENE_FIELDS),
    ),
)

MODELS: Dict[Provider, List[str]] = {
    Provider.GEMINI: ["gemini-3-flash-preview", "gemini-3-pro-preview", "gemini-2.5-flash"],
    Provider.OPENAI: ["gpt-4-turbo", "gpt-4o", "gpt-3.5-turbo"],
    Provider.DEEPSEEK: ["deepseek-chat", "deepseek-reasoner"],
}


def default_model(provider: Provider) -> str:
    """Return the first catalog model for a provider."""
    return MODELS[provider][0]


@dataclass(frozen=True)
class PresetTemplate:
    """A focus preset as shown to users."""

    focus: FocusPreset
    description: str


PRESET_TEMPLATES: List[PresetTemplate] = [
    PresetTemplate(FocusPreset.VILLAGE_LIFE, "Traditional rural Bangladeshi setting."),
    PresetTemplate(FocusPreset.MONSOON, "Heavy rains and lush green landscapes."),
    PresetTemplate(FocusPreset.FESTIVALS, "Eid, Pohela Boishakh, and more."),
    PresetTemplate(FocusPreset.ANIMALS, "Tigers, deer, and rural wildlife."),
    PresetTemplate(FocusPreset.CITY_LIFE, "Dhaka streets, rickshaw traffic and rooftops."),
]


def build_prompt(request: GenerationRequest) -> str:
    """Build the user prompt for scene generation."""
    prompt_parts = [
        f"Generate {request.scene_count} Masterprompt scenes for a Bangladeshi 2D cartoon.",
        f'Project Title: "{request.title}"',
        f"Tone: {request.tone.value}",
        f"Complexity Level: {request.complexity.value}",
        f"Focus Theme: {request.focus.value}",
        "",
        "Ensure each scene is culturally immersive and adheres to 2D animation rules.",
    ]
    return "\n".join(prompt_parts)
