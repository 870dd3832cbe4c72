"""Text, JSON and CSV renderings of a generated project."""

import csv
import io
import json
from enum import Enum
from pathlib import Path

from .models import GeneratedProject
from .prompts import SCENE_FIELDS


class ExportFormat(str, Enum):
    """Export file formats."""
    TEXT = "text"
    JSON = "json"
    CSV = "csv"


EXTENSIONS = {
    ExportFormat.TEXT: ".txt",
    ExportFormat.JSON: ".json",
    ExportFormat.CSV: ".csv",
}


def scenes_to_text(project: GeneratedProject) -> str:
    """Render every scene as plain text, ready to paste."""
    lines = [
        f"{project.title}",
        f"{project.tone.value} | {project.complexity.value} | {project.focus.value}",
        "",
    ]
    for scene in project.scenes:
        lines.extend([
            f"Scene {scene.number}",
            f"{scene.characters}. {scene.setup}",
            f"Camera: {scene.movement}",
            f"Background: {scene.background}",
            f"Lighting: {scene.lighting}",
            f"Mood: {scene.mood}",
            f"Final check: {scene.final_check}",
            scene.style_lock,
            "",
        ])
    return "\n".join(lines)


def scenes_to_json(project: GeneratedProject) -> str:
    """Render the project as JSON using the camelCase scene keys."""
    return json.dumps(
        project.model_dump(mode="json", by_alias=True), indent=2, ensure_ascii=False
    )


def scenes_to_csv(project: GeneratedProject) -> str:
    """Render one CSV row per scene, for spreadsheets."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=SCENE_FIELDS)
    writer.writeheader()
    for scene in project.scenes:
        writer.writerow(scene.model_dump(by_alias=True))
    return buffer.getvalue()


_RENDERERS = {
    ExportFormat.TEXT: scenes_to_text,
    ExportFormat.JSON: scenes_to_json,
    ExportFormat.CSV: scenes_to_csv,
}


def render(project: GeneratedProject, fmt: ExportFormat) -> str:
    """Render a project in the given format."""
    return _RENDERERS[fmt](project)


def export_project(project: GeneratedProject, path: Path, fmt: ExportFormat) -> Path:
    """Write a project to ``path`` and return the path written.

    A missing suffix is filled in from the format.
    """
    path = Path(path)
    if not path.suffix:
        path = path.with_suffix(EXTENSIONS[fmt])
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render(project, fmt), encoding="utf-8")
    return path
