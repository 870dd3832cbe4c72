from __future__ import annotations

import csv
import io
import json

import pytest

from conftest import scene_dict
from promptforge.export import ExportFormat, export_project, scenes_to_csv, scenes_to_json, scenes_to_text
from promptforge.history import HistoryStore
from promptforge.models import Complexity, FocusPreset, GeneratedProject, Provider, Scene, Tone
from promptforge.prompts import SCENE_FIELDS


def _project(title: str = "Monsoon Day", n_scenes: int = 2) -> GeneratedProject:
    return GeneratedProject(
        title=title,
        provider=Provider.OPENAI,
        model="gpt-4o",
        tone=Tone.FUNNY,
        complexity=Complexity.INTERMEDIATE,
        focus=FocusPreset.VILLAGE_LIFE,
        scene_count=n_scenes,
        scenes=[Scene.model_validate(scene_dict(i + 1)) for i in range(n_scenes)],
    )


def test_history_round_trips_through_file(tmp_path):
    store = HistoryStore(tmp_path / "history.yaml")
    project = _project()

    store.add(project)
    loaded = HistoryStore(tmp_path / "history.yaml").load()

    assert len(loaded) == 1
    assert loaded[0].id == project.id
    assert loaded[0].scenes == project.scenes
    assert loaded[0].focus == FocusPreset.VILLAGE_LIFE


def test_history_is_most_recent_first_and_capped(tmp_path):
    store = HistoryStore(tmp_path / "history.yaml", limit=10)
    projects = [_project(title=f"Project {i}", n_scenes=1) for i in range(12)]

    for project in projects:
        store.add(project)

    titles = [p.title for p in store.load()]
    assert titles == [f"Project {i}" for i in range(11, 1, -1)]


def test_history_missing_file_is_empty(tmp_path):
    assert HistoryStore(tmp_path / "nope.yaml").load() == []


def test_history_corrupt_file_is_empty(tmp_path):
    path = tmp_path / "history.yaml"
    path.write_text("- {title: [unclosed\n")

    assert HistoryStore(path).load() == []


def test_history_get_and_clear(tmp_path):
    store = HistoryStore(tmp_path / "history.yaml")
    project = _project()
    store.add(project)

    assert store.get(project.id).title == "Monsoon Day"
    assert store.get("missing") is None

    store.clear()
    assert store.load() == []


def test_text_export_lists_every_scene():
    text = scenes_to_text(_project())

    assert text.startswith("Monsoon Day\nFunny | Intermediate | Village Life")
    assert "Scene 1" in text and "Scene 2" in text
    assert "Camera: Slow pan left, then quick zoom on his face" in text
    assert text.count("Classic 2D Bangladeshi Cartoon Style - No 3D") == 2


def test_json_export_uses_wire_names():
    data = json.loads(scenes_to_json(_project()))

    assert data["scenes"][0] == scene_dict(1)
    assert data["focus"] == "Village Life"


def test_csv_export_has_one_row_per_scene():
    rows = list(csv.DictReader(io.StringIO(scenes_to_csv(_project(n_scenes=3)))))

    assert len(rows) == 3
    assert list(rows[0]) == SCENE_FIELDS
    assert rows[2]["number"] == "3"


@pytest.mark.parametrize(
    "fmt, suffix",
    [(ExportFormat.TEXT, ".txt"), (ExportFormat.JSON, ".json"), (ExportFormat.CSV, ".csv")],
)
def test_export_project_adds_suffix(tmp_path, fmt, suffix):
    written = export_project(_project(), tmp_path / "out" / "monsoon", fmt)

    assert written == tmp_path / "out" / f"monsoon{suffix}"
    assert written.read_text(encoding="utf-8")
