"""Capped history log of generated projects."""

import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from .models import GeneratedProject

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


class HistoryStore:
    """Most-recent-first list of projects persisted to a YAML file."""

    def __init__(self, path: Path, limit: int = DEFAULT_LIMIT) -> None:
        self._path = Path(path)
        self._limit = limit

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[GeneratedProject]:
        """Load saved projects.

        A missing file is an empty history. An unreadable one is logged and
        also treated as empty, so it gets overwritten by the next save.
        """
        if not self._path.exists():
            return []

        try:
            with open(self._path, "r") as f:
                data = yaml.safe_load(f) or []
            return [GeneratedProject.model_validate(item) for item in data]
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning(f"Ignoring unreadable history file {self._path}: {e}")
            return []

    def save(self, projects: List[GeneratedProject]) -> None:
        """Write projects to the history file."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data = [p.model_dump(mode="json", by_alias=True) for p in projects[: self._limit]]
        with open(self._path, "w") as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)

    def add(self, project: GeneratedProject) -> List[GeneratedProject]:
        """Prepend a project, drop the oldest beyond the limit and save."""
        projects = [project, *self.load()][: self._limit]
        self.save(projects)
        logger.debug(f"History now holds {len(projects)} project(s)")
        return projects

    def get(self, project_id: str) -> Optional[GeneratedProject]:
        """Return the saved project with the given id, if any."""
        for project in self.load():
            if project.id == project_id:
                return project
        return None

    def clear(self) -> None:
        """Delete the history file."""
        if self._path.exists():
            self._path.unlink()
