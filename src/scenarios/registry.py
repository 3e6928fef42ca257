"""Scenario registry - loads and serves scenarios from YAML files.

Scenarios are stored as <scenarios_dir>/<slug>__<id>.yaml.
"""

import logging
import uuid
from pathlib import Path
from typing import Optional

from src.data_paths import SCENARIOS_DIR
from src.scenarios.parser import (
    ScenarioParseError,
    build_scenario_file,
    parse_scenario_file,
)
from src.scenarios.schemas import (
    ScenarioDoc,
    ScenarioMeta,
    ScenarioStep,
    ScenarioSummary,
)
from src.texts.parser import slugify

logger = logging.getLogger(__name__)


class ScenarioRegistry:
    """Registry of scenarios loaded from YAML files."""

    def __init__(self, scenarios_dir: Optional[Path] = None):
        if scenarios_dir is None:
            scenarios_dir = SCENARIOS_DIR
        self.scenarios_dir = scenarios_dir
        self._scenarios: dict[str, ScenarioDoc] = {}
        self._file_map: dict[str, Path] = {}
        self._loaded = False

    def load(self) -> None:
        """Load all scenario files."""
        if self._loaded:
            return

        self.scenarios_dir.mkdir(parents=True, exist_ok=True)

        files = sorted(
            list(self.scenarios_dir.glob("*.yaml")) + list(self.scenarios_dir.glob("*.yml"))
        )
        for yaml_file in files:
            try:
                doc = parse_scenario_file(yaml_file.read_text(encoding="utf-8"))
                self._scenarios[doc.meta.id] = doc
                self._file_map[doc.meta.id] = yaml_file
                logger.debug(f"Loaded scenario: {doc.meta.id} ({len(doc.steps)} steps)")
            except (OSError, ScenarioParseError) as e:
                logger.error(f"Failed to load scenario from {yaml_file}: {e}")

        self._loaded = True
        logger.info(f"Loaded {len(self._scenarios)} scenarios")

    def find_by_id(self, scenario_id: str) -> Optional[ScenarioDoc]:
        """Get scenario by id."""
        self.load()
        return self._scenarios.get(scenario_id)

    def list_all(self) -> list[ScenarioDoc]:
        self.load()
        return list(self._scenarios.values())

    def list_summaries(self) -> list[ScenarioSummary]:
        self.load()
        return [
            ScenarioSummary(
                id=s.meta.id,
                title=s.meta.title,
                description=s.meta.description,
                step_count=len(s.steps),
            )
            for s in self._scenarios.values()
        ]

    def create(
        self,
        title: str,
        description: str = "",
        steps: Optional[list[ScenarioStep]] = None,
    ) -> ScenarioDoc:
        """Create a new scenario file."""
        self.load()
        doc = ScenarioDoc(
            meta=ScenarioMeta(id=uuid.uuid4().hex.upper(), title=title, description=description),
            steps=steps or [],
        )
        path = self.scenarios_dir / f"{slugify(title) or 'scenario'}__{doc.meta.id}.yaml"
        return self._write(doc, path)

    def update(
        self,
        scenario_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        steps: Optional[list[ScenarioStep]] = None,
    ) -> Optional[ScenarioDoc]:
        """Update an existing scenario. Renames the file when the title changes."""
        existing = self.find_by_id(scenario_id)
        if existing is None:
            return None

        meta = existing.meta.model_copy(
            update={
                k: v
                for k, v in {"title": title, "description": description}.items()
                if v is not None
            }
        )
        doc = ScenarioDoc(meta=meta, steps=existing.steps if steps is None else steps)

        old_path = self._file_map[scenario_id]
        new_path = old_path.with_name(f"{slugify(meta.title) or 'scenario'}__{scenario_id}.yaml")
        saved = self._write(doc, new_path)
        if new_path != old_path and old_path.exists():
            old_path.unlink()
            logger.info(f"Renamed scenario file: {old_path.name} -> {new_path.name}")
        return saved

    def delete(self, scenario_id: str) -> bool:
        self.load()
        path = self._file_map.pop(scenario_id, None)
        if path is None:
            return False
        self._scenarios.pop(scenario_id, None)
        if path.exists():
            path.unlink()
        logger.info(f"Deleted scenario: {scenario_id}")
        return True

    def count(self) -> int:
        self.load()
        return len(self._scenarios)

    def reload(self) -> None:
        """Force reload all scenarios from disk."""
        self._loaded = False
        self._scenarios.clear()
        self._file_map.clear()
        self.load()

    def _write(self, doc: ScenarioDoc, path: Path) -> ScenarioDoc:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(build_scenario_file(doc), encoding="utf-8")
        self._scenarios[doc.meta.id] = doc
        self._file_map[doc.meta.id] = path
        logger.info(f"Saved scenario: {doc.meta.title} ({doc.meta.id})")
        return doc


# Global registry instance
_registry: Optional[ScenarioRegistry] = None


def get_scenario_registry() -> ScenarioRegistry:
    """Get the global scenario registry instance."""
    global _registry
    if _registry is None:
        _registry = ScenarioRegistry()
        _registry.load()
    return _registry
