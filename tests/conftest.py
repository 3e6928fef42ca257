"""
Pytest configuration and fixtures.

In-memory stand-ins for the player's collaborators, plus temporary data
directories for the file-backed registries.
"""

from pathlib import Path
from typing import Optional

import pytest

from src.player.engine import PlayerEngine
from src.scenarios.schemas import ScenarioDoc, ScenarioMeta, ScenarioStep
from src.settings.schemas import DisplayConstraints
from src.texts.schemas import TextDoc, TextMeta


def make_text(text_id: str, slides: list[str], title: str = "Song", domain: str = "songs") -> TextDoc:
    return TextDoc(
        meta=TextMeta(id=text_id, title=title, domain=domain),
        content_raw="\n\n".join(slides),
        slides=slides,
    )


def make_scenario(scenario_id: str, steps: list[ScenarioStep], title: str = "Sunday") -> ScenarioDoc:
    return ScenarioDoc(meta=ScenarioMeta(id=scenario_id, title=title), steps=steps)


class FakeTexts:
    def __init__(self, *docs: TextDoc):
        self.docs = {d.meta.id: d for d in docs}

    def find_by_id(self, text_id: str) -> Optional[TextDoc]:
        return self.docs.get(text_id)


class FakeScenarios:
    def __init__(self, *docs: ScenarioDoc):
        self.docs = {d.meta.id: d for d in docs}

    def find_by_id(self, scenario_id: str) -> Optional[ScenarioDoc]:
        return self.docs.get(scenario_id)


class FakeSettings:
    def __init__(self, max_chars_per_line: int = 10, max_lines_per_page: int = 2):
        self.max_chars_per_line = max_chars_per_line
        self.max_lines_per_page = max_lines_per_page

    def current(self) -> DisplayConstraints:
        return DisplayConstraints(
            max_chars_per_line=self.max_chars_per_line,
            max_lines_per_page=self.max_lines_per_page,
        )


class RecordingNotifier:
    def __init__(self):
        self.screen_changes = 0
        self.settings_changes = 0

    def notify_screen_changed(self) -> None:
        self.screen_changes += 1

    def notify_settings_changed(self) -> None:
        self.settings_changes += 1


@pytest.fixture
def song() -> TextDoc:
    """Three slides; with 10 chars x 2 lines the first slide has two pages."""
    return make_text("T1", ["one two three four", "five six", "seven"], title="Barka")


@pytest.fixture
def texts(song) -> FakeTexts:
    return FakeTexts(song, make_text("EMPTY", [], title="Empty"))


@pytest.fixture
def scenarios() -> FakeScenarios:
    from src.scenarios.schemas import (
        AudioStep,
        BlankStep,
        HeadingStep,
        ImageStep,
        TextStep,
        VideoStep,
    )

    return FakeScenarios(
        make_scenario(
            "S1",
            [
                TextStep(text="songs/barka__T1"),
                ImageStep(image="announcements/logo.png"),
                HeadingStep(heading="Communion"),
                BlankStep(blank=True),
                TextStep(text="songs/missing__NOPE"),
                VideoStep(video="clips/intro.mp4"),
                AudioStep(audio="music/bells.mp3"),
            ],
        ),
        make_scenario("EMPTY", [], title="Nothing yet"),
    )


@pytest.fixture
def settings() -> FakeSettings:
    return FakeSettings()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def engine(texts, scenarios, settings, notifier) -> PlayerEngine:
    return PlayerEngine(texts=texts, scenarios=scenarios, settings=settings, notifier=notifier)


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Data root with one song and one scenario on disk."""
    songs = tmp_path / "texts" / "songs"
    songs.mkdir(parents=True)
    (songs / "barka__T1.md").write_text(
        "---\n"
        "schemaVersion: 1\n"
        "id: T1\n"
        "title: Barka\n"
        "description: ''\n"
        "categories: [worship]\n"
        "---\n"
        "\n"
        "one two three four\n"
        "\n"
        "five six\n"
        "\n"
        "seven\n",
        encoding="utf-8",
    )

    scenarios_dir = tmp_path / "scenarios"
    scenarios_dir.mkdir()
    (scenarios_dir / "sunday__S1.yaml").write_text(
        "schemaVersion: scenario-1\n"
        "id: S1\n"
        "title: Sunday\n"
        "description: Morning service\n"
        "steps:\n"
        "  - heading: Entrance\n"
        "  - text: songs/barka__T1\n"
        "  - image: announcements/logo.png\n"
        "  - blank: true\n",
        encoding="utf-8",
    )
    return tmp_path
