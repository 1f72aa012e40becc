from pathlib import Path
import pytest

from deploygate.domain.output import BufferedOutput


@pytest.fixture(autouse=True)
def home_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Hermetic home directory.

    Keeps tests away from the developer's real ~/.deploygate/config.yml and
    gives the home-directory guard a path the test controls.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return str(home)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An existing project directory outside the home directory."""
    d = tmp_path / "project"
    d.mkdir()
    return d


@pytest.fixture
def output() -> BufferedOutput:
    return BufferedOutput()


class ScriptedConfirm:
    """Confirm prompt that returns a fixed answer and records its calls."""

    def __init__(self, answer: bool) -> None:
        self.answer = answer
        self.calls: list[tuple[str, bool]] = []

    def __call__(self, message: str, default: bool) -> bool:
        self.calls.append((message, default))
        return self.answer


@pytest.fixture
def confirm_yes() -> ScriptedConfirm:
    return ScriptedConfirm(True)


@pytest.fixture
def confirm_no() -> ScriptedConfirm:
    return ScriptedConfirm(False)
