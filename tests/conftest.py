import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import fortune_kind
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


def write_fortunes(path: Path, *texts: str) -> Path:
    """Write texts to path in fortune-file format."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{text}\n%\n" for text in texts), encoding="utf-8")
    return path


# Common test fixtures
@pytest.fixture
def fortune_dir(tmp_path: Path) -> Path:
    """Directory with two files, a.txt ("X") and b.txt ("Y")."""
    root = tmp_path / "fortunes"
    write_fortunes(root / "b.txt", "Y")
    write_fortunes(root / "a.txt", "X")
    return root


@pytest.fixture
def fortune_roots(tmp_path: Path) -> tuple[Path, Path]:
    """Standard and unkind roots with a mix of short and long fortunes."""
    standard = tmp_path / "standard"
    unkind = tmp_path / "off"
    write_fortunes(standard / "kind", "Be nice.", "Kindness is a language the deaf can hear and the blind can see. " * 3)
    write_fortunes(unkind / "rude", "Go away.", "Nobody asked. " * 12)
    return standard, unkind


@pytest.fixture
def clean_env(monkeypatch):
    """Remove fortune environment variables for the test."""
    monkeypatch.delenv("FORTUNE_DIR", raising=False)
    monkeypatch.delenv("FORTUNE_OFF_DIR", raising=False)
    return monkeypatch


@pytest.fixture
def make_fortune_file():
    """Return the write_fortunes helper."""
    return write_fortunes
