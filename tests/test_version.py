from __future__ import annotations

from importlib import metadata
from typing import TYPE_CHECKING

import cycle_safe_copy
import cycle_safe_copy.version as version_module
import pytest

if TYPE_CHECKING:
    from pathlib import Path


def _not_installed(name: str) -> str:
    raise metadata.PackageNotFoundError(name)


def test_package_exposes_version() -> None:
    assert isinstance(cycle_safe_copy.__version__, str)
    assert cycle_safe_copy.__version__


def test_reads_pyproject(tmp_path: Path) -> None:
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nname = "x"\nversion = "9.8.7"\n', "utf-8")
    assert version_module.read_pyproject_version(pyproject) == "9.8.7"


def test_falls_back_to_pyproject(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(version_module.metadata, "version", _not_installed)
    pyproject = tmp_path / "pyproject.toml"
    pyproject.write_text('[project]\nversion = "1.2.3"\n', "utf-8")
    assert version_module.get_version(pyproject) == "1.2.3"


@pytest.mark.parametrize(
    "content",
    [None, "[tool.other]\nkey = 1\n", "not = [valid"],
)
def test_unknown_when_no_version_available(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, content: str | None
) -> None:
    monkeypatch.setattr(version_module.metadata, "version", _not_installed)
    pyproject = tmp_path / "pyproject.toml"
    if content is not None:
        pyproject.write_text(content, "utf-8")
    assert version_module.get_version(pyproject) == "unknown"


def test_installed_metadata_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(version_module.metadata, "version", lambda name: "4.5.6")
    assert version_module.get_version() == "4.5.6"
