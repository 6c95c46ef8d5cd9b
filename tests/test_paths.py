from pathlib import Path

import pytest

import cvm
from cvm.data import paths


def test_get_definitions_path_base_path(tmp_path: Path) -> None:
    assert paths.get_definitions_path(tmp_path) == tmp_path


def test_default_definitions_ship_inside_the_package(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(paths.DEFINITIONS_DIR_ENV, raising=False)
    package_dir = Path(cvm.__file__).resolve().parent

    definitions_path = paths.get_definitions_path()

    assert definitions_path == paths.get_package_definitions_path()
    assert definitions_path == package_dir / "data" / "definitions"
    for filename in ("avatars.json", "classes.json", "elements.json", "monsters.json", "name_pools.json"):
        assert (definitions_path / filename).is_file(), filename


def test_environment_override(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv(paths.DEFINITIONS_DIR_ENV, str(tmp_path))
    assert paths.get_definitions_path() == tmp_path
    assert paths.get_definitions_path(tmp_path / "explicit") == tmp_path / "explicit"
