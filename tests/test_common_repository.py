from pathlib import Path

import pytest

from path_labels.repositories import CommonRepository, default_root


def test_default_root_under_home_config(tmp_path: Path) -> None:
    assert default_root() == tmp_path / ".config" / "path-labels"


def test_default_root_env_override(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("PATH_LABELS_HOME", str(tmp_path / "elsewhere"))

    assert default_root() == tmp_path / "elsewhere"
    assert CommonRepository().root == tmp_path / "elsewhere"


def test_scope_root_global_and_workspace(tmp_path: Path) -> None:
    common = CommonRepository(tmp_path / "root")

    assert common.scope_root() == tmp_path / "root"
    assert common.scope_root("team") == tmp_path / "root" / "workspaces" / "team"


@pytest.mark.parametrize("name", ["", ".", "..", "a/b", "a\\b"])
def test_scope_root_rejects_invalid_names(tmp_path: Path, name: str) -> None:
    with pytest.raises(ValueError):
        CommonRepository(tmp_path).scope_root(name)


def test_list_workspaces_skips_files_and_dotdirs(tmp_path: Path) -> None:
    common = CommonRepository(tmp_path)
    (tmp_path / "workspaces" / "b").mkdir(parents=True)
    (tmp_path / "workspaces" / "a").mkdir()
    (tmp_path / "workspaces" / ".hidden").mkdir()
    (tmp_path / "workspaces" / "file.txt").write_text("x", encoding="utf-8")

    assert common.list_workspaces() == ["a", "b"]


def test_list_workspaces_missing_dir(tmp_path: Path) -> None:
    assert CommonRepository(tmp_path / "none").list_workspaces() == []
