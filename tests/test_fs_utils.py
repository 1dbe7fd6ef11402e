"""Tests for safe removal of partially created projects."""

import os
from pathlib import Path

import pytest

from projkit.fs_utils import create_safe_path, safe_rmtree


def test_removes_direct_child(tmp_path: Path):
    target = tmp_path / "Alpha"
    (target / "nested").mkdir(parents=True)
    (target / "nested" / "f.txt").write_text("x")
    safe_rmtree(create_safe_path(target, tmp_path))
    assert not target.exists()


def test_refuses_workdir_itself(tmp_path: Path):
    with pytest.raises(PermissionError):
        create_safe_path(tmp_path, tmp_path)


def test_refuses_paths_outside_workdir(tmp_path: Path):
    (tmp_path / "a" / "b").mkdir(parents=True)
    with pytest.raises(PermissionError):
        create_safe_path(tmp_path / "a" / "b", tmp_path)
    with pytest.raises(PermissionError):
        create_safe_path(tmp_path.parent, tmp_path)


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
def test_refuses_symlink(tmp_path: Path):
    real = tmp_path / "real"
    real.mkdir()
    link = tmp_path / "Alpha"
    link.symlink_to(real, target_is_directory=True)
    with pytest.raises(PermissionError):
        create_safe_path(link, tmp_path)
    assert real.is_dir()


def test_missing_path_is_noop(tmp_path: Path):
    safe_rmtree(create_safe_path(tmp_path / "gone", tmp_path))
