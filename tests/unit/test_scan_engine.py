"""FileScanner and iter_files tests."""

import os
from pathlib import Path

import pytest

from image_filter_tool.core.scan_engine import FileScanner
from image_filter_tool.errors import ScanError
from image_filter_tool.utils.utils import iter_files, is_image


@pytest.fixture
def tree(tmp_path):
    (tmp_path / "a").mkdir()
    (tmp_path / "a" / "deep" / "er").mkdir(parents=True)
    (tmp_path / "dacy").mkdir()
    for rel in [
        "top.jpg",
        "notes.txt",
        "a/photo.PNG",
        "a/anim.gif",
        "a/deep/er/scan.bmp",
        "a/deep/er/raw.JpEg",
        "a/deep/readme.md",
        "dacy/flagged.jpg",
    ]:
        (tmp_path / rel).write_bytes(b"x")
    return tmp_path


class TestIsImage:
    @pytest.mark.parametrize("name", ["a.jpg", "a.JPG", "a.jpeg", "a.png", "a.gif", "a.BMP"])
    def test_allowed(self, name):
        assert is_image(Path(name))

    @pytest.mark.parametrize("name", ["a.heic", "a.txt", "a", "a.jpg.tmp", "a.webp"])
    def test_rejected(self, name):
        assert not is_image(Path(name))


class TestFileScanner:
    def test_finds_images_recursively(self, tree):
        found = FileScanner(tree, tree / "dacy").scan()
        names = sorted(p.name for p in found)
        assert names == ["anim.gif", "photo.PNG", "raw.JpEg", "scan.bmp", "top.jpg"]

    def test_never_returns_quarantined_files(self, tree):
        (tree / "dacy" / "nested").mkdir()
        (tree / "dacy" / "nested" / "other.png").write_bytes(b"x")
        found = FileScanner(tree, tree / "dacy").scan()
        quarantine = (tree / "dacy").resolve()
        assert all(quarantine not in p.resolve().parents for p in found)

    def test_quarantine_name_elsewhere_is_still_scanned(self, tree):
        (tree / "a" / "dacy").mkdir()
        (tree / "a" / "dacy" / "kept.jpg").write_bytes(b"x")
        found = FileScanner(tree, tree / "dacy").scan()
        assert tree / "a" / "dacy" / "kept.jpg" in found

    def test_counts_extensions_and_other_files(self, tree):
        scanner = FileScanner(tree, tree / "dacy")
        scanner.scan()
        assert scanner.non_image_count == 2
        assert scanner.ext_counter[".jpeg"] == 1
        assert sum(scanner.ext_counter.values()) == 5

    def test_order_is_repeatable(self, tree):
        scanner = FileScanner(tree, tree / "dacy")
        assert scanner.scan() == scanner.scan()

    def test_empty_folder(self, tmp_path):
        assert FileScanner(tmp_path, tmp_path / "dacy").scan() == []

    def test_unreadable_directory_is_fatal(self, tree, monkeypatch):
        real_scandir = os.scandir
        broken = str(tree / "a" / "deep")

        def fake_scandir(path):
            if str(path) == broken:
                raise PermissionError("denied")
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", fake_scandir)
        with pytest.raises(ScanError):
            FileScanner(tree, tree / "dacy").scan()

    def test_missing_root_is_fatal(self, tmp_path):
        with pytest.raises(ScanError):
            FileScanner(tmp_path / "missing").scan()


def test_iter_files_does_not_follow_symlinked_dirs(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    (target / "x.jpg").write_bytes(b"x")
    root = tmp_path / "root"
    root.mkdir()
    try:
        os.symlink(target, root / "link", target_is_directory=True)
    except (OSError, NotImplementedError):
        pytest.skip("symlinks not supported")
    assert list(iter_files(root)) == []
