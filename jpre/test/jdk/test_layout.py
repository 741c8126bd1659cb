"""Tests for jpre.jdk.layout - JDK root discovery in extracted archives."""

from __future__ import annotations

from pathlib import Path

from jpre.jdk.layout import locate_jdk_root, promotion_root, visible_entries
from jpre.platform.detection import Platform


def _tree(root: Path, *names: str) -> None:
    for name in names:
        path = root / name
        if name.endswith("/"):
            path.mkdir(parents=True, exist_ok=True)
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("", encoding="utf-8")


class TestVisibleEntries:
    def test_hidden_entries_skipped(self, tmp_path: Path) -> None:
        _tree(tmp_path, "b/", "a", ".DS_Store", "._b")
        assert visible_entries(tmp_path) == [tmp_path / "a", tmp_path / "b"]


class TestLocateJdkRoot:
    def test_linux_uses_folder(self, tmp_path: Path) -> None:
        _tree(tmp_path, "jdk/Contents/Home/")
        assert locate_jdk_root(tmp_path / "jdk", Platform.LINUX) == tmp_path / "jdk"

    def test_macos_descends_into_contents_home(self, tmp_path: Path) -> None:
        _tree(tmp_path, "jdk/Contents/Home/")
        expected = tmp_path / "jdk" / "Contents" / "Home"
        assert locate_jdk_root(tmp_path / "jdk", Platform.MACOS) == expected

    def test_macos_without_bundle_uses_folder(self, tmp_path: Path) -> None:
        _tree(tmp_path, "jdk/bin/")
        assert locate_jdk_root(tmp_path / "jdk", Platform.MACOS) == tmp_path / "jdk"


class TestPromotionRoot:
    def test_single_folder(self, tmp_path: Path) -> None:
        _tree(tmp_path, "jdk-17.0.2+8/bin/")
        assert promotion_root(tmp_path, Platform.LINUX) == tmp_path / "jdk-17.0.2+8"

    def test_single_folder_next_to_hidden_file(self, tmp_path: Path) -> None:
        _tree(tmp_path, "jdk-17.0.2+8/bin/", "._jdk-17.0.2+8")
        assert promotion_root(tmp_path, Platform.LINUX) == tmp_path / "jdk-17.0.2+8"

    def test_single_file_keeps_staging(self, tmp_path: Path) -> None:
        _tree(tmp_path, "release")
        assert promotion_root(tmp_path, Platform.LINUX) == tmp_path

    def test_several_entries_keep_staging(self, tmp_path: Path) -> None:
        _tree(tmp_path, "bin/", "lib/", "release")
        assert promotion_root(tmp_path, Platform.LINUX) == tmp_path

    def test_empty_staging(self, tmp_path: Path) -> None:
        assert promotion_root(tmp_path, Platform.LINUX) == tmp_path
