"""Tests for project location, lockfile detection, and manifest reading."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from npmctl.domain.errors import (
    ManifestIOError,
    ManifestParseError,
    NoLockfileError,
    ProjectNotFoundError,
)
from npmctl.domain.types import PackageManager
from npmctl.infrastructure.project import (
    detect,
    get_dependencies,
    get_scripts,
    load_manifest,
    locate,
    project_root,
    read_field,
)

if TYPE_CHECKING:
    from tests.conftest import MakeProject

NPM = PackageManager.NPM


class TestLocate:
    def test_manifest_in_start_dir(self, make_project: MakeProject) -> None:
        root = make_project({})
        assert locate(root) == (root / "package.json").resolve()

    def test_walks_up_from_subdirectory(self, make_project: MakeProject) -> None:
        root = make_project({})
        child = root / "src" / "components"
        child.mkdir(parents=True)
        assert locate(child) == (root / "package.json").resolve()
        assert project_root(child) == root.resolve()

    def test_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ProjectNotFoundError) as exc_info:
            locate(tmp_path)
        assert exc_info.value.detail["start"] == str(tmp_path)

    def test_depth_bound(self, make_project: MakeProject) -> None:
        root = make_project({})
        child = root / "a" / "b" / "c"
        child.mkdir(parents=True)
        with pytest.raises(ProjectNotFoundError):
            locate(child, max_depth=2)


class TestDetect:
    @pytest.mark.parametrize(
        ("lockfile", "expected"),
        [
            ("package-lock.json", PackageManager.NPM),
            ("yarn.lock", PackageManager.YARN),
            ("pnpm-lock.yaml", PackageManager.PNPM),
        ],
    )
    def test_single_lockfile(
        self, make_project: MakeProject, lockfile: str, expected: PackageManager
    ) -> None:
        root = make_project({}, lockfile)
        assert detect(root) is expected

    def test_npm_wins_over_yarn(self, make_project: MakeProject) -> None:
        root = make_project({}, "yarn.lock", "package-lock.json")
        assert detect(root) is PackageManager.NPM

    def test_npm_wins_over_all(self, make_project: MakeProject) -> None:
        root = make_project({}, "pnpm-lock.yaml", "yarn.lock", "package-lock.json")
        assert detect(root) is PackageManager.NPM

    def test_yarn_wins_over_pnpm(self, make_project: MakeProject) -> None:
        root = make_project({}, "pnpm-lock.yaml", "yarn.lock")
        assert detect(root) is PackageManager.YARN

    def test_priority_beats_proximity(self, make_project: MakeProject) -> None:
        """An npm lockfile further up still wins over a nearer yarn.lock."""
        outer = make_project({}, "package-lock.json", subdir="mono")
        inner = make_project({}, "yarn.lock", subdir="mono/packages/web")
        assert detect(inner) is PackageManager.NPM
        assert outer in inner.parents

    def test_detects_from_subdirectory(self, make_project: MakeProject) -> None:
        root = make_project({}, "yarn.lock")
        child = root / "lib"
        child.mkdir()
        assert detect(child) is PackageManager.YARN

    def test_no_lockfile(self, make_project: MakeProject) -> None:
        root = make_project({"name": "fresh"})
        with pytest.raises(NoLockfileError) as exc_info:
            detect(root)
        assert "package-lock.json" in exc_info.value.message

    def test_lockfile_contents_ignored(self, make_project: MakeProject) -> None:
        root = make_project({})
        (root / "yarn.lock").write_text("not really a lockfile")
        assert detect(root) is PackageManager.YARN


class TestLoadManifest:
    def test_parses_object(self, make_project: MakeProject) -> None:
        root = make_project({"name": "demo"})
        assert load_manifest(root) == {"name": "demo"}

    def test_byte_order_mark(self, make_project: MakeProject) -> None:
        root = make_project({})
        (root / "package.json").write_bytes(b'\xef\xbb\xbf{"scripts": {"build": "tsc"}}')
        assert load_manifest(root) == {"scripts": {"build": "tsc"}}
        assert get_scripts(root, NPM) == [("build", "npm build")]

    def test_malformed_json(self, make_project: MakeProject) -> None:
        root = make_project('{"name": "demo",')
        with pytest.raises(ManifestParseError) as exc_info:
            load_manifest(root)
        assert exc_info.value.code == "MANIFEST_PARSE_ERROR"
        assert "line" in exc_info.value.detail

    def test_non_object_top_level(self, make_project: MakeProject) -> None:
        root = make_project("[1, 2, 3]")
        with pytest.raises(ManifestParseError):
            load_manifest(root)

    def test_unreadable(self, tmp_path: Path) -> None:
        with pytest.raises(ManifestIOError):
            load_manifest(tmp_path)

    def test_manifest_is_a_directory(self, tmp_path: Path) -> None:
        (tmp_path / "package.json").mkdir()
        with pytest.raises(ManifestIOError):
            load_manifest(tmp_path)

    def test_read_fresh_each_time(self, make_project: MakeProject) -> None:
        root = make_project({"name": "one"})
        assert read_field(root, "name", NPM) == "one"
        (root / "package.json").write_text('{"name": "two"}')
        assert read_field(root, "name", NPM) == "two"


class TestReadField:
    def test_string_passthrough(self, make_project: MakeProject) -> None:
        root = make_project({"name": "foo"})
        assert read_field(root, "name", NPM) == "foo"

    @pytest.mark.parametrize("value", [True, 3, None, ["a", "b"]])
    def test_other_json_types_unchanged(self, make_project: MakeProject, value: object) -> None:
        root = make_project({"field": value})
        assert read_field(root, "field", NPM) == value

    def test_missing_field_is_none(self, make_project: MakeProject) -> None:
        root = make_project({"name": "foo"})
        assert read_field(root, "scripts", NPM) is None

    def test_mapping_becomes_preview_pairs(self, make_project: MakeProject) -> None:
        root = make_project({"scripts": {"build": "webpack", "lint": "eslint ."}})
        assert read_field(root, "scripts", PackageManager.PNPM) == [
            ("build", "pnpm build"),
            ("lint", "pnpm lint"),
        ]


class TestGetScripts:
    def test_preview_format(self, make_project: MakeProject) -> None:
        root = make_project({"scripts": {"build": "webpack"}})
        assert get_scripts(root, NPM) == [("build", "npm build")]

    def test_manifest_order_kept(self, make_project: MakeProject) -> None:
        root = make_project({"scripts": {"z": "1", "a": "2", "m": "3"}})
        assert [name for name, _ in get_scripts(root, NPM)] == ["z", "a", "m"]

    def test_no_scripts(self, make_project: MakeProject) -> None:
        root = make_project({"name": "foo"})
        assert get_scripts(root, NPM) == []

    def test_non_object_scripts(self, make_project: MakeProject) -> None:
        root = make_project({"scripts": ["build"]})
        assert get_scripts(root, NPM) == []

    def test_parse_error_propagates(self, make_project: MakeProject) -> None:
        root = make_project("{not json")
        with pytest.raises(ManifestParseError):
            get_scripts(root, NPM)


class TestGetDependencies:
    def test_group_order_and_duplicates(self, make_project: MakeProject) -> None:
        root = make_project(
            {
                "peerDependencies": {"react": "*"},
                "devDependencies": {"x": "1", "jest": "29"},
                "optionalDependencies": {"fsevents": "2"},
                "dependencies": {"x": "1", "lodash": "4"},
            }
        )
        names = [name for name, _ in get_dependencies(root, PackageManager.YARN)]
        assert names == ["x", "lodash", "x", "jest", "fsevents", "react"]

    def test_previews_use_manager(self, make_project: MakeProject) -> None:
        root = make_project({"dependencies": {"lodash": "4"}})
        assert get_dependencies(root, PackageManager.YARN) == [("lodash", "yarn lodash")]

    def test_missing_groups_skipped(self, make_project: MakeProject) -> None:
        root = make_project({"name": "foo"})
        assert get_dependencies(root, NPM) == []

    def test_parse_error_propagates(self, make_project: MakeProject) -> None:
        root = make_project("")
        with pytest.raises(ManifestParseError):
            get_dependencies(root, NPM)
