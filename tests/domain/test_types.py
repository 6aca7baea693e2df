"""Tests for package manager and operation enums and the lockfile rules."""

from npmctl.domain.types import (
    DEPENDENCY_FIELDS,
    LOCKFILE_RULES,
    Operation,
    PackageManager,
)


class TestPackageManager:
    def test_values_are_binary_names(self) -> None:
        assert [str(pm) for pm in PackageManager] == ["npm", "yarn", "pnpm"]

    def test_lookup_by_value(self) -> None:
        assert PackageManager("yarn") is PackageManager.YARN


class TestOperation:
    def test_all_operations(self) -> None:
        assert {op.value for op in Operation} == {
            "init",
            "install",
            "install-save",
            "install-save-dev",
            "uninstall",
            "list",
            "run",
            "clean",
        }


class TestRules:
    def test_lockfile_priority_order(self) -> None:
        assert LOCKFILE_RULES == (
            (PackageManager.NPM, "package-lock.json"),
            (PackageManager.YARN, "yarn.lock"),
            (PackageManager.PNPM, "pnpm-lock.yaml"),
        )

    def test_dependency_field_order(self) -> None:
        assert DEPENDENCY_FIELDS == (
            "dependencies",
            "devDependencies",
            "optionalDependencies",
            "peerDependencies",
        )
