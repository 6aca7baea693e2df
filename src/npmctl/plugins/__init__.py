"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints,
plus single-file plugins under ``.npmctl/plugins/`` in the project root.
INVARIANT: Plugin failures are warnings, never errors.
"""

from npmctl.plugins.manager import PluginManager

__all__ = ["PluginManager"]
