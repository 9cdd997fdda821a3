"""Extension layer — validator plugins via pluggy.

Discovery: entry_points (pip-installed) in the ``recipectl.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from recipectl.plugins.manager import PluginManager, hookimpl

__all__ = ["PluginManager", "hookimpl"]
