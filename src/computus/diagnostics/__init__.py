"""Diagnostics package.

- easter_table: plain-text table, no extras needed
- easter_scatter: requires the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["easter_table", "easter_scatter"]
