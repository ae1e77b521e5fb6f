"""
loot-settings — migrates LOOT's legacy per-game settings and resolves
the masterlist source for the game being sorted.
"""

__version__ = "0.1.0"
