"""Solutions to classic competitive-programming problems: dynamic programming,
range queries, segment trees, geometry, graphs and small puzzles."""

__version__ = "0.1.0"