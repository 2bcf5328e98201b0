"""Computer architecture exercises: skip-list leaderboard, float conversion and integer promotion."""

__version__ = "0.1.0"