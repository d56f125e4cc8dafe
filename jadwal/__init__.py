"""Doctor roster management, 30-day shift schedule generation and an interactive menu."""

__version__ = "0.1.0"