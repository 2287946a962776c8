"""Static constants shared across the application."""

from app.constants.branches import POLITICAL_BRANCHES, REQUIRED_PAIR_COUNT

__all__ = ["POLITICAL_BRANCHES", "REQUIRED_PAIR_COUNT"]
