"""API module for svcinit.

Command functions defined here are the single source of truth for the CLI.
"""

__all__ = []
