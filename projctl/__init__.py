"""Manage project context: registry, configuration and tmux server sessions."""

__version__ = "0.1.0"

__all__ = ["config", "models", "servers", "tmux", "utils"]