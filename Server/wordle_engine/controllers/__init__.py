"""
Controllers Package

HTTP endpoints that translate requests into engine events.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
