"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import (
    Cell, Cursor, EventDecodeError, EventKind, EventResult, Feedback,
    GameSnapshot, GameStatus, Grid, InputEvent, Notice
)

__all__ = [
    'Cell', 'Cursor', 'EventDecodeError', 'EventKind', 'EventResult', 'Feedback',
    'GameSnapshot', 'GameStatus', 'Grid', 'InputEvent', 'Notice'
]
