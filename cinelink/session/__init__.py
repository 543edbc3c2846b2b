"""
Session Module - Drives a single game from line-based input.

Sessions are EPHEMERAL:
- One game at a time
- No persistence; state lives only in the engine
"""

from .game_loop import GameLoop, LoopState, LoopSummary

__all__ = [
    "GameLoop",
    "LoopState",
    "LoopSummary",
]
