"""
CineLink - Two-player movie chain game engine

Players take turns naming movies linked to the previous one by a
shared actor, director, writer, composer or cinematographer. The
package provides:
- A movie catalog and TMDB CSV loader
- The game-state engine (link rules, win conditions, history)
- A line-based game loop and CLI
"""

__version__ = "0.1.0"
