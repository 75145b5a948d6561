"""A line-protocol Battleship player with its byte queue and line reader."""

__version__ = "0.1.0"
__all__ = ["cli", "fifo", "game", "link"]