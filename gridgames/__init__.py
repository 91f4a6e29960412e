"""Grid games: a biggest-square solver, a two-player battleship and a duck shooter."""

__version__ = "0.1.0"