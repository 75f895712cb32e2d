"""Friend leaderboards: best-time submissions and ranked per-map boards."""

__version__ = "0.1.0"
