"""
Tick Pong: a minimal Pong built on mini-arcade-core.
"""

__version__ = "0.1.0"
