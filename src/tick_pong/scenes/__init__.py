"""
Scenes for Tick Pong.
"""
