"""
Paddle controllers for Tick Pong.
"""
