"""
Pong scene package: world model, systems and scene wiring.
"""
