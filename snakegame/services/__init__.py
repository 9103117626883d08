"""
Collaborators around the engine: renderers, replay recording and the
game loop that schedules ticks.
"""
