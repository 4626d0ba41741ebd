"""Domain layer: pure data and rules, no I/O.

Nothing here may import from producers, services, commands, or output.
"""
