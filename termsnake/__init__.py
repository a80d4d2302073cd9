# termsnake package
"""
termsnake - single-screen terminal snake game.

Modules:
- game: Data model and the per-tick state transitions
- core: Abstract interfaces for input sources and renderers
- engine: Tick scheduler and game session
- terminal: Terminal detection, keyboard capture and Rich drawing
- utils: Configuration and logging
"""

__version__ = "1.0.0"
