"""
Core abstractions for termsnake.

Provides the interfaces the game loop talks to: input sources and renderers.
"""

from .input_interface import InputSource
from .renderer_interface import RendererInterface

__all__ = [
    'InputSource',
    'RendererInterface',
]
