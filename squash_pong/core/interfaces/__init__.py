"""
Interfaces between the game core and its collaborators
"""

from squash_pong.core.interfaces.renderer import RendererProtocol

__all__ = ["RendererProtocol"]
