"""
User storage access
"""

from .repository import UserGateway

__all__ = ["UserGateway"]
