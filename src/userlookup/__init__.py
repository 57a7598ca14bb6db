"""
User lookup service
REST, GraphQL and OpenAPI documentation over a single users table
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
