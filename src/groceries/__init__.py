"""
Groceries API
GraphQL service for stores, departments, products and grocery lists
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
