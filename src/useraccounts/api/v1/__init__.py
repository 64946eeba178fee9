"""
API v1 package.

Contains versioned API routes for the user accounts API.
"""

from useraccounts.api.v1.routes import router

__all__ = ["router"]
