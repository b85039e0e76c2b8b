# leadintake/routes/__init__.py
"""
API route handlers organized by domain.
"""

from leadintake.routes.content import router as content_router
from leadintake.routes.health import router as health_router
from leadintake.routes.leads import router as leads_router

__all__ = [
    "content_router",
    "health_router",
    "leads_router",
]
