"""
portfolio_builder/api/routes/__init__.py

Convenience exports for FastAPI routers.
This keeps `portfolio_builder/api/main.py` imports clean and centralized.
"""

from portfolio_builder.api.routes.portfolios import router as portfolios_router
from portfolio_builder.api.routes.export import router as export_router
from portfolio_builder.api.routes.templates import router as templates_router
from portfolio_builder.api.routes.template_purchases import router as template_purchases_router
from portfolio_builder.api.routes.admin_templates import router as admin_templates_router

__all__ = [
    "portfolios_router",
    "export_router",
    "templates_router",
    "template_purchases_router",
    "admin_templates_router",
]
