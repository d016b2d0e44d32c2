import os
import sys
from dotenv import load_dotenv

# Load environment variables from a local .env (if present) before anything reads them.
# Skip under pytest to avoid cross-test side effects from a developer's local .env.
if "pytest" not in sys.modules:
    # Only override if JWT_SECRET is missing/empty in the current process environment.
    override = os.getenv("JWT_SECRET") in (None, "")
    load_dotenv(override=override)

from fastapi import FastAPI

from portfolio_builder.api.auth.routes import router as auth_router
from portfolio_builder.api.routes import (
    admin_templates_router,
    export_router,
    portfolios_router,
    template_purchases_router,
    templates_router,
)

app = FastAPI(title="Portfolio Builder API")

@app.get("/health")
def health():
    return {"status": "ok"}

app.include_router(auth_router)
app.include_router(templates_router)
app.include_router(portfolios_router)
app.include_router(export_router)
app.include_router(template_purchases_router)
app.include_router(admin_templates_router)
