import logging

from fastapi import FastAPI, Depends, Request
from fastapi.responses import JSONResponse

from app.shared.auth import auth_guard, public
from app.shared.config import settings
from app.shared.http import ApiError, api_error_handler

# Routers Import
from app.auth.api import router as auth_router
from app.sentiment.api import router as sentiment_router

logging.basicConfig(
    level=settings.log_level_no,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

TAGS_METADATA = [
    {"name": "Auth", "description": "Demo auth for Swagger 'Authorize' button"},
    {"name": "Sentiment", "description": "Proxy to the Python sentiment API"},
    {"name": "Health", "description": "Service health"},
]

# auth_guard runs for every route; @public endpoints skip the token check
app = FastAPI(
    title="Sentiment Gateway",
    version="0.1.0",
    description="Auth-guarded proxy in front of the Python sentiment API.",
    openapi_tags=TAGS_METADATA,
    dependencies=[Depends(auth_guard)],
)

app.add_exception_handler(ApiError, api_error_handler)

# ---- DEV-ONLY error handler (helps you see real errors in Swagger) ----
if settings.ENV == "dev":
    @app.exception_handler(Exception)
    async def _dev_ex_handler(request: Request, exc: Exception):
        return JSONResponse(status_code=500, content={"detail": str(exc)})

# ----------------------------------------------------------------------

@app.get("/healthz", tags=["Health"])
@public
def healthz():
    return {"ok": True}

# Routers
app.include_router(auth_router)
app.include_router(sentiment_router)

def run():
    """Console entry point: serve the app with uvicorn using HOST/PORT/LOG_LEVEL."""
    import uvicorn
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
