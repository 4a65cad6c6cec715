from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .exceptions import MeasureCalculatorError
from .log import configure_logging
from .calculator import router as calculator_router
from .ratelimit import RateLimitExceededError

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    debug=settings.DEBUG
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=settings.CORS_ALLOWED_ORIGIN_REGEX,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Global exception handlers
@app.exception_handler(RateLimitExceededError)
async def rate_limit_handler(request: Request, exc: RateLimitExceededError):
    return JSONResponse(
        status_code=429,
        content={"error": exc.code, "message": exc.message},
        headers={"Retry-After": str(int(exc.retry_after) + 1)}
    )

@app.exception_handler(MeasureCalculatorError)
async def calculator_exception_handler(request: Request, exc: MeasureCalculatorError):
    return JSONResponse(
        status_code=500,
        content={"error": exc.code, "message": exc.message}
    )

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME}

# Include routers
app.include_router(calculator_router)


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
