import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wellness_journal.analytics import routes as analytics_router
from wellness_journal.core import config
from wellness_journal.core.dependency import get_db
from wellness_journal.core.errors import JournalError
from wellness_journal.entries import routes as entries_router
from wellness_journal.insights import routes as insights_router
from wellness_journal.system import routes as system_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Wellness Journal API",
    version="1.0.0",
    description="Journal entries with mood tracking, wellness analytics, and AI-assisted insights.",
)

# CORS config
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(system_router.router)
app.include_router(entries_router.router)
app.include_router(analytics_router.router)
app.include_router(insights_router.router)


def _error_body(message: str, details=None) -> dict:
    body = {"error": message}
    if details is not None and not config.IS_PRODUCTION:
        body["details"] = details
    return body


# Error handlers
@app.exception_handler(JournalError)
async def journal_error_handler(request: Request, exc: JournalError):
    details = exc.details
    if details is None and exc.__cause__ is not None:
        details = str(exc.__cause__)
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.message, details))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    details = [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return JSONResponse(status_code=400, content=_error_body("Invalid request", details))


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={"error": "Route not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


# Startup
@app.on_event("startup")
def init_store():
    logger.info(f"Environment: {config.APP_ENV}")
    logger.info(f"PORT: {config.PORT}")
    logger.info(f"Data file: {config.DATA_FILE}")
    logger.info(f"GEMINI_API_KEY set: {'yes' if config.GEMINI_API_KEY else 'no'}")
    get_db().init()
    logger.info("Journal store initialized")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
