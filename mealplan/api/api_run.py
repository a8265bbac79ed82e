from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import logging

from mealplan.domain.errors import (
    PlanningError,
    MalformedOutput,
    ModelInvocationFailed,
    SubmissionFailed,
)

# Routers
from mealplan.api.api_ai import router as ai_router
from mealplan.api.routes import calendar, settings
from dotenv import load_dotenv
load_dotenv()

# Logging
logger = logging.getLogger("mealplan_app")

# Initialize FastAPI app
app = FastAPI(title="Household Meal Plan Assistant API")

# Include routers
app.include_router(settings.router)
app.include_router(ai_router)
app.include_router(calendar.router)


@app.exception_handler(PlanningError)
async def planning_error_handler(request: Request, exc: PlanningError):
    """One human readable message per failed cycle; nothing is retried."""
    if isinstance(exc, MalformedOutput):
        logger.warning("Malformed model output on %s: %s", request.url.path, exc.reason)
    elif isinstance(exc, ModelInvocationFailed):
        logger.error("Model invocation failed on %s: %s", request.url.path, exc.details)
    elif isinstance(exc, SubmissionFailed):
        logger.error("Calendar submission stopped after %d events: %s", exc.inserted_count, exc.cause)
    else:
        logger.info("%s on %s: %s", exc.__class__.__name__, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.get("/health")
def health():
    return {"status": "ok"}
