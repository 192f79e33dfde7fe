from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core import db, settings
from core.errors import AppError
from core.log import setup_logging
from tasks import router as tasks_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Task API", lifespan=lifespan)

# Allow the frontend dev server (or configured origins) to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(tasks_router.router, tags=["tasks"])


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    # Store failures are already logged with their traceback by the repository.
    logger.debug(
        "request_failed method=%s path=%s status=%s",
        request.method,
        request.url.path,
        exc.status_code,
    )
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == status.HTTP_204_NO_CONTENT or exc.status_code < 200:
        return Response(status_code=exc.status_code, headers=exc.headers)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=exc.headers,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info(
        "request_rejected method=%s path=%s errors=%s",
        request.method,
        request.url.path,
        exc.errors(),
    )
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


def run() -> None:
    setup_logging(settings.log_level())
    uvicorn.run(app, host=settings.host(), port=settings.port(), log_config=None)


if __name__ == "__main__":
    run()
