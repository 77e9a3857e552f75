from __future__ import annotations

import logging
import traceback
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from filestore.db import dispose_engine
from filestore.errors import FileStoreError, status_for
from filestore.logging import configure_logging
from web.deps import build_transfer_service
from web.routes.files import router as files_router

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    service = build_transfer_service()
    service.provisioning.provision_at_startup(service.backends.values())
    app.state.transfer_service = service
    logger.info("Application started")
    yield
    dispose_engine()


app = FastAPI(docs_url=None, redoc_url=None, lifespan=lifespan)

app.include_router(files_router)


@app.exception_handler(FileStoreError)
async def filestore_error_handler(request: Request, exc: FileStoreError):
    status_code = status_for(exc)
    log = logger.warning if status_code < 500 else logger.error
    log("%s %s failed (%d): %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(str(exc), status_code=status_code)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        "Unhandled exception on %s %s:\n%s",
        request.method,
        request.url.path,
        traceback.format_exc(),
    )
    return JSONResponse("Internal Server Error", status_code=500)
