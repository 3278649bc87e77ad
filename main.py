"""
Entry point for the Gradesight Analytics Engine API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.routes import router
from api.routes.exception import error_detail
from config import APP_VERSION, settings
from engine.exceptions import GradeError

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


app = FastAPI(
    title="Gradesight Analytics Engine",
    description="Descriptive statistics, trend analysis and ensemble grade prediction over grade histories.",
    version=APP_VERSION,
)

app.include_router(router, prefix="/api/v1")


@app.exception_handler(GradeError)
async def grade_error_handler(request: Request, exc: GradeError) -> JSONResponse:
    log.warning("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": error_detail(exc)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())),
            "error": err.get("msg", ""),
        }
        for err in exc.errors()
    ]
    log.warning("%s %s failed to decode: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=422, content={"detail": errors})


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        access_log=True,
    )
