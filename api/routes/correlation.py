"""
Correlation routes for Pearson correlation between two sequences and lagged autocorrelation of one sequence.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter

from api.requests import AutocorrelationRequest, CorrelationRequest
from api.responses import ValueResponse
from api.routes.exception import handle_exceptions
from engine.correlation import autocorrelation, correlation

router = APIRouter(tags=["Correlation"])


@router.post("/correlation", response_model=ValueResponse)
@handle_exceptions
async def pearson(req: CorrelationRequest) -> ValueResponse:
    return ValueResponse(value=correlation(req.data1, req.data2))


@router.post("/correlation/autocorrelation", response_model=ValueResponse)
@handle_exceptions
async def lagged(req: AutocorrelationRequest) -> ValueResponse:
    return ValueResponse(value=autocorrelation(req.data, req.lag))
