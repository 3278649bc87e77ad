"""
Smoothing routes: moving average, exponential moving average, z-scores and coefficient of variation.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter

from api.requests import EmaRequest, MovingAverageRequest, SeriesRequest
from api.responses import SeriesResponse, ValueResponse
from api.routes.exception import handle_exceptions
from engine.smoothing import coefficient_of_variation, ema, moving_average, z_scores

router = APIRouter(tags=["Smoothing"])


@router.post("/smoothing/moving-average", response_model=SeriesResponse)
@handle_exceptions
async def smoothing_moving_average(req: MovingAverageRequest) -> SeriesResponse:
    return SeriesResponse(values=moving_average(req.data, req.window))


@router.post("/smoothing/ema", response_model=SeriesResponse)
@handle_exceptions
async def smoothing_ema(req: EmaRequest) -> SeriesResponse:
    return SeriesResponse(values=ema(req.data, req.alpha))


@router.post("/smoothing/z-scores", response_model=SeriesResponse)
@handle_exceptions
async def smoothing_z_scores(req: SeriesRequest) -> SeriesResponse:
    return SeriesResponse(values=z_scores(req.data))


@router.post("/smoothing/coefficient-of-variation", response_model=ValueResponse)
@handle_exceptions
async def smoothing_cv(req: SeriesRequest) -> ValueResponse:
    return ValueResponse(value=coefficient_of_variation(req.data))
