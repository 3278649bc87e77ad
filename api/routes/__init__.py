"""
Routes initialization for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health import router as health_router
from api.routes.statistics import router as statistics_router
from api.routes.trend import router as trend_router
from api.routes.correlation import router as correlation_router
from api.routes.smoothing import router as smoothing_router
from api.routes.forecast import router as forecast_router
from api.routes.scenario import router as scenario_router
from api.routes.grades import router as grades_router

router = APIRouter()

router.include_router(health_router)
router.include_router(statistics_router)
router.include_router(trend_router)
router.include_router(correlation_router)
router.include_router(smoothing_router)
router.include_router(forecast_router)
router.include_router(scenario_router)
router.include_router(grades_router)

__all__ = ["router"]
