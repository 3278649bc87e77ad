"""
Trend route: least-squares fit over caller-ordered (timestamp, value) points.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter

from api.requests import TrendRequest
from api.responses import payload
from api.routes.exception import handle_exceptions
from engine.trend import fit

router = APIRouter(tags=["Trend"])


@router.post("/trend", summary="Linear trend with direction and strength")
@handle_exceptions
async def trend(req: TrendRequest) -> Dict[str, Any]:
    return payload(fit(req.points))
