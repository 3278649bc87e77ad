"""
Response models for API endpoints and the JSON coercion applied to engine results.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import dataclasses
import math
from enum import Enum
from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, model_serializer


def _coerce(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return _coerce(dataclasses.asdict(obj))
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_coerce(v) for v in obj]
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.ndarray):
        return _coerce(obj.tolist())
    if isinstance(obj, (float, np.floating)):
        # NaN/inf have no JSON form
        value = float(obj)
        return value if math.isfinite(value) else None
    return obj


def payload(obj: Any) -> Any:
    return _coerce(obj)


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class ValueResponse(NpModel):

    value: Optional[float]


class SeriesResponse(NpModel):

    values: List[Optional[float]]


class ValidityResponse(NpModel):

    value: Optional[float]
    valid: bool


class FormattedGrade(NpModel):

    value: Optional[float]
    formatted: str


class HealthResponse(NpModel):

    status: str
    version: str
