"""
Grade validity and display helpers. Display strings use a comma as the decimal separator.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from engine.exceptions import GradeParseError
from config import settings


def validate_grade(value: float) -> bool:
    return settings.grade_min <= value <= settings.grade_max


def format_grade(value: float, decimals: int = 1) -> str:
    return f"{value:.{max(0, int(decimals))}f}".replace(".", ",")


def parse_grade(text: str, field: str = "grade") -> float:
    try:
        return float(str(text).replace(",", "."))
    except ValueError as exc:
        raise GradeParseError(field, text, str(exc)) from exc
