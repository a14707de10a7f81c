from __future__ import annotations

import logging
import os

from financing_core.domain.financing import CalculationMethod


def default_calculation_method() -> CalculationMethod:
    value = os.getenv("FINANCING_DEFAULT_METHOD", CalculationMethod.UNIFORM_RATE.value)

    try:
        return CalculationMethod(value.strip().lower())
    except ValueError:
        allowed = ", ".join(m.value for m in CalculationMethod)
        raise RuntimeError(
            f"FINANCING_DEFAULT_METHOD must be one of: {allowed} (got {value!r})"
        ) from None


def log_level() -> int:
    name = os.getenv("FINANCING_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)

    if not isinstance(level, int):
        raise RuntimeError(f"FINANCING_LOG_LEVEL is not a valid logging level: {name!r}")

    return level
