"""
Dependency injection for FastAPI routes.

Strategies are stateless, so use cases are cheap to build per request.
Nothing here is cached: the default method is re-read from the
environment on every request.
"""

from __future__ import annotations

from typing import Callable

from financing_core.domain.financing import CalculationMethod
from financing_core.infra.config import default_calculation_method
from financing_core.use_cases.compute_financing import ComputeFinancing, strategy_for


UseCaseFactory = Callable[[CalculationMethod], ComputeFinancing]


def get_default_method() -> CalculationMethod:
    """Method applied when a request does not name one (FINANCING_DEFAULT_METHOD)."""
    return default_calculation_method()


def build_compute_financing(method: CalculationMethod) -> ComputeFinancing:
    """Create a ComputeFinancing use case wired with the strategy for ``method``."""
    return ComputeFinancing(strategy=strategy_for(method))


def get_compute_financing_factory() -> UseCaseFactory:
    """
    Factory provider for the ComputeFinancing use case.

    Routes pick the method per request, so they receive a factory rather
    than a prebuilt use case. Tests override this dependency to inject mocks.
    """
    return build_compute_financing
