"""barrier_pricing.engines

Pricing engines ("how it is priced") and the factory wiring them to legs.
"""

from .analytic import AnalyticDigitalEngine, AnalyticEuropeanEngine
from .attach import attach_engines, resolve_engine
from .base import PricingEngine
from .builders import (
    EngineBuilder,
    FxDigitalOptionEngineBuilder,
    FxEuropeanOptionEngineBuilder,
)
from .factory import EngineFactory, create_engine_factory

__all__ = [
    "PricingEngine",
    "AnalyticEuropeanEngine",
    "AnalyticDigitalEngine",
    "EngineBuilder",
    "FxEuropeanOptionEngineBuilder",
    "FxDigitalOptionEngineBuilder",
    "EngineFactory",
    "create_engine_factory",
    "attach_engines",
    "resolve_engine",
]
