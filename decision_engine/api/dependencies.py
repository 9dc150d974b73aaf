"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request

from decision_engine.config import settings
from decision_engine.domain.decision import DecisionEngine
from decision_engine.infrastructure.data.client_data import load_client_registry


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


@lru_cache(maxsize=1)
def get_decision_engine() -> DecisionEngine:
    """Provide the process-wide decision engine; the client dataset is loaded on first use"""
    registry = load_client_registry(settings.client_data_path)
    return DecisionEngine(registry=registry, constants=settings.decision_constants())
