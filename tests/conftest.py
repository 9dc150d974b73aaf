"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from decision_engine.api.main import create_app
from decision_engine.api.dependencies import get_decision_engine
from decision_engine.domain.decision import DecisionEngine
from decision_engine.domain.models import ClientRecord, DecisionConstants
from decision_engine.domain.registry import ClientRegistry


# Fixed clock so age windows do not drift with the calendar
TODAY = date(2024, 6, 15)

DEBT_CODE = "49002010965"  # CM 0
SEGMENT_1_CODE = "49002010976"  # CM 100, no age yet
SEGMENT_2_CODE = "49002010987"  # CM 300, age on file
SEGMENT_3_CODE = "49002010998"  # CM 1000, no age yet
LOW_CREDIT_CODE = "38001010009"  # CM 30, never reaches the minimum amount
UNKNOWN_CODE = "50001010006"  # valid code, not in the registry

STORED_BIRTH_DATE = "01.02.1990"  # 34 on TODAY
BIRTH_DATE = "15.06.1995"  # 29 on TODAY


@pytest.fixture
def constants() -> DecisionConstants:
    """Default platform limits"""
    return DecisionConstants(
        minimum_loan_amount=2000,
        maximum_loan_amount=10000,
        minimum_loan_period=12,
        maximum_loan_period=60,
        minimum_age=18,
        expected_lifetime_years=80,
        maximum_loan_period_years=5,
        minimum_loan_period_years=1,
    )


@pytest.fixture
def registry() -> ClientRegistry:
    """Registry with one client per credit segment"""
    return ClientRegistry(
        [
            ClientRecord(DEBT_CODE, "", 0),
            ClientRecord(SEGMENT_1_CODE, "", 100),
            ClientRecord(SEGMENT_2_CODE, STORED_BIRTH_DATE, 300),
            ClientRecord(SEGMENT_3_CODE, "", 1000),
            ClientRecord(LOW_CREDIT_CODE, "01.01.1980", 30),
        ]
    )


@pytest.fixture
def engine(registry: ClientRegistry, constants: DecisionConstants) -> DecisionEngine:
    """Decision engine pinned to TODAY"""
    return DecisionEngine(registry=registry, constants=constants, clock=lambda: TODAY)


@pytest.fixture
def client(engine: DecisionEngine) -> TestClient:
    """Create FastAPI test client with the test engine"""
    app = create_app()
    app.dependency_overrides[get_decision_engine] = lambda: engine
    return TestClient(app)
