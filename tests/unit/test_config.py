"""Unit tests for settings"""

import pytest
from pydantic import ValidationError
from decision_engine.config import Settings


def test_default_constants():
    constants = Settings(_env_file=None).decision_constants()

    assert (constants.minimum_loan_amount, constants.maximum_loan_amount) == (2000, 10000)
    assert (constants.minimum_loan_period, constants.maximum_loan_period) == (12, 60)
    assert (constants.minimum_approved_age, constants.maximum_approved_age) == (19, 75)


def test_constants_from_environment(monkeypatch):
    monkeypatch.setenv("MAXIMUM_LOAN_AMOUNT", "15000")
    monkeypatch.setenv("MINIMUM_AGE", "21")

    constants = Settings(_env_file=None).decision_constants()

    assert constants.maximum_loan_amount == 15000
    assert constants.minimum_approved_age == 22


def test_inverted_bounds_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, minimum_loan_amount=20000)
    with pytest.raises(ValidationError):
        Settings(_env_file=None, minimum_loan_period=0)
