"""Input validation for loan decision requests"""

from datetime import date
from typing import Callable

from stdnum.ee import ik

from decision_engine.domain.age import is_age_approved
from decision_engine.domain.exceptions import (
    InvalidAgeError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
)
from decision_engine.domain.models import DecisionConstants


def verify_inputs(
    personal_code: str,
    age: str,
    loan_amount: int,
    loan_period: int,
    constants: DecisionConstants,
    personal_code_validator: Callable[[str], bool] = ik.is_valid,
    today: date | None = None,
) -> None:
    """
    Verify request inputs against business rules, first failure wins.

    Order: personal code, loan amount, loan period, age window.

    Raises:
        InvalidPersonalCodeError, InvalidLoanAmountError,
        InvalidLoanPeriodError, InvalidAgeError
    """
    if not personal_code_validator(personal_code):
        raise InvalidPersonalCodeError("Invalid personal ID code!")
    if not constants.minimum_loan_amount <= loan_amount <= constants.maximum_loan_amount:
        raise InvalidLoanAmountError("Invalid loan amount!")
    if not constants.minimum_loan_period <= loan_period <= constants.maximum_loan_period:
        raise InvalidLoanPeriodError("Invalid loan period!")
    if not is_age_approved(age, constants, today):
        raise InvalidAgeError("Invalid Age. Please retry")
