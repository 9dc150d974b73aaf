"""Loan decision engine - core business logic for loan sizing"""

import logging
from datetime import date
from typing import Callable, Tuple

from stdnum.ee import ik

from decision_engine.domain.exceptions import DecisionEngineError, NoValidLoanError
from decision_engine.domain.models import AgeReconciliation, DecisionConstants, DecisionResult
from decision_engine.domain.registry import ClientRegistry
from decision_engine.domain.validation import verify_inputs


def highest_valid_loan_amount(credit_modifier: int, loan_period: int) -> int:
    """Largest amount the client's credit modifier supports for a period"""
    return credit_modifier * loan_period


def find_approvable_loan(credit_modifier: int, loan_period: int, constants: DecisionConstants) -> Tuple[int, int]:
    """
    Search for the largest approvable (amount, period) pair.

    Extends the period one month at a time until credit_modifier * period
    clears the minimum loan amount, then caps the amount at the maximum.

    Returns: (approved_amount, approved_period)

    Raises:
        NoValidLoanError: If the modifier is not positive or the period runs past the maximum
    """
    if credit_modifier < 1:
        raise NoValidLoanError("No valid loan found!")

    while (
        highest_valid_loan_amount(credit_modifier, loan_period) < constants.minimum_loan_amount
        and loan_period <= constants.maximum_loan_period
    ):
        loan_period += 1

    if loan_period > constants.maximum_loan_period:
        raise NoValidLoanError("No valid loan found!")

    amount = min(constants.maximum_loan_amount, highest_valid_loan_amount(credit_modifier, loan_period))
    return amount, loan_period


class DecisionEngine:
    """
    Calculates the approved loan amount and period for a client.

    The engine keeps no per-request state; the registry is the only shared
    mutable resource and guards its own age updates.
    """

    def __init__(
        self,
        registry: ClientRegistry,
        constants: DecisionConstants,
        personal_code_validator: Callable[[str], bool] = ik.is_valid,
        clock: Callable[[], date] = date.today,
    ):
        self.registry = registry
        self.constants = constants
        self.personal_code_validator = personal_code_validator
        self.clock = clock

    def calculate_approved_loan(self, personal_code: str, age: str, loan_amount: int, loan_period: int) -> DecisionResult:
        """
        Decision flow:
        1. Validate inputs (personal code, amount, period, age window)
        2. Look up the credit modifier (unknown client or 0 = no loan)
        3. Reconcile the submitted age with the stored one
        4. Extend the period until the minimum amount is reachable

        Raises:
            DecisionEngineError: Subclass naming the first rule the request violates
        """
        verify_inputs(
            personal_code,
            age,
            loan_amount,
            loan_period,
            self.constants,
            personal_code_validator=self.personal_code_validator,
            today=self.clock(),
        )

        credit_modifier = self.registry.credit_modifier_of(personal_code)
        logging.info("Credit modifier resolved", extra={"personal_code": personal_code, "credit_modifier": credit_modifier})
        if credit_modifier == 0:
            raise NoValidLoanError("No valid loan found!")

        if self.registry.reconcile_age(personal_code, age) is AgeReconciliation.CLIENT_NOT_FOUND:
            raise NoValidLoanError("No valid loan found!")

        amount, period = find_approvable_loan(credit_modifier, loan_period, self.constants)
        return DecisionResult.approved(amount, period)

    def decide(self, personal_code: str, age: str, loan_amount: int, loan_period: int) -> DecisionResult:
        """
        Main entry point: never raises for business-rule rejections.

        Returns an approved DecisionResult, or one carrying the error message
        and kind of the first failed rule.
        """
        try:
            return self.calculate_approved_loan(personal_code, age, loan_amount, loan_period)
        except DecisionEngineError as e:
            logging.info(f"Loan request rejected: {e.message}", extra={"personal_code": personal_code, "kind": e.kind})
            return DecisionResult.rejected(e.message, e.kind)
