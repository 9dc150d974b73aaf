"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class ClientRecord:
    """Client entry from the static dataset"""

    personal_id: str
    age: str  # birth date as submitted, "" until the first request sets it
    credit_modifier: int


@dataclass(frozen=True)
class DecisionConstants:
    """Platform limits for loan sizing and age eligibility"""

    minimum_loan_amount: int
    maximum_loan_amount: int
    minimum_loan_period: int
    maximum_loan_period: int
    minimum_age: int
    expected_lifetime_years: int
    maximum_loan_period_years: int
    minimum_loan_period_years: int
    birth_date_format: str = "%d.%m.%Y"

    @property
    def minimum_approved_age(self) -> int:
        return self.minimum_age + self.minimum_loan_period_years

    @property
    def maximum_approved_age(self) -> int:
        return self.expected_lifetime_years - self.maximum_loan_period_years


class AgeReconciliation(Enum):
    """Outcome of binding a submitted age to a stored client record"""

    RECONCILED = "reconciled"
    CLIENT_NOT_FOUND = "client_not_found"


@dataclass(frozen=True)
class DecisionResult:
    """
    Output of a loan decision.

    Either approved_amount and approved_period are both set, or error_message
    (with error_kind) is set. Never both.
    """

    approved_amount: Optional[int] = None
    approved_period: Optional[int] = None
    error_message: Optional[str] = None
    error_kind: Optional[str] = None

    @classmethod
    def approved(cls, amount: int, period: int) -> "DecisionResult":
        return cls(approved_amount=amount, approved_period=period)

    @classmethod
    def rejected(cls, message: str, kind: str) -> "DecisionResult":
        return cls(error_message=message, error_kind=kind)

    @property
    def is_approved(self) -> bool:
        return self.error_message is None
