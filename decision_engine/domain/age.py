"""Age eligibility window for loan approval"""

import logging
from datetime import date

from decision_engine.domain.models import DecisionConstants
from decision_engine.utils.date_utils import full_years_between, parse_date


def is_age_approved(date_of_birth: str, constants: DecisionConstants, today: date | None = None) -> bool:
    """
    Check that the applicant's age falls inside the approval window.

    Window (inclusive):
    - lower: minimum_age + minimum_loan_period_years (legal age through the shortest term)
    - upper: expected_lifetime_years - maximum_loan_period_years (longest term ends in time)

    With the default limits this is 19..75 years.
    Unparsable input is rejected, never raised.
    """
    try:
        birth_date = parse_date(date_of_birth, constants.birth_date_format)
    except (TypeError, ValueError):
        logging.error("Date parsing error", extra={"date_of_birth": date_of_birth})
        return False

    age = full_years_between(birth_date, today or date.today())
    return constants.minimum_approved_age <= age <= constants.maximum_approved_age
