"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ClientDataError(DomainException):
    """Client dataset is missing or malformed"""

    pass


class DecisionEngineError(DomainException):
    """Business-rule rejection of a loan request"""

    kind = "DecisionEngineError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidPersonalCodeError(DecisionEngineError):
    """Personal code fails format or checksum validation"""

    kind = "InvalidPersonalCode"


class InvalidLoanAmountError(DecisionEngineError):
    """Requested amount is outside the platform limits"""

    kind = "InvalidLoanAmount"


class InvalidLoanPeriodError(DecisionEngineError):
    """Requested period is outside the platform limits"""

    kind = "InvalidLoanPeriod"


class InvalidAgeError(DecisionEngineError):
    """Birth date is unparsable, out of window, missing, or conflicts with the stored one"""

    kind = "InvalidAge"


class NoValidLoanError(DecisionEngineError):
    """Unknown client, zero credit modifier, or no period within limits"""

    kind = "NoValidLoan"
