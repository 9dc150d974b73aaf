"""Configuration management using Pydantic Settings"""

from pathlib import Path
from typing import Optional

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from decision_engine.domain.models import DecisionConstants


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "decision-engine"
    log_level: str = "INFO"

    # Client dataset (None = packaged data/client_data.json)
    client_data_path: Optional[Path] = None
    birth_date_format: str = "%d.%m.%Y"

    # Loan limits
    minimum_loan_amount: int = 2000
    maximum_loan_amount: int = 10000
    minimum_loan_period: int = 12  # months
    maximum_loan_period: int = 60  # months

    # Age window
    minimum_age: int = 18
    expected_lifetime_years: int = 80
    maximum_loan_period_years: int = 5
    minimum_loan_period_years: int = 1

    @model_validator(mode="after")
    def check_bounds(self) -> "Settings":
        if self.minimum_loan_amount > self.maximum_loan_amount:
            raise ValueError("minimum_loan_amount must not exceed maximum_loan_amount")
        if self.minimum_loan_period > self.maximum_loan_period:
            raise ValueError("minimum_loan_period must not exceed maximum_loan_period")
        if self.minimum_loan_period < 1:
            raise ValueError("minimum_loan_period must be positive")
        return self

    def decision_constants(self) -> DecisionConstants:
        """Build the limits used by the decision engine"""
        return DecisionConstants(
            minimum_loan_amount=self.minimum_loan_amount,
            maximum_loan_amount=self.maximum_loan_amount,
            minimum_loan_period=self.minimum_loan_period,
            maximum_loan_period=self.maximum_loan_period,
            minimum_age=self.minimum_age,
            expected_lifetime_years=self.expected_lifetime_years,
            maximum_loan_period_years=self.maximum_loan_period_years,
            minimum_loan_period_years=self.minimum_loan_period_years,
            birth_date_format=self.birth_date_format,
        )


settings = Settings()
