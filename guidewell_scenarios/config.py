"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "guidewell-scenarios"
    log_level: str = "INFO"

    # Baseline estimation
    baseline_lookback_days: int = 60

    # Growth assumptions (monthly rate = share * annual / 12)
    default_annual_return_percent: float = 6.0
    checking_growth_share: float = 0.1
    savings_growth_share: float = 0.3
    investment_growth_share: float = 1.0

    # Planner defaults
    emergency_fund_default_contribution_rate: float = 0.10
    default_minimum_payment_rate: float = 0.02  # Share of balance when a debt has no minimum on file
    default_horizon_months: int = 24


settings = Settings()
