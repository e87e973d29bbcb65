from pydantic_settings import BaseSettings
from dataclasses import dataclass
from typing import Optional

from .brand import brand_email_from


@dataclass(frozen=True)
class MvpFeatureFlags:
    disable_email: bool
    disable_sheets: bool


class Settings(BaseSettings):
    # Deployment environment
    DEPLOYMENT_ENV: str = "development"

    # Resend (email notifications)
    RESEND_API_KEY: str = ""
    EMAIL_FROM: str = brand_email_from()
    # Hiring-team inbox that receives every submission notification.
    NOTIFICATION_EMAIL: str = ""

    # Google Sheets system of record (Sheets API, service-account auth).
    # The spreadsheet must be shared with the service account email.
    GOOGLE_SHEETS_ID: str = ""
    GOOGLE_SERVICE_ACCOUNT_EMAIL: str = ""
    # PEM key; escaped \n sequences are accepted in place of newlines.
    GOOGLE_PRIVATE_KEY: str = ""
    SHEETS_TIMEOUT_SECONDS: float = 10.0

    # URLs
    FRONTEND_URL: str = "http://localhost:3000"
    # Optional comma-separated extra CORS origins
    CORS_EXTRA_ORIGINS: Optional[str] = None

    # Sentry
    SENTRY_DSN: Optional[str] = None

    # Submission thresholds
    ASSESSMENT_MIN_COMPLETION: float = 0.75
    SCENARIO_MIN_COMPLETION_PERCENT: int = 50

    # MVP feature flags. Collaborators are also skipped when unconfigured.
    MVP_DISABLE_EMAIL: bool = False
    MVP_DISABLE_SHEETS: bool = False

    @property
    def is_production(self) -> bool:
        return (self.DEPLOYMENT_ENV or "").strip().lower() == "production"

    @property
    def email_configured(self) -> bool:
        return bool((self.RESEND_API_KEY or "").strip() and (self.NOTIFICATION_EMAIL or "").strip())

    @property
    def sheets_configured(self) -> bool:
        return all(
            (value or "").strip()
            for value in (self.GOOGLE_SHEETS_ID, self.GOOGLE_SERVICE_ACCOUNT_EMAIL, self.GOOGLE_PRIVATE_KEY)
        )

    @property
    def mvp_flags(self) -> MvpFeatureFlags:
        return MvpFeatureFlags(
            disable_email=self.MVP_DISABLE_EMAIL,
            disable_sheets=self.MVP_DISABLE_SHEETS,
        )

    def model_post_init(self, __context) -> None:
        if not 0 < self.ASSESSMENT_MIN_COMPLETION <= 1:
            raise ValueError("ASSESSMENT_MIN_COMPLETION must be in (0, 1].")
        if not 0 <= self.SCENARIO_MIN_COMPLETION_PERCENT <= 100:
            raise ValueError("SCENARIO_MIN_COMPLETION_PERCENT must be between 0 and 100.")

    model_config = {
        "env_file": ".env",
        "extra": "ignore",
    }


settings = Settings()
