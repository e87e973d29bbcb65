"""Centralized brand configuration for user-facing copy."""

BRAND_NAME = "Epworth Family Resources"
BRAND_DOMAIN = "epworthvillage.org"
BRAND_PRODUCT_NAME = "Interview Assistant"
BRAND_APP_DESCRIPTION = "Interview and assessment intelligence for in-home family services hiring"
BRAND_CORE_VALUES = (
    "Trauma-Informed Care",
    "Family Preservation",
    "Professional Growth",
    "Accountability",
)


def brand_email_from() -> str:
    return f"{BRAND_NAME} {BRAND_PRODUCT_NAME} <noreply@{BRAND_DOMAIN}>"
