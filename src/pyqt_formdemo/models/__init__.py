"""Registration data model and reference data."""

from .registration import RegistrationData, Country, COUNTRIES, SUBSCRIPTION_PLANS

__all__ = [
    "RegistrationData",
    "Country",
    "COUNTRIES",
    "SUBSCRIPTION_PLANS",
]
