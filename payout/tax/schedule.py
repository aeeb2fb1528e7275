from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Withholding on gross payout, by destination currency
WITHHOLDING_RATES = MappingProxyType({
    "NGN": 0.30,
    "USD": 0.15,
    "EUR": 0.15,
})

# Processor charges, USD
PROCESSOR_NAME = "Stripe"
PROCESSOR_FIXED_FEE = 2.25
PROCESSOR_BORDER_RATE = 0.0025

DISPLAY_LOCALES = MappingProxyType({
    "NGN": "en_NG",
    "EUR": "de_DE",
    "USD": "en_US",
})

@dataclass(frozen=True)
class FeeSchedule:
    """Tax and processor constants for one run. Frozen so it can be shared."""
    withholding_rates: Mapping[str, float] = field(default_factory=lambda: WITHHOLDING_RATES)
    fixed_fee: float = PROCESSOR_FIXED_FEE
    border_fee_rate: float = PROCESSOR_BORDER_RATE
    processor_name: str = PROCESSOR_NAME
    locales: Mapping[str, str] = field(default_factory=lambda: DISPLAY_LOCALES)

    def __post_init__(self):
        # callers may pass plain dicts; freeze them
        object.__setattr__(self, "withholding_rates", MappingProxyType(dict(self.withholding_rates)))
        object.__setattr__(self, "locales", MappingProxyType(dict(self.locales)))

    @property
    def supported(self) -> tuple:
        return tuple(self.withholding_rates)

    def is_supported(self, currency: str) -> bool:
        return currency in self.withholding_rates

    def withholding_rate(self, currency: str) -> float:
        return self.withholding_rates[currency]

    def locale_for(self, currency: str) -> str:
        return self.locales.get(currency, "en_US")

DEFAULT_SCHEDULE = FeeSchedule()
