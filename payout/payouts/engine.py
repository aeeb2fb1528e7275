import math
from dataclasses import dataclass, asdict
from typing import Dict

from payout.tax.schedule import FeeSchedule, DEFAULT_SCHEDULE
from payout.core.utils import setup_logging

@dataclass(frozen=True)
class PayoutRequest:
    gross_usd: float
    destination: str

@dataclass(frozen=True)
class PayoutBreakdown:
    destination: str
    withholding_rate: float
    gross: float
    withheld_tax: float
    after_tax: float
    fixed_fee: float
    border_fee: float
    after_fees: float
    fx_rate: float
    local_amount: float
    def to_dict(self) -> Dict[str, float]: return asdict(self)

    def is_finite(self) -> bool:
        return all(math.isfinite(v) for v in asdict(self).values() if isinstance(v, float))

class PayoutEngine:
    """
    Withholding, then processor fees on the post-tax amount, then conversion
    of what is left. Values are kept at full precision; rounding is a display
    concern.
    """
    def __init__(self, schedule: FeeSchedule = DEFAULT_SCHEDULE):
        self.schedule = schedule
        self.logger = setup_logging("payouts")

    def compute_withholding(self, gross: float, destination: str) -> float:
        return gross * self.schedule.withholding_rate(destination)

    def compute_fees(self, after_tax: float) -> Dict[str, float]:
        fixed = self.schedule.fixed_fee
        border = after_tax * self.schedule.border_fee_rate
        return {"fixed": fixed, "border": border, "net": after_tax - fixed - border}

    def compute(self, request: PayoutRequest, fx_rate: float) -> PayoutBreakdown:
        gross = request.gross_usd
        tax = self.compute_withholding(gross, request.destination)
        after_tax = gross - tax
        fees = self.compute_fees(after_tax)
        local = fees["net"] * fx_rate
        breakdown = PayoutBreakdown(
            destination=request.destination,
            withholding_rate=self.schedule.withholding_rate(request.destination),
            gross=gross,
            withheld_tax=tax,
            after_tax=after_tax,
            fixed_fee=fees["fixed"],
            border_fee=fees["border"],
            after_fees=fees["net"],
            fx_rate=fx_rate,
            local_amount=local,
        )
        self.logger.info("breakdown computed dest=%s gross=%s local=%s", request.destination, gross, local)
        return breakdown
