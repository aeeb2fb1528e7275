import sys
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import List, Optional, TextIO

import pandas as pd
from babel.numbers import format_currency
from colorama import Fore, Style

from payout.payouts.engine import PayoutBreakdown
from payout.tax.schedule import FeeSchedule, DEFAULT_SCHEDULE

LABEL_WIDTH = 30
CENT = Decimal("0.01")

def round_half_up(value: float) -> Decimal:
    d = Decimal(value)
    with localcontext() as ctx:
        # default 28 digits cannot hold the cents of very large amounts
        ctx.prec = max(ctx.prec, d.adjusted() + 4)
        return d.quantize(CENT, rounding=ROUND_HALF_UP)

def _pct(rate: float) -> str:
    return f"{round(rate * 100, 4):g}%"

class BreakdownReport:
    """
    Turns a computed breakdown into display lines. Nothing here feeds back
    into the numbers.
    """
    def __init__(self, schedule: FeeSchedule = DEFAULT_SCHEDULE, color: bool = True):
        self.schedule = schedule
        self.color = color

    def _paint(self, text: str, *styles: str) -> str:
        if not self.color: return text
        return "".join(styles) + text + Style.RESET_ALL

    def format_usd(self, value: float) -> str:
        return self._paint(f"${round_half_up(value)}", Fore.GREEN)

    def format_local(self, value: float, currency: str) -> str:
        amount = round_half_up(value)
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, amount.adjusted() + 4)
            text = format_currency(amount, currency, locale=self.schedule.locale_for(currency))
        return self._paint(text, Fore.LIGHTBLUE_EX)

    def label(self, text: str) -> str:
        return self._paint(text.ljust(LABEL_WIDTH), Style.BRIGHT, Fore.YELLOW)

    def lines(self, b: PayoutBreakdown, destination: Optional[str] = None) -> List[str]:
        dest = destination or b.destination
        processor = self.schedule.processor_name
        local = self.format_local(b.local_amount, dest)
        return [
            "",
            self._paint("💰 Detailed Payout Breakdown", Style.BRIGHT),
            f"{self.label('Gross (USD)')}: {self.format_usd(b.gross)}",
            f"{self.label(f'Withholding ({_pct(b.withholding_rate)})')}: -{self.format_usd(b.withheld_tax)}",
            f"{self.label('After Tax')}: {self.format_usd(b.after_tax)}",
            "",
            f"{self.label(f'{processor} Fixed Fee')}: -{self.format_usd(b.fixed_fee)}",
            f"{self.label(f'Cross-border Fee ({_pct(self.schedule.border_fee_rate)})')}: -{self.format_usd(b.border_fee)}",
            f"{self.label(f'After {processor}')}: {self.format_usd(b.after_fees)}",
            "",
            # shown at 2dp, conversion above used the full rate
            f"{self.label(f'FX Rate (1 USD → {dest})')}: {round_half_up(b.fx_rate)}",
            f"{self.label(f'Converted ({dest})')}: {local}",
            "",
            self._paint("🎉 Final Payout ≈ ", Style.BRIGHT, Fore.GREEN) + local,
        ]

    def render(self, b: PayoutBreakdown, destination: Optional[str] = None) -> str:
        return "\n".join(self.lines(b, destination))

    def frame(self, b: PayoutBreakdown) -> pd.DataFrame:
        dest = b.destination
        processor = self.schedule.processor_name
        rows = [
            ("Gross", "USD", b.gross),
            (f"Withholding ({_pct(b.withholding_rate)})", "USD", -b.withheld_tax),
            ("After Tax", "USD", b.after_tax),
            (f"{processor} Fixed Fee", "USD", -b.fixed_fee),
            (f"Cross-border Fee ({_pct(self.schedule.border_fee_rate)})", "USD", -b.border_fee),
            (f"After {processor}", "USD", b.after_fees),
            (f"FX Rate (1 USD → {dest})", dest, b.fx_rate),
            (f"Converted ({dest})", dest, b.local_amount),
        ]
        df = pd.DataFrame(rows, columns=["Step", "Currency", "Amount"])
        plain = BreakdownReport(self.schedule, color=False)
        display = []
        for step, cur, amount in rows:
            if step.startswith("FX Rate"): display.append(str(round_half_up(amount)))
            elif cur == "USD": display.append(plain.format_usd(amount))
            else: display.append(plain.format_local(amount, cur))
        df["Display"] = display
        return df

def render(breakdown: PayoutBreakdown, destination: Optional[str] = None, *,
           schedule: FeeSchedule = DEFAULT_SCHEDULE, color: bool = True) -> str:
    return BreakdownReport(schedule, color).render(breakdown, destination)

def print_report(breakdown: PayoutBreakdown, destination: Optional[str] = None, *,
                 schedule: FeeSchedule = DEFAULT_SCHEDULE, color: bool = True, out: TextIO = None):
    out = out or sys.stdout
    out.write(render(breakdown, destination, schedule=schedule, color=color) + "\n")

def breakdown_frame(breakdown: PayoutBreakdown, schedule: FeeSchedule = DEFAULT_SCHEDULE) -> pd.DataFrame:
    return BreakdownReport(schedule, color=False).frame(breakdown)
