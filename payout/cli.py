"""
Console entry point: ask for the amount and destination, look up the rate,
print the breakdown. The only place that maps failures to an exit status.
"""
import sys
from typing import Callable, Optional, TextIO

import colorama
from colorama import Fore, Style

from payout.core.config import settings
from payout.core.errors import InvalidAmount, PayoutError
from payout.core.utils import setup_logging
from payout.fx.rates import RateFetcher
from payout.intake.prompts import console_ask, read_gross_amount, read_destination_currency
from payout.payouts.engine import PayoutEngine, PayoutRequest, PayoutBreakdown
from payout.reports.breakdown import print_report

def build_payout(ask: Callable[[str], str], fetcher: RateFetcher, engine: PayoutEngine) -> PayoutBreakdown:
    gross = read_gross_amount(ask)
    dest = read_destination_currency(ask, engine.schedule)
    rate = fetcher.fetch_rate(dest)
    breakdown = engine.compute(PayoutRequest(gross_usd=gross, destination=dest), rate)
    if not breakdown.is_finite():
        # amount too large to convert without overflowing
        raise InvalidAmount(str(gross))
    return breakdown

def run(ask: Callable[[str], str] = console_ask, fetcher: Optional[RateFetcher] = None,
        engine: Optional[PayoutEngine] = None, out: TextIO = None, err: TextIO = None,
        color: Optional[bool] = None) -> int:
    out = out or sys.stdout
    err = err or sys.stderr
    color = settings.USE_COLOR if color is None else color
    engine = engine or PayoutEngine()
    logger = setup_logging("cli")
    own_fetcher = fetcher is None
    fetcher = fetcher or RateFetcher()
    try:
        breakdown = build_payout(ask, fetcher, engine)
    except PayoutError as e:
        logger.warning("payout aborted: %s", e.message)
        msg = f"{Fore.RED}{e.message}{Style.RESET_ALL}" if color else e.message
        err.write(msg + "\n")
        return e.exit_code
    finally:
        if own_fetcher:
            fetcher.close()
    print_report(breakdown, schedule=engine.schedule, color=color, out=out)
    return 0

def main():
    colorama.just_fix_windows_console()
    sys.exit(run())

if __name__ == "__main__":
    main()
