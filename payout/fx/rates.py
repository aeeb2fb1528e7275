"""
USD-base exchange-rate lookup against a public rate table.

One GET per lookup, no retry and no caching. Every failure mode (transport,
status, body, missing entry) surfaces as RateFetchFailed.
"""
import math
from typing import Dict, Optional

import requests

from payout.core.config import settings
from payout.core.errors import RateFetchFailed
from payout.core.utils import setup_logging

BASE_CURRENCY = "USD"

class RateFetcher:
    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.url = url or settings.FX_API_URL
        self.timeout = timeout if timeout is not None else settings.FX_HTTP_TIMEOUT_S
        self.session = session or requests.Session()
        self.logger = setup_logging("fx")

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.session.close()

    def fetch_table(self, currency: str = BASE_CURRENCY) -> Dict[str, float]:
        """Return the full ``rates`` mapping from the endpoint."""
        self.logger.debug("fetching rate table from %s", self.url)
        try:
            r = self.session.get(self.url, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except (requests.RequestException, ValueError) as e:
            self.logger.warning("rate fetch failed: %s", e)
            raise RateFetchFailed(currency, str(e)) from e
        rates = data.get("rates") if isinstance(data, dict) else None
        if not isinstance(rates, dict):
            self.logger.warning("rate table missing from response")
            raise RateFetchFailed(currency, "response has no rates table")
        return rates

    def fetch_rate(self, destination: str) -> float:
        if destination == BASE_CURRENCY:
            return 1.0
        rates = self.fetch_table(destination)
        rate = rates.get(destination)
        if isinstance(rate, bool) or not isinstance(rate, (int, float)) or not math.isfinite(rate) or rate <= 0:
            self.logger.warning("no usable rate for %s: %r", destination, rate)
            raise RateFetchFailed(destination, "Rate not found")
        self.logger.info("rate 1 %s -> %s %s", BASE_CURRENCY, rate, destination)
        return float(rate)
