"""
Typed failures for the payout flow. Domain code raises these and only the
console entry point turns them into an exit status.
"""

class PayoutError(Exception):
    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class InvalidAmount(PayoutError):
    def __init__(self, raw: str):
        super().__init__("Invalid USD amount.")
        self.raw = raw

class UnsupportedCurrency(PayoutError):
    def __init__(self, currency: str):
        super().__init__(f"Currency not supported: {currency}")
        self.currency = currency

class RateFetchFailed(PayoutError):
    def __init__(self, currency: str, reason: str = ""):
        super().__init__("Failed to fetch exchange rate.")
        self.currency = currency
        self.reason = reason

class InputAborted(PayoutError):
    def __init__(self):
        super().__init__("Input aborted.")
