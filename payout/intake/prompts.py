import math
import re
from typing import Callable

from colorama import Fore, Style

from payout.core.config import settings
from payout.core.errors import InputAborted, InvalidAmount, UnsupportedCurrency
from payout.tax.schedule import FeeSchedule, DEFAULT_SCHEDULE

# leading numeric prefix, trailing junk ignored ("250usd" -> 250)
NUMBER_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)

AMOUNT_PROMPT = "Enter Medium payout amount (USD): "

def console_ask(question: str) -> str:
    if settings.USE_COLOR:
        question = f"{Fore.CYAN}{question}{Style.RESET_ALL}"
    return input(question)

def ask_line(ask: Callable[[str], str], question: str) -> str:
    try:
        return ask(question)
    except (EOFError, KeyboardInterrupt) as e:
        raise InputAborted() from e

def parse_amount(text: str) -> float:
    m = NUMBER_PREFIX.match((text or "").strip())
    if not m:
        raise InvalidAmount(text)
    value = float(m.group(0).replace("Infinity", "inf"))
    if not math.isfinite(value) or value <= 0:
        raise InvalidAmount(text)
    return value

def parse_currency(text: str, schedule: FeeSchedule = DEFAULT_SCHEDULE) -> str:
    code = (text or "").strip().upper()
    if not schedule.is_supported(code):
        raise UnsupportedCurrency(code)
    return code

def read_gross_amount(ask: Callable[[str], str] = console_ask) -> float:
    return parse_amount(ask_line(ask, AMOUNT_PROMPT))

def read_destination_currency(ask: Callable[[str], str] = console_ask,
                              schedule: FeeSchedule = DEFAULT_SCHEDULE) -> str:
    question = f"Enter destination currency ({', '.join(schedule.supported)}): "
    return parse_currency(ask_line(ask, question), schedule)
