import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import NamedTuple


class CurrencyFormat(NamedTuple):
    symbol: str
    symbol_after: bool = False   # '1.234,56 €' vs '$1,234.56'
    spaced: bool = False         # space between symbol and number
    group: str = ","
    decimal: str = "."
    digits: int = 2
    indian_grouping: bool = False  # 12,34,567.00


_NBSP = "\u00a0"

# Each currency formatted the way its home locale writes it
CURRENCY_FORMATS: dict[str, CurrencyFormat] = {
    "USD": CurrencyFormat("$"),
    "EUR": CurrencyFormat("€", symbol_after=True, spaced=True, group=".", decimal=","),
    "JPY": CurrencyFormat("¥", digits=0),
    "GBP": CurrencyFormat("£"),
    "AUD": CurrencyFormat("A$"),
    "CAD": CurrencyFormat("CA$"),
    "CHF": CurrencyFormat("CHF", spaced=True, group="’"),
    "CNY": CurrencyFormat("CN¥"),
    "SEK": CurrencyFormat("kr", symbol_after=True, spaced=True, group=_NBSP, decimal=","),
    "NZD": CurrencyFormat("NZ$"),
    "MXN": CurrencyFormat("MX$"),
    "SGD": CurrencyFormat("S$"),
    "HKD": CurrencyFormat("HK$"),
    "NOK": CurrencyFormat("kr", symbol_after=True, spaced=True, group=_NBSP, decimal=","),
    "KRW": CurrencyFormat("₩", digits=0),
    "TRY": CurrencyFormat("₺", group=".", decimal=","),
    "INR": CurrencyFormat("₹", indian_grouping=True),
    "RUB": CurrencyFormat("₽", symbol_after=True, spaced=True, group=_NBSP, decimal=","),
    "BRL": CurrencyFormat("R$", spaced=True, group=".", decimal=","),
    "ZAR": CurrencyFormat("R", spaced=True, group=_NBSP, decimal=","),
    "PHP": CurrencyFormat("₱"),
}


def _group_digits(digits: str, sep: str, indian: bool) -> str:
    if indian and len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        parts = []
        while len(head) > 2:
            parts.insert(0, head[-2:])
            head = head[:-2]
        if head:
            parts.insert(0, head)
        return sep.join(parts + [tail])
    parts = []
    while len(digits) > 3:
        parts.insert(0, digits[-3:])
        digits = digits[:-3]
    parts.insert(0, digits)
    return sep.join(parts)


def format_currency(amount: float, currency: str = "USD") -> str:
    """Format an amount for display in the given currency, e.g. '$1,234.56'.

    Unknown codes fall back to '<CODE> 1,234.56'.
    """
    fmt = CURRENCY_FORMATS.get(currency) or CurrencyFormat(currency, spaced=True)
    if not math.isfinite(amount):
        return f"{'-' if amount < 0 else ''}{fmt.symbol}∞"
    quantum = Decimal(1).scaleb(-fmt.digits)
    value = Decimal(str(amount))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + fmt.digits + 1)
        value = value.quantize(quantum, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    int_part, _, frac_part = f"{abs(value):f}".partition(".")

    number = _group_digits(int_part, fmt.group, fmt.indian_grouping)
    if fmt.digits:
        number = f"{number}{fmt.decimal}{frac_part}"

    space = _NBSP if fmt.spaced else ""
    if fmt.symbol_after:
        return f"{sign}{number}{space}{fmt.symbol}"
    return f"{sign}{fmt.symbol}{space}{number}"
