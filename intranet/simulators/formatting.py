import math
import re

# "30.000", "1.234.567": dots grouping thousands, no decimal part
_THOUSANDS_ONLY = re.compile(r"^\d{1,3}(\.\d{3})+$")


def format_currency(value) -> str:
    """1234.5 -> "R$ 1.234,50" """
    return f"R$ {value:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def format_percent(rate, digits: int = 1) -> str:
    """0.012 -> "1,2%" """
    return f"{rate * 100:.{digits}f}%".replace(".", ",")


def format_number(value) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").replace(".", ",")


def parse_brl(value) -> float:
    """
    Parses the amounts typed in the simulator forms: plain numbers,
    "1234.56", "30.000", "1.234,56" and "R$ 1.234,56". Blank means zero.
    Raises ValueError for anything else.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise ValueError("booleans are not amounts")
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).replace("R$", "").replace("\xa0", "").replace(" ", "").strip()
        if not text:
            return 0.0
        if "," in text:
            text = text.replace(".", "").replace(",", ".")
        elif _THOUSANDS_ONLY.match(text):
            text = text.replace(".", "")
        number = float(text)

    if not math.isfinite(number):
        raise ValueError("amount must be finite")
    return number
