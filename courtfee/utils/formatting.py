"""Amount formatting for formulas and messages."""


def format_amount(value: float) -> str:
    """Thousands-separated amount without trailing zeros (60000.0 -> '60,000', 800.0003 -> '800.0003')."""
    text = f"{value:,.6f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text
