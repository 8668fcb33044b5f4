"""Value formatters for display."""

from decimal import Decimal


def format_currency(value: Decimal, symbol: str = "R$") -> str:
    """
    Format decimal as Brazilian currency.

    Args:
        value: Decimal value to format
        symbol: Currency symbol (default: R$)

    Returns:
        Formatted string like "R$ 1.234,56"
    """
    # Handle negative values
    negative = value < 0
    value = abs(value)

    # Format with 2 decimal places
    formatted = f"{value:,.2f}"

    # Convert to Brazilian format (. for thousands, , for decimals)
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")

    result = f"{symbol} {formatted}"
    return f"-{result}" if negative else result


def format_reference_period(month: int, year: int) -> str:
    """Format a payroll reference period as MM/YYYY."""
    return f"{month:02d}/{year}"
