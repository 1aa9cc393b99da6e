"""
Number, currency and date formatting utilities.

Amounts are rendered the way the Indonesian (id-ID) locale writes them:
``.`` groups thousands and ``,`` separates decimals, e.g. ``Rp 25.000,00``.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from django.utils import timezone, translation

CURRENCY_SYMBOLS = {
    "IDR": "Rp",
    "USD": "$",
}

INDONESIAN_MONTHS = [
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
]

INDONESIAN_SHORT_MONTHS = [
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "Mei",
    "Jun",
    "Jul",
    "Agu",
    "Sep",
    "Okt",
    "Nov",
    "Des",
]


def format_number(
    number: Union[int, float, Decimal],
    decimal_places: Optional[int] = None,
    use_grouping: bool = True,
    locale: Optional[str] = None,
) -> str:
    """
    Format a number according to the current or specified locale.

    Args:
        number: Number to format
        decimal_places: Number of decimal places (None for automatic)
        use_grouping: Whether to use thousand separators
        locale: Locale code ('id' or 'en'), defaults to current language

    Returns:
        Formatted number string

    Examples:
        >>> format_number(1234567.5, decimal_places=2, locale='id')
        '1.234.567,50'
        >>> format_number(1234567.5, decimal_places=2, locale='en')
        '1,234,567.50'
    """
    if locale is None:
        locale = translation.get_language() or "id"

    if decimal_places is not None:
        quantum = Decimal(1).scaleb(-decimal_places)
        formatted = str(Decimal(str(number)).quantize(quantum, rounding=ROUND_HALF_UP))
    else:
        formatted = str(number)

    negative = formatted.startswith("-")
    if negative:
        formatted = formatted[1:]

    # Split into integer and decimal parts
    if "." in formatted:
        integer_part, decimal_part = formatted.split(".")
    else:
        integer_part = formatted
        decimal_part = None

    # Add thousand separators if requested
    if use_grouping and len(integer_part) > 3:
        groups = []
        for i in range(len(integer_part), 0, -3):
            start = max(0, i - 3)
            groups.insert(0, integer_part[start:i])
        integer_part = ",".join(groups)

    if decimal_part:
        formatted = f"{integer_part}.{decimal_part}"
    else:
        formatted = integer_part

    if locale.startswith("id"):
        # Swap separators: 1,234.50 -> 1.234,50
        formatted = formatted.translate(str.maketrans(",.", ".,"))

    return f"-{formatted}" if negative else formatted


def format_currency(
    amount: Union[int, float, Decimal],
    currency: str = "IDR",
    locale: Optional[str] = "id",
) -> str:
    """
    Format a currency amount with its symbol.

    Examples:
        >>> format_currency(25000)
        'Rp 25.000,00'
        >>> format_currency(-1500)
        '-Rp 1.500,00'
    """
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    formatted_amount = format_number(abs(Decimal(str(amount))), decimal_places=2, locale=locale)
    sign = "-" if Decimal(str(amount)) < 0 else ""
    return f"{sign}{symbol} {formatted_amount}"


def format_datetime(
    datetime_obj: datetime,
    locale: Optional[str] = "id",
) -> str:
    """
    Format a datetime in the local time zone.

    Examples:
        >>> format_datetime(datetime(2024, 1, 5, 14, 30), locale='id')
        '5 Januari 2024, 14:30'
    """
    if timezone.is_aware(datetime_obj):
        datetime_obj = timezone.localtime(datetime_obj)

    if locale and locale.startswith("id"):
        month = INDONESIAN_MONTHS[datetime_obj.month - 1]
        return f"{datetime_obj.day} {month} {datetime_obj.year}, {datetime_obj:%H:%M}"

    return datetime_obj.strftime("%b %d, %Y, %H:%M")


def format_short_date(date_obj: date, locale: Optional[str] = "id") -> str:
    """
    Format a day and abbreviated month, as used on chart axes.

    Examples:
        >>> format_short_date(date(2024, 8, 17))
        '17 Agu'
    """
    if locale and locale.startswith("id"):
        return f"{date_obj.day} {INDONESIAN_SHORT_MONTHS[date_obj.month - 1]}"

    return f"{date_obj:%b} {date_obj.day}"
