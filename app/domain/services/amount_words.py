# app/domain/services/amount_words.py
"""
Rupee amounts in Indian-English words, for the "Amount in words" line of a
tax invoice.

Grouping follows the Indian system: crore (10^7), lakh (10^5), thousand,
then the last three digits::

    >>> convert_amount_to_words(1234567.5)
    'Twelve Lakh Thirty Four Thousand Five Hundred Sixty Seven Rupees and Fifty Paise Only'
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Union

from app.domain.services.gst_math import quantize_half_up

Number = Union[int, float, Decimal]

ONES = [
    "", "One", "Two", "Three", "Four", "Five", "Six", "Seven", "Eight", "Nine",
]
TEENS = [
    "Ten", "Eleven", "Twelve", "Thirteen", "Fourteen",
    "Fifteen", "Sixteen", "Seventeen", "Eighteen", "Nineteen",
]
TENS = [
    "", "", "Twenty", "Thirty", "Forty", "Fifty", "Sixty", "Seventy", "Eighty", "Ninety",
]

CRORE = 10_000_000
LAKH = 100_000
THOUSAND = 1_000

ZERO_WORDS = "Zero Only"


def words_below_hundred(n: int) -> str:
    if n < 10:
        return ONES[n]
    if n < 20:
        return TEENS[n - 10]
    tens, ones = divmod(n, 10)
    return f"{TENS[tens]} {ONES[ones]}" if ones else TENS[tens]


def words_below_thousand(n: int) -> str:
    """Words for 0–999; zero gives an empty string."""
    hundreds, rest = divmod(n, 100)
    if not hundreds:
        return words_below_hundred(rest)
    head = f"{ONES[hundreds]} Hundred"
    return f"{head} {words_below_hundred(rest)}" if rest else head


def indian_number_to_words(n: int) -> str:
    """Words for a non-negative integer using crore/lakh/thousand grouping.

    Counts of crore above 999 are spelled with the same grouping
    (``"One Lakh Crore"``). Zero gives an empty string.
    """
    if n <= 0:
        return ""

    crores, n = divmod(n, CRORE)
    lakhs, n = divmod(n, LAKH)
    thousands, rest = divmod(n, THOUSAND)

    parts: list[str] = []
    if crores:
        parts.append(f"{indian_number_to_words(crores)} Crore")
    if lakhs:
        parts.append(f"{words_below_thousand(lakhs)} Lakh")
    if thousands:
        parts.append(f"{words_below_thousand(thousands)} Thousand")
    if rest:
        parts.append(words_below_thousand(rest))
    return " ".join(parts)


def convert_amount_to_words(amount: Number) -> str:
    """Spell out a rupee amount, e.g. ``"One Hundred Rupees and Fifty Paise Only"``.

    The amount is rounded to paise first (halves away from zero). Zero,
    and anything that rounds to zero, is ``"Zero Only"``. Non-finite input
    also yields ``"Zero Only"`` since this string ends up in legal text.
    Negative amounts are spelled as their absolute value with a ``"Minus"``
    prefix.
    """
    if amount is None:
        return ZERO_WORDS
    if isinstance(amount, float) and not math.isfinite(amount):
        return ZERO_WORDS
    value = Decimal(str(amount))
    if not value.is_finite():
        return ZERO_WORDS

    value = quantize_half_up(value, Decimal("0.01"))
    if value == 0:
        return ZERO_WORDS

    prefix = ""
    if value < 0:
        prefix = "Minus "
        value = value.copy_abs()

    rupees = int(value)
    paise = int((value - rupees) * 100)

    words = indian_number_to_words(rupees)
    if words:
        words += " Rupee" if rupees == 1 else " Rupees"

    if paise:
        paise_words = f"{words_below_hundred(paise)} Paise"
        words = f"{words} and {paise_words}" if words else paise_words

    return f"{prefix}{words} Only"
