# app/domain/services/gst_jurisdiction.py
"""
Seller/buyer jurisdiction for GST: decides CGST+SGST vs IGST.

State names arrive as free text ("MH", "Maharashtra", "maharashtra ",
"Jammu & Kashmir") or not at all, in which case the PIN code is used.
Everything is reduced to one normalised key (lower-case letters only)
before comparison. If either side stays unknown the supply is treated
as inter-state (IGST).

The PIN table is a coarse 3-digit prefix map. It is good enough for the
state decision on ordinary addresses; border post offices and tiny UTs
sharing a prefix with a neighbour resolve to the neighbour.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from app.domain.models.gst import AddressPair, GstTypeInfo

logger = logging.getLogger("gst_jurisdiction")

# normalised key -> (display name, GST state code)
STATES: dict[str, tuple[str, str]] = {
    "jammukashmir": ("Jammu & Kashmir", "01"),
    "himachalpradesh": ("Himachal Pradesh", "02"),
    "punjab": ("Punjab", "03"),
    "chandigarh": ("Chandigarh", "04"),
    "uttarakhand": ("Uttarakhand", "05"),
    "haryana": ("Haryana", "06"),
    "delhi": ("Delhi", "07"),
    "rajasthan": ("Rajasthan", "08"),
    "uttarpradesh": ("Uttar Pradesh", "09"),
    "bihar": ("Bihar", "10"),
    "sikkim": ("Sikkim", "11"),
    "arunachalpradesh": ("Arunachal Pradesh", "12"),
    "nagaland": ("Nagaland", "13"),
    "manipur": ("Manipur", "14"),
    "mizoram": ("Mizoram", "15"),
    "tripura": ("Tripura", "16"),
    "meghalaya": ("Meghalaya", "17"),
    "assam": ("Assam", "18"),
    "westbengal": ("West Bengal", "19"),
    "jharkhand": ("Jharkhand", "20"),
    "odisha": ("Odisha", "21"),
    "chhattisgarh": ("Chhattisgarh", "22"),
    "madhyapradesh": ("Madhya Pradesh", "23"),
    "gujarat": ("Gujarat", "24"),
    "damananddiu": ("Daman & Diu", "25"),
    "dadraandnagarhaveli": ("Dadra & Nagar Haveli", "26"),
    "maharashtra": ("Maharashtra", "27"),
    "karnataka": ("Karnataka", "29"),
    "goa": ("Goa", "30"),
    "lakshadweep": ("Lakshadweep", "31"),
    "kerala": ("Kerala", "32"),
    "tamilnadu": ("Tamil Nadu", "33"),
    "puducherry": ("Puducherry", "34"),
    "andamanandnicobar": ("Andaman & Nicobar", "35"),
    "telangana": ("Telangana", "36"),
    "andhrapradesh": ("Andhra Pradesh", "37"),
    "ladakh": ("Ladakh", "38"),
}

ABBREVIATIONS: dict[str, str] = {
    "jk": "jammukashmir",
    "hp": "himachalpradesh",
    "pb": "punjab",
    "ch": "chandigarh",
    "ut": "uttarakhand",
    "uk": "uttarakhand",
    "hr": "haryana",
    "dl": "delhi",
    "rj": "rajasthan",
    "up": "uttarpradesh",
    "br": "bihar",
    "sk": "sikkim",
    "ar": "arunachalpradesh",
    "nl": "nagaland",
    "mn": "manipur",
    "mz": "mizoram",
    "tr": "tripura",
    "ml": "meghalaya",
    "as": "assam",
    "wb": "westbengal",
    "jh": "jharkhand",
    "or": "odisha",
    "od": "odisha",
    "ct": "chhattisgarh",
    "cg": "chhattisgarh",
    "mp": "madhyapradesh",
    "gj": "gujarat",
    "dd": "damananddiu",
    "dn": "dadraandnagarhaveli",
    "mh": "maharashtra",
    "ka": "karnataka",
    "ga": "goa",
    "ld": "lakshadweep",
    "kl": "kerala",
    "tn": "tamilnadu",
    "py": "puducherry",
    "an": "andamanandnicobar",
    "ts": "telangana",
    "tg": "telangana",
    "ap": "andhrapradesh",
    "la": "ladakh",
}

ALIASES: dict[str, str] = {
    "jammuandkashmir": "jammukashmir",
    "orissa": "odisha",
    "pondicherry": "puducherry",
    "uttaranchal": "uttarakhand",
    "newdelhi": "delhi",
    "nctofdelhi": "delhi",
    "nationalcapitalterritoryofdelhi": "delhi",
    "andamannicobar": "andamanandnicobar",
    "andamanandnicobarislands": "andamanandnicobar",
    "dadranagarhaveli": "dadraandnagarhaveli",
    "dadraandnagarhavelianddamananddiu": "dadraandnagarhaveli",
    "damandiu": "damananddiu",
    "chattisgarh": "chhattisgarh",
}

_CODE_TO_STATE = {code: key for key, (_, code) in STATES.items()}
_CODE_TO_STATE["28"] = "andhrapradesh"  # pre-2014 registrations
_CODE_TO_STATE["37"] = "andhrapradesh"

# (first, last, state) over the first three PIN digits; earlier rows win
_PIN_PREFIXES: list[tuple[int, int, str]] = [
    (110, 110, "delhi"),
    (160, 160, "chandigarh"),
    (194, 194, "ladakh"),
    (246, 246, "uttarakhand"),
    (248, 249, "uttarakhand"),
    (262, 263, "uttarakhand"),
    (403, 403, "goa"),
    (737, 737, "sikkim"),
    (744, 744, "andamanandnicobar"),
    (814, 816, "jharkhand"),
    (822, 835, "jharkhand"),
    (121, 136, "haryana"),
    (140, 159, "punjab"),
    (171, 177, "himachalpradesh"),
    (180, 193, "jammukashmir"),
    (200, 285, "uttarpradesh"),
    (301, 345, "rajasthan"),
    (360, 396, "gujarat"),
    (400, 445, "maharashtra"),
    (450, 488, "madhyapradesh"),
    (490, 497, "chhattisgarh"),
    (500, 509, "telangana"),
    (510, 535, "andhrapradesh"),
    (560, 591, "karnataka"),
    (600, 643, "tamilnadu"),
    (670, 695, "kerala"),
    (700, 743, "westbengal"),
    (751, 770, "odisha"),
    (781, 788, "assam"),
    (790, 792, "arunachalpradesh"),
    (793, 794, "meghalaya"),
    (795, 795, "manipur"),
    (796, 796, "mizoram"),
    (797, 798, "nagaland"),
    (799, 799, "tripura"),
    (800, 855, "bihar"),
]

_NON_LETTERS = re.compile(r"[^a-z]")
_PIN_RE = re.compile(r"^[1-9][0-9]{5}$")


def normalize_state(name: str | None) -> str:
    """Reduce free-text state names and abbreviations to one key.

    ``"MH"``, ``"Maharashtra"`` and ``" maharashtra."`` all give
    ``"maharashtra"``. Unknown names are returned letters-only, lower-case,
    so two spellings of an unlisted place still compare equal.
    """
    if not name:
        return ""
    key = _NON_LETTERS.sub("", str(name).strip().lower())
    if key in ABBREVIATIONS:
        return ABBREVIATIONS[key]
    return ALIASES.get(key, key)


def state_display_name(key: str | None) -> Optional[str]:
    if not key:
        return None
    entry = STATES.get(key)
    return entry[0] if entry else None


def state_code(key: str | None) -> Optional[str]:
    if not key:
        return None
    entry = STATES.get(key)
    return entry[1] if entry else None


def state_from_pincode(pincode: str | int | None) -> Optional[str]:
    """Normalised state key for a six-digit Indian PIN code, or None."""
    if pincode is None:
        return None
    pin = re.sub(r"\s", "", str(pincode))
    if not _PIN_RE.match(pin):
        return None
    prefix = int(pin[:3])
    for first, last, key in _PIN_PREFIXES:
        if first <= prefix <= last:
            return key
    return None


def state_from_gstin(gstin: str | None) -> Optional[str]:
    """Normalised state key from the first two digits of a GSTIN."""
    if not gstin or len(gstin.strip()) < 2:
        return None
    return _CODE_TO_STATE.get(gstin.strip()[:2])


def place_of_supply_label(key: str | None) -> Optional[str]:
    """``"27-Maharashtra"`` for a known state key, None otherwise."""
    name = state_display_name(key)
    if not name:
        return None
    return f"{state_code(key)}-{name}"


def _resolve_side(state: str | None, pincode: str | None) -> str:
    return normalize_state(state) or state_from_pincode(pincode) or ""


def resolve_gst_type(address: AddressPair) -> GstTypeInfo:
    """Decide intra- vs inter-state supply for a seller/buyer pair.

    Explicit state text wins over the PIN code. Same normalised state on
    both sides gives CGST+SGST; different or unknown gives IGST.
    """
    seller_key = _resolve_side(address.seller_state, address.seller_pincode)
    buyer_key = _resolve_side(address.buyer_state, address.buyer_pincode)

    if not seller_key or not buyer_key:
        logger.info(
            "gst_jurisdiction: state unresolved (seller=%r/%s, buyer=%r/%s), defaulting to IGST",
            address.seller_state, address.seller_pincode,
            address.buyer_state, address.buyer_pincode,
        )

    is_same_state = bool(seller_key) and seller_key == buyer_key

    buyer_name = state_display_name(buyer_key)
    if buyer_name is None and address.buyer_state:
        buyer_name = address.buyer_state.strip() or None

    return GstTypeInfo(
        is_same_state=is_same_state,
        gst_type="CGST_SGST" if is_same_state else "IGST",
        seller_state=state_display_name(seller_key) or ((address.seller_state or "").strip() or None),
        buyer_state=buyer_name,
        place_of_supply=place_of_supply_label(buyer_key) or buyer_name,
    )
