"""Query parsing helpers built on the usaddress library."""

import re

import usaddress

_ZIP5 = re.compile(r"^(\d{5})(?:-?\d{4})?$")

# Fallback for inputs usaddress cannot label: a ZIP (or ZIP+4) ending
# the string.  Only a trailing token is trusted so that five-digit house
# numbers ("12345 Main St") are never taken for a postal code.
_TRAILING_ZIP = re.compile(r"(?:^|[\s,])(\d{5})(?:-\d{4})?\s*$")


def _clean_token(token: str) -> str:
    # usaddress keeps trailing commas/semicolons on tokens.
    return token.strip().strip(",;.")


def extract_postal_code(query: str) -> str | None:
    """Return the 5-digit ZIP written in *query*, or *None*.

    Tokens labelled ``ZipCode`` by usaddress win; ZIP+4 values are cut
    down to their first five digits.  When usaddress labels no ZIP the
    trailing-token pattern is tried instead.
    """
    if not query or not query.strip():
        return None

    for token, label in usaddress.parse(query):
        if label != "ZipCode":
            continue
        m = _ZIP5.match(_clean_token(token))
        if m:
            return m.group(1)

    m = _TRAILING_ZIP.search(query.strip())
    return m.group(1) if m else None


def zip5(postcode: str | None) -> str | None:
    """Reduce a provider postcode to its leading five digits, if it has them."""
    if not postcode:
        return None
    digits = re.sub(r"[^\d]", "", postcode)
    if len(digits) < 5:
        return None
    return digits[:5]
