"""Confidence scoring for geocoded address components."""

from models import AddressComponents
from services.parser import extract_postal_code, zip5

# Points awarded for each component present in the match.
WEIGHTS: dict[str, int] = {
    "house_number": 30,
    "road": 25,
    "city": 20,
    "state": 15,
    "postcode": 10,
}

# Components that must all be present for an address to be valid.
REQUIRED: tuple[str, ...] = ("house_number", "road", "city", "state")

DEFAULT_POSTAL_PENALTY = 25

_CITY_KEYS = ("city", "town", "village")


def _present(value: str | None) -> bool:
    return bool(value and value.strip())


def present_components(components: AddressComponents) -> set[str]:
    """Return the weighted component names present in *components*.

    ``city`` stands for the first of city, town or village that is set.
    """
    found = {
        name
        for name in ("house_number", "road", "state", "postcode")
        if _present(getattr(components, name))
    }
    if any(_present(getattr(components, key)) for key in _CITY_KEYS):
        found.add("city")
    return found


def _clamp(value: int) -> int:
    return max(0, min(100, value))


def score(
    components: AddressComponents | None,
    query: str | None = None,
    *,
    postal_penalty: int = DEFAULT_POSTAL_PENALTY,
) -> tuple[int, bool]:
    """Score a provider match.

    Returns ``(confidence, valid)``.  Confidence is the sum of
    :data:`WEIGHTS` for the components present, less *postal_penalty*
    when *query* names a ZIP that disagrees with the provider's
    postcode, clamped to 0..100.  ``valid`` only depends on
    :data:`REQUIRED` being present; the penalty never changes it.
    """
    if components is None:
        return 0, False

    found = present_components(components)
    confidence = sum(WEIGHTS[name] for name in found)

    if query:
        wanted = extract_postal_code(query)
        returned = zip5(components.postcode)
        if wanted and returned and wanted != returned:
            confidence -= postal_penalty

    valid = all(name in found for name in REQUIRED)
    return _clamp(confidence), valid
