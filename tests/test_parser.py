# tests/test_parser.py
import pytest

from services.parser import extract_postal_code, zip5


@pytest.mark.parametrize(
    "query, expected",
    [
        ("123 Main St, Springfield, IL 62704", "62704"),
        ("123 Main St, Springfield, IL 62704-1234", "62704"),
        ("123 Main St, Springfield, IL", None),
        ("Main St", None),
        ("12345 Main St", None),
        ("", None),
        ("   ", None),
    ],
)
def test_extract_postal_code(query, expected):
    assert extract_postal_code(query) == expected


@pytest.mark.parametrize(
    "postcode, expected",
    [
        ("62704", "62704"),
        ("62704-1234", "62704"),
        ("627", None),
        ("", None),
        (None, None),
    ],
)
def test_zip5(postcode, expected):
    assert zip5(postcode) == expected
