"""Unit tests for did_utils module"""

import pytest

from did_com_driver.did_utils import parse_did, is_did_com
from did_com_driver.constants import SAMPLE_DID
from did_com_driver.errors import InvalidInputError
from did_com_driver.schemas import DID


def test_parse_did():
    """Test that a DID string is split into method and method-specific id"""
    did = parse_did(SAMPLE_DID)

    assert did.method == "com"
    assert did.method_specific_id == "109l7hvxq4kk0mtarfcl3gy3cdxuypdmt6j50ln"
    assert did.did == SAMPLE_DID
    assert did.uri == SAMPLE_DID
    assert str(did) == SAMPLE_DID

def test_parse_did_returns_parsed_did_unchanged():
    did = DID(method="com", method_specific_id="109l7hvxq4kk0mtarfcl3gy3cdxuypdmt6j50ln")
    assert parse_did(did) is did

@pytest.mark.parametrize("value", ["", "did:com", "com:1234", "did::abc", "https://example.com"])
def test_parse_did_invalid(value):
    with pytest.raises(InvalidInputError) as excinfo:
        parse_did(value)
    assert "Invalid DID format" in str(excinfo.value)

def test_parse_did_not_a_string():
    with pytest.raises(InvalidInputError):
        parse_did(None)

def test_is_did_com_sample():
    assert is_did_com(SAMPLE_DID)
    assert is_did_com(parse_did(SAMPLE_DID))

def test_is_did_com_length_bounds():
    """The method-specific id is 38 or 39 characters long"""
    assert is_did_com("did:com:" + "a" * 38)
    assert is_did_com("did:com:" + "a" * 39)
    assert not is_did_com("did:com:" + "a" * 37)
    assert not is_did_com("did:com:" + "a" * 40)

@pytest.mark.parametrize("did", [
    "did:com:109i7hvxq4kk0mtarfcl3gy3cdxuypdmt6j50ln",  # 'i' is not in the alphabet
    "did:com:109o7hvxq4kk0mtarfcl3gy3cdxuypdmt6j50ln",  # nor is 'o'
    "did:com:109L7HVXQ4KK0MTARFCL3GY3CDXUYPDMT6J50LN",
    "did:com:109l7hvxq4kk0mtarfcl3gy3cdxuypdmt6j50ln ",
    "did:sov:109l7hvxq4kk0mtarfcl3gy3cdxuypdmt6j50ln",
    "did:key:z6MkhaXgBZDvotDkL5257faiztiGiC2QtKLGpbnnEGta2doK",
    "not a did",
])
def test_is_did_com_rejects(did):
    assert not is_did_com(did)
