"""Configuration for pytest"""

import json
import pytest
import logging
from unittest.mock import MagicMock

from did_com_driver.constants import SAMPLE_DID

@pytest.fixture(autouse=True)
def setup_logging():
    logging.basicConfig(
        level=logging.DEBUG,
        format='%(levelname)s - %(name)s - %(message)s'
    )

    logging.getLogger('urllib3').setLevel(logging.WARNING)

    return logging.getLogger()

@pytest.fixture
def sample_identity():
    """An /identities response with one verification method and no services."""
    return {
        "identity": {
            "didDocument": {
                "context": [
                    "https://www.w3.org/ns/did/v1",
                    "https://example.org/ctx"
                ],
                "id": SAMPLE_DID,
                "verificationMethod": [
                    {
                        "id": f"{SAMPLE_DID}#keys-1",
                        "type": "RsaVerificationKey2018",
                        "controller": SAMPLE_DID,
                        "publicKeyMultibase": "mMIIBIjANBgkqhkiG9w0BAQEFAAOCAQ8AMIIBCgKCAQEA"
                    }
                ],
                "authentication": [f"{SAMPLE_DID}#keys-1"],
                "assertionMethod": [{"id": f"{SAMPLE_DID}#keys-1"}],
                "keyAgreement": [],
                "service": []
            },
            "metadata": {
                "created": "2022-03-01T10:00:00Z",
                "updated": "2022-03-01T10:00:00Z"
            }
        }
    }

@pytest.fixture
def make_response():
    """Builds a stand-in for requests.Response."""
    def _make_response(body, status_code=200, headers=None):
        response = MagicMock()
        response.status_code = status_code
        response.headers = headers or {"Content-Type": "application/json"}
        if isinstance(body, bytes):
            response.content = body
        else:
            text = body if isinstance(body, str) else json.dumps(body, ensure_ascii=False)
            response.content = text.encode("utf-8")
        return response
    return _make_response
