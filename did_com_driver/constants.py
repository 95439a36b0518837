"""Shared constants for the did:com driver."""

import re

DID_COM_PATTERN = re.compile(r"^did:com:([0-9a-hj-np-z]{38,39})$")
DID_PATTERN = re.compile(r"^did:([a-z0-9]+):(\S+)$")

# Property holding the Commercio network endpoint to contact.
NETWORK_KEY_IN_PROPERTIES: str = "uniresolver_driver_did_com_network"
DEFAULT_NETWORK: str = "https://lcd-devnet.commercio.network"

# Environment variable -> property key
ENVIRONMENT_PROPERTY_KEYS = {
    NETWORK_KEY_IN_PROPERTIES: NETWORK_KEY_IN_PROPERTIES,
    "uniresolver_driver_did_sov_libIndyPath": "libIndyPath",
    "uniresolver_driver_did_sov_poolConfigs": "poolConfigs",
    "uniresolver_driver_did_sov_poolVersions": "poolVersions",
    "uniresolver_driver_did_sov_walletNames": "walletNames",
    "uniresolver_driver_did_sov_submitterDidSeeds": "submitterDidSeeds",
    "uniresolver_driver_did_sov_genesisTimestamps": "genesisTimestamps",
}

IDENTITIES_PATH_TEMPLATE: str = "{network}/commercionetwork/did/{did}/identities"

REQUEST_HEADERS = {
    "Content-Type": "application/json; UTF-8",
    "Accept": "application/json",
}
CONNECT_TIMEOUT_SECONDS: float = 5.0
READ_TIMEOUT_SECONDS: float = 5.0

DID_CONTEXT_V1: str = "https://www.w3.org/ns/did/v1"
DID_LD_JSON_CONTENT_TYPE: str = "application/did+ld+json"

SAMPLE_DID: str = "did:com:109l7hvxq4kk0mtarfcl3gy3cdxuypdmt6j50ln"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
