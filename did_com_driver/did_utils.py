"""Utilities for DID parsing and did:com syntax validation."""

from typing import Union

from .constants import DID_COM_PATTERN, DID_PATTERN
from .errors import InvalidInputError
from .schemas import DID

def parse_did(value: Union[str, DID]) -> DID:
    """
    Parses a DID string into its method and method-specific id.

    Args:
        value: A DID string (e.g. "did:com:1...") or an already parsed DID.

    Returns:
        The parsed DID.

    Raises:
        InvalidInputError: If the value is not a DID.
    """
    if isinstance(value, DID):
        return value
    if not isinstance(value, str):
        raise InvalidInputError(f"DID must be a string, got {type(value).__name__}.")

    match = DID_PATTERN.match(value)
    if not match:
        raise InvalidInputError(f"Invalid DID format: '{value}'.")
    return DID(method=match.group(1), method_specific_id=match.group(2))

def is_did_com(did: Union[str, DID]) -> bool:
    """Returns True if the DID matches the did:com grammar."""
    did_string = did.did if isinstance(did, DID) else did
    return isinstance(did_string, str) and DID_COM_PATTERN.match(did_string) is not None
