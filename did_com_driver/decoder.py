"""Decoding of Commercio identity responses."""

from pydantic import ValidationError

from .errors import DecodeError
from .schemas import IdentityData, IdentityResponse


def decode_identity(text: str) -> IdentityData:
    """
    Decodes the body of an ``/identities`` response.

    The body is expected to look like
    ``{"identity": {"didDocument": {...}, "metadata": {...}}}``.

    Raises:
        DecodeError: If the body is not JSON or does not have that shape.
    """
    try:
        return IdentityResponse.model_validate_json(text).identity
    except ValidationError as e:
        raise DecodeError(f"Malformed identity response: {e}") from e
