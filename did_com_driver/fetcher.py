"""HTTP access to the Commercio network."""

import logging

import requests

from .constants import CONNECT_TIMEOUT_SECONDS, READ_TIMEOUT_SECONDS, REQUEST_HEADERS
from .errors import TransportError

logger = logging.getLogger(__name__)

def send_get_request(url: str) -> str:
    """
    Sends a GET request to the Commercio network.

    A single attempt is made, bounded by the connect and read timeouts.

    Args:
        url: The full request URL.

    Returns:
        The response body as text.

    Raises:
        TransportError: If the connection failed or timed out, the status is
                        not 2xx, or the body could not be read.
    """
    logger.debug(f"Sending request {url}")

    response = None
    try:
        response = requests.get(
            url,
            headers=REQUEST_HEADERS,
            timeout=(CONNECT_TIMEOUT_SECONDS, READ_TIMEOUT_SECONDS),
        )
        response.raise_for_status()
        if not 200 <= response.status_code < 300:
            raise TransportError(f"Request to {url} failed: unexpected status {response.status_code}")
        # the body is UTF-8 whatever charset the headers announce
        return response.content.decode("utf-8")
    except (requests.RequestException, UnicodeDecodeError) as e:
        raise TransportError(f"Request to {url} failed: {e}") from e
    finally:
        if response is not None:
            response.close()
