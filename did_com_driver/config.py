"""Driver configuration: network endpoint selection and environment loading."""

import os
import logging
from typing import Any, Dict, Mapping, Optional

from .constants import DEFAULT_NETWORK, ENVIRONMENT_PROPERTY_KEYS, NETWORK_KEY_IN_PROPERTIES
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

def select_network(properties: Mapping[str, Any]) -> str:
    """
    Infers the Commercio network endpoint to contact.

    The endpoint is taken from the ``uniresolver_driver_did_com_network``
    property when it holds a string, and defaults to
    https://lcd-devnet.commercio.network otherwise.
    """
    network = properties.get(NETWORK_KEY_IN_PROPERTIES)
    if isinstance(network, str):
        return network
    return DEFAULT_NETWORK

def properties_from_environment(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """
    Builds the driver properties from environment variables.

    Args:
        environ: The environment to read, ``os.environ`` when omitted.

    Returns:
        The properties, holding only the variables that are set.

    Raises:
        ConfigurationError: If the environment cannot be read.
    """
    if environ is None:
        environ = os.environ

    properties: Dict[str, Any] = {}
    try:
        for env_var_name, property_key in ENVIRONMENT_PROPERTY_KEYS.items():
            value = environ.get(env_var_name)
            if value is not None:
                properties[property_key] = value
    except Exception as e:
        raise ConfigurationError(f"Failed to load properties from environment: {e}") from e

    logger.debug(f"Loaded properties from environment: {sorted(properties)}")
    return properties
