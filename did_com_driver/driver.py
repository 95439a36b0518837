"""Universal resolver driver for did:com DIDs (Commercio network)."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Mapping, Optional, Union

from .config import properties_from_environment, select_network
from .constants import DID_LD_JSON_CONTENT_TYPE, IDENTITIES_PATH_TEMPLATE
from .decoder import decode_identity
from .did_utils import is_did_com, parse_did
from .errors import ResolutionError
from .fetcher import send_get_request
from .mapper import to_did_document
from .schemas import DID, ResolveResult

logger = logging.getLogger(__name__)

class Driver(ABC):
    """A resolution backend for one DID method."""

    @abstractmethod
    def resolve(
        self, did: Union[str, DID], resolve_options: Optional[Mapping[str, Any]] = None
    ) -> Optional[ResolveResult]:
        """
        Resolves a DID.

        Returns:
            The resolution result, or None if the DID does not belong to
            the method handled by this driver.

        Raises:
            ResolutionError: If the DID belongs to this driver but could not
                             be resolved.
        """

    @property
    @abstractmethod
    def properties(self) -> Mapping[str, Any]:
        """The properties this driver was built with."""


class DidComDriver(Driver):
    """
    Resolves did:com DIDs against the Commercio network.

    The network endpoint is selected once, at construction time, from the
    ``uniresolver_driver_did_com_network`` property.
    """

    def __init__(self, properties: Optional[Mapping[str, Any]] = None):
        """
        Args:
            properties: The driver properties. When omitted they are read
                        from the environment.
        """
        if properties is None:
            properties = properties_from_environment()
        self._properties: Dict[str, Any] = dict(properties)
        self._network = select_network(self._properties)

    @property
    def properties(self) -> Mapping[str, Any]:
        return dict(self._properties)

    @property
    def network(self) -> str:
        return self._network

    def resolve(
        self, did: Union[str, DID], resolve_options: Optional[Mapping[str, Any]] = None
    ) -> Optional[ResolveResult]:
        logger.debug(f"Trying to resolve {did}")

        try:
            if not is_did_com(did):
                logger.debug(f"The DID {did} doesn't match its expected format")
                return None

            parsed_did = parse_did(did)
            request = IDENTITIES_PATH_TEMPLATE.format(network=self._network, did=parsed_did.did)
            response = send_get_request(request)
            identity = decode_identity(response)
            did_document = to_did_document(identity, parsed_did)

            logger.debug(f"Resolved {did}")
            return ResolveResult(
                did_document=did_document,
                did_document_metadata=identity.metadata,
                did_resolution_metadata={"contentType": DID_LD_JSON_CONTENT_TYPE},
            )
        except ResolutionError as e:
            logger.error(f"Failed to resolve DID {did}: {e}")
            raise
        except Exception as e:
            logger.exception(f"Unexpected error while resolving DID {did}")
            raise ResolutionError(str(e)) from e
