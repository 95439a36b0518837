"""Mapping of Commercio identity records into DID Documents."""

from typing import Any, Callable, Dict, List, TypeVar, Union

from pydantic import ValidationError

from .constants import DID_CONTEXT_V1
from .errors import DecodeError
from .schemas import (
    DID,
    DIDDocument,
    IdentityData,
    Service,
    VerificationMethod,
    VerificationMethodReference,
    VerificationRelationship,
)

T = TypeVar("T")

def to_did_document(identity: IdentityData, did: DID) -> DIDDocument:
    """
    Builds the DID Document for ``did`` out of its Commercio identity.

    Each raw entry is converted independently and list order is kept.
    References between entries are not checked.

    Raises:
        DecodeError: If an entry lacks a field its type requires.
    """
    raw = identity.didDocument
    # the default DID context is implied
    contexts = [context for context in raw.context if context != DID_CONTEXT_V1]

    return DIDDocument(
        context=contexts,
        id=did.uri,
        verification_method=into_verification_methods(raw.verificationMethod),
        authentication=into_relationships(raw.authentication),
        assertion_method=into_relationships(raw.assertionMethod),
        key_agreement=into_relationships(raw.keyAgreement),
        service=into_services(raw.service),
    )

def into_verification_methods(entries: List[Dict[str, Any]]) -> List[VerificationMethod]:
    return _into_beans(entries, VerificationMethod.model_validate)

def into_services(entries: List[Dict[str, Any]]) -> List[Service]:
    return _into_beans(entries, Service.model_validate)

def into_relationships(entries: List[Union[str, Dict[str, Any]]]) -> List[VerificationRelationship]:
    return _into_beans(entries, _into_relationship)

def _into_relationship(entry: Union[str, Dict[str, Any]]) -> VerificationRelationship:
    """An entry is a reference when it is a bare id or a map with nothing but an id."""
    if isinstance(entry, str):
        return VerificationMethodReference(id=entry)
    if set(entry) == {"id"}:
        return VerificationMethodReference.model_validate(entry)
    return VerificationMethod.model_validate(entry)

def _into_beans(entries: List[Any], mapper: Callable[[Any], T]) -> List[T]:
    try:
        return [mapper(entry) for entry in entries]
    except ValidationError as e:
        raise DecodeError(f"Invalid DID Document entry: {e}") from e
