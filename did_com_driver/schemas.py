"""Pydantic models for the Commercio identity record and the resolved DID Document."""

from typing import Dict, Any, List, Union
from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator, model_serializer

class DID(BaseModel):
    """A parsed DID: did:<method>:<method-specific-id>."""
    model_config = ConfigDict(frozen=True)

    method: str
    method_specific_id: str

    @property
    def did(self) -> str:
        return f"did:{self.method}:{self.method_specific_id}"

    @property
    def uri(self) -> str:
        """The DID as used in the document ``id`` field."""
        return self.did

    def __str__(self) -> str:
        return self.did


# Raw record, as returned by /commercionetwork/did/{did}/identities

class RawDidDocument(BaseModel):
    """The ``didDocument`` part of a Commercio identity."""
    context: List[str] = Field(
        default_factory=list, validation_alias=AliasChoices("context", "@context")
    )
    verificationMethod: List[Dict[str, Any]] = Field(default_factory=list)
    authentication: List[Union[str, Dict[str, Any]]] = Field(default_factory=list)
    assertionMethod: List[Union[str, Dict[str, Any]]] = Field(default_factory=list)
    keyAgreement: List[Union[str, Dict[str, Any]]] = Field(default_factory=list)
    service: List[Dict[str, Any]] = Field(default_factory=list)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

class IdentityData(BaseModel):
    """A DID Document together with its ledger metadata."""
    didDocument: RawDidDocument
    metadata: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("metadata", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

class IdentityResponse(BaseModel):
    identity: IdentityData


# Canonical DID Document

class VerificationMethod(BaseModel):
    """Represents a DID Document Verification Method entry.

    Key material (``publicKeyMultibase``, ``publicKeyJwk``, ...) is kept as
    extra fields exactly as the ledger returned it.
    """
    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    type: str
    controller: str

class VerificationMethodReference(BaseModel):
    """A verification relationship entry that points to a method by id."""
    model_config = ConfigDict(frozen=True)

    id: str

    @model_serializer
    def _as_id(self) -> str:
        return self.id

VerificationRelationship = Union[VerificationMethod, VerificationMethodReference]

class Service(BaseModel):
    """Represents a DID Document service entry."""
    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    type: str
    serviceEndpoint: Union[str, List[Any], Dict[str, Any]]

class DIDDocument(BaseModel):
    """Method-agnostic DID Document. The default DID context is implied and not listed."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    context: List[str] = Field(default_factory=list, alias="@context")
    id: str
    verification_method: List[VerificationMethod] = Field(default_factory=list, alias="verificationMethod")
    authentication: List[VerificationRelationship] = Field(default_factory=list)
    assertion_method: List[VerificationRelationship] = Field(default_factory=list, alias="assertionMethod")
    key_agreement: List[VerificationRelationship] = Field(default_factory=list, alias="keyAgreement")
    service: List[Service] = Field(default_factory=list)

    def serialize(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

class ResolveResult(BaseModel):
    """Output of a successful resolution."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    did_document: DIDDocument = Field(..., alias="didDocument")
    did_document_metadata: Dict[str, Any] = Field(default_factory=dict, alias="didDocumentMetadata")
    did_resolution_metadata: Dict[str, Any] = Field(default_factory=dict, alias="didResolutionMetadata")

    def serialize(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
