"""Pydantic models for conviction documents and the public service config.

Every document model accepts extra fields: the server owns the schemas and
this package must round-trip fields it does not know about.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


# =============================================================================
# Documents
# =============================================================================


class Participant(BaseModel):
    """A known participant of the global state."""

    account: str  # blockchain address
    convictions: Optional[str] = None  # Convictions document address

    class Config:
        extra = "allow"


class ProposalConviction(BaseModel):
    """Aggregate conviction metadata for one proposal, kept in the state."""

    proposal: str  # Proposal document address

    class Config:
        extra = "allow"


class ConvictionState(BaseModel):
    """The global aggregate, owned by the service identity."""

    context: str
    participants: List[Participant] = Field(default_factory=list)
    proposals: List[ProposalConviction] = Field(default_factory=list)

    class Config:
        extra = "allow"


class Proposal(BaseModel):
    """User-authored proposal content."""

    title: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[Union[int, float, str]] = None
    beneficiary: Optional[str] = None
    context: Optional[str] = None

    class Config:
        extra = "allow"


class ConvictionAllocation(BaseModel):
    """One allocation of an identity's conviction to a proposal."""

    proposal: str
    allocation: float = 0

    class Config:
        extra = "allow"


class Convictions(BaseModel):
    """Per-identity conviction record."""

    context: str
    convictions: List[ConvictionAllocation] = Field(default_factory=list)
    proposals: List[str] = Field(default_factory=list)

    class Config:
        extra = "allow"

    @classmethod
    def empty(cls, context: str) -> "Convictions":
        """The zero-value record used when an identity has none stored yet."""
        return cls(context=context, convictions=[], proposals=[])


class FullProposal(BaseModel):
    """Read-only merge of a proposal's content and its state metadata.

    Never persisted. Build it with :func:`merge_proposal`.
    """

    proposal: str

    class Config:
        extra = "allow"


def merge_proposal(content: Dict[str, Any], conviction: ProposalConviction) -> FullProposal:
    """Merge proposal content with its conviction metadata.

    Content fields are laid down first and every ProposalConviction field is
    written over them, so the conviction metadata wins when both sides define
    the same field name.
    """
    merged: Dict[str, Any] = dict(content)
    merged.update(conviction.model_dump())
    return FullProposal(**merged)


# =============================================================================
# Public configuration
# =============================================================================


class SchemaIds(BaseModel):
    """Schema ids published by the service."""

    proposal: str = Field(alias="Proposal")

    class Config:
        populate_by_name = True
        extra = "allow"


class CeramicConfig(BaseModel):
    """Document network section of the public config."""

    did: str  # service identity owning the state document
    schemas: SchemaIds
    definitions: Dict[str, str] = Field(default_factory=dict)  # alias -> definition id


class EnvironmentConfig(BaseModel):
    """Chain section of the public config."""

    chain_id: int = Field(alias="chainId")

    class Config:
        populate_by_name = True
        extra = "allow"


class PublicConfig(BaseModel):
    """Configuration served at the service root."""

    ceramic: CeramicConfig
    environment: EnvironmentConfig

    class Config:
        frozen = True


# =============================================================================
# Submission result
# =============================================================================


@dataclass
class ProposalSubmission:
    """Outcome of a proposal submission, including partial progress."""

    proposal_id: str  # URL of the created Proposal document
    account: str  # blockchain address the proposal was submitted for
    convictions_id: Optional[str] = None  # set once the caller's index was written
    gate_status: Optional[int] = None  # HTTP status of the gate notification

    @property
    def indexed(self) -> bool:
        return self.convictions_id is not None

    @property
    def completed(self) -> bool:
        return self.indexed and self.gate_status is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "proposal_id": self.proposal_id,
            "account": self.account,
            "convictions_id": self.convictions_id,
            "gate_status": self.gate_status,
            "completed": self.completed,
        }
