"""
Conviction - storage and coordination for conviction voting.

Resolves conviction state from a document network and submits proposals
through the conviction service's allow-list gate.
"""

from .api import ConvictionApi
from .config import Session, Settings, get_settings
from .errors import (
    AddressIdentityMismatch,
    AddressNotLinked,
    AuthorizationError,
    ConfigFetchError,
    ConvictionError,
    DocumentNotFound,
    NotAuthenticated,
    ProposalNotFound,
    ProposalSubmissionError,
    StateNotFound,
    UnknownAlias,
)
from .network import DocumentHandle, DocumentNetwork
from .storage import ConvictionStorage
from .types import (
    ConvictionAllocation,
    ConvictionState,
    Convictions,
    FullProposal,
    Participant,
    Proposal,
    ProposalConviction,
    ProposalSubmission,
    PublicConfig,
    merge_proposal,
)

try:
    from importlib.metadata import version

    __version__ = version("conviction-voting")
except Exception:
    __version__ = "0.0.0"

__all__ = [
    # Facade
    "ConvictionApi",
    "ConvictionStorage",
    # Config
    "Session",
    "Settings",
    "get_settings",
    # Network
    "DocumentHandle",
    "DocumentNetwork",
    # Types
    "ConvictionAllocation",
    "ConvictionState",
    "Convictions",
    "FullProposal",
    "Participant",
    "Proposal",
    "ProposalConviction",
    "ProposalSubmission",
    "PublicConfig",
    "merge_proposal",
    # Errors
    "AddressIdentityMismatch",
    "AddressNotLinked",
    "AuthorizationError",
    "ConfigFetchError",
    "ConvictionError",
    "DocumentNotFound",
    "NotAuthenticated",
    "ProposalNotFound",
    "ProposalSubmissionError",
    "StateNotFound",
    "UnknownAlias",
]
