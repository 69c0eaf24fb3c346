"""Conviction storage on a document network.

Translates the conviction domain model into individual document network
operations. Nothing is cached: every read resolves again from the network.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Union

from .config import Session
from .errors import DocumentNotFound, ProposalNotFound, StateNotFound
from .index import IndexResolver
from .network import DocumentHandle
from .types import (
    ConvictionState,
    Convictions,
    FullProposal,
    Proposal,
    merge_proposal,
)

logger = logging.getLogger(__name__)

STATE_ALIAS = "convictionstate"
CONVICTIONS_ALIAS = "convictions"


def _proposal_content(proposal: Union[Proposal, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(proposal, Proposal):
        return proposal.model_dump(exclude_none=True)
    return dict(proposal)


class ConvictionStorage:
    """Reads and writes conviction documents for one session."""

    def __init__(self, session: Session):
        self._session = session
        self._index = IndexResolver(session.network, session.config.ceramic.definitions)

    @property
    def session(self) -> Session:
        return self._session

    # ------------------------------------------------------------------
    # Global state
    # ------------------------------------------------------------------

    async def state_document(self) -> ConvictionState:
        """Load the global state owned by the service identity."""
        owner = self._session.config.ceramic.did
        state = await self._index.get(STATE_ALIAS, owner)
        if not state:
            raise StateNotFound(owner)
        return ConvictionState(**state)

    async def proposals(self) -> List[FullProposal]:
        """Load every proposal listed in the state, merged with its conviction.

        Loads run concurrently; the first failure fails the whole call.
        """
        state = await self.state_document()
        proposal_convictions = state.proposals
        docs = await asyncio.gather(
            *(self.fetch_proposal(pc.proposal) for pc in proposal_convictions)
        )
        return [
            merge_proposal(doc.content, conviction)
            for doc, conviction in zip(docs, proposal_convictions)
        ]

    async def query_participant_conviction(self, address: str) -> Optional[Convictions]:
        """Return the Convictions record of the participant at ``address``.

        Accounts are compared lower-cased. Returns None when the address is
        not a participant or has no convictions reference.

        Raises:
            DocumentNotFound: If the referenced convictions document is missing.
        """
        state = await self.state_document()
        wanted = address.lower()
        participant = next(
            (p for p in state.participants if p.account.lower() == wanted),
            None,
        )
        if participant is None or not participant.convictions:
            return None

        doc = await self._session.network.load(participant.convictions)
        if doc is None:
            logger.error(f"Convictions document {participant.convictions} of {address} is missing")
            raise DocumentNotFound(participant.convictions, referrer=f"participant {address}")
        return Convictions(**doc.content)

    # ------------------------------------------------------------------
    # Authenticated identity's records
    # ------------------------------------------------------------------

    async def get_convictions(self) -> Convictions:
        """Return the session identity's Convictions, or an unsaved empty one."""
        state = await self.state_document()
        content = await self._index.get(CONVICTIONS_ALIAS)
        if content is None:
            return Convictions.empty(state.context)
        return Convictions(**content)

    async def set_convictions(self, convictions: Convictions) -> str:
        """Create or update the session identity's Convictions record."""
        return await self._index.set(CONVICTIONS_ALIAS, convictions.model_dump())

    # ------------------------------------------------------------------
    # Proposals
    # ------------------------------------------------------------------

    async def create_proposal(self, proposal: Union[Proposal, Dict[str, Any]]) -> DocumentHandle:
        """Create a Proposal document under the published proposal schema."""
        doc = await self._session.network.create(
            _proposal_content(proposal),
            schema=self._session.config.ceramic.schemas.proposal,
        )
        logger.info(f"Created proposal document {doc.id}")
        return doc

    async def set_proposal(
        self, doc: DocumentHandle, next_proposal: Union[Proposal, Dict[str, Any]]
    ) -> str:
        """Update an existing Proposal document in place and return its id."""
        content = _proposal_content(next_proposal)
        await self._session.network.update(doc.id, content)
        doc.content = content
        return doc.id

    async def fetch_proposal(self, address: str) -> DocumentHandle:
        """Load any Proposal document by id or URL."""
        doc = await self._session.network.load(address)
        if doc is None:
            raise ProposalNotFound(address)
        return doc
