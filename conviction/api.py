"""Caller-facing conviction API.

Bootstraps the public configuration from the conviction service, binds a
:class:`ConvictionStorage` to the caller's document network session and
adds the one compound operation, proposal submission.
"""

import logging
from typing import Any, Dict, List, Optional, Union

import httpx

from .config import Session, get_settings
from .errors import ConfigFetchError, ProposalSubmissionError
from .gate import fetch_public_config, notify_proposal
from .identity import check_auth, verify_account_link
from .network import DocumentHandle, DocumentNetwork
from .storage import ConvictionStorage
from .types import (
    ConvictionState,
    Convictions,
    FullProposal,
    Proposal,
    ProposalSubmission,
)

logger = logging.getLogger(__name__)


class ConvictionApi:
    """Conviction operations for one authenticated session."""

    def __init__(self, session: Session):
        self._session = session
        self._storage = ConvictionStorage(session)

    @classmethod
    async def connect(
        cls,
        network: DocumentNetwork,
        service_uri: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
    ) -> "ConvictionApi":
        """Fetch the public config and return an API bound to ``network``.

        Args:
            network: The caller's document network session
            service_uri: Conviction service root (default: CONVICTION_SERVICE_URI)
            timeout: HTTP timeout in seconds (default: CONVICTION_HTTP_TIMEOUT)

        Raises:
            ConfigFetchError: If no service URI is configured or the config
                cannot be fetched.
        """
        settings = get_settings()
        service_uri = service_uri or settings.service_uri
        if not service_uri:
            raise ConfigFetchError("No conviction service URI configured")
        timeout = timeout if timeout is not None else settings.http_timeout

        config = await fetch_public_config(service_uri, timeout=timeout)
        logger.debug("Fetched public config from %s", service_uri)
        return cls(
            Session(
                network=network,
                service_uri=service_uri,
                config=config,
                http_timeout=timeout,
            )
        )

    @property
    def session(self) -> Session:
        return self._session

    @property
    def storage(self) -> ConvictionStorage:
        return self._storage

    # Global State Getters

    async def state_document(self) -> ConvictionState:
        """Get the global state document."""
        check_auth(self._session.network)
        return await self._storage.state_document()

    async def proposals(self) -> List[FullProposal]:
        """Get the proposals listed on the state document."""
        check_auth(self._session.network)
        return await self._storage.proposals()

    async def fetch_proposal(self, address: str) -> DocumentHandle:
        """Fetch a proposal document by id or URL.

        Useful for proposals that are not listed in the global state and may
        or may not be modifiable by the authenticated identity.
        """
        check_auth(self._session.network)
        return await self._storage.fetch_proposal(address)

    async def query_participant_conviction(self, address: str) -> Optional[Convictions]:
        """Get the Convictions record of a participant by blockchain address."""
        check_auth(self._session.network)
        return await self._storage.query_participant_conviction(address)

    # Actions specific to the authenticated identity

    async def get_convictions(self) -> Convictions:
        check_auth(self._session.network)
        return await self._storage.get_convictions()

    async def set_convictions(self, convictions: Convictions) -> str:
        check_auth(self._session.network)
        return await self._storage.set_convictions(convictions)

    async def update_proposal(
        self, doc: DocumentHandle, next_proposal: Union[Proposal, Dict[str, Any]]
    ) -> str:
        """Update an existing Proposal document."""
        check_auth(self._session.network)
        return await self._storage.set_proposal(doc, next_proposal)

    async def add_proposal(
        self, proposal: Union[Proposal, Dict[str, Any]], address: str
    ) -> ProposalSubmission:
        """Create a Proposal document and submit it for the global state.

        The address must be linked to the authenticated identity; otherwise
        nothing is created. Once the document exists, a failure to index it
        or to reach the gate raises ProposalSubmissionError carrying the
        partial submission. An address outside the allow-list is reported
        by the gate status (typically 401) and keeps the proposal out of the
        state document.

        Raises:
            NotAuthenticated: If the session has no identity
            AddressNotLinked: If no identity has claimed the address
            AddressIdentityMismatch: If another identity has claimed it
            ProposalSubmissionError: If a step after creation fails
        """
        chain_id = self._session.config.environment.chain_id
        await verify_account_link(self._session.network, address, chain_id)

        # TODO: distinguish a resubmission of an indexed proposal from a new one
        doc = await self._storage.create_proposal(proposal)
        submission = ProposalSubmission(proposal_id=doc.url, account=address)

        try:
            convictions = await self._storage.get_convictions()
            convictions.proposals.append(doc.url)
            submission.convictions_id = await self._storage.set_convictions(convictions)
        except Exception as e:
            logger.error(f"Proposal {doc.id} created but not indexed: {e}")
            raise ProposalSubmissionError(submission, "index") from e

        try:
            submission.gate_status = await notify_proposal(
                self._session.service_uri, address, timeout=self._session.http_timeout
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"Proposal {doc.id} indexed but gate notification failed: {e}")
            raise ProposalSubmissionError(submission, "gate") from e

        return submission
