"""Alias resolution for identity-scoped records.

Each identity owns one index document (family ``IDX``) mapping definition
ids to record document URLs. Aliases are the human names of those
definitions, as published in the service configuration.
"""

import logging
from typing import Any, Dict, Optional

from .errors import DocumentNotFound, NotAuthenticated, UnknownAlias
from .network import DocumentHandle, DocumentNetwork

logger = logging.getLogger(__name__)

INDEX_FAMILY = "IDX"


class IndexResolver:
    """Get and set identity-scoped records by alias."""

    def __init__(self, network: DocumentNetwork, aliases: Dict[str, str]):
        self._network = network
        self._aliases = dict(aliases)

    def definition(self, alias: str) -> str:
        try:
            return self._aliases[alias]
        except KeyError:
            raise UnknownAlias(alias) from None

    def _session_did(self) -> str:
        did = self._network.did
        if not did:
            raise NotAuthenticated()
        return did

    async def get(self, alias: str, did: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Return the content of ``did``'s record for ``alias``.

        Args:
            alias: Configured alias name
            did: Owner of the record; defaults to the session identity

        Returns:
            The record content, or None if the owner has no such record.

        Raises:
            DocumentNotFound: If the index points at a missing document.
        """
        definition_id = self.definition(alias)
        owner = did or self._session_did()

        index = await self._network.deterministic(owner, INDEX_FAMILY)
        record_url = index.content.get(definition_id)
        if not record_url:
            logger.debug("No %s record indexed for %s", alias, owner)
            return None

        return (await self._load_record(alias, record_url, owner)).content

    async def _load_record(self, alias: str, record_url: str, owner: str) -> DocumentHandle:
        record = await self._network.load(record_url)
        if record is None:
            logger.error(f"Indexed {alias} record {record_url} of {owner} is missing")
            raise DocumentNotFound(record_url, referrer=f"{alias} index of {owner}")
        return record

    async def set(self, alias: str, content: Dict[str, Any]) -> str:
        """Write the session identity's record for ``alias``.

        Updates the record in place when one is indexed, otherwise creates it
        and links it into the identity's index.

        Returns:
            The record document id.

        Raises:
            DocumentNotFound: If the index points at a missing document.
        """
        definition_id = self.definition(alias)
        owner = self._session_did()

        index = await self._network.deterministic(owner, INDEX_FAMILY)
        record_url = index.content.get(definition_id)
        if record_url:
            record = await self._load_record(alias, record_url, owner)
            await self._network.update(record.id, content)
            return record.id

        record = await self._network.create(content, controllers=[owner])
        await self._network.update(index.id, {**index.content, definition_id: record.url})
        logger.info(f"Created {alias} record {record.id} for {owner}")
        return record.id
