"""Document network protocol.

This defines the interface the conviction core consumes from a mutable,
identity-addressed document network. The network owns durable storage and
versioning; implementations are expected to serialize concurrent writes to
the same document themselves.

Implementations:
- InMemoryNetwork (conviction.testing): reference implementation used by tests
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

DOCUMENT_URL_SCHEME = "ceramic://"


def document_id(address: str) -> str:
    """Return the bare document id for an id or a ``ceramic://`` URL."""
    if address.startswith(DOCUMENT_URL_SCHEME):
        return address[len(DOCUMENT_URL_SCHEME) :]
    return address


@dataclass
class DocumentHandle:
    """A loaded document: its stable address and the current content."""

    id: str
    content: Dict[str, Any] = field(default_factory=dict)
    schema: Optional[str] = None
    controllers: List[str] = field(default_factory=list)

    @property
    def url(self) -> str:
        return f"{DOCUMENT_URL_SCHEME}{self.id}"


@runtime_checkable
class DocumentNetwork(Protocol):
    """Primitives of an authenticated document network session."""

    did: Optional[str]  # identity bound to the session, if authenticated

    async def create(
        self,
        content: Dict[str, Any],
        *,
        schema: Optional[str] = None,
        controllers: Optional[List[str]] = None,
    ) -> DocumentHandle:
        """Create a document and return its handle.

        Controllers default to the session identity.
        """
        ...

    async def load(self, address: str) -> Optional[DocumentHandle]:
        """Load a document by id or URL; None if it does not exist."""
        ...

    async def deterministic(self, controller: str, family: str) -> DocumentHandle:
        """Return the identity-scoped document for (controller, family).

        The address is derived from its arguments. Loading it must not
        persist anything; content is empty until the first update.
        """
        ...

    async def update(self, address: str, content: Dict[str, Any]) -> None:
        """Replace a document's content. Raises if the network rejects it."""
        ...

    async def resolve_account_link(self, account_id: str) -> Optional[str]:
        """Return the identity linked to a CAIP-10 account id, if any."""
        ...
