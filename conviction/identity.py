"""Authentication checks and blockchain account linking."""

import logging
from typing import Union

from .errors import AddressIdentityMismatch, AddressNotLinked, NotAuthenticated
from .network import DocumentNetwork

logger = logging.getLogger(__name__)

EIP155_NAMESPACE = "eip155"


def account_id(address: str, chain_id: Union[int, str]) -> str:
    """Build the lower-cased CAIP-10 account id for an EVM address."""
    return f"{address}@{EIP155_NAMESPACE}:{chain_id}".lower()


def check_auth(network: DocumentNetwork) -> str:
    """Return the session identity, or raise NotAuthenticated."""
    did = network.did
    if not did:
        raise NotAuthenticated()
    return did


async def verify_account_link(
    network: DocumentNetwork, address: str, chain_id: Union[int, str]
) -> str:
    """Check that ``address`` on ``chain_id`` is linked to the session identity.

    Args:
        network: Authenticated document network session
        address: Blockchain address claimed by the caller
        chain_id: EIP-155 chain id from the public config

    Returns:
        The authenticated identity.

    Raises:
        NotAuthenticated: If the session has no identity
        AddressNotLinked: If no identity has claimed the address
        AddressIdentityMismatch: If another identity has claimed it
    """
    authenticated_did = check_auth(network)
    caip10 = account_id(address, chain_id)

    linked_did = await network.resolve_account_link(caip10)
    if not linked_did:
        raise AddressNotLinked(address, caip10)
    if linked_did != authenticated_did:
        logger.warning(f"Account {caip10} is linked to {linked_did}, not {authenticated_did}")
        raise AddressIdentityMismatch(address, linked_did, authenticated_did)

    return authenticated_did
