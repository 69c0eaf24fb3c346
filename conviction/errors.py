"""Error taxonomy for the conviction storage core.

Every failure raised by this package derives from :class:`ConvictionError`.
Failures coming from the document network or the HTTP layer are not
wrapped, with one exception: a proposal submission that already created a
document reports the partial result through :class:`ProposalSubmissionError`.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .types import ProposalSubmission


class ConvictionError(Exception):
    """Base for all conviction errors."""

    pass


class NotAuthenticated(ConvictionError):
    """The document network session carries no decentralized identity."""

    def __init__(self, message: str = "no document network authentication"):
        super().__init__(message)


class ConfigFetchError(ConvictionError):
    """The public configuration could not be fetched or parsed."""

    pass


class StateNotFound(ConvictionError):
    """The global conviction state document could not be resolved.

    This signals a misconfiguration: the state alias of the service identity
    does not point at a document.
    """

    def __init__(self, owner: Optional[str] = None):
        self.owner = owner
        super().__init__("no state document found; is server config correct?")


class DocumentNotFound(ConvictionError):
    """A referenced document does not exist on the network."""

    def __init__(self, address: str, referrer: Optional[str] = None):
        self.address = address
        self.referrer = referrer
        message = f"No doc matching docId: {address}"
        if referrer:
            message += f" (referenced by {referrer})"
        super().__init__(message)


class ProposalNotFound(DocumentNotFound):
    """No proposal document exists at the given address."""

    def __init__(self, address: str):
        super().__init__(address)


class UnknownAlias(ConvictionError):
    """An alias is missing from the configured definitions."""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(f"alias '{alias}' is not defined in the service configuration")


class AuthorizationError(ConvictionError):
    """The caller is not allowed to act for the claimed blockchain address."""

    pass


class AddressNotLinked(AuthorizationError):
    """No decentralized identity has claimed the blockchain address."""

    def __init__(self, address: str, account_id: str):
        self.address = address
        self.account_id = account_id
        super().__init__(f"address {address} is not linked to any identity")


class AddressIdentityMismatch(AuthorizationError):
    """The blockchain address is linked to another identity."""

    def __init__(self, address: str, linked_did: str, authenticated_did: str):
        self.address = address
        self.linked_did = linked_did
        self.authenticated_did = authenticated_did
        super().__init__(f"address {address} is linked to a different identity")


class ProposalSubmissionError(ConvictionError):
    """A proposal document was created but a later submission step failed.

    ``submission`` holds what was completed before the failure, so the
    caller can reconcile the orphaned document. The original failure is
    available as ``__cause__``.
    """

    def __init__(self, submission: "ProposalSubmission", step: str):
        self.submission = submission
        self.step = step
        super().__init__(
            f"proposal {submission.proposal_id} was created but the {step} step failed"
        )
