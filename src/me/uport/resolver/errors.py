"""Resolution error taxonomy.

Every stage of MNID resolution raises one of the ResolutionError subclasses
below. Callers branch on the class; the MNID and network id that triggered
the failure travel with the exception.
"""

from typing import Optional


class ResolutionError(Exception):
    """Base class for all resolution failures.

    Attributes:
        mnid: The MNID (or DID) being resolved when the failure happened
        network: Network id involved in the failure, when known
    """

    def __init__(
        self,
        message: str,
        mnid: Optional[str] = None,
        network: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.mnid = mnid
        self.network = network

    @property
    def kind(self) -> str:
        return type(self).__name__

    def with_context(
        self, mnid: Optional[str] = None, network: Optional[str] = None
    ) -> "ResolutionError":
        """Fill in missing context without changing the error kind."""
        if self.mnid is None:
            self.mnid = mnid
        if self.network is None:
            self.network = network
        return self

    def __str__(self) -> str:
        context = []
        if self.mnid is not None:
            context.append(f"mnid={self.mnid}")
        if self.network is not None:
            context.append(f"network={self.network}")
        if not context:
            return self.message
        return f"{self.message} ({', '.join(context)})"


class InvalidAccount(ResolutionError):
    pass


class NetworkMismatch(ResolutionError):
    pass


class UnknownNetwork(ResolutionError):
    pass


class TransportError(ResolutionError):
    pass


class MalformedResponse(ResolutionError):
    pass


class NotRegistered(ResolutionError):
    """The registry holds no document for the (tag, issuer, subject) triple."""


class TranslateError(ResolutionError):
    pass


class DecodeError(ResolutionError):
    """The fetched identity document is not valid JSON or fails the schema."""
