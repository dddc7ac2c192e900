"""
Interfaces of the remote collaborators used when creating a service.
"""
from typing import Protocol
from ..MODELS.service_spec import ServiceSpec


class NetworkResolver(Protocol):
    """Turns a human readable network name into a network identifier."""

    def resolve_network(self, name: str) -> str:
        """:raises NetworkNotFoundError: If no network has that name."""
        ...


class ServiceSubmitter(Protocol):
    """Submits a specification and returns the created service's identifier."""

    def create_service(self, spec: ServiceSpec) -> str:
        """:raises RemoteError: If the service could not be created."""
        ...
