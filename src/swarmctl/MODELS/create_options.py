"""
Options collected by the service create command.
"""
from typing import List, Optional
from pydantic import BaseModel, Field


class ServiceCreateOptions(BaseModel):
    """
    The flag values a service specification is built from.

    ``ports`` and ``network`` are ``None`` when the corresponding flag was not
    given; an empty ``ports`` list still produces an (empty) endpoint.
    """
    name: str = ""
    image: str = ""
    mode: str = "replicated"
    instances: int = Field(default=1, ge=0)

    # Execution
    command: List[str] = []
    args: List[str] = []
    env: List[str] = []

    # Networking
    ports: Optional[List[str]] = None
    network: Optional[str] = None
