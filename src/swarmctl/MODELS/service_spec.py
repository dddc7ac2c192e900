"""
Models describing a service specification as submitted to the orchestrator.
"""
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, Field
from enum import Enum

MAX_PORT = 2 ** 32 - 1


class PortProtocol(str, Enum):
    """
    Transport protocols a port can be exposed on.
    """
    TCP = "tcp"
    UDP = "udp"


class PortConfig(BaseModel):
    """
    A named port exposure. A target port of 0 means the published port is reused.
    """
    name: str
    protocol: PortProtocol = PortProtocol.TCP
    published_port: int = Field(ge=0, le=MAX_PORT)
    target_port: int = Field(default=0, ge=0, le=MAX_PORT)


class EndpointSpec(BaseModel):
    exposed_ports: List[PortConfig] = []


class NetworkAttachmentConfig(BaseModel):
    """
    Attaches the service to a network by its identifier.
    """
    target: str


class ContainerSpec(BaseModel):
    """
    The container each task of the service runs.
    """
    image: str = Field(min_length=1)
    command: List[str] = []
    args: List[str] = []
    env: List[str] = []  # KEY=VALUE, passed through untouched


class TaskSpec(BaseModel):
    container: ContainerSpec


class GlobalService(BaseModel):
    """
    One task on every eligible node.
    """
    kind: Literal["global"] = "global"


class ReplicatedService(BaseModel):
    """
    A fixed number of tasks spread over the cluster.
    """
    kind: Literal["replicated"] = "replicated"
    instances: int = Field(default=1, ge=0)


ServiceMode = Annotated[Union[GlobalService, ReplicatedService], Field(discriminator="kind")]


class ServiceSpec(BaseModel):
    """
    The complete declarative description of a service.
    """
    name: str = Field(min_length=1)
    task: TaskSpec
    mode: ServiceMode
    endpoint: Optional[EndpointSpec] = None
    networks: List[NetworkAttachmentConfig] = []

    @property
    def image(self) -> str:
        return self.task.container.image
