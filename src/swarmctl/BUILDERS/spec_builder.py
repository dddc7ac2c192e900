"""
Assembles service specifications from the values of the create command's flags.
"""
import logging
from typing import Optional
from ..MODELS.create_options import ServiceCreateOptions
from ..MODELS.service_spec import (
    ContainerSpec,
    EndpointSpec,
    GlobalService,
    NetworkAttachmentConfig,
    ReplicatedService,
    ServiceMode,
    ServiceSpec,
    TaskSpec,
)
from ..PARSERS.port_parser import PortConfigParser
from ..errors import InvalidModeError, MissingMandatoryFieldError

logger = logging.getLogger(__name__)


class SpecBuilder:
    """
    Builds a ServiceSpec from create options. Performs no I/O.
    """
    def __init__(self, port_parser: Optional[PortConfigParser] = None):
        self.port_parser = port_parser or PortConfigParser()

    def build(self, options: ServiceCreateOptions, network_id: Optional[str] = None) -> ServiceSpec:
        """
        Builds the specification for a new service.

        :param options: The flag values.
        :param network_id: Identifier of the network to attach, if any.
        :return: The assembled specification.
        :raises MissingMandatoryFieldError: If the name or image is empty.
        :raises InvalidModeError: If the mode is neither global nor replicated.
        :raises PortConfigError: If any port entry fails to parse.
        """
        if not options.name or not options.image:
            raise MissingMandatoryFieldError("--name and --image are mandatory")

        mode = self._build_mode(options)

        endpoint = None
        if options.ports is not None:
            endpoint = EndpointSpec(exposed_ports=self.port_parser.parse_list(options.ports))

        spec = ServiceSpec(
            name=options.name,
            task=TaskSpec(
                container=ContainerSpec(
                    image=options.image,
                    command=list(options.command),
                    args=list(options.args),
                    env=list(options.env),
                )
            ),
            mode=mode,
            endpoint=endpoint,
        )
        logger.debug(f"Built spec for service {spec.name} ({mode.kind})")

        if network_id is not None:
            spec = self.attach_network(spec, network_id)
        return spec

    def attach_network(self, spec: ServiceSpec, network_id: str) -> ServiceSpec:
        """
        Returns a copy of the spec attached to exactly one network.
        """
        return spec.model_copy(update={'networks': [NetworkAttachmentConfig(target=network_id)]})

    def _build_mode(self, options: ServiceCreateOptions) -> ServiceMode:
        if options.mode == "global":
            return GlobalService()
        if options.mode == "replicated":
            return ReplicatedService(instances=options.instances)
        raise InvalidModeError(f"invalid mode {options.mode!r}: must be one of replicated, global")
