# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""
Creation of services: builds the specification, resolves its network and submits it.
"""
import logging
from typing import Optional
from ..BUILDERS.spec_builder import SpecBuilder
from ..CLIENT.interfaces import NetworkResolver, ServiceSubmitter
from ..MODELS.create_options import ServiceCreateOptions
from ..MODELS.service_spec import ServiceSpec

logger = logging.getLogger(__name__)


class ServiceCreator:
    """
    Creates services on the orchestrator from create options.
    """
    def __init__(self,
                 resolver: NetworkResolver,
                 submitter: ServiceSubmitter,
                 builder: Optional[SpecBuilder] = None):
        """
        Initializes the creator.

        :param resolver: Looks up network identifiers by name.
        :param submitter: Sends the finished specification to the orchestrator.
        :param builder: Builds specifications from options.
        """
        self.resolver = resolver
        self.submitter = submitter
        self.builder = builder or SpecBuilder()

    def prepare(self, options: ServiceCreateOptions) -> ServiceSpec:
        """
        Builds the specification, attaching the requested network.

        Local validation runs before the network is looked up, so bad flags
        never reach the orchestrator.

        :param options: The flag values.
        :return: The specification ready for submission.
        """
        spec = self.builder.build(options)
        return self.attach(spec, options.network)

    def create(self, options: ServiceCreateOptions) -> str:
        """
        Creates a service from flag values.

        :param options: The flag values.
        :return: The created service's identifier.
        """
        return self.submit(self.prepare(options))

    def attach(self, spec: ServiceSpec, network: Optional[str]) -> ServiceSpec:
        """
        Attaches the spec to the named network, if one is given.

        :param spec: The specification.
        :param network: Human readable network name, or None.
        :return: The specification, attached when a network was named.
        """
        if network is None:
            return spec
        network_id = self.resolver.resolve_network(network)
        return self.builder.attach_network(spec, network_id)

    def submit(self, spec: ServiceSpec) -> str:
        """
        Submits an already assembled specification.

        :param spec: The specification.
        :return: The created service's identifier.
        """
        logger.info(f"Creating service {spec.name} from image {spec.image}")
        return self.submitter.create_service(spec)
