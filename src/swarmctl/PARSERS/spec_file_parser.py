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
Parser for YAML service spec files.
"""
import yaml
from typing import Any, Dict
from pydantic import ValidationError
from ..MODELS.service_spec import ServiceSpec
from ..errors import SpecFileError
from .port_parser import PortConfigParser


class SpecFileParser:
    """
    Reads a complete service specification from YAML.

    The document mirrors ServiceSpec; for convenience the mode may be given
    as a bare 'global' or 'replicated' and exposed ports as port mapping
    entries (e.g. 'web:80/tcp:8080').
    """
    def parse(self, spec_path: str) -> ServiceSpec:
        """
        Parses a spec file from a path.

        :param spec_path: Path to the spec file.
        :return: The service specification.
        """
        try:
            with open(spec_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SpecFileError(f"cannot read spec file {spec_path}: {e}") from e
        return self.parse_from_string(content)

    def parse_from_string(self, content: str) -> ServiceSpec:
        """
        Parses a spec file from a string.

        :param content: YAML content of the spec file.
        :return: The service specification.
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise SpecFileError(f"invalid YAML in spec file: {e}") from e

        if not isinstance(data, dict):
            raise SpecFileError("spec file must contain a mapping")

        data = self._normalize(data)
        try:
            return ServiceSpec.model_validate(data)
        except ValidationError as e:
            raise SpecFileError(f"invalid service spec: {e}") from e

    def _normalize(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Expands the shorthand forms into the full ServiceSpec layout.

        :param data: The raw YAML mapping.
        :return: A copy ready for validation.
        """
        data = dict(data)

        if isinstance(data.get('mode'), str):
            data['mode'] = {'kind': data['mode']}
        elif data.get('mode') is None:
            data['mode'] = {'kind': 'replicated'}

        endpoint = data.get('endpoint')
        if isinstance(endpoint, dict) and isinstance(endpoint.get('exposed_ports'), list):
            ports = []
            for p in endpoint['exposed_ports']:
                if isinstance(p, str):
                    ports.append(PortConfigParser.parse_entry(p))
                else:
                    ports.append(p)
            data['endpoint'] = dict(endpoint, exposed_ports=ports)

        return data
