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
Parser for port mapping entries such as 'web:80', 'dns:53/udp' or 'web:80/tcp:8080'.
"""
import re
from typing import Iterable, List, Tuple
from ..MODELS.service_spec import MAX_PORT, PortConfig, PortProtocol
from ..errors import (
    InsufficientParametersError,
    InvalidPortNumberError,
    InvalidProtocolError,
    ProtocolMismatchError,
)

_DIGITS = re.compile(r'[0-9]+')


class PortConfigParser:
    """
    Parser for the ``name:port[/protocol][:node_port[/protocol]]`` mini-language.
    """
    @staticmethod
    def parse_list(entries: Iterable[str]) -> List[PortConfig]:
        """
        Parses port mapping entries, preserving their order.

        :param entries: The entries to parse.
        :return: One PortConfig per entry.
        :raises PortConfigError: On the first entry that fails to parse.
        """
        return [PortConfigParser.parse_entry(entry) for entry in entries]

    @staticmethod
    def parse_entry(entry: str) -> PortConfig:
        """
        Parses a single port mapping entry.

        Segments after the node port are ignored.

        :param entry: The entry, e.g. 'web:80/tcp:8080'.
        :return: The parsed port configuration.
        """
        parts = entry.split(':')
        if len(parts) < 2:
            raise InsufficientParametersError("insufficient parameters in port configuration")

        name = parts[0]
        protocol, published_port = PortConfigParser._parse_port_spec(parts[1], "port")

        target_port = 0
        if len(parts) > 2:
            node_protocol, target_port = PortConfigParser._parse_port_spec(parts[2], "node port")
            if node_protocol != protocol:
                raise ProtocolMismatchError("protocol mismatch")

        return PortConfig(
            name=name,
            protocol=protocol,
            published_port=published_port,
            target_port=target_port,
        )

    @staticmethod
    def _parse_port_spec(port_spec: str, label: str) -> Tuple[PortProtocol, int]:
        """
        Parses 'number[/protocol]'. The protocol defaults to TCP.

        :param port_spec: The port spec to parse.
        :param label: Which port is being parsed, used in error messages.
        :return: The protocol and port number.
        """
        parts = port_spec.split('/')
        number = parts[0]
        if not _DIGITS.fullmatch(number):
            raise InvalidPortNumberError(f"failed to parse {label}: invalid port number {number!r}")
        port = int(number)
        if port > MAX_PORT:
            raise InvalidPortNumberError(f"failed to parse {label}: port number {number!r} out of range")

        if len(parts) > 1:
            proto = parts[1]
            try:
                return PortProtocol(proto.lower()), port
            except ValueError:
                raise InvalidProtocolError(f"failed to parse {label}: invalid protocol string: {proto}")

        return PortProtocol.TCP, port
