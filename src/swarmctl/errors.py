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
Errors raised while assembling, parsing and submitting service specifications.
"""


class SwarmctlError(Exception):
    """Base class for all errors surfaced by swarmctl."""


class MissingMandatoryFieldError(SwarmctlError, ValueError):
    """A required field (service name or image) was left empty."""


class InvalidModeError(SwarmctlError, ValueError):
    """The requested scheduling mode is neither global nor replicated."""


class PortConfigError(SwarmctlError, ValueError):
    """Base class for port mapping entries that cannot be parsed."""


class InsufficientParametersError(PortConfigError):
    """A port mapping entry has fewer than two colon separated parts."""


class InvalidPortNumberError(PortConfigError):
    """A port token is not an unsigned 32-bit decimal number."""


class InvalidProtocolError(PortConfigError):
    """A protocol token names no known protocol."""


class ProtocolMismatchError(PortConfigError):
    """The published and node port protocols disagree."""


class SpecFileError(SwarmctlError, ValueError):
    """A spec file could not be read or does not describe a valid service."""


class ConfigError(SwarmctlError, ValueError):
    """Client settings from the environment or command line are invalid."""


class NetworkNotFoundError(SwarmctlError, LookupError):
    """No network matches the requested name."""


class RemoteError(SwarmctlError):
    """The orchestration API rejected a request or could not be reached."""

    def __init__(self, message: str, status: int = 0):
        super().__init__(message)
        self.status = status
