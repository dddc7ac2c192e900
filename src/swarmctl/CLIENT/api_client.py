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
HTTP client for the orchestration API.
Resolves network names and submits service specifications as JSON.
"""

import json
import logging
from typing import Any, Dict, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from ..MODELS.client_config import ClientConfig
from ..MODELS.service_spec import ServiceSpec
from ..errors import NetworkNotFoundError, RemoteError

logger = logging.getLogger(__name__)


def _is_connection_error(exc: BaseException) -> bool:
    """True for failures to reach the server, as opposed to error responses."""
    return isinstance(exc, URLError) and not isinstance(exc, HTTPError)


class OrchestratorClient:
    """
    Client for the orchestration API.
    Implements both NetworkResolver and ServiceSubmitter.
    """

    def __init__(self, config: Optional[ClientConfig] = None):
        """
        Initialize the client.

        Args:
            config: Connection settings. Defaults to ClientConfig().
        """
        self.config = config or ClientConfig()
        self.base_url = self.config.host.rstrip("/")

    def resolve_network(self, name: str) -> str:
        """
        Look up a network by name.

        Args:
            name: Human readable network name

        Returns:
            The network identifier
        """
        url = f"{self.base_url}/networks/{quote(name, safe='')}"
        try:
            data = self._fetch_json(url)
        except HTTPError as e:
            if e.code == 404:
                raise NetworkNotFoundError(f"network {name} not found") from e
            raise self._remote_error(e) from e
        except OSError as e:
            raise self._connection_error(e) from e

        network_id = self._require_id(data)
        logger.debug(f"Resolved network {name} to {network_id}")
        return network_id

    def create_service(self, spec: ServiceSpec) -> str:
        """
        Submit a service specification. Not retried, as creation is not idempotent.

        Args:
            spec: The specification to submit

        Returns:
            The created service's identifier
        """
        body = json.dumps({"spec": spec.model_dump(mode="json")}).encode()
        request = Request(f"{self.base_url}/services/create", data=body, method="POST")
        request.add_header("Content-Type", "application/json")

        try:
            data = self._read_json(request)
        except HTTPError as e:
            raise self._remote_error(e) from e
        except OSError as e:
            raise self._connection_error(e) from e

        service_id = self._require_id(data)
        logger.info(f"Created service {spec.name} with ID {service_id}")
        return service_id

    @retry(
        retry=retry_if_exception(_is_connection_error),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.5, max=4),
        reraise=True,
    )
    def _fetch_json(self, url: str) -> Dict[str, Any]:
        """GET a JSON document, retrying when the server cannot be reached."""
        request = Request(url)
        request.add_header("Accept", "application/json")
        return self._read_json(request)

    def _read_json(self, request: Request) -> Dict[str, Any]:
        logger.debug(f"{request.get_method()} {request.full_url}")
        with urlopen(request, timeout=self.config.timeout) as response:
            content = response.read()
        try:
            return json.loads(content.decode() or "{}")
        except ValueError as e:
            raise RemoteError(f"invalid response from {request.full_url}: {e}") from e

    def _require_id(self, data: Any) -> str:
        if not isinstance(data, dict) or not data.get("id"):
            raise RemoteError("response carries no identifier")
        return str(data["id"])

    def _connection_error(self, error: OSError) -> RemoteError:
        reason = getattr(error, "reason", error)
        return RemoteError(f"cannot reach {self.base_url}: {reason}")

    def _remote_error(self, error: HTTPError) -> RemoteError:
        """Build a RemoteError from an error response, preferring its message field."""
        message = error.reason
        try:
            payload = json.loads(error.read().decode())
            if isinstance(payload, dict) and payload.get("message"):
                message = payload["message"]
        except (OSError, ValueError):
            pass
        return RemoteError(f"{message} (HTTP {error.code})", status=error.code)
