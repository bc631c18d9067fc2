# Copyright 2026 Cisco Systems, Inc.
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
#
# SPDX-License-Identifier: Apache-2.0

"""
SonarQube Web API client.

Implements :class:`BaseSonarQubeService` over ``/api/settings/values`` and
``/api/rules/search``.  Requests are not retried; failures surface as
:class:`SonarQubeServiceError`.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ..config.config import Config
from ..config.constants import ExporterConstants
from ..core.exceptions import SonarQubeServiceError
from ..core.models import Rule
from ..core.properties import PropertyStore
from ..core.service import BaseSonarQubeService

logger = logging.getLogger(__name__)

SETTINGS_ENDPOINT = "/api/settings/values"
RULES_SEARCH_ENDPOINT = "/api/rules/search"
RULES_SEARCH_FIELDS = "repo,internalKey,params,actives"


class SonarQubeClient(BaseSonarQubeService):
    """Async client for the parts of the SonarQube Web API the exporter needs."""

    def __init__(
        self,
        server_url: str = ExporterConstants.DEFAULT_SERVER_URL,
        token: str | None = None,
        timeout: int = ExporterConstants.DEFAULT_REQUEST_TIMEOUT,
        page_size: int = ExporterConstants.DEFAULT_PAGE_SIZE,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the client.

        Args:
            server_url: Base URL of the server
            token: User token, sent as the basic-auth user name
            timeout: Request timeout in seconds
            page_size: Rules requested per page
            transport: Optional httpx transport (tests use ``httpx.MockTransport``)
        """
        self.server_url = server_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self.page_size = page_size
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @classmethod
    def from_config(cls, config: Config, transport: httpx.AsyncBaseTransport | None = None) -> SonarQubeClient:
        return cls(
            server_url=config.server_url or ExporterConstants.DEFAULT_SERVER_URL,
            token=config.token,
            timeout=config.request_timeout,
            page_size=config.page_size,
            transport=transport,
        )

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.server_url,
                timeout=httpx.Timeout(self.timeout),
                auth=httpx.BasicAuth(self.token, "") if self.token else None,
                headers={"Accept": "application/json"},
                transport=self._transport,
            )
        return self._client

    async def aclose(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> SonarQubeClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _get_json(self, endpoint: str, params: dict[str, Any] | None = None) -> dict[str, Any]:
        client = self._get_client()
        try:
            response = await client.get(endpoint, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            if status == 401:
                message = "SonarQube rejected the credentials (401). Check SONARQUBE_TOKEN."
            elif status == 403:
                message = f"Access denied by SonarQube (403) for {endpoint}"
            else:
                message = f"SonarQube API error for {endpoint}: {status}"
            raise SonarQubeServiceError(message, status_code=status) from e
        except httpx.TimeoutException as e:
            raise SonarQubeServiceError(f"SonarQube request to {endpoint} timed out after {self.timeout}s") from e
        except httpx.RequestError as e:
            raise SonarQubeServiceError(f"SonarQube request to {endpoint} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise SonarQubeServiceError(f"SonarQube returned invalid JSON for {endpoint}") from e
        if not isinstance(data, dict):
            raise SonarQubeServiceError(
                f"Unexpected response from {endpoint}: expected a JSON object, got {type(data).__name__}"
            )
        return data

    async def get_all_properties(self) -> PropertyStore:
        data = await self._get_json(SETTINGS_ENDPOINT)
        properties: list[tuple[str, str]] = []
        for setting in data.get("settings", []):
            key = setting.get("key")
            if not key:
                logger.warning("Skipping setting without a key: %r", setting)
                continue
            if "value" in setting:
                properties.append((key, str(setting["value"])))
            elif "values" in setting:
                properties.append((key, ",".join(str(v) for v in setting["values"])))
            else:
                # Property sets (fieldValues) have no flat representation
                logger.debug("Skipping structured setting '%s'", key)
        logger.debug("Fetched %d properties from %s", len(properties), self.server_url)
        return PropertyStore(properties)

    async def get_rules(self, is_active: bool, quality_profile_key: str) -> list[Rule]:
        rules: list[Rule] = []
        page = 1
        while True:
            data = await self._get_json(
                RULES_SEARCH_ENDPOINT,
                params={
                    "qprofile": quality_profile_key,
                    "activation": "true" if is_active else "false",
                    "f": RULES_SEARCH_FIELDS,
                    "ps": self.page_size,
                    "p": page,
                },
            )
            page_rules = data.get("rules", [])
            actives = data.get("actives", {})
            for raw in page_rules:
                rule = self._parse_rule(raw, actives, is_active)
                if rule is not None:
                    rules.append(rule)

            total = data.get("total", data.get("paging", {}).get("total", 0))
            if not page_rules or page * self.page_size >= total:
                break
            page += 1

        logger.debug(
            "Fetched %d %s rule(s) for quality profile '%s'",
            len(rules),
            "active" if is_active else "inactive",
            quality_profile_key,
        )
        return rules

    @staticmethod
    def _parse_rule(raw: dict[str, Any], actives: dict[str, Any], is_active: bool) -> Rule | None:
        qualified_key = raw.get("key", "")
        repository_key, sep, key = qualified_key.partition(":")
        if not sep:
            logger.warning("Skipping rule with malformed key: %r", qualified_key)
            return None
        repository_key = raw.get("repo", repository_key)

        parameters: dict[str, str] = {}
        activations = actives.get(qualified_key) or []
        if activations:
            for param in activations[0].get("params", []):
                if not isinstance(param, dict) or "key" not in param:
                    raise SonarQubeServiceError(f"Parameter without a key in activation of rule {qualified_key}")
                parameters[param["key"]] = str(param.get("value", ""))

        return Rule(repository_key=repository_key, key=key, is_active=is_active, parameters=parameters)
