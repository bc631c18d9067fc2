# Copyright 2026 Cisco Systems, Inc. and its affiliates
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
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before running tests.
All fixtures defined here are available to every test module without
explicit imports.
"""

from __future__ import annotations

import pytest

from roslyn_exporter.core.models import Rule
from roslyn_exporter.core.properties import PropertyStore
from roslyn_exporter.core.service import BaseSonarQubeService

# ---------------------------------------------------------------------------
# Property fixtures
# ---------------------------------------------------------------------------

CS_ANALYZER_PROPERTIES = {
    "sonaranalyzer-cs.analyzerId": "SonarAnalyzer.CSharp",
    "sonaranalyzer-cs.ruleNamespace": "SonarAnalyzer.CSharp",
    "sonaranalyzer-cs.pluginVersion": "8.6.1.20166",
}

VBNET_ANALYZER_PROPERTIES = {
    "sonaranalyzer-vbnet.analyzerId": "SonarAnalyzer.VisualBasic",
    "sonaranalyzer-vbnet.ruleNamespace": "SonarAnalyzer.VisualBasic",
    "sonaranalyzer-vbnet.pluginVersion": "8.6.1.20166",
}

SCA_ANALYZER_PROPERTIES = {
    "sca.analyzerId": "SecurityCodeScan",
    "sca.ruleNamespace": "SecurityCodeScan.Security",
    "sca.pluginVersion": "3.5.3",
}


@pytest.fixture
def server_properties() -> PropertyStore:
    """Properties of a server with SonarC#, SonarVB and one Roslyn SDK plugin."""
    return PropertyStore(
        {
            **CS_ANALYZER_PROPERTIES,
            **VBNET_ANALYZER_PROPERTIES,
            **SCA_ANALYZER_PROPERTIES,
            "sonar.cs.analyzeGeneratedCode": "true",
            "sonar.cs.file.suffixes": ".cs",
            "sonar.vbnet.file.suffixes": ".vb",
            "sonar.core.serverBaseURL": "https://sonarqube.example.com",
        }
    )


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_rule():
    """Factory fixture for :class:`Rule` objects.

    Usage::

        rule = make_rule("csharpsquid:S100", params={"format": "^[A-Z]"})
        inactive = make_rule("roslyn.sca:SCS0001", active=False)
    """

    def _make(qualified_key: str, active: bool = True, params: dict[str, str] | None = None) -> Rule:
        return Rule.from_qualified_key(qualified_key, is_active=active, parameters=params)

    return _make


class FakeSonarQubeService(BaseSonarQubeService):
    """In-memory service recording the calls it receives."""

    def __init__(
        self,
        properties: dict[str, str] | PropertyStore,
        active_rules: list[Rule],
        inactive_rules: list[Rule],
    ):
        self.properties = PropertyStore(properties)
        self.active_rules = active_rules
        self.inactive_rules = inactive_rules
        self.calls: list[tuple] = []

    async def get_all_properties(self) -> PropertyStore:
        self.calls.append(("properties",))
        return self.properties

    async def get_rules(self, is_active: bool, quality_profile_key: str) -> list[Rule]:
        self.calls.append(("rules", is_active, quality_profile_key))
        return list(self.active_rules if is_active else self.inactive_rules)


@pytest.fixture
def fake_service_factory():
    """Factory for :class:`FakeSonarQubeService`."""

    def _make(properties, active_rules=None, inactive_rules=None) -> FakeSonarQubeService:
        return FakeSonarQubeService(properties, active_rules or [], inactive_rules or [])

    return _make


@pytest.fixture
def cs_analyzer_properties() -> dict[str, str]:
    """SonarC# metadata only."""
    return dict(CS_ANALYZER_PROPERTIES)


@pytest.fixture
def sca_analyzer_properties() -> dict[str, str]:
    """Security Code Scan metadata only."""
    return dict(SCA_ANALYZER_PROPERTIES)
