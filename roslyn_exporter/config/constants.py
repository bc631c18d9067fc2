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
Constants for Roslyn Exporter.

The language table is closed: every supported analysis language maps to
exactly one first-party rule repository.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageDefinition:
    """A language the exporter can produce configuration for."""

    key: str
    """SonarQube language key, e.g. ``cs``."""

    repository_key: str
    """Key of the first-party rule repository for the language."""

    name: str


class ExporterConstants:
    """Constants used throughout the exporter."""

    # Languages
    CSHARP_LANGUAGE = "cs"
    VBNET_LANGUAGE = "vbnet"

    CSHARP_REPOSITORY_KEY = "csharpsquid"
    VBNET_REPOSITORY_KEY = "vbnet"

    LANGUAGES: dict[str, LanguageDefinition] = {
        CSHARP_LANGUAGE: LanguageDefinition(CSHARP_LANGUAGE, CSHARP_REPOSITORY_KEY, "C#"),
        VBNET_LANGUAGE: LanguageDefinition(VBNET_LANGUAGE, VBNET_REPOSITORY_KEY, "VB.NET"),
    }

    # Analyzer group keys
    ROSLYN_REPOSITORY_PREFIX = "roslyn."
    SONARANALYZER_PARTIAL_REPO_KEY_PREFIX = "sonaranalyzer-"
    SONARANALYZER_PARTIAL_REPO_KEY = SONARANALYZER_PARTIAL_REPO_KEY_PREFIX + "{0}"

    # Property suffixes published by analyzer plugins
    ANALYZER_ID_SUFFIX = "analyzerId"
    RULE_NAMESPACE_SUFFIX = "ruleNamespace"
    PLUGIN_VERSION_SUFFIX = "pluginVersion"

    # Rule set metadata
    RULESET_NAME = "Rules for SonarQube"
    RULESET_DESCRIPTION = "This rule set was automatically generated from SonarQube"
    RULESET_TOOLS_VERSION = "14.0"

    # Output files
    SONARLINT_FILE_NAME = "SonarLint.xml"
    RULESET_FILE_EXTENSION = ".ruleset"

    # Defaults
    DEFAULT_SERVER_URL = "http://localhost:9000"
    DEFAULT_ACTIVE_RULE_ACTION = "Warning"
    DEFAULT_REQUEST_TIMEOUT = 30
    DEFAULT_PAGE_SIZE = 500

    @classmethod
    def supported_languages(cls) -> tuple[str, ...]:
        """Return the supported language keys in table order."""
        return tuple(cls.LANGUAGES)

    @classmethod
    def get_language(cls, language: str) -> LanguageDefinition | None:
        """Look up a language definition by key."""
        return cls.LANGUAGES.get(language)

    @classmethod
    def sonaranalyzer_group_key(cls, language: str) -> str:
        """Return the built-in analyzer group key for *language*."""
        return cls.SONARANALYZER_PARTIAL_REPO_KEY.format(language)
