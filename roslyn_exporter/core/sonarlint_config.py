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
SonarLint.xml generation.

The SonarAnalyzer reads rule parameters and ``sonar.<language>.*`` settings
from a ``SonarLint.xml`` additional file.  Third-party analyzers do not read
it, so only rules of the language's first-party repository are exported.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .exceptions import InvalidArgumentError
from .models import KeyValuePair, Rule, SonarLintConfiguration, SonarLintRule
from .properties import PropertyStore
from .repositories import get_repository_key

logger = logging.getLogger(__name__)


class SonarLintConfigBuilder:
    """Builds the :class:`SonarLintConfiguration` for one language."""

    def build(
        self,
        rules: Iterable[Rule],
        properties: PropertyStore | Mapping[str, str],
        language: str,
    ) -> SonarLintConfiguration:
        """
        Generate the SonarLint configuration.

        Args:
            rules: Rules to export; callers pass the active rules.
            properties: Server properties.
            language: ``cs`` or ``vbnet``.

        Raises:
            InvalidArgumentError: If any argument is ``None``.
            UnsupportedLanguageError: If *language* is not supported.
        """
        if rules is None:
            raise InvalidArgumentError("rules")
        if properties is None:
            raise InvalidArgumentError("properties")
        if language is None:
            raise InvalidArgumentError("language")

        repository_key = get_repository_key(language)
        if not isinstance(properties, PropertyStore):
            properties = PropertyStore(properties)

        settings = self._get_settings(language, properties)
        sonarlint_rules = [self._to_sonarlint_rule(r) for r in rules if r.repository_key == repository_key]

        logger.debug(
            "SonarLint configuration for '%s': %d setting(s), %d rule(s)",
            language,
            len(settings),
            len(sonarlint_rules),
        )
        return SonarLintConfiguration(settings=settings, rules=sonarlint_rules)

    @staticmethod
    def _get_settings(language: str, properties: PropertyStore) -> list[KeyValuePair]:
        return [KeyValuePair(k, v) for k, v in properties.with_prefix(f"sonar.{language}.")]

    @staticmethod
    def _to_sonarlint_rule(rule: Rule) -> SonarLintRule:
        parameters = None
        if rule.parameters:
            parameters = [KeyValuePair(k, v) for k, v in rule.parameters.items()]
        return SonarLintRule(key=rule.key, parameters=parameters)


def generate_sonarlint_configuration(
    rules: Iterable[Rule],
    properties: PropertyStore | Mapping[str, str],
    language: str,
) -> SonarLintConfiguration:
    """Convenience function wrapping :class:`SonarLintConfigBuilder`."""
    return SonarLintConfigBuilder().build(rules, properties, language)
