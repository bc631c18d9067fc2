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
Quality profile export: fetch, build and assemble.
"""

from __future__ import annotations

import asyncio
import logging
import time

from ..config.constants import ExporterConstants
from .exceptions import InvalidArgumentError, UnsupportedLanguageError
from .models import ExportResponse, RuleAction
from .plugins import get_plugin_references
from .properties import PropertyStore
from .ruleset_generator import RuleSetBuilder
from .serializers.sonarlint_xml import SonarLintXmlSerializer
from .service import BaseSonarQubeService
from .sonarlint_config import SonarLintConfigBuilder

logger = logging.getLogger(__name__)


class ProfileExporter:
    """Exports a quality profile as a Roslyn rule set plus SonarLint.xml."""

    def __init__(
        self,
        service: BaseSonarQubeService,
        active_rule_action: RuleAction | str = RuleAction.WARNING,
    ):
        """
        Initialize the exporter.

        Args:
            service: Source of properties and rules
            active_rule_action: Action given to active rules in the rule set
        """
        if service is None:
            raise InvalidArgumentError("service")
        self.service = service
        self.active_rule_action = RuleAction.from_text(active_rule_action)
        self.sonarlint_builder = SonarLintConfigBuilder()

    async def export(self, language: str, quality_profile_key: str) -> ExportResponse:
        """
        Export *quality_profile_key* for *language*.

        Properties, active rules and inactive rules are fetched concurrently.

        Raises:
            InvalidArgumentError: If an argument is ``None``.
            UnsupportedLanguageError: If *language* is not supported; raised
                before anything is fetched.
            MissingConfigurationError: If the server lacks analyzer metadata
                required by the rule set.
        """
        if language is None:
            raise InvalidArgumentError("language")
        if quality_profile_key is None:
            raise InvalidArgumentError("quality_profile_key")
        if ExporterConstants.get_language(language) is None:
            raise UnsupportedLanguageError(language, ExporterConstants.supported_languages())

        logger.info("Exporting quality profile '%s' for language '%s'", quality_profile_key, language)
        start_time = time.time()

        properties, active_rules, inactive_rules = await asyncio.gather(
            self.service.get_all_properties(),
            self.service.get_rules(True, quality_profile_key),
            self.service.get_rules(False, quality_profile_key),
        )
        if not isinstance(properties, PropertyStore):
            properties = PropertyStore(properties)

        logger.debug(
            "Fetched %d properties, %d active and %d inactive rules",
            len(properties),
            len(active_rules),
            len(inactive_rules),
        )

        rule_set = RuleSetBuilder(properties, active_rule_action=self.active_rule_action).build(
            language, active_rules, inactive_rules
        )
        sonarlint_configuration = self.sonarlint_builder.build(active_rules, properties, language)
        plugin_references = get_plugin_references(active_rules, properties)
        additional_files = [SonarLintXmlSerializer().to_additional_file(sonarlint_configuration)]

        logger.info(
            "Exported %d analyzer group(s) and %d plugin reference(s) in %.2fs",
            len(rule_set.groups),
            len(plugin_references),
            time.time() - start_time,
        )

        return ExportResponse(
            language=language,
            quality_profile_key=quality_profile_key,
            rule_set=rule_set,
            sonarlint_configuration=sonarlint_configuration,
            plugin_references=plugin_references,
            additional_files=additional_files,
        )


async def build_export_async(
    language: str,
    quality_profile_key: str,
    service: BaseSonarQubeService,
    active_rule_action: RuleAction | str = RuleAction.WARNING,
) -> ExportResponse:
    """Export a quality profile from within a running event loop."""
    exporter = ProfileExporter(service, active_rule_action=active_rule_action)
    return await exporter.export(language, quality_profile_key)


def build_export(
    language: str,
    quality_profile_key: str,
    service: BaseSonarQubeService,
    active_rule_action: RuleAction | str = RuleAction.WARNING,
) -> ExportResponse:
    """
    Convenience function to export a quality profile.

    Args:
        language: ``cs`` or ``vbnet``
        quality_profile_key: Key of the quality profile
        service: Source of properties and rules
        active_rule_action: Action given to active rules

    Returns:
        ExportResponse
    """
    return asyncio.run(build_export_async(language, quality_profile_key, service, active_rule_action))
