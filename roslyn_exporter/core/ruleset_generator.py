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
Roslyn rule set generation.

Active and inactive rules are grouped by the analyzer plugin that owns them.
Each group becomes a ``<Rules AnalyzerId RuleNamespace>`` element whose
identity is read from properties the plugin publishes on the server.  Rules
with no owning Roslyn analyzer are dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from ..config.constants import ExporterConstants
from .exceptions import InvalidArgumentError, MissingConfigurationError
from .models import Rule, RuleAction, RuleGroup, RuleSet, RuleSetRule, get_action_text
from .properties import PropertyStore
from .repositories import get_group_key, property_key

logger = logging.getLogger(__name__)


class RuleSetBuilder:
    """Builds a :class:`RuleSet` from quality-profile rules."""

    def __init__(
        self,
        properties: PropertyStore | Mapping[str, str],
        active_rule_action: RuleAction | str = RuleAction.WARNING,
    ):
        """
        Initialize the builder.

        Args:
            properties: Server properties holding the analyzer metadata.
            active_rule_action: Action given to active rules.  Inactive rules
                are always ``None``.
        """
        if properties is None:
            raise InvalidArgumentError("properties")
        if not isinstance(properties, PropertyStore):
            properties = PropertyStore(properties)
        self.properties = properties
        self._inactive_rule_action_text = get_action_text(RuleAction.NONE)
        self.active_rule_action = active_rule_action

    @property
    def active_rule_action(self) -> RuleAction:
        return self._active_rule_action

    @active_rule_action.setter
    def active_rule_action(self, value: RuleAction | str) -> None:
        self._active_rule_action = RuleAction.from_text(value)
        self._active_rule_action_text = get_action_text(self._active_rule_action)

    def build(self, language: str, active_rules: Iterable[Rule], inactive_rules: Iterable[Rule]) -> RuleSet:
        """
        Generate the rule set.

        The rule set has no groups when no rule belongs to ``vbnet``,
        ``csharpsquid`` or a ``roslyn.*`` repository.

        Raises:
            InvalidArgumentError: If any argument is ``None``.
            MissingConfigurationError: If a group's ``analyzerId`` or
                ``ruleNamespace`` property is missing.
        """
        if active_rules is None:
            raise InvalidArgumentError("active_rules")
        if inactive_rules is None:
            raise InvalidArgumentError("inactive_rules")
        if language is None:
            raise InvalidArgumentError("language")

        grouped: dict[str, list[Rule]] = {}
        skipped = 0
        for rule in [*active_rules, *inactive_rules]:
            group_key = get_group_key(rule, language)
            if not group_key:
                skipped += 1
                continue
            grouped.setdefault(group_key, []).append(rule)

        if skipped:
            logger.debug("Skipped %d rule(s) with no Roslyn analyzer", skipped)

        rule_set = RuleSet(
            name=ExporterConstants.RULESET_NAME,
            description=ExporterConstants.RULESET_DESCRIPTION,
            tools_version=ExporterConstants.RULESET_TOOLS_VERSION,
        )
        rule_set.groups.extend(self._create_group(key, rules) for key, rules in grouped.items())

        logger.debug("Generated rule set with %d analyzer group(s) for language '%s'", len(rule_set.groups), language)
        return rule_set

    def _create_group(self, group_key: str, rules: list[Rule]) -> RuleGroup:
        return RuleGroup(
            analyzer_id=self._get_required_property(group_key, ExporterConstants.ANALYZER_ID_SUFFIX),
            rule_namespace=self._get_required_property(group_key, ExporterConstants.RULE_NAMESPACE_SUFFIX),
            rules=[self._create_rule(rule) for rule in rules],
        )

    def _create_rule(self, rule: Rule) -> RuleSetRule:
        action = self._active_rule_action_text if rule.is_active else self._inactive_rule_action_text
        return RuleSetRule(id=rule.key, action=action)

    def _get_required_property(self, group_key: str, suffix: str) -> str:
        key = property_key(group_key, suffix)
        value = self.properties.get_value(key)
        if value is None:
            message = f"Property does not exist: {key}. This property should be set by the plugin in SonarQube."
            if key.startswith(ExporterConstants.sonaranalyzer_group_key(ExporterConstants.VBNET_LANGUAGE)):
                message += (
                    " Possible cause: this Scanner is not compatible with SonarVB 2.X."
                    " If necessary, upgrade SonarVB latest in SonarQube."
                )
            raise MissingConfigurationError(property_key=key, group_key=group_key, message=message)
        return value


def build_rule_set(
    language: str,
    active_rules: Iterable[Rule],
    inactive_rules: Iterable[Rule],
    properties: PropertyStore | Mapping[str, str],
    active_rule_action: RuleAction | str = RuleAction.WARNING,
) -> RuleSet:
    """
    Convenience function to build a rule set in one call.

    Returns:
        RuleSet
    """
    builder = RuleSetBuilder(properties, active_rule_action=active_rule_action)
    return builder.build(language, active_rules, inactive_rules)
