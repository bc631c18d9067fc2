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

"""Tests for data models."""

from __future__ import annotations

import pytest

from roslyn_exporter.core.exceptions import InvalidArgumentError
from roslyn_exporter.core.models import (
    ExportResponse,
    KeyValuePair,
    PluginReference,
    Rule,
    RuleAction,
    RuleGroup,
    RuleSet,
    RuleSetRule,
    SonarLintConfiguration,
    SonarLintRule,
    get_action_text,
)


class TestRuleAction:
    @pytest.mark.parametrize(
        "action,text",
        [
            (RuleAction.NONE, "None"),
            (RuleAction.HIDDEN, "Hidden"),
            (RuleAction.INFO, "Info"),
            (RuleAction.WARNING, "Warning"),
            (RuleAction.ERROR, "Error"),
        ],
    )
    def test_action_text(self, action, text):
        assert get_action_text(action) == text

    def test_unknown_action_raises(self):
        with pytest.raises(ValueError, match="not a supported RuleAction"):
            get_action_text("Severe")

    def test_from_text_is_case_insensitive(self):
        assert RuleAction.from_text("error") is RuleAction.ERROR
        assert RuleAction.from_text(" Hidden ") is RuleAction.HIDDEN
        assert RuleAction.from_text(RuleAction.INFO) is RuleAction.INFO

    def test_from_text_rejects_unknown(self):
        with pytest.raises(ValueError, match="not a supported rule action"):
            RuleAction.from_text("Critical")


class TestRule:
    def test_from_qualified_key(self):
        rule = Rule.from_qualified_key("roslyn.sca:SCS0001", is_active=True, parameters={"a": "1"})

        assert rule.repository_key == "roslyn.sca"
        assert rule.key == "SCS0001"
        assert rule.is_active
        assert rule.parameters == {"a": "1"}
        assert rule.qualified_key == "roslyn.sca:SCS0001"

    def test_from_qualified_key_defaults_to_no_parameters(self):
        rule = Rule.from_qualified_key("csharpsquid:S100", is_active=False)
        assert rule.parameters == {}

    @pytest.mark.parametrize("bad_key", ["S100", ":S100", "csharpsquid:"])
    def test_from_qualified_key_rejects_malformed_keys(self, bad_key):
        with pytest.raises(InvalidArgumentError):
            Rule.from_qualified_key(bad_key, is_active=True)

    def test_rules_are_hashable(self):
        first = Rule("csharpsquid", "S107", True, {"max": "7", "min": "1"})
        second = Rule("csharpsquid", "S107", True, {"min": "1", "max": "7"})

        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_parameters_are_read_only(self):
        params = {"max": "7"}
        rule = Rule("csharpsquid", "S107", True, params)

        with pytest.raises(TypeError):
            rule.parameters["max"] = "8"
        params["max"] = "9"
        assert rule.parameters == {"max": "7"}

    def test_rule_is_immutable(self):
        rule = Rule("csharpsquid", "S100", True)
        with pytest.raises(AttributeError):
            rule.key = "S200"


class TestRuleSet:
    def test_defaults(self):
        rule_set = RuleSet()
        assert rule_set.name == "Rules for SonarQube"
        assert rule_set.description == "This rule set was automatically generated from SonarQube"
        assert rule_set.tools_version == "14.0"
        assert rule_set.groups == []

    def test_get_group_and_all_rules(self):
        rule_set = RuleSet(
            groups=[
                RuleGroup("A", "A.ns", [RuleSetRule("R1", "Warning")]),
                RuleGroup("B", "B.ns", [RuleSetRule("R2", "None"), RuleSetRule("R3", "Warning")]),
            ]
        )
        assert rule_set.get_group("B").rule_namespace == "B.ns"
        assert rule_set.get_group("missing") is None
        assert [r.id for r in rule_set.all_rules()] == ["R1", "R2", "R3"]


def test_export_response_to_dict():
    response = ExportResponse(
        language="cs",
        quality_profile_key="qp",
        rule_set=RuleSet(groups=[RuleGroup("A", "A.ns", [RuleSetRule("S100", "Warning")])]),
        sonarlint_configuration=SonarLintConfiguration(
            settings=[KeyValuePair("sonar.cs.x", "1")],
            rules=[SonarLintRule("S100", [KeyValuePair("max", "10")]), SonarLintRule("S200")],
        ),
        plugin_references=[PluginReference("SonarAnalyzer.CSharp", "8.6")],
    )

    data = response.to_dict()

    assert data["language"] == "cs"
    assert data["rule_set"]["groups"][0]["rules"] == [{"id": "S100", "action": "Warning"}]
    assert data["sonarlint_configuration"]["rules"][0]["parameters"] == [{"key": "max", "value": "10"}]
    assert data["sonarlint_configuration"]["rules"][1]["parameters"] is None
    assert data["plugin_references"] == [{"id": "SonarAnalyzer.CSharp", "version": "8.6"}]
