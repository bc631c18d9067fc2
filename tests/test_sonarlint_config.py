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

"""Tests for SonarLint.xml configuration generation."""

from __future__ import annotations

import pytest

from roslyn_exporter.core.exceptions import InvalidArgumentError, UnsupportedLanguageError
from roslyn_exporter.core.models import KeyValuePair
from roslyn_exporter.core.properties import PropertyStore
from roslyn_exporter.core.sonarlint_config import SonarLintConfigBuilder, generate_sonarlint_configuration


class _RecordingStore(PropertyStore):
    """Property store that records prefix scans."""

    def __init__(self, properties):
        super().__init__(properties)
        self.accessed = False

    def with_prefix(self, prefix):
        self.accessed = True
        return super().with_prefix(prefix)


class TestRules:
    def test_only_first_party_repository_rules_for_language(self, make_rule):
        rules = [
            make_rule("csharpsquid:S100", params={"max": "10"}),
            make_rule("vbnet:S200"),
        ]

        config = SonarLintConfigBuilder().build(rules, {}, "cs")

        assert len(config.rules) == 1
        assert config.rules[0].key == "S100"
        assert config.rules[0].parameters == [KeyValuePair("max", "10")]

    def test_vbnet_language_uses_vbnet_repository(self, make_rule):
        rules = [make_rule("csharpsquid:S100"), make_rule("vbnet:S200"), make_rule("roslyn.sca:SCS0001")]
        config = SonarLintConfigBuilder().build(rules, {}, "vbnet")
        assert [r.key for r in config.rules] == ["S200"]

    def test_roslyn_rules_are_not_exported(self, make_rule):
        config = SonarLintConfigBuilder().build([make_rule("roslyn.sca:SCS0001", params={"a": "b"})], {}, "cs")
        assert config.rules == []

    def test_rule_without_parameters_has_none(self, make_rule):
        config = SonarLintConfigBuilder().build([make_rule("csharpsquid:S100")], {}, "cs")
        assert config.rules[0].parameters is None

    def test_parameter_order_is_preserved(self, make_rule):
        params = {"zeta": "1", "alpha": "2", "mid": "3"}
        config = SonarLintConfigBuilder().build([make_rule("csharpsquid:S107", params=params)], {}, "cs")
        assert [p.key for p in config.rules[0].parameters] == ["zeta", "alpha", "mid"]

    def test_rule_order_is_preserved(self, make_rule):
        rules = [make_rule(f"csharpsquid:S{n}") for n in (300, 100, 200)]
        config = SonarLintConfigBuilder().build(rules, {}, "cs")
        assert [r.key for r in config.rules] == ["S300", "S100", "S200"]


class TestSettings:
    def test_settings_for_language_only(self):
        properties = {"sonar.cs.analyzeGeneratedCode": "true", "sonar.vbnet.foo": "x", "sonar.cs.": "y"}

        config = SonarLintConfigBuilder().build([], properties, "cs")

        assert config.settings == [KeyValuePair("sonar.cs.analyzeGeneratedCode", "true")]

    def test_settings_keep_prefix_and_server_order(self, server_properties):
        config = SonarLintConfigBuilder().build([], server_properties, "cs")
        assert [(s.key, s.value) for s in config.settings] == [
            ("sonar.cs.analyzeGeneratedCode", "true"),
            ("sonar.cs.file.suffixes", ".cs"),
        ]

    def test_vbnet_settings(self, server_properties):
        config = SonarLintConfigBuilder().build([], server_properties, "vbnet")
        assert config.settings == [KeyValuePair("sonar.vbnet.file.suffixes", ".vb")]

    def test_settings_do_not_depend_on_rules(self, server_properties, make_rule):
        config = SonarLintConfigBuilder().build([make_rule("vbnet:S1")], server_properties, "cs")
        assert len(config.settings) == 2
        assert config.rules == []


class TestValidation:
    @pytest.mark.parametrize("language", ["java", "CS", "", "csharp"])
    def test_unsupported_language_raises_before_property_lookup(self, language):
        store = _RecordingStore({"sonar.java.x": "1"})

        with pytest.raises(UnsupportedLanguageError) as exc_info:
            SonarLintConfigBuilder().build([], store, language)

        assert exc_info.value.language == language
        assert not store.accessed

    def test_unsupported_language_is_value_error(self):
        with pytest.raises(ValueError):
            generate_sonarlint_configuration([], {}, "java")

    @pytest.mark.parametrize(
        "rules,properties,language",
        [(None, {}, "cs"), ([], None, "cs"), ([], {}, None)],
    )
    def test_none_arguments_raise(self, rules, properties, language):
        with pytest.raises(InvalidArgumentError):
            SonarLintConfigBuilder().build(rules, properties, language)


def test_convenience_function(make_rule):
    config = generate_sonarlint_configuration(
        [make_rule("csharpsquid:S100")], PropertyStore({"sonar.cs.x": "1"}), "cs"
    )
    assert [r.key for r in config.rules] == ["S100"]
    assert config.settings == [KeyValuePair("sonar.cs.x", "1")]
