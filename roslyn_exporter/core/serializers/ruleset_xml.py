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
Roslyn ``.ruleset`` XML serializer.

.. code-block:: xml

    <RuleSet Name="..." Description="..." ToolsVersion="14.0">
      <Rules AnalyzerId="SonarAnalyzer.CSharp" RuleNamespace="SonarAnalyzer.CSharp">
        <Rule Id="S100" Action="Warning" />
      </Rules>
    </RuleSet>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from ..exceptions import InvalidArgumentError
from ..models import RuleSet

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'


class RuleSetXmlSerializer:
    """Converts :class:`RuleSet` objects to XML."""

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def to_element(self, rule_set: RuleSet) -> ET.Element:
        if rule_set is None:
            raise InvalidArgumentError("rule_set")
        root = ET.Element(
            "RuleSet",
            {
                "Name": rule_set.name,
                "Description": rule_set.description,
                "ToolsVersion": rule_set.tools_version,
            },
        )
        for group in rule_set.groups:
            rules_el = ET.SubElement(
                root,
                "Rules",
                {"AnalyzerId": group.analyzer_id, "RuleNamespace": group.rule_namespace},
            )
            for rule in group.rules:
                ET.SubElement(rules_el, "Rule", {"Id": rule.id, "Action": rule.action})
        return root

    def to_string(self, rule_set: RuleSet) -> str:
        """Return the rule set as an XML document string."""
        root = self.to_element(rule_set)
        if self.indent:
            ET.indent(root, space=self.indent)
        return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"

    def to_bytes(self, rule_set: RuleSet) -> bytes:
        return self.to_string(rule_set).encode("utf-8")

    def save(self, rule_set: RuleSet, output_path: str | Path) -> Path:
        """Write the rule set to *output_path*, creating parent directories."""
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        # Serialize fully before touching the file
        data = self.to_bytes(rule_set)
        path.write_bytes(data)
        return path
