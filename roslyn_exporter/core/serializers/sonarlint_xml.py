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
``SonarLint.xml`` serializer.

.. code-block:: xml

    <AnalysisInput>
      <Settings>
        <Setting><Key>sonar.cs.analyzeGeneratedCode</Key><Value>true</Value></Setting>
      </Settings>
      <Rules>
        <Rule>
          <Key>S100</Key>
          <Parameters>
            <Parameter><Key>format</Key><Value>^[A-Z]</Value></Parameter>
          </Parameters>
        </Rule>
      </Rules>
      <Files />
    </AnalysisInput>
"""

from __future__ import annotations

import base64
import xml.etree.ElementTree as ET
from pathlib import Path

from ...config.constants import ExporterConstants
from ..exceptions import InvalidArgumentError
from ..models import AdditionalFile, KeyValuePair, SonarLintConfiguration

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>\n'


def _add_key_value(parent: ET.Element, tag: str, pair: KeyValuePair) -> None:
    el = ET.SubElement(parent, tag)
    ET.SubElement(el, "Key").text = pair.key
    ET.SubElement(el, "Value").text = pair.value


class SonarLintXmlSerializer:
    """Converts :class:`SonarLintConfiguration` objects to XML."""

    def __init__(self, indent: str = "  "):
        self.indent = indent

    def to_element(self, config: SonarLintConfiguration) -> ET.Element:
        if config is None:
            raise InvalidArgumentError("config")
        root = ET.Element("AnalysisInput")

        settings_el = ET.SubElement(root, "Settings")
        for setting in config.settings:
            _add_key_value(settings_el, "Setting", setting)

        rules_el = ET.SubElement(root, "Rules")
        for rule in config.rules:
            rule_el = ET.SubElement(rules_el, "Rule")
            ET.SubElement(rule_el, "Key").text = rule.key
            if rule.parameters:
                params_el = ET.SubElement(rule_el, "Parameters")
                for param in rule.parameters:
                    _add_key_value(params_el, "Parameter", param)

        ET.SubElement(root, "Files")
        return root

    def to_string(self, config: SonarLintConfiguration) -> str:
        root = self.to_element(config)
        if self.indent:
            ET.indent(root, space=self.indent)
        return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"

    def to_bytes(self, config: SonarLintConfiguration) -> bytes:
        return self.to_string(config).encode("utf-8")

    def to_base64(self, config: SonarLintConfiguration) -> str:
        return base64.b64encode(self.to_bytes(config)).decode("ascii")

    def to_additional_file(
        self,
        config: SonarLintConfiguration,
        file_name: str = ExporterConstants.SONARLINT_FILE_NAME,
    ) -> AdditionalFile:
        """Package the document as a base64 additional file."""
        return AdditionalFile(file_name=file_name, content=self.to_base64(config))

    def save(self, config: SonarLintConfiguration, output_path: str | Path) -> Path:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        data = self.to_bytes(config)
        path.write_bytes(data)
        return path
