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
JSON serializer for export responses.
"""

import json
from pathlib import Path

from ..models import ExportResponse


class JSONSerializer:
    """Serializes an :class:`ExportResponse` to JSON."""

    def __init__(self, pretty: bool = True):
        """
        Initialize JSON serializer.

        Args:
            pretty: If True, format JSON with indentation
        """
        self.pretty = pretty

    def serialize(self, response: ExportResponse) -> str:
        """
        Generate JSON output.

        Args:
            response: Export response

        Returns:
            JSON string
        """
        if self.pretty:
            return json.dumps(response.to_dict(), indent=2)
        return json.dumps(response.to_dict())

    def save(self, response: ExportResponse, output_path: str | Path):
        """
        Save JSON output to file.

        Args:
            response: Export response
            output_path: Path to save file
        """
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.serialize(response))
