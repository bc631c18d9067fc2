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
Read-only view of the properties a SonarQube server declares.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

from .exceptions import InvalidArgumentError


class PropertyStore(Mapping[str, str]):
    """Immutable ``key -> value`` snapshot of server properties.

    Iteration follows the order in which the server returned the
    properties.  A key mapped to an empty string counts as absent for
    :meth:`get_value`, since analyzer plugins never publish empty metadata.
    """

    def __init__(self, properties: Mapping[str, str] | Iterable[tuple[str, str]] | None = None):
        if properties is None:
            properties = {}
        self._properties: dict[str, str] = dict(properties)

    @classmethod
    def from_settings(cls, settings: Iterable[dict]) -> PropertyStore:
        """Build a store from ``[{"key": ..., "value": ...}, ...]`` entries."""
        if settings is None:
            raise InvalidArgumentError("settings")
        return cls((s["key"], s["value"]) for s in settings)

    def __getitem__(self, key: str) -> str:
        return self._properties[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._properties)

    def __len__(self) -> int:
        return len(self._properties)

    def __repr__(self) -> str:
        return f"PropertyStore({len(self)} properties)"

    def get_value(self, key: str) -> str | None:
        """Return the value for *key*, or ``None`` if it is missing or empty."""
        value = self._properties.get(key)
        return value if value else None

    def with_prefix(self, prefix: str) -> list[tuple[str, str]]:
        """Return entries whose key starts with *prefix* and is strictly longer.

        Keys and values are returned unchanged, prefix included.
        """
        return [(k, v) for k, v in self._properties.items() if k.startswith(prefix) and len(k) > len(prefix)]
