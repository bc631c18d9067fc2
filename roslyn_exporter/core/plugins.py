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
Analyzer plugin package references.

Unlike rule set generation, resolving plugin packages is best effort: a
group whose ``analyzerId`` or ``pluginVersion`` is not published is left out
rather than failing the export.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from ..config.constants import ExporterConstants
from .exceptions import InvalidArgumentError
from .models import PluginReference, Rule
from .properties import PropertyStore
from .repositories import get_roslyn_group_key, property_key

logger = logging.getLogger(__name__)


def get_active_group_keys(active_rules: Iterable[Rule]) -> list[str]:
    """Return analyzer group keys to resolve packages for.

    SonarC# and SonarVB are always included, followed by the Roslyn SDK
    groups of *active_rules* in first-seen order.
    """
    keys = [ExporterConstants.sonaranalyzer_group_key(lang) for lang in ExporterConstants.supported_languages()]
    for rule in active_rules:
        group_key = get_roslyn_group_key(rule)
        if group_key and group_key not in keys:
            keys.append(group_key)
    return keys


def get_plugin_references(
    active_rules: Iterable[Rule],
    properties: PropertyStore | Mapping[str, str],
) -> list[PluginReference]:
    """Resolve the analyzer packages referenced by *active_rules*."""
    if active_rules is None:
        raise InvalidArgumentError("active_rules")
    if properties is None:
        raise InvalidArgumentError("properties")
    if not isinstance(properties, PropertyStore):
        properties = PropertyStore(properties)

    plugins: list[PluginReference] = []
    for group_key in get_active_group_keys(active_rules):
        analyzer_id = properties.get_value(property_key(group_key, ExporterConstants.ANALYZER_ID_SUFFIX))
        plugin_version = properties.get_value(property_key(group_key, ExporterConstants.PLUGIN_VERSION_SUFFIX))
        if analyzer_id is None or plugin_version is None:
            logger.debug("No analyzer package published for '%s'", group_key)
            continue
        plugins.append(PluginReference(id=analyzer_id, version=plugin_version))
    return plugins
