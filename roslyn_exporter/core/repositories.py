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
Rule repository to analyzer group mapping.

A rule's repository key decides which analyzer plugin owns it:

* ``roslyn.<name>`` repositories belong to third-party Roslyn analyzers
  imported through the Roslyn SDK; the group key is ``<name>``.
* ``csharpsquid`` and ``vbnet`` belong to SonarAnalyzer; the group key is
  ``sonaranalyzer-<language>``.

Anything else has no Roslyn analyzer and is left out of the rule set.
"""

from __future__ import annotations

from ..config.constants import ExporterConstants
from .exceptions import UnsupportedLanguageError
from .models import Rule

_SONARANALYZER_REPOSITORIES = frozenset(
    {ExporterConstants.CSHARP_REPOSITORY_KEY, ExporterConstants.VBNET_REPOSITORY_KEY}
)


def get_group_key(rule: Rule, language: str) -> str | None:
    """Return the analyzer group key owning *rule*, or ``None``."""
    prefix = ExporterConstants.ROSLYN_REPOSITORY_PREFIX
    if rule.repository_key.startswith(prefix):
        return rule.repository_key[len(prefix) :]
    if rule.repository_key in _SONARANALYZER_REPOSITORIES:
        return ExporterConstants.sonaranalyzer_group_key(language)
    return None


def get_roslyn_group_key(rule: Rule) -> str | None:
    """Return the group key for Roslyn SDK rules only."""
    prefix = ExporterConstants.ROSLYN_REPOSITORY_PREFIX
    if rule.repository_key.startswith(prefix):
        return rule.repository_key[len(prefix) :]
    return None


def get_repository_key(language: str) -> str:
    """Return the first-party repository key for *language*.

    Raises:
        UnsupportedLanguageError: If *language* is not in the language table.
    """
    definition = ExporterConstants.get_language(language)
    if definition is None:
        raise UnsupportedLanguageError(language, ExporterConstants.supported_languages())
    return definition.repository_key


def property_key(group_key: str, suffix: str) -> str:
    """Build the ``<group>.<suffix>`` property key a plugin publishes."""
    return f"{group_key}.{suffix}"
