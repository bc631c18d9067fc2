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
Data models for quality-profile rules and the documents exported from them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

from ..config.constants import ExporterConstants
from .exceptions import InvalidArgumentError


class RuleAction(str, Enum):
    """Diagnostic severity a Roslyn rule set assigns to a rule."""

    NONE = "None"
    HIDDEN = "Hidden"
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"

    @classmethod
    def from_text(cls, text: str | RuleAction) -> RuleAction:
        """Parse an action name case-insensitively.

        Raises:
            ValueError: If *text* does not name a rule action.
        """
        if isinstance(text, RuleAction):
            return text
        for action in cls:
            if action.value.lower() == str(text).strip().lower():
                return action
        names = ", ".join(a.value for a in cls)
        raise ValueError(f"{text!r} is not a supported rule action (expected one of: {names})")


_ACTION_TEXT = {
    RuleAction.NONE: "None",
    RuleAction.HIDDEN: "Hidden",
    RuleAction.INFO: "Info",
    RuleAction.WARNING: "Warning",
    RuleAction.ERROR: "Error",
}


def get_action_text(action: RuleAction) -> str:
    """Render *action* as the text used in the rule set ``Action`` attribute."""
    try:
        return _ACTION_TEXT[action]
    except KeyError:
        raise ValueError(f"{action!r} is not a supported RuleAction.") from None


@dataclass(frozen=True)
class Rule:
    """A rule of a quality profile as returned by the server.

    ``parameters`` is stored as a read-only mapping so rules stay hashable.
    """

    repository_key: str
    key: str
    is_active: bool
    parameters: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters or {})))

    def __hash__(self) -> int:
        return hash((self.repository_key, self.key, self.is_active, frozenset(self.parameters.items())))

    @property
    def qualified_key(self) -> str:
        return f"{self.repository_key}:{self.key}"

    @classmethod
    def from_qualified_key(
        cls,
        qualified_key: str,
        is_active: bool,
        parameters: Mapping[str, str] | None = None,
    ) -> Rule:
        """Build a rule from a ``repository:key`` identifier."""
        if qualified_key is None:
            raise InvalidArgumentError("qualified_key")
        repository_key, sep, key = qualified_key.partition(":")
        if not sep or not repository_key or not key:
            raise InvalidArgumentError(
                "qualified_key", f"Rule key must have the form 'repository:key', got {qualified_key!r}"
            )
        return cls(repository_key=repository_key, key=key, is_active=is_active, parameters=parameters or {})


# ---------------------------------------------------------------------------
# Rule set document
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RuleSetRule:
    """One ``<Rule Id Action/>`` entry."""

    id: str
    action: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "action": self.action}


@dataclass
class RuleGroup:
    """Rules owned by one analyzer plugin."""

    analyzer_id: str
    rule_namespace: str
    rules: list[RuleSetRule] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "analyzer_id": self.analyzer_id,
            "rule_namespace": self.rule_namespace,
            "rules": [r.to_dict() for r in self.rules],
        }


@dataclass
class RuleSet:
    """A Roslyn rule set: per-analyzer groups of rule actions."""

    name: str = ExporterConstants.RULESET_NAME
    description: str = ExporterConstants.RULESET_DESCRIPTION
    tools_version: str = ExporterConstants.RULESET_TOOLS_VERSION
    groups: list[RuleGroup] = field(default_factory=list)

    def get_group(self, analyzer_id: str) -> RuleGroup | None:
        """Return the group for *analyzer_id*, if any."""
        for group in self.groups:
            if group.analyzer_id == analyzer_id:
                return group
        return None

    def all_rules(self) -> list[RuleSetRule]:
        """Flatten every group's rules in document order."""
        return [rule for group in self.groups for rule in group.rules]

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "tools_version": self.tools_version,
            "groups": [g.to_dict() for g in self.groups],
        }


# ---------------------------------------------------------------------------
# SonarLint.xml document
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeyValuePair:
    key: str
    value: str

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value}


@dataclass
class SonarLintRule:
    """A first-party rule and its parameters.

    ``parameters`` is ``None`` when the rule has no parameters, never an
    empty list.
    """

    key: str
    parameters: list[KeyValuePair] | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "parameters": [p.to_dict() for p in self.parameters] if self.parameters is not None else None,
        }


@dataclass
class SonarLintConfiguration:
    """Language settings and rule parameters read by the SonarAnalyzer at analysis time."""

    settings: list[KeyValuePair] = field(default_factory=list)
    rules: list[SonarLintRule] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "settings": [s.to_dict() for s in self.settings],
            "rules": [r.to_dict() for r in self.rules],
        }


# ---------------------------------------------------------------------------
# Export response
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PluginReference:
    """NuGet package that provides an analyzer referenced by the profile."""

    id: str
    version: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "version": self.version}


@dataclass(frozen=True)
class AdditionalFile:
    """A file shipped alongside the rule set; ``content`` is base64 encoded."""

    file_name: str
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"file_name": self.file_name, "content": self.content}


@dataclass
class ExportResponse:
    """Everything exported for one language of one quality profile."""

    language: str
    quality_profile_key: str
    rule_set: RuleSet
    sonarlint_configuration: SonarLintConfiguration
    plugin_references: list[PluginReference] = field(default_factory=list)
    additional_files: list[AdditionalFile] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "language": self.language,
            "quality_profile_key": self.quality_profile_key,
            "rule_set": self.rule_set.to_dict(),
            "sonarlint_configuration": self.sonarlint_configuration.to_dict(),
            "plugin_references": [p.to_dict() for p in self.plugin_references],
            "additional_files": [f.to_dict() for f in self.additional_files],
        }
