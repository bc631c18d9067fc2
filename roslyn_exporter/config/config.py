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
Configuration class for Roslyn Exporter.

Values come from constructor arguments first, then environment variables,
then the defaults in :class:`ExporterConstants`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from ..core.models import RuleAction
from .constants import ExporterConstants

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Configuration for Roslyn Exporter.
    """

    # Server connection
    server_url: str | None = None
    token: str | None = None
    request_timeout: int = ExporterConstants.DEFAULT_REQUEST_TIMEOUT
    page_size: int = ExporterConstants.DEFAULT_PAGE_SIZE

    # Rule set generation
    active_rule_action: str = ExporterConstants.DEFAULT_ACTIVE_RULE_ACTION

    # Output
    output_dir: str = "."

    def __post_init__(self):
        """Load configuration from environment variables if not provided."""

        if self.server_url is None:
            self.server_url = os.getenv("SONARQUBE_URL", ExporterConstants.DEFAULT_SERVER_URL)

        if self.token is None:
            self.token = os.getenv("SONARQUBE_TOKEN")

        # Only if still at default
        if self.active_rule_action == ExporterConstants.DEFAULT_ACTIVE_RULE_ACTION:
            if env_action := os.getenv("ROSLYN_EXPORTER_ACTIVE_RULE_ACTION"):
                self.active_rule_action = env_action

        if self.request_timeout == ExporterConstants.DEFAULT_REQUEST_TIMEOUT:
            if env_timeout := os.getenv("ROSLYN_EXPORTER_TIMEOUT"):
                try:
                    self.request_timeout = int(env_timeout)
                except ValueError:
                    logger.warning("Ignoring non-integer ROSLYN_EXPORTER_TIMEOUT=%r", env_timeout)

        # Validate eagerly so a typo fails before any network call
        RuleAction.from_text(self.active_rule_action)

    @classmethod
    def from_env(cls) -> Config:
        """
        Create configuration from environment variables.

        Returns:
            Config instance with values from environment
        """
        return cls()

    @classmethod
    def from_file(cls, config_file: Path) -> Config:
        """
        Load configuration from a .env file.

        Args:
            config_file: Path to .env file

        Returns:
            Config instance
        """
        if config_file.exists():
            load_dotenv(config_file, override=True)
        else:
            logger.warning("Config file not found: %s", config_file)

        return cls.from_env()

    @classmethod
    def from_yaml(cls, path: str | Path) -> Config:
        """Load configuration from a YAML mapping.

        Keys mirror the dataclass field names. Unknown keys are ignored.
        """
        path = Path(path)
        with open(path, encoding="utf-8") as fh:
            raw: dict[str, Any] = yaml.safe_load(fh) or {}

        if not isinstance(raw, dict):
            raise ValueError(f"Expected a mapping at the top level of {path}")

        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in raw.items():
            if key not in known:
                logger.warning("Ignoring unknown config key '%s' in %s", key, path)
                continue
            kwargs[key] = value
        return cls(**kwargs)

    def to_yaml(self, path: str | Path) -> None:
        """Write this configuration to *path*, omitting the token."""
        data = asdict(self)
        data.pop("token", None)
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as fh:
            yaml.safe_dump(data, fh, default_flow_style=False, sort_keys=False)
