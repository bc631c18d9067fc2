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

"""Roslyn Exporter exceptions.

All exceptions inherit from RoslynExporterError for easy catching.

Example:
    >>> from roslyn_exporter.core.exporter import build_export
    >>> from roslyn_exporter.core.exceptions import MissingConfigurationError
    >>>
    >>> try:
    ...     response = build_export("cs", "AXk1-profile", service)
    ... except MissingConfigurationError as e:
    ...     print(f"Server is missing plugin metadata: {e.property_key}")
"""

from __future__ import annotations


class RoslynExporterError(Exception):
    """Base exception for all Roslyn Exporter errors."""

    pass


class InvalidArgumentError(RoslynExporterError, ValueError):
    """Raised when a required input is missing at a public boundary."""

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        super().__init__(message or f"Argument must not be None: {argument}")


class UnsupportedLanguageError(RoslynExporterError, ValueError):
    """Raised when the requested language has no first-party repository."""

    def __init__(self, language: str, supported: tuple[str, ...] = ()):
        self.language = language
        self.supported = supported
        message = f"Unsupported language: {language!r}"
        if supported:
            message += f" (supported: {', '.join(supported)})"
        super().__init__(message)


class MissingConfigurationError(RoslynExporterError):
    """Raised when a plugin property required to build a rule group is absent.

    This indicates:
    - The analyzer plugin is not installed on the server
    - The installed plugin is too old to publish its Roslyn metadata

    Attributes:
        property_key: The property that could not be resolved,
            e.g. ``sonaranalyzer-cs.analyzerId``.
        group_key: The analyzer group the rule belonged to.
    """

    def __init__(self, property_key: str, group_key: str, message: str):
        self.property_key = property_key
        self.group_key = group_key
        super().__init__(message)


class SonarQubeServiceError(RoslynExporterError):
    """Raised when rules or properties cannot be fetched from the server."""

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        super().__init__(message)
