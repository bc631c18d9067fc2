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
Roslyn Exporter - Translate SonarQube quality profiles into Roslyn rule sets.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("roslyn-exporter")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__author__ = "Cisco Systems, Inc."


def __getattr__(name: str):
    """Lazy-load public API symbols on first access.

    Keeps ``python -m roslyn_exporter.cli.cli`` from importing httpx and the
    serializers before argument parsing.
    """
    _lazy_map = {
        "Config": (".config.config", "Config"),
        "ExporterConstants": (".config.constants", "ExporterConstants"),
        "PropertyStore": (".core.properties", "PropertyStore"),
        "Rule": (".core.models", "Rule"),
        "RuleAction": (".core.models", "RuleAction"),
        "RuleSet": (".core.models", "RuleSet"),
        "SonarLintConfiguration": (".core.models", "SonarLintConfiguration"),
        "PluginReference": (".core.models", "PluginReference"),
        "ExportResponse": (".core.models", "ExportResponse"),
        "RuleSetBuilder": (".core.ruleset_generator", "RuleSetBuilder"),
        "SonarLintConfigBuilder": (".core.sonarlint_config", "SonarLintConfigBuilder"),
        "ProfileExporter": (".core.exporter", "ProfileExporter"),
        "build_export": (".core.exporter", "build_export"),
        "build_export_async": (".core.exporter", "build_export_async"),
        "SonarQubeClient": (".client.sonarqube_client", "SonarQubeClient"),
    }
    if name in _lazy_map:
        module_path, attr = _lazy_map[name]
        import importlib

        mod = importlib.import_module(module_path, __package__)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is only called once per symbol
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Config",
    "ExporterConstants",
    "PropertyStore",
    "Rule",
    "RuleAction",
    "RuleSet",
    "SonarLintConfiguration",
    "PluginReference",
    "ExportResponse",
    "RuleSetBuilder",
    "SonarLintConfigBuilder",
    "ProfileExporter",
    "build_export",
    "build_export_async",
    "SonarQubeClient",
]
