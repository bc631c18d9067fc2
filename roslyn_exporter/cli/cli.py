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

"""Command-line interface for the Roslyn Exporter."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import yaml

from .. import __version__ as PACKAGE_VERSION
from ..client.sonarqube_client import SonarQubeClient
from ..config.config import Config
from ..config.constants import ExporterConstants
from ..core.exceptions import RoslynExporterError
from ..core.exporter import ProfileExporter
from ..core.models import ExportResponse, RuleAction
from ..core.serializers.json_serializer import JSONSerializer
from ..core.serializers.ruleset_xml import RuleSetXmlSerializer
from ..core.serializers.sonarlint_xml import SonarLintXmlSerializer

logger = logging.getLogger("roslyn_exporter.cli")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _load_config(args: argparse.Namespace) -> Config:
    """Build the configuration from ``--config`` and explicit flags."""
    config_path = getattr(args, "config", None)
    if config_path:
        path = Path(config_path)
        if path.suffix.lower() in (".yaml", ".yml"):
            config = Config.from_yaml(path)
        else:
            config = Config.from_file(path)
    else:
        config = Config.from_env()

    if getattr(args, "server_url", None):
        config.server_url = args.server_url
    if getattr(args, "token", None):
        config.token = args.token
    if getattr(args, "active_action", None):
        config.active_rule_action = RuleAction.from_text(args.active_action).value
    if getattr(args, "output_dir", None):
        config.output_dir = args.output_dir
    return config


async def _run_export(config: Config, language: str, profile: str) -> ExportResponse:
    async with SonarQubeClient.from_config(config) as client:
        exporter = ProfileExporter(client, active_rule_action=config.active_rule_action)
        return await exporter.export(language, profile)


def _write_files(response: ExportResponse, output_dir: Path) -> list[Path]:
    """Write the rule set and SonarLint.xml into *output_dir*."""
    ruleset_path = output_dir / f"{response.language}{ExporterConstants.RULESET_FILE_EXTENSION}"
    sonarlint_path = output_dir / ExporterConstants.SONARLINT_FILE_NAME
    return [
        RuleSetXmlSerializer().save(response.rule_set, ruleset_path),
        SonarLintXmlSerializer().save(response.sonarlint_configuration, sonarlint_path),
    ]


def _generate_summary(response: ExportResponse, written: list[Path]) -> str:
    lines = [
        "=" * 60,
        f"Quality profile: {response.quality_profile_key} ({response.language})",
        "=" * 60,
        f"Analyzer groups: {len(response.rule_set.groups)}",
    ]
    for group in response.rule_set.groups:
        active = sum(1 for r in group.rules if r.action != RuleAction.NONE.value)
        lines.append(f"  {group.analyzer_id}: {len(group.rules)} rule(s), {active} enabled")
    lines.append(f"SonarLint settings: {len(response.sonarlint_configuration.settings)}")
    lines.append(f"SonarLint rules: {len(response.sonarlint_configuration.rules)}")
    lines.append(f"Plugin packages: {len(response.plugin_references)}")
    for plugin in response.plugin_references:
        lines.append(f"  {plugin.id} {plugin.version}")
    if written:
        lines.append("")
        lines.extend(f"Wrote {path}" for path in written)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def export_command(args: argparse.Namespace) -> int:
    """Export a quality profile."""
    try:
        config = _load_config(args)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return 1

    try:
        response = asyncio.run(_run_export(config, args.language, args.profile))
    except RoslynExporterError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        output = JSONSerializer(pretty=not args.compact).serialize(response)
        if args.output:
            try:
                with open(args.output, "w", encoding="utf-8") as f:
                    f.write(output)
            except OSError as e:
                print(f"Error writing output: {e}", file=sys.stderr)
                return 1
            print(f"Export saved to: {args.output}", file=sys.stderr)
        else:
            print(output)
        return 0

    try:
        written = _write_files(response, Path(config.output_dir))
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        return 1
    print(_generate_summary(response, written))
    return 0


def list_languages_command(args: argparse.Namespace) -> int:
    """List supported languages."""
    print("Supported languages:")
    for definition in ExporterConstants.LANGUAGES.values():
        print(f"  {definition.key:<8} {definition.name:<8} repository: {definition.repository_key}")
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Roslyn Exporter - Export SonarQube quality profiles as Roslyn rule sets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  roslyn-exporter export --language cs --profile AXk1abc --output-dir .sonarlint
  roslyn-exporter export --language vbnet --profile AXk1abc --format json
  roslyn-exporter export --language cs --profile AXk1abc --active-action Error
  roslyn-exporter list-languages
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {PACKAGE_VERSION}")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # -- export ------------------------------------------------------------
    export_p = subparsers.add_parser("export", help="Export a quality profile")
    export_p.add_argument(
        "--language",
        "-l",
        required=True,
        choices=list(ExporterConstants.supported_languages()),
        help="Language of the quality profile",
    )
    export_p.add_argument("--profile", "-p", required=True, help="Quality profile key")
    export_p.add_argument("--server-url", help="SonarQube URL (or set SONARQUBE_URL)")
    export_p.add_argument("--token", help="SonarQube user token (or set SONARQUBE_TOKEN)")
    export_p.add_argument("--config", "-c", metavar="PATH", help="Path to a .env or YAML configuration file")
    export_p.add_argument(
        "--active-action",
        choices=[a.value for a in RuleAction],
        help="Action for active rules (default: Warning)",
    )
    export_p.add_argument("--output-dir", "-d", help="Directory for the rule set and SonarLint.xml")
    export_p.add_argument("--format", choices=["files", "json"], default="files", help="Output format")
    export_p.add_argument("--output", "-o", help="Output file path (json format only)")
    export_p.add_argument("--compact", action="store_true", help="Compact JSON output")

    # -- list-languages ----------------------------------------------------
    subparsers.add_parser("list-languages", help="List supported languages")

    # -- dispatch ----------------------------------------------------------
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 1

    dispatch = {
        "export": export_command,
        "list-languages": list_languages_command,
    }
    handler = dispatch.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
