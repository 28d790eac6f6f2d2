"""CLI entry point: analyze a JSON level list and print the result."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from soundingbrief.analysis.sounding import analyze_sounding
from soundingbrief.config import load_analysis_config
from soundingbrief.errors import SoundingError

logger = logging.getLogger(__name__)


def _load_levels(path: Path) -> list[dict]:
    """Read levels from a JSON list or a ``{"levels": [...]}`` document."""
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise SoundingError(f"{path}: invalid JSON: {exc}") from exc
    if isinstance(data, dict):
        data = data.get("levels", [])
    if not isinstance(data, list):
        raise SoundingError(f"{path}: expected a list of levels")
    return data


def run_analyze(args: argparse.Namespace) -> int:
    """Run the analysis for one profile file; returns the exit status."""
    profile_path = Path(args.profile)
    if not profile_path.exists():
        print(f"Error: Profile not found: {profile_path}", file=sys.stderr)
        return 1

    try:
        config = load_analysis_config(args.config)
    except (FileNotFoundError, ValidationError, yaml.YAMLError) as exc:
        print(f"Error: Invalid analysis config: {exc}", file=sys.stderr)
        return 1
    if args.serial:
        config = config.model_copy(update={"parallel_parcels": False})

    try:
        levels = _load_levels(profile_path)
        result = analyze_sounding(levels, config)
    except SoundingError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if result is None:
        print("Error: Not enough levels to analyze.", file=sys.stderr)
        return 1

    print(result.model_dump_json(indent=args.indent))
    return 0


def main() -> None:
    """CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="soundingbrief",
        description="Convective parameters (CAPE/CIN, shear, SRH, STP, SCP) from a sounding",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze_parser = subparsers.add_parser(
        "analyze", help="Analyze a JSON level list and print the result as JSON"
    )
    analyze_parser.add_argument(
        "profile", help="JSON file: list of levels or {\"levels\": [...]}"
    )
    analyze_parser.add_argument(
        "--config", default=None,
        help="YAML analysis config (default: env SOUNDINGBRIEF_CONFIG or built-in)",
    )
    analyze_parser.add_argument(
        "--serial", action="store_true", help="Run the three parcels sequentially"
    )
    analyze_parser.add_argument(
        "--indent", type=int, default=2, help="JSON indent (default: 2)"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.command == "analyze":
        sys.exit(run_analyze(args))


if __name__ == "__main__":
    main()
