from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict

from schemagraph.assembly import build_registry
from schemagraph.loader import load_document
from schemagraph.logging_config import configure_logging
from schemagraph.registry import SchemaRegistry
from schemagraph.settings import load_settings


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Schemagraph utilities")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Assemble a JSON schema document and report errors")
    check.add_argument("document", type=Path, help="Path to the JSON definitions document")
    check.add_argument("--config", type=Path, default=None, help="Path to schemagraph.toml")
    check.add_argument("--log-level", default=None, help="Override the configured log level")
    check.add_argument("--log-file", type=Path, default=None, help="Write logs to this file instead of stderr")
    check.add_argument(
        "--no-fail",
        action="store_true",
        help="Exit with status 0 even when the schema has errors",
    )
    return parser.parse_args(argv)


def registry_report(registry: SchemaRegistry) -> Dict[str, Any]:
    return {
        "types": dict(registry.type_map()),
        "directives": dict(registry.directive_map()),
        "exports": sorted(registry.exports()),
        "implementors": {iface: sorted(idents) for iface, idents in sorted(registry.implementors().items())},
        "errors": [error.model_dump(mode="json") for error in registry.errors()],
    }


def _check(args: argparse.Namespace) -> int:
    overrides: Dict[str, Any] = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.no_fail:
        overrides["fail_on_errors"] = False

    try:
        settings = load_settings(config_path=args.config, overrides=overrides)
        configure_logging(level=settings.log_level, jsonl=settings.log_jsonl, log_file=args.log_file)
        document = load_document(args.document)
    except (OSError, ValueError) as exc:
        # ValidationError and JSONDecodeError are both ValueErrors.
        print(f"schemagraph: {exc}", file=sys.stderr)
        return 2

    registry = build_registry(
        document.definitions,
        descriptions=document.descriptions,
        rules=settings.rule_checks(),
    )
    print(json.dumps(registry_report(registry), indent=2, ensure_ascii=False))
    for error in registry.errors():
        print(error.message(), file=sys.stderr)

    if registry.has_errors() and settings.fail_on_errors:
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    if args.command == "check":
        return _check(args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
