"""
main.py - Entry point for tap-audit
"""

import sys
import argparse
import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from tap_audit.audit import TapTargetsAudit
from tap_audit.schemas.config import AuditConfig
from tap_audit.schemas.results import AuditResult
from tap_audit.schemas.targets import TapTargetArtifacts

EXIT_AUDIT_FAILED = 2


def _load_yaml(path: Path, label: str) -> Any:
    if not path.is_file():
        print(f"Error: {label} file not found at {path}")
        sys.exit(1)

    with open(path, "r") as f:
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as e:
            print(f"Error parsing {label} file: {e}")
            sys.exit(1)


def load_artifacts(artifacts_path: str) -> TapTargetArtifacts:
    data = _load_yaml(Path(artifacts_path), "Artifacts")
    try:
        return TapTargetArtifacts.model_validate(data or {})
    except ValidationError as e:
        print(f"Error validating artifacts: {e}")
        sys.exit(1)


def load_config(config_path: Optional[str], overrides: Dict[str, Any]) -> AuditConfig:
    data: Dict[str, Any] = {}
    if config_path:
        data = _load_yaml(Path(config_path), "Config") or {}
        if not isinstance(data, dict):
            print("Error: config file must contain a mapping")
            sys.exit(1)
    data.update({key: value for key, value in overrides.items() if value is not None})
    try:
        return AuditConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        print(f"Error validating config: {e}")
        sys.exit(1)


def format_result(result: AuditResult) -> str:
    if result.skipped:
        return f"⏭️  SKIPPED: {result.explanation}"

    lines = []
    if result.passed:
        lines.append(f"✅ PASSED: {result.display_value}")
    else:
        lines.append(f"❌ FAILED: {result.display_value}")
        lines.append("-" * 50)
        for row in result.rows:
            lines.append(
                f"{row.tap_target.snippet or row.tap_target.selector} ({row.size}) "
                f"-> {row.overlapping_target.snippet or row.overlapping_target.selector} "
                f"[overlap {row.overlap_score_ratio:.0%}]"
            )
    return "\n".join(lines)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="tap-audit CLI")
    parser.add_argument("artifacts", type=str, help="Path to the tap target artifacts (YAML or JSON)")
    parser.add_argument("--config", type=str, default=None, help="Path to an audit config YAML file")
    parser.add_argument("--finger-size", type=float, default=None, help="Finger size in px")
    parser.add_argument(
        "--max-overlap-ratio", type=float, default=None, help="Max acceptable overlap score ratio"
    )
    parser.add_argument(
        "--not-mobile-optimized",
        action="store_true",
        help="Treat the viewport as not optimized for mobile",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    args = parser.parse_args(argv)

    artifacts = load_artifacts(args.artifacts)
    if args.not_mobile_optimized:
        artifacts = artifacts.model_copy(update={"viewport_is_mobile_optimized": False})

    config = load_config(
        args.config,
        {
            "finger_size_px": args.finger_size,
            "max_acceptable_overlap_score_ratio": args.max_overlap_ratio,
        },
    )

    result = TapTargetsAudit(config).audit(artifacts)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(format_result(result))

    if result.skipped or result.passed:
        return 0
    return EXIT_AUDIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
