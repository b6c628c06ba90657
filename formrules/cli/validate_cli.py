"""
Command-line interface for validating JSON documents against YAML rule files.

Usage:
    formrules-validate --rules <rules.yaml> --data <data.json> [options]
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from formrules.core.exceptions import ConfigError
from formrules.core.rules import FormValidator
from formrules.observability.logger import setup_logger

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def validate_command(args) -> int:
    """
    Execute the validate command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    logger = setup_logger("formrules", level=args.log_level, format_type=args.log_format)

    data_path = Path(args.data)
    if not data_path.exists():
        logger.error(f"Data file not found: {args.data}")
        return EXIT_CONFIG_ERROR

    try:
        validator = FormValidator.from_yaml(args.rules)
        data = json.loads(data_path.read_text(encoding="utf-8"))

        if args.field:
            pending = validator.check_field(args.field, data)
        else:
            pending = validator.check(data)
        report = asyncio.run(pending)

    except (ConfigError, FileNotFoundError, json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error(f"Cannot validate {args.data}: {e}")
        return EXIT_CONFIG_ERROR

    logger.info(
        f"Validated {len(report.checked_fields)} field(s), {len(report.failed_fields)} failed",
        extra={"rules_file": str(args.rules), "data_file": str(args.data)},
    )
    print(report.model_dump_json(indent=2))

    return EXIT_OK if report.passed else EXIT_INVALID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formrules-validate",
        description="Validate a JSON document against declarative field rules",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate every field with rules
  formrules-validate --rules config/signup_rules.yaml --data signup.json

  # Validate a single field
  formrules-validate --rules config/signup_rules.yaml --data signup.json --field phone

  # Plain-text diagnostics at debug level
  formrules-validate --rules rules.yaml --data data.json --log-level DEBUG --log-format text

Exit codes: 0 valid, 1 validation failures, 2 configuration or input errors.
        """
    )

    parser.add_argument("--rules", required=True, help="Path to YAML rule file")
    parser.add_argument("--data", required=True, help="Path to JSON document to validate")
    parser.add_argument("--field", default=None, help="Validate only this field")
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL env var or WARNING)",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "text"],
        help="Log format (default: LOG_FORMAT env var or json)",
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    sys.exit(validate_command(args))


if __name__ == "__main__":
    main()
