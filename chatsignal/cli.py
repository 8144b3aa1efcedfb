"""
CLI interface for ChatSignal v1
"""

import sys
import json
import logging
import argparse
from typing import List, Optional

from . import config
from .messages import load_messages
from .report import build_signal_report

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def analyze_file(filepath: str, names: Optional[List[str]] = None, output_file: str = None) -> dict:
    """
    Analyze a JSON message export.

    Args:
        filepath: Path to a JSON list of messages (or {"messages": [...]})
        names: Participant names; overrides names stored in the file
        output_file: Optional output JSON file

    Returns:
        Signal report dict
    """
    logger.info(f"Analyzing file: {filepath}")

    valid, msg = config.validate_config()
    if not valid:
        logger.error(f"Configuration error: {msg}")
        sys.exit(1)

    try:
        messages, stored_names = load_messages(filepath)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load messages: {e}")
        sys.exit(1)

    report = build_signal_report(messages, names or stored_names)

    if output_file:
        with open(output_file, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=config.REPORT_INDENT, ensure_ascii=False)
        logger.info(f"Report saved to {output_file}")
    else:
        print(json.dumps(report, indent=config.REPORT_INDENT, ensure_ascii=False))

    return report


def main(argv: Optional[List[str]] = None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="ChatSignal v1 - Behavioral signal engine for chat logs"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Analyze a JSON message export")
    analyze.add_argument(
        "filepath",
        help="Path to JSON messages file"
    )
    analyze.add_argument(
        "--names",
        nargs="+",
        help="Participant names (default: senders in order of appearance)"
    )
    analyze.add_argument(
        "-o", "--output",
        dest="output_file",
        help="Output JSON file path"
    )
    analyze.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose logging"
    )

    subparsers.add_parser("config", help="Show and validate configuration")

    args = parser.parse_args(argv)

    if getattr(args, "verbose", False):
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "config":
        print(json.dumps(config.get_config_summary(), indent=2))
        valid, msg = config.validate_config()
        print(f"Valid: {valid} - {msg}")
        sys.exit(0 if valid else 1)

    elif args.command == "analyze":
        try:
            report = analyze_file(args.filepath, args.names, args.output_file)
            logger.info("Analysis complete")
            conflicts = report["conflicts"]["total_conflicts"]
            logger.info(f"Messages: {report['metadata']['message_count']}, conflicts: {conflicts}")
        except Exception as e:
            logger.error(f"Analysis failed: {e}", exc_info=True)
            sys.exit(1)


if __name__ == "__main__":
    main()
