"""CLI interface for cpr-filter — for shell pipelines and log scrubbing.

Usage:
    # Redact plain text (stdin → stdout)
    echo 'CPR: 070761-4285' | cpr-filter redact-text

    # Same, with metadata about every candidate
    echo 'CPR: 070761-4285' | cpr-filter redact-text --json

    # Redact chat messages (stdin: JSON array of message dicts)
    echo '[{"role":"user","content":"min cpr er 0707614285"}]' | \
        cpr-filter redact

    # Settings from a YAML file, overridden by flags
    cpr-filter --config filter.yaml --dummy-value '[CPR]' redact-text < doc.txt
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Any

from .config import config_section, create_redactor, load_from_yaml
from .redactor import Redactor


def _build_redactor(args: argparse.Namespace) -> Redactor:
    data: dict[str, Any] = load_from_yaml(args.config) if args.config else {}
    data = dict(config_section(data))
    if args.no_modulus11:
        data["modulus11_check"] = False
    if args.no_date_check:
        data["date_check"] = False
    if args.no_replace_all_dash:
        data["replace_all_dash"] = False
    if args.dummy_value is not None:
        data["dummy_value"] = args.dummy_value
    return create_redactor(data)


def cmd_redact_text(args: argparse.Namespace, redactor: Redactor) -> None:
    """Redact CPR numbers from plain text on stdin."""
    text = sys.stdin.read()
    result = redactor.redact(text)

    if not args.json:
        sys.stdout.write(result.text)
        return

    output = {
        "text": result.text,
        "matches": [
            {
                "text": m.candidate.text,
                "start": m.candidate.start,
                "end": m.candidate.end,
                "approved_by": m.approved_by,
            }
            for m in result.matches
        ],
        "replaced": len(result.replacements),
    }
    json.dump(output, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def cmd_redact(args: argparse.Namespace, redactor: Redactor) -> None:
    """Redact CPR numbers from chat messages (JSON array on stdin)."""
    messages = json.loads(sys.stdin.read())
    if not isinstance(messages, list):
        raise ValueError("expected a JSON array of messages")
    if not all(isinstance(msg, dict) for msg in messages):
        raise ValueError("expected a JSON array of message objects")

    redacted = redactor.redact_messages(messages, content_key=args.content_key)

    json.dump(redacted, sys.stdout, ensure_ascii=False)
    sys.stdout.write("\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="cpr-filter",
        description="Find and replace Danish CPR numbers in text",
    )
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("--no-modulus11", action="store_true", help="Disable the modulus 11 check")
    parser.add_argument("--no-date-check", action="store_true", help="Disable the date check")
    parser.add_argument(
        "--no-replace-all-dash", action="store_true",
        help="Do not replace every number written as XXXXXX-XXXX",
    )
    parser.add_argument("--dummy-value", default=None, help="Replacement text (max 32 chars)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")

    sub = parser.add_subparsers(dest="command", required=True)
    p_text = sub.add_parser("redact-text", help="Redact plain text (stdin)")
    p_text.add_argument("--json", action="store_true", help="Emit text plus match metadata as JSON")
    p_msgs = sub.add_parser("redact", help="Redact chat messages (JSON stdin)")
    p_msgs.add_argument("--content-key", default="content", help="Message field holding the text")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cmds = {
        "redact-text": cmd_redact_text,
        "redact": cmd_redact,
    }
    try:
        redactor = _build_redactor(args)
        cmds[args.command](args, redactor)
    except (ValueError, OSError) as e:
        # ConfigError and json.JSONDecodeError are ValueErrors
        sys.stderr.write(f"cpr-filter: {e}\n")
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
