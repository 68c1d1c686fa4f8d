from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
import sys

from .config import DEFAULT_CONFIG, load_config
from .contrast.audit import audit_palette, format_audit_report, summarize_audit
from .contrast.validator import validate_contrast
from .standards import is_large_text
from .style.palette import PALETTES


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="foodylog-a11y")
    parser.add_argument("--config", type=Path, default=None, help="TOML file with an [a11y] table.")
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    audit = sub.add_parser("audit-colors", help="Audit the built-in palettes against WCAG contrast ratios.")
    audit.add_argument("--mode", choices=["light", "dark", "all"], default="all")
    audit.add_argument("--strict", action="store_true", help="Exit 1 when any combination fails AA.")

    check = sub.add_parser("check-contrast", help="Validate one foreground/background pair.")
    check.add_argument("foreground")
    check.add_argument("background")
    check.add_argument("--large-text", action="store_true")
    check.add_argument("--font-size", type=float, default=None, metavar="PT", help="Derive --large-text from a point size.")
    check.add_argument("--bold", action="store_true", help="Text is bold (with --font-size).")

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    config = load_config(args.config) if args.config is not None else DEFAULT_CONFIG

    if args.command == "audit-colors":
        modes = ["light", "dark"] if args.mode == "all" else [args.mode]
        rows_by_mode = {mode: audit_palette(PALETTES[mode], config=config) for mode in modes}
        print(format_audit_report(rows_by_mode))
        summary = summarize_audit(rows_by_mode)
        if args.strict and summary.failures > 0:
            return 1
        return 0

    if args.command == "check-contrast":
        large_text = args.large_text or (args.font_size is not None and is_large_text(args.font_size, args.bold))
        result = validate_contrast(args.foreground, args.background, large_text, config=config)
        print(
            json.dumps(
                {
                    "ratio": result.ratio,
                    "required_ratio": result.required_ratio,
                    "passes": result.passes,
                    "level": result.level,
                },
                indent=2,
            )
        )
        return 0 if result.passes else 1

    raise ValueError(f"unknown command: {args.command}")


if __name__ == "__main__":
    sys.exit(main())
