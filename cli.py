# cli.py
from __future__ import annotations
import argparse
import json
import logging
import shutil
import sys
from typing import List, Optional

from core.config import AppConfig, load_config
from core.errors import ConfigurationError, EntropySourceError, ExportError
from core.export_utils import ClipboardWriter, CommandClipboard, export_csv
from core.logging_utils import setup_logging
from core.password_utils import GenerationRequest, build_universe, entropy_bits, entropy_label, generate_batch
from core.strength_utils import assess_strength
from core.system_utils import format_report, get_system_info

logger = logging.getLogger("vlabs.cli")

EXIT_OK = 0
EXIT_RUNTIME = 1
EXIT_CONFIG = 2

# Tried in order; the first one found on PATH wins
_CLIPBOARD_CMDS = {
    "darwin": [["pbcopy"]],
    "win32": [["clip"]],
    "linux": [["wl-copy"], ["xclip", "-selection", "clipboard"], ["xsel", "--clipboard", "--input"]],
}


def detect_clipboard(platform: str = sys.platform) -> Optional[ClipboardWriter]:
    key = "linux" if platform.startswith("linux") else platform
    for cmd in _CLIPBOARD_CMDS.get(key, []):
        if shutil.which(cmd[0]):
            return CommandClipboard(cmd)
    return None


def build_parser(cfg: AppConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vlabs-passkit",
        description="Secure password generator, strength checker and system info report.",
    )
    parser.add_argument("--log-level", default=cfg.log_level,
                        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
                        help="Logging verbosity (default: %(default)s)")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate passwords")
    gen.add_argument("-l", "--length", type=int, default=cfg.default_length, help="Password length")
    gen.add_argument("-n", "--count", type=int, default=1, help="Number of passwords")
    gen.add_argument("--no-upper", dest="use_upper", action="store_false", help="Exclude A-Z")
    gen.add_argument("--no-lower", dest="use_lower", action="store_false", help="Exclude a-z")
    gen.add_argument("--no-digits", dest="use_digits", action="store_false", help="Exclude 0-9")
    gen.add_argument("--no-special", dest="use_special", action="store_false", help="Exclude symbols")
    gen.add_argument("--special", dest="special_chars", default=None, help="Custom special-character set")
    gen.add_argument("--exclude-ambiguous", action="store_true", help="Drop 0 O l I 1")
    gen.add_argument("--no-require-all", dest="require_all", action="store_false",
                     help="Do not force one character from every class")
    gen.add_argument("--csv", metavar="PATH", help="Also write results to a CSV file")
    gen.add_argument("--copy", action="store_true", help="Copy the first password to the clipboard")
    gen.add_argument("--json", action="store_true", help="Print results as JSON")

    st = sub.add_parser("strength", help="Score an existing password")
    st.add_argument("password")
    st.add_argument("--special", dest="special_chars", default=None, help="Special-character set to score against")

    sub.add_parser("sysinfo", help="Print a system information report")
    return parser


def _cmd_generate(args: argparse.Namespace, cfg: AppConfig, clipboard: Optional[ClipboardWriter]) -> int:
    request = GenerationRequest.from_flags(
        args.length,
        use_upper=args.use_upper,
        use_lower=args.use_lower,
        use_digits=args.use_digits,
        use_special=args.use_special,
        exclude_ambiguous=args.exclude_ambiguous,
        require_all=args.require_all,
        special_chars=args.special_chars,
        count=args.count,
    )
    results = generate_batch(request, cfg)

    if args.json:
        print(json.dumps([
            {"password": pw, "score": a.score, "strength": a.label, "suggestions": list(a.suggestions)}
            for pw, a in results
        ], indent=2))
    else:
        universe = build_universe(request.classes, request.exclude_ambiguous, cfg.with_special(args.special_chars))
        bits = entropy_bits(request.length, len(universe.combined))
        print(f"# Estimated entropy: {bits:.1f} bits ({entropy_label(bits)}), alphabet {len(universe.combined)} chars")
        for i, (pw, a) in enumerate(results, 1):
            print(f"{i:>3}. {pw}  [{a.label}, score {a.score}]")

    if args.csv:
        export_csv(results, args.csv)
    if args.copy:
        clipboard = clipboard or detect_clipboard()
        if clipboard is None:
            logger.warning("No clipboard command found; --copy ignored")
        else:
            clipboard.copy(results[0].password)
            logger.info("First password copied to clipboard")
    return EXIT_OK


def _cmd_strength(args: argparse.Namespace, cfg: AppConfig) -> int:
    special = cfg.with_special(args.special_chars).tables.special
    a = assess_strength(args.password, special)
    print(f"Strength: {a.label} (score {a.score})")
    for tip in a.suggestions:
        print(f"  - {tip}")
    return EXIT_OK


def main(argv: Optional[List[str]] = None, clipboard: Optional[ClipboardWriter] = None) -> int:
    try:
        cfg = load_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    args = build_parser(cfg).parse_args(argv)
    setup_logging(args.log_level, cfg.log_file)

    try:
        if args.command == "generate":
            return _cmd_generate(args, cfg, clipboard)
        if args.command == "strength":
            return _cmd_strength(args, cfg)
        print(format_report(get_system_info()))
        return EXIT_OK
    except ConfigurationError as e:
        logger.error("Invalid options: %s", e)
        return EXIT_CONFIG
    except (EntropySourceError, ExportError) as e:
        logger.error("%s", e)
        return EXIT_RUNTIME


if __name__ == "__main__":
    sys.exit(main())
