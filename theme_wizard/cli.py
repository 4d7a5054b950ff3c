"""Command-line entry point for ``python -m theme_wizard``.

Usage::

    python -m theme_wizard                      # interactive wizard
    python -m theme_wizard generate answers.json -o prompt.md --copy
    python -m theme_wizard version
    python -m theme_wizard serve --port 8787
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from theme_wizard.catalog import TOTAL_STEPS
from theme_wizard.clipboard import PromptClipboard
from theme_wizard.config import Config
from theme_wizard.models import WizardData
from theme_wizard.prompt_gen import PromptGenerator, generate_prompt
from theme_wizard.utils import console, print_error, print_success, print_summary_table, print_warning
from theme_wizard.validator import can_advance
from theme_wizard.version import VersionChecker


def load_answers(path: Path) -> WizardData:
    """Load a ``WizardData`` JSON file (camelCase or snake_case keys)."""
    raw = Path(path).read_text(encoding="utf-8")
    return WizardData.model_validate_json(raw)


def _cmd_wizard(args: argparse.Namespace, config: Config) -> int:
    from theme_wizard.steps import run_interactive

    run_interactive(config=config, console=console)
    return 0


def _cmd_generate(args: argparse.Namespace, config: Config) -> int:
    answers = Path(args.answers)
    if not answers.exists():
        print_error(f"Error: answers file not found: {answers}")
        return 1
    try:
        data = load_answers(answers)
    except UnicodeDecodeError as exc:
        print_error(f"Error: answers file {answers} is not UTF-8: {exc}")
        return 1
    except ValidationError as exc:
        print_error(f"Error: invalid answers file {answers}:\n{exc}")
        return 1

    for step in range(1, TOTAL_STEPS + 1):
        check = can_advance(step, data)
        if not check.ok:
            print_error(f"Error: step {step}: {check.message}")
            return 1

    if args.save:
        prompt, _ = PromptGenerator(config.output_dir, console=console).generate_and_save(data)
    else:
        prompt = generate_prompt(data)

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(prompt, encoding="utf-8")
        print_success(f"Prompt written to {output} ({len(prompt)} chars)")
    elif not args.save:
        console.print(prompt, markup=False, highlight=False, emoji=False, soft_wrap=True)

    if args.copy:
        method = PromptClipboard(config.copied_reset_seconds, console=console).copy(prompt)
        print_success(f"Prompt copied to clipboard ({method})")
    return 0


def _cmd_version(args: argparse.Namespace, config: Config) -> int:
    info = asyncio.run(VersionChecker(config).check())
    print_summary_table(
        {
            "Installed": info.installed,
            "Latest": info.latest,
            "Up to date": "yes" if info.up_to_date else "no",
            "Changelog": info.changelog,
        },
        title="Template version",
    )
    if not info.up_to_date:
        print_warning(f"A new template version is available: {info.latest}")
    return 0


def _cmd_serve(args: argparse.Namespace, config: Config) -> int:
    import uvicorn

    from theme_wizard.server import create_app

    uvicorn.run(create_app(config), host=args.host or config.server_host, port=args.port or config.server_port)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="theme-wizard",
        description="Theme wizard -- builds the CNX theme-creation prompt for a coding agent",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m theme_wizard\n"
            "  python -m theme_wizard generate answers.json -o prompt.md\n"
            "  python -m theme_wizard version\n"
        ),
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("wizard", help="Run the interactive wizard (default)")

    gen = sub.add_parser("generate", help="Generate the prompt from a saved answers file")
    gen.add_argument("answers", help="Path to a JSON file with the wizard answers")
    gen.add_argument("--output", "-o", default=None, help="Write the prompt to this file")
    gen.add_argument(
        "--save", action="store_true",
        help="Save under <output_dir>/prompts/theme-<slug>.md",
    )
    gen.add_argument("--copy", action="store_true", help="Copy the prompt to the clipboard")

    sub.add_parser("version", help="Compare the installed template version with the latest")

    serve = sub.add_parser("serve", help="Serve GET /api/admin/version")
    serve.add_argument("--host", default=None, help="Bind address (default: from config)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: from config)")

    return parser


_COMMANDS = {
    None: _cmd_wizard,
    "wizard": _cmd_wizard,
    "generate": _cmd_generate,
    "version": _cmd_version,
    "serve": _cmd_serve,
}


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``python -m theme_wizard`` and ``theme-wizard``."""
    args = build_parser().parse_args(argv)
    config = Config.from_env()
    return _COMMANDS[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
