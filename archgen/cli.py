"""archgen command-line interface.

Usage::

    archgen generate
    archgen generate -a clean -m github.com/user/project
    archgen list
    archgen preview hexagonal
"""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.prompt import Confirm, Prompt

from . import __version__
from .config import Config
from .scaffolder import (
    ProjectGenerator,
    ScaffoldError,
    lookup,
    preview,
    supported_architectures,
    validate_architecture,
    validate_module_name,
)
from .selection import SelectionError, build_strategies, select_choice
from .utils import (
    console,
    print_error,
    print_preview,
    print_success,
    print_summary_table,
    print_warning,
    setup_logging,
)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def _architecture_help() -> str:
    lines = ["Supported architectures:"]
    for name in supported_architectures():
        lines.append(f"  {name:<11} {lookup(name).description}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="archgen",
        description="Generate Go projects with different architectural patterns.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging"
    )
    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser(
        "generate",
        help="Generate Go project structure",
        description="Generate a Go project with the specified architecture pattern.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            _architecture_help()
            + "\n\nExamples:\n"
            "  archgen generate\n"
            "  archgen generate -a clean -m github.com/user/project\n"
        ),
    )
    generate.add_argument("-a", "--arch", default="", help="Architecture type")
    generate.add_argument("-m", "--module", default="", help="Go module name")
    generate.add_argument(
        "--no-fuzzy",
        action="store_true",
        help="Disable fuzzy UI and use numeric selection",
    )
    generate.add_argument(
        "-f", "--force",
        action="store_true",
        help="Overwrite an existing project directory without asking",
    )
    generate.add_argument(
        "-y", "--yes",
        action="store_true",
        help="Skip the final confirmation in interactive mode",
    )
    generate.add_argument(
        "--staged",
        action="store_true",
        default=None,
        help="Build into a temporary directory and move it into place on success",
    )
    generate.add_argument(
        "-o", "--output",
        default=None,
        help="Directory that receives the project (default: current directory)",
    )

    subparsers.add_parser("list", help="List supported architectures")

    preview_cmd = subparsers.add_parser("preview", help="Print an architecture's tree")
    preview_cmd.add_argument("arch", help="Architecture type")

    return parser


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_list(args: argparse.Namespace, config: Config) -> int:
    data = {name: lookup(name).description for name in supported_architectures()}
    print_summary_table(data, title="Architectures")
    return EXIT_OK


def cmd_preview(args: argparse.Namespace, config: Config) -> int:
    arch = validate_architecture(args.arch)
    print_preview(arch, preview(arch))
    return EXIT_OK


def cmd_generate(args: argparse.Namespace, config: Config) -> int:
    interactive = not (args.arch and args.module)

    if args.arch:
        arch = validate_architecture(args.arch)
    else:
        strategies = build_strategies(config, no_fuzzy=args.no_fuzzy)
        arch = select_choice(list(supported_architectures()), strategies)

    if args.module:
        module = args.module
    else:
        module = Prompt.ask(
            "Go module name", default=config.default_module, console=console
        ).strip() or config.default_module
    validate_module_name(module)

    generator = ProjectGenerator(config)
    root = generator.project_root(arch)
    exists = generator.destination_exists(arch)
    overwrite = False
    if exists:
        print_warning(f"project directory '{root}' already exists")
        overwrite = args.force or Confirm.ask(
            "Do you want to overwrite the existing directory?",
            default=False,
            console=console,
        )
        if not overwrite:
            console.print("Generation cancelled.")
            return EXIT_OK

    print_preview(arch, preview(arch))

    if interactive and not args.yes:
        if not Confirm.ask("Generate project?", default=True, console=console):
            console.print("Generation cancelled.")
            return EXIT_OK

    console.print("Generating project...")
    root = generator.generate(arch, module, overwrite=overwrite, destination_exists=exists)

    template = lookup(arch)
    console.print()
    print_success("Project generated successfully!")
    print_summary_table(
        {"Module": module, "Architecture": arch, "Location": f"{root}/"},
        title="Project",
    )
    console.print("Next steps:")
    console.print(f"  cd {root}", highlight=False, markup=False)
    console.print(f"  {template.setup_command}", highlight=False, markup=False)
    console.print(f"  go run {template.run_hint}", highlight=False, markup=False)
    return EXIT_OK


_COMMANDS = {
    "generate": cmd_generate,
    "list": cmd_list,
    "preview": cmd_preview,
}


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``archgen`` and ``python -m archgen``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config.from_env()
    updates: dict[str, object] = {}
    if args.verbose:
        updates["verbose"] = True
    if getattr(args, "output", None):
        updates["output_dir"] = Path(args.output)
    if getattr(args, "staged", None):
        updates["staged"] = True
    if updates:
        config = config.model_copy(update=updates)

    setup_logging(config.verbose)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    try:
        return _COMMANDS[args.command](args, config)
    except ScaffoldError as exc:
        print_error(exc.message)
        return EXIT_ERROR
    except SelectionError as exc:
        print_error(f"selecting architecture: {exc}")
        return EXIT_ERROR
    except EOFError:
        print_error("input closed before the prompt was answered")
        return EXIT_ERROR
    except KeyboardInterrupt:
        console.print()
        console.print("Generation cancelled.")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    raise SystemExit(main())
