"""
Command-line interface for cefbundle.

This module provides the `cefbundle` CLI tool: build a CEF example with cargo
and package it, together with the CEF runtime, into a standalone directory.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from cefbundle import __version__
from cefbundle.build import BundleOrchestrator
from cefbundle.build.build_utils import BundleSummaryPrinter
from cefbundle.cli_utils import ErrorFormatter, PathValidator
from cefbundle.config import (
    BOOLEAN_OPTIONS,
    OPTION_ALIASES,
    BundleIniConfig,
    ResolvedConfig,
    parse_bool,
    resolve_config,
)
from cefbundle.errors import BundleError, ConfigurationError

EPILOG = """\
Examples:
  cefbundle --example cefsimple
  cefbundle -e cefsimple -p debug -s false
  cefbundle -ExampleName cefsimple -MinLocales false
"""

OPTION_HELP = {
    "example": "Name of the example to build (required)",
    "profile": "Build profile (default: release)",
    "cargo_target_dir": "Path to cargo target directory (default: target)",
    "final_output_dir": "Path for final output (default: ../../cef)",
    "skip_pdb": "Skip PDB files to reduce size (default: true)",
    "min_locales": "Only include en-US locale (default: true)",
    "include_dx_compiler": "Include dxcompiler.dll and dxil.dll (default: false)",
    "use_upx": "Compress binaries with UPX if available (default: false)",
}


class BundleArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit status 1."""

    def error(self, message: str) -> None:  # type: ignore[override]
        self.print_usage(sys.stderr)
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)


def _bool_option(value: str) -> bool:
    try:
        return parse_bool(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def create_parser() -> BundleArgumentParser:
    """Build the argument parser with every accepted option spelling."""
    parser = BundleArgumentParser(
        prog="cefbundle",
        description="Build a CEF example and package it with the CEF runtime",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cefbundle {__version__}",
    )

    for name, flags in OPTION_ALIASES.items():
        if name in BOOLEAN_OPTIONS:
            parser.add_argument(
                *flags,
                dest=name,
                nargs="?",
                const=True,
                default=None,
                type=_bool_option,
                metavar="BOOL",
                help=OPTION_HELP[name],
            )
        else:
            parser.add_argument(*flags, dest=name, default=None, help=OPTION_HELP[name])

    parser.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        help="Directory relative paths are resolved against (default: current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )
    return parser


def build_config(parsed_args: argparse.Namespace) -> ResolvedConfig:
    """Resolve parsed arguments and cefbundle.ini into a ResolvedConfig.

    Raises:
        ConfigurationError: If the configuration is incomplete or invalid
    """
    project_dir = (parsed_args.project_dir or Path.cwd()).resolve()
    cli_values: Dict[str, Any] = {name: getattr(parsed_args, name) for name in OPTION_ALIASES}
    ini_config = BundleIniConfig.load(project_dir)
    return resolve_config(
        cli_values, project_dir=project_dir, ini_config=ini_config, verbose=parsed_args.verbose
    )


def _print_configured_examples(project_dir: Optional[Path]) -> None:
    try:
        ini_config = BundleIniConfig.load((project_dir or Path.cwd()).resolve())
    except ConfigurationError:
        return
    if ini_config is None:
        return
    examples = ini_config.get_examples()
    if examples:
        print(f"Examples configured in cefbundle.ini: {', '.join(examples)}", file=sys.stderr)


def bundle_command(config: ResolvedConfig) -> None:
    """Build the example and assemble its bundle.

    Examples:
        cefbundle -e cefsimple                     # Release build into ../../cef
        cefbundle -e cefsimple -p dev              # Debug build
        cefbundle -e cefsimple -m false -u         # All locales, compress with UPX
    """
    print(f"cefbundle v{__version__}")
    print()

    try:
        orchestrator = BundleOrchestrator(verbose=config.verbose)
        result = orchestrator.run(config)

        BundleSummaryPrinter.print_summary(result, verbose=config.verbose)
        ErrorFormatter.print_success(
            f"Build and packaging complete. Output is in {result.final_output_dir}"
        )
        sys.exit(0)

    except BundleError as e:
        ErrorFormatter.handle_bundle_error(e)
    except PermissionError as e:
        ErrorFormatter.handle_permission_error(e)
    except KeyboardInterrupt:
        ErrorFormatter.handle_keyboard_interrupt()
    except Exception as e:
        ErrorFormatter.handle_unexpected_error(e, config.verbose)


def main(argv: Optional[List[str]] = None) -> None:
    """cefbundle - package CEF examples into standalone directories."""
    raw_args = sys.argv[1:] if argv is None else argv
    parser = create_parser()
    parsed_args = parser.parse_args(raw_args)

    if parsed_args.verbose:
        print(f"Raw arguments: {raw_args}")

    if parsed_args.project_dir is not None:
        PathValidator.validate_project_dir(parsed_args.project_dir)

    try:
        config = build_config(parsed_args)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        if parsed_args.example is None:
            _print_configured_examples(parsed_args.project_dir)
        parser.print_help(sys.stderr)
        sys.exit(1)

    bundle_command(config)


if __name__ == "__main__":
    main()
