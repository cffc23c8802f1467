"""
Command-line interface for scriptreflect.

Prints the executable lines, branches and function names a coverage
tool needs for a JavaScript file.
"""

import argparse
import logging
import os
import sys
from typing import Optional, List

from scriptreflect import __version__
from scriptreflect.config import load_reflect_config, create_default_config
from scriptreflect.core.script import ReflectedScript
from scriptreflect.formatters import get_formatter


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="scriptreflect",
        description="Static coverage facts (executable lines, branches, functions) for JavaScript.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  scriptreflect analyze app.js                  # Analyze a script
  scriptreflect analyze app.js --format json    # Output as JSON
  scriptreflect analyze lib.mjs --module        # Parse as an ES module
  scriptreflect init                            # Create config file
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze a script file")
    analyze_parser.add_argument(
        "file",
        help="JavaScript file to analyze",
    )
    analyze_parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
    )
    analyze_parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        help="Output format (default: text)",
    )
    analyze_parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)",
    )
    analyze_parser.add_argument(
        "--module",
        action="store_true",
        help="Parse the file as an ES module",
    )
    analyze_parser.add_argument(
        "--tolerant",
        action="store_true",
        help="Keep parsing past recoverable syntax errors",
    )
    analyze_parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort executable lines",
    )
    analyze_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )
    analyze_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    # Init command
    init_parser = subparsers.add_parser("init", help="Create a configuration file")
    init_parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Overwrite existing config file",
    )

    return parser


def configure_logging(verbose: bool) -> None:
    """Route log records to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def cmd_analyze(args: argparse.Namespace) -> int:
    """Execute the analyze command."""
    config = load_reflect_config(args.config, start_dir=os.path.dirname(os.path.abspath(args.file)))

    # Apply command-line overrides
    if args.module:
        config.source_type = "module"
    if args.tolerant:
        config.tolerant = True
    if args.format:
        config.output.format = args.format
    if args.output:
        config.output.output_file = args.output
    if args.sort:
        config.output.sort_lines = True
    if args.verbose:
        config.output.verbose = True
    if args.no_color:
        config.output.color = False

    script = ReflectedScript(args.file, config)
    result = script.result()

    if config.output.format == "json":
        formatter = get_formatter("json", sort_lines=config.output.sort_lines)
    else:
        formatter = get_formatter(
            "text",
            use_color=config.output.color and not config.output.output_file,
            verbose=config.output.verbose,
            sort_lines=config.output.sort_lines,
        )

    output = formatter.format_result(result, script.path, script.n_lines)

    # Write output
    if config.output.output_file:
        with open(config.output.output_file, 'w', encoding='utf-8') as f:
            f.write(output)
            f.write("\n")
        if config.output.format == "text":
            print(f"Results written to {config.output.output_file}")
    else:
        print(output)

    return 0


def cmd_init(args: argparse.Namespace) -> int:
    """Execute the init command."""
    config_file = ".scriptreflect.yaml"

    if os.path.exists(config_file) and not args.force:
        print(f"Configuration file {config_file} already exists.")
        print("Use --force to overwrite.")
        return 1

    content = create_default_config()

    with open(config_file, 'w', encoding='utf-8') as f:
        f.write(content)

    print(f"Created configuration file: {config_file}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(getattr(args, "verbose", False))

    try:
        if args.command == "analyze":
            return cmd_analyze(args)
        elif args.command == "init":
            return cmd_init(args)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if os.environ.get("DEBUG"):
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
