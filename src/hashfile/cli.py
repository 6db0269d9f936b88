#!/usr/bin/env python3
"""
hashfile CLI — Command line interface for file hashing, verification and duplicate detection.
Argument parsing and printing only; all work is delegated to HashCommand.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

from rich.console import Console
from rich.text import Text

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from hashfile import __version__
from hashfile.core.models import HashParams, DuplicateGroup
from hashfile.commands import HashCommand
from hashfile.services.checksum_service import ChecksumService
from hashfile.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    FORMAT_ALIASES, FORMAT_CHOICES, FORMAT_HELP_TEXT,
    EPILOG_TEXT
)

STATUS_STYLES = {"OK": "green", "FAILED": "red", "ERROR": "red"}


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        # Colors only when writing to a terminal; pipes and files get plain text
        self.console = Console(highlight=False)
        self.err_console = Console(stderr=True, highlight=False)

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="hashfile",
            description="hashfile — Fast CLI tool to calculate and verify cryptographic hashes",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "paths",
            nargs="*",
            default=[],
            help="Files or directories to hash ('-' reads standard input)"
        )

        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="sha256",
            type=str.lower,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--verify", "-v",
            default=None,
            type=str,
            metavar="HASH|FILE",
            help="Verify files against a hash value or a checksum file"
        )
        parser.add_argument(
            "--recursive", "-r",
            action="store_true",
            help="Recursive directory processing"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Output only hash values and suppress non-essential output"
        )
        parser.add_argument(
            "--format", "-f",
            choices=FORMAT_CHOICES,
            default="plain",
            type=str.lower,
            dest="output_format",
            help=FORMAT_HELP_TEXT
        )
        parser.add_argument(
            "--duplicates",
            action="store_true",
            help="Find duplicate files instead of printing hashes"
        )
        parser.add_argument(
            "--stdin",
            action="store_true",
            dest="read_stdin",
            help="Read the list of files to hash from stdin (one path per line)"
        )
        parser.add_argument(
            "--jobs", "-j",
            default=None,
            type=int,
            metavar="N",
            dest="workers",
            help="Worker threads for --duplicates. Default: number of CPUs"
        )
        parser.add_argument(
            "--debug",
            action="store_true",
            help="Show debug log records on stderr"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.verify is not None and args.duplicates:
            self.error_exit("--verify cannot be combined with --duplicates")

        if args.verify is not None and not args.paths:
            self.error_exit("No files specified for verification")

        if args.read_stdin and args.verify is not None:
            self.warning("--stdin has no effect with --verify: verifying the paths on the command line")
        elif args.read_stdin and args.paths:
            self.warning("--stdin given: ignoring paths on the command line")

        if not args.read_stdin and not args.paths:
            self.error_exit("No input files. Pass paths or use --stdin to read them from stdin.")

        if args.workers is not None and args.workers < 1:
            self.error_exit("--jobs must be at least 1")

        if args.paths.count("-") > 1:
            self.error_exit("Standard input ('-') can only be given once")

    def create_params(self, args: argparse.Namespace) -> HashParams:
        """Create HashParams from CLI arguments."""
        read_stdin = args.read_stdin and args.verify is None
        try:
            return HashParams(
                paths=[] if read_stdin else list(args.paths),
                algorithm=ALGORITHM_ALIASES[args.algorithm],
                recursive=args.recursive,
                read_stdin=read_stdin,
                output_format=FORMAT_ALIASES[args.output_format],
                quiet=args.quiet,
                verify=args.verify,
                duplicates=args.duplicates,
                workers=args.workers,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def on_skip(self, path: str, reason: str) -> None:
        """Scanner callback for inputs that are not hashed."""
        self.warning(f"{path}: {reason}")

    def run_hash(self, command: HashCommand) -> int:
        """Print one line per file. Returns 1 if any file could not be read."""
        params = command.params
        failures = 0
        for result in command.hash_files(command.collect_paths(on_skip=self.on_skip)):
            if not result.ok:
                failures += 1
                self.err_console.print(Text.assemble(f"{result.path}: ", (result.error, "red")), soft_wrap=True)
                continue
            if params.quiet:
                print(result.digest)
            else:
                print(ChecksumService.format_line(
                    result.digest, result.path, params.algorithm, params.output_format))
        return 1 if failures else 0

    def run_verify(self, command: HashCommand) -> int:
        """Print OK/FAILED/ERROR per file. Returns 1 unless every file verified."""
        all_ok = True
        try:
            for result in command.verify_files():
                line = Text.assemble(f"{result.path}: ", (result.status, STATUS_STYLES[result.status]))
                if result.error is not None:
                    line.append(f" - {result.error}")
                self.console.print(line, soft_wrap=True)
                all_ok = all_ok and result.matched
        except (OSError, UnicodeDecodeError) as e:
            self.error_exit(f"Cannot read checksum file {command.params.verify}: {e}")
        return 0 if all_ok else 1

    def run_duplicates(self, command: HashCommand) -> int:
        """Find and print duplicate groups."""
        paths = command.collect_paths(on_skip=self.on_skip)
        if self.verbose:
            print(f"Hashing {len(paths)} files ({command.params.algorithm.display_name})...",
                  file=sys.stderr)

        groups, skipped = command.find_duplicates(paths)
        for path in skipped:
            self.warning(f"Could not hash {path}, left out of duplicate detection")

        self.output_groups(groups)
        return 0

    def output_groups(self, groups: List[DuplicateGroup]) -> None:
        """Output duplicate groups; the group header is yellow on a terminal."""
        if not groups:
            if not self.quiet:
                print("No duplicate files found.")
            return

        if not self.quiet:
            total_files = sum(g.duplicate_count for g in groups)
            print(f"Found {len(groups)} duplicate groups ({total_files} files)")

        for group in groups:
            self.console.print(Text.assemble("\n", ("Duplicate files:", "yellow"), f" ({group.digest})"),
                               soft_wrap=True)
            for path in group.paths:
                print(f"  {path}")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point. Returns the process exit code."""
        args = self.parse_args(argv)
        self.quiet = args.quiet
        self.verbose = args.debug

        if args.debug:
            logging.getLogger().setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)
        command = HashCommand(params)

        if params.mode == "verify":
            code = self.run_verify(command)
        elif params.mode == "duplicates":
            code = self.run_duplicates(command)
        else:
            code = self.run_hash(command)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)
        return code


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        sys.exit(app.run())
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
