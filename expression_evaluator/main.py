"""
Command-line entrypoint.

This script:
- Starts an interactive shell when no file is given
- Otherwise evaluates every line of the given file and writes a results file next to it
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional

from pydantic import BaseModel, FilePath, ValidationError

from expression_evaluator.common.config import LogLevel, settings
from expression_evaluator.common.logger import set_level
from expression_evaluator.shell.repl import ExpressionShell


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : Optional[FilePath]
        Path to the file containing arithmetic expressions, None for the interactive shell.
    show_postfix : bool
        Print the postfix form of each expression.
    log_level : str
        Level of the application logger.
    """

    file_path: Optional[FilePath] = None
    show_postfix: bool = False
    log_level: LogLevel = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, defaults to ``sys.argv[1:]``
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Evaluate integer arithmetic expressions such as '( 2 + 3 ) * 4'"
    )

    parser.add_argument(
        "file_path",
        nargs="?",
        default=None,
        help="Path to a file with one expression per line (interactive shell if omitted)",
    )
    parser.add_argument(
        "--show-postfix",
        action="store_true",
        help="Print the postfix (Reverse Polish) form of each expression",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            file_path=args.file_path,
            show_postfix=args.show_postfix,
            log_level=args.log_level.upper(),
        )
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the results file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations.txt
    output: resources/operations_txt_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffix_safe = "_".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{input_path.stem}{suffix_safe}_results.txt")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the shell or the batch evaluation.

    :return: Exit status, 1 if any expression failed in batch mode
    """
    cli_args = parse_args(argv)
    set_level(cli_args.log_level)
    shell = ExpressionShell(show_postfix=cli_args.show_postfix)

    if cli_args.file_path is None:
        shell.run(sys.stdin, sys.stdout)
        return 0

    input_path: Path = Path(cli_args.file_path)
    output_path: Path = build_output_path(input_path)
    results = shell.run_file(input_path, output_path)
    print(f"Results written to {output_path}")
    return 0 if all(result.ok for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
