"""Interactive and batch front ends for the calculator."""
from pathlib import Path
from typing import List, TextIO

from pydantic import BaseModel, ConfigDict, Field

from expression_evaluator.common.calculator import Calculator
from expression_evaluator.common.config import settings
from expression_evaluator.common.logger import logger
from expression_evaluator.common.models import EvaluationResult


class ExpressionShell(BaseModel):
    """
    Read expressions line by line, evaluate them and report results or errors.

    Modes:
        - Interactive: prompt, read one line, print its result, repeat until the exit command
        - Batch: evaluate every non-empty line of a file and write a results file
    """

    # Make the Pydantic instance immutable (read-only)
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(default=settings.prompt, description="Prompt printed before each line")
    exit_command: str = Field(default=settings.exit_command, description="Line that stops the loop")
    show_postfix: bool = Field(default=False, description="Also print the postfix form of each expression")

    def evaluate(self, expr: str, line_number: int) -> EvaluationResult:
        """
        Evaluate one expression and log its outcome.

        :param str expr: Arithmetic expression
        :param int line_number: Position of the expression in the input, starting at 1

        :return: Evaluation result or error
        :rtype: EvaluationResult
        """
        logger.info(f"🧮🏁 Evaluating line {line_number}: {expr}")
        result = Calculator.evaluate_line(expr)
        if result.ok:
            logger.info(f"🧮✅ Line {line_number} = {result.result}")
        else:
            logger.error(
                f"🧮❌ Line {line_number} failed: {result.error}\n"
                f"Invalid arithmetic expression, could not evaluate: {expr!r}"
            )
        return result

    def _write_result(self, result: EvaluationResult, out: TextIO) -> None:
        if self.show_postfix and result.postfix is not None:
            out.write(f"Postfix: {result.postfix}\n")
        out.write(f"{result.format()}\n")
        out.flush()

    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        """
        Run the interactive loop until the exit command or the end of input.

        Blank lines are skipped. Failures are printed and the loop goes on.
        Results are not kept once printed.

        :param TextIO stdin: Stream the expressions are read from
        :param TextIO stdout: Stream prompts and results are written to

        :return: Number of expressions evaluated
        :rtype: int
        """
        line_number = 0
        while True:
            stdout.write(self.prompt)
            stdout.flush()
            line = stdin.readline()
            # readline() returns "" only at end of input
            if not line:
                stdout.write("\n")
                break
            expr = line.strip()
            if expr == self.exit_command:
                break
            if not expr:
                continue

            line_number += 1
            self._write_result(self.evaluate(expr, line_number), stdout)
        return line_number

    def run_file(self, input_file: Path, output_file: Path) -> List[EvaluationResult]:
        """
        Evaluate every non-empty line of ``input_file`` and write results to ``output_file``.

        Each result is written as soon as it is computed.

        :param Path input_file: Text file with one expression per line
        :param Path output_file: Path where results will be written

        :return: Results in input order
        :rtype: List[EvaluationResult]
        """
        # Remove empty lines
        lines = [line.strip() for line in input_file.read_text(encoding="utf-8").splitlines() if line.strip()]
        logger.info(f"📄 {len(lines)} expression(s) read from {input_file}")

        results: List[EvaluationResult] = []
        with output_file.open("w", encoding="utf-8") as f_out:
            for line_number, expr in enumerate(lines, start=1):
                result = self.evaluate(expr, line_number)
                results.append(result)
                self._write_result(result, f_out)

        logger.info(f"📄✅ Results written to {output_file}")
        return results
