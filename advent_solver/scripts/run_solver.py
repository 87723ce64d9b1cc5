"""Entrypoint for solving one puzzle or benchmarking all of them."""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, List, Optional, TextIO

from advent_solver.scripts.utils import format_duration, input_path, open_input
from advent_solver.src.problems import PROBLEMS, Problem, Solver, get_problem
from advent_solver.src.utils.config_loader import load_runner_config
from advent_solver.src.utils.logger import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the Advent of Code puzzle solvers")
    parser.add_argument("problem", nargs="?", help="1-based problem number; omit to run every problem")
    parser.add_argument("input", nargs="?", help="Input file, or '-' for stdin (default: <inputs-dir>/NN)")
    parser.add_argument("--config", type=Path, default=None, help="YAML or JSON runner configuration")
    parser.add_argument("--inputs-dir", default=None, help="Directory holding the default puzzle inputs")
    parser.add_argument("--benchmark", action="store_true", help="Time every part (also enabled by $BENCHMARK)")
    parser.add_argument("--samples", type=int, default=None, help="Timed runs per part in benchmark mode")
    return parser


def _load(number: int, problem: Problem, stream: TextIO, logger: logging.Logger) -> Optional[Any]:
    try:
        return problem.load_input(stream)
    except Exception as exc:
        logger.error("%02d: Failed to load input: %s", number, exc)
        return None


def run_problem(number: int, problem: Problem, stream: TextIO, logger: logging.Logger) -> int:
    """Solve both parts of ``problem`` and print the answers; return an exit code."""
    data = _load(number, problem, stream, logger)
    if data is None:
        return 1
    for part, solver in problem.parts():
        try:
            answer = solver(data)
        except Exception as exc:
            logger.error("%02d: Part %d failed: %s", number, part, exc)
            continue
        print(f"{number:02}p{part}: {answer}")
    return 0


def benchmark_part(solver: Solver, data: Any, samples: int) -> float:
    """Return the mean wall time of ``samples`` runs of ``solver`` in seconds."""
    total = 0.0
    for _ in range(samples):
        start = time.perf_counter()
        solver(data)
        total += time.perf_counter() - start
    return total / samples


def run_all(inputs_dir: str | Path, benchmark: bool, samples: int, logger: logging.Logger) -> int:
    """Run every registered problem against its default input file."""
    begin = time.perf_counter()
    results: List[str] = []
    for number, problem in enumerate(PROBLEMS, start=1):
        try:
            stream = open_input(input_path(inputs_dir, number))
        except OSError as exc:
            logger.error("%02d: Failed to open input: %s", number, exc)
            continue
        data = _load(number, problem, stream, logger)
        if data is None:
            continue

        line = f"{number:02}: "
        for part, solver in problem.parts():
            try:
                if benchmark:
                    avg = benchmark_part(solver, data, samples)
                    line += f"p{part}={format_duration(avg):<12}  "
                else:
                    solver(data)
            except Exception as exc:
                logger.error("%02d: Part %d failed: %s", number, part, exc)
        if benchmark:
            results.append(line.rstrip())

    elapsed = time.perf_counter() - begin
    if benchmark:
        for line in results:
            print(line)
    else:
        print(f"Solved {len(PROBLEMS)} problems in {int(elapsed * 1000)} ms")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_runner_config(args.config)
    logger = get_logger("advent_solver", config.get("log_file"), config.get("log_level", "INFO"))
    inputs_dir = args.inputs_dir if args.inputs_dir is not None else config["inputs_dir"]

    if args.problem is None:
        benchmark = args.benchmark or os.environ.get("BENCHMARK") is not None
        samples = args.samples if args.samples is not None else config["benchmark_samples"]
        if benchmark and samples <= 0:
            logger.error("benchmark samples must be positive, got %d", samples)
            return 1
        return run_all(inputs_dir, benchmark, samples, logger)

    try:
        number = int(args.problem)
        if number < 0:
            raise ValueError(args.problem)
    except ValueError:
        logger.error("unable to parse problem number")
        return 1
    try:
        problem = get_problem(number)
    except ValueError as exc:
        logger.error("error: %s", exc)
        return 1
    except KeyError:
        logger.error("invalid problem number")
        return 1

    source = args.input if args.input is not None else input_path(inputs_dir, number)
    try:
        stream = open_input(source)
    except OSError as exc:
        logger.error("%02d: Failed to open input: %s", number, exc)
        return 1
    return run_problem(number, problem, stream, logger)


if __name__ == "__main__":
    sys.exit(main())
