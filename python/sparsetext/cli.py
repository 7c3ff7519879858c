"""Command-line front end: load two matrices, combine them, save the result.

Examples
--------
Non-interactive::

    sparsetext add a.txt b.txt -o result.txt

Interactive, picking inputs from a directory of ``.txt`` files::

    sparsetext --interactive --input-dir sample_inputs --output-dir sample_results
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from . import _runtime
from .errors import InvalidSelection, SparseTextError
from .io import dumps, load, save
from .sparse import SparseMatrix

logger = logging.getLogger(__name__)

OPERATIONS = {
    "add": SparseMatrix.add,
    "subtract": SparseMatrix.subtract,
    "multiply": SparseMatrix.multiply,
}


def normalize_operation(name: str) -> str:
    op = str(name).strip().lower()
    if op not in OPERATIONS:
        raise InvalidSelection(
            f"Invalid operation {name!r}; choose one of {', '.join(OPERATIONS)}."
        )
    return op


def dispatch(operation: str, a: SparseMatrix, b: SparseMatrix) -> SparseMatrix:
    """Apply the named operation to ``a`` and ``b``."""
    op = normalize_operation(operation)
    logger.debug("dispatching %s on %r and %r", op, a, b)
    return OPERATIONS[op](a, b)


def run(
    operation: str,
    path_a,
    path_b,
    output_path=None,
) -> SparseMatrix:
    """Load both inputs, apply ``operation`` and optionally save the result."""
    op = normalize_operation(operation)
    a = load(path_a)
    b = load(path_b)
    result = dispatch(op, a, b)
    if output_path is not None:
        save(result, output_path)
    return result


def list_matrix_files(directory) -> List[Path]:
    """Return the ``.txt`` files of ``directory``, sorted by name."""
    return sorted(p for p in Path(directory).iterdir() if p.is_file() and p.suffix == ".txt")


def select_file(choice: str, files: List[Path]) -> Path:
    """Map a 1-based menu choice to one of ``files``."""
    try:
        index = int(str(choice).strip()) - 1
    except ValueError:
        raise InvalidSelection("Invalid file selection.") from None
    if index < 0 or index >= len(files):
        raise InvalidSelection("Invalid file selection.")
    return files[index]


def _prompt_file(label: str, files: List[Path], ask: Callable[[str], str]) -> Path:
    print(f"\nAvailable {label} files:")
    for i, path in enumerate(files, start=1):
        print(f"{i}) {path.name}")
    return select_file(ask(f"Select a {label} file by number: "), files)


def run_interactive(
    input_dir, output_dir, ask: Callable[[str], str] = input
) -> Path:
    """Prompt for the operation, both inputs and an output name, then run."""
    op = normalize_operation(ask("Choose operation (add/subtract/multiply): "))
    files = list_matrix_files(input_dir)
    if not files:
        raise InvalidSelection(f"No .txt matrix files found in {input_dir}.")
    first = _prompt_file("first matrix", files, ask)
    second = _prompt_file("second matrix", files, ask)
    name = ask("Enter output file name (e.g. result_add.txt): ").strip()
    if not name:
        raise InvalidSelection("Output file name must not be empty.")
    output_path = Path(output_dir) / name
    run(op, first, second, output_path)
    print(f"\nOperation completed. Result saved to: {output_path}")
    return output_path


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="sparsetext", description="Add, subtract or multiply sparse matrix files."
    )
    ap.add_argument("operation", nargs="?", help="add, subtract or multiply")
    ap.add_argument("first", nargs="?", help="path of the left matrix")
    ap.add_argument("second", nargs="?", help="path of the right matrix")
    ap.add_argument("-o", "--output", default=None, help="output path (default: stdout)")
    ap.add_argument("--interactive", action="store_true", help="pick inputs from a menu")
    ap.add_argument("--input-dir", default="sample_inputs")
    ap.add_argument("--output-dir", default="sample_results")
    ap.add_argument("--kernel", choices=_runtime.KERNELS, default=None)
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    _runtime.configure_logging("DEBUG" if args.verbose else None)
    if args.kernel:
        _runtime.set_matmul_kernel(args.kernel)

    try:
        if args.interactive:
            run_interactive(args.input_dir, args.output_dir)
            return 0
        if not (args.operation and args.first and args.second):
            ap.error("operation, first and second are required unless --interactive is given")
        result = run(args.operation, args.first, args.second, args.output)
        if args.output is None:
            print(dumps(result))
        else:
            print(f"Operation completed. Result saved to: {args.output}")
    except (SparseTextError, OSError, EOFError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
