"""Text format for sparse matrices.

A matrix file holds two header lines and one line per non-zero entry::

    rows=3
    cols=4
    (0, 1, 5)
    (2, 3, -7)

Headers may appear anywhere, blank lines are ignored, and whitespace around
each line and around each entry field is tolerated. Anything else is
rejected with :class:`~sparsetext.errors.MalformedInput`; parsing stops at the
first bad line and no partial matrix is returned.
"""

import logging
import re
from pathlib import Path

from .errors import MalformedInput
from .sparse.matrix import SparseMatrix

logger = logging.getLogger(__name__)

_ENTRY = re.compile(r"^\(\s*(-?\d+)\s*,\s*(-?\d+)\s*,\s*(-?\d+)\s*\)$")
_HEADER = re.compile(r"^(rows|cols)=\s*(\d+)$")


def parse(lines):
    """Build a :class:`SparseMatrix` from an iterable of text lines.

    Parameters
    ----------
    lines : iterable of str
        Lines of matrix text, with or without trailing newlines.

    Returns
    -------
    SparseMatrix

    Raises
    ------
    MalformedInput
        On the first line that is neither blank, a header, nor an entry.
    """
    matrix = SparseMatrix()
    lineno = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith(("rows=", "cols=")):
            m = _HEADER.match(line)
            if m is None:
                logger.debug("bad header on line %d: %r", lineno, line)
                raise MalformedInput(lineno, line)
            if m.group(1) == "rows":
                matrix.rows = int(m.group(2))
            else:
                matrix.cols = int(m.group(2))
            continue
        m = _ENTRY.match(line)
        if m is None:
            logger.debug("bad entry on line %d: %r", lineno, line)
            raise MalformedInput(lineno, line)
        r, c, v = (int(g) for g in m.groups())
        matrix.set_element(r, c, v)
    logger.debug("parsed %d lines -> %r", lineno, matrix)
    return matrix


def loads(text):
    """Parse matrix text held in a string."""
    return parse(text.splitlines())


def load(path):
    """Read and parse a UTF-8 matrix file.

    I/O errors propagate unchanged; bytes that are not valid UTF-8 raise
    :class:`MalformedInput`.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            matrix = parse(fh)
    except UnicodeDecodeError as exc:
        logger.debug("%s is not valid UTF-8: %s", path, exc)
        raise MalformedInput() from exc
    logger.debug("loaded %s", path)
    return matrix


def dumps(matrix, sort=False):
    """Serialize ``matrix`` to text.

    Entries follow the mapping's iteration order unless ``sort`` is True, in
    which case they are ordered by ``(row, col)``. The result has no trailing
    newline.
    """
    items = matrix.items()
    if sort:
        items = sorted(items)
    lines = [f"rows={matrix.rows}", f"cols={matrix.cols}"]
    lines.extend(f"({r}, {c}, {v})" for (r, c), v in items)
    return "\n".join(lines)


def save(matrix, path, sort=False):
    """Write ``dumps(matrix)`` to ``path``, overwriting any existing file."""
    path = Path(path)
    path.write_text(dumps(matrix, sort=sort), encoding="utf-8")
    logger.debug("saved %r to %s", matrix, path)
