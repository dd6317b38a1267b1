"""
Loading and validation of zeta-zero ordinates.

A zero file holds one imaginary part t > 0 per line (the zero ½ + ti),
strictly ascending. Blank lines and '#' comments are ignored. Any other
malformed line fails the whole load.
"""

import math

import numpy as np

from .errors import DomainError, ParseError


def _freeze(values) -> np.ndarray:
    zeros = np.array(values, dtype=np.float64)
    zeros.setflags(write=False)
    return zeros


def _check_ordinate(t: float, previous: float):
    """Return an error message for an invalid ordinate, or None."""
    if not math.isfinite(t):
        return f"zero ordinate {t!r} is not finite"
    if t <= 0.0:
        return f"zero ordinate {t!r} is not positive"
    if previous is not None and t <= previous:
        return f"zero ordinate {t!r} does not exceed the previous one ({previous!r}); zeros must be ascending and distinct"
    return None


def load_zeta_zeros(path) -> np.ndarray:
    """
    Read a zero file completely and return a read-only float64 array.
    The file handle is closed before the array is returned.
    """
    with open(path, "r", encoding="utf-8") as f:
        lines = f.readlines()

    values = []
    previous = None
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        tokens = line.split()
        if len(tokens) != 1:
            raise ParseError(f"expected one number per line, got {line!r}", path, line_number)
        try:
            t = float(tokens[0])
        except ValueError:
            raise ParseError(f"not a number: {tokens[0]!r}", path, line_number) from None
        problem = _check_ordinate(t, previous)
        if problem is not None:
            raise ParseError(problem, path, line_number)
        values.append(t)
        previous = t

    return _freeze(values)


def as_zero_array(values) -> np.ndarray:
    """Validate an in-memory sequence of ordinates with the same rules as the file loader."""
    if isinstance(values, np.ndarray) and values.ndim != 1:
        raise DomainError("zero ordinates must form a one-dimensional sequence")
    previous = None
    checked = []
    for t in values:
        t = float(t)
        problem = _check_ordinate(t, previous)
        if problem is not None:
            raise DomainError(problem)
        checked.append(t)
        previous = t
    return _freeze(checked)


def write_zeta_zeros(path, values, header=None):
    """Write ordinates in the format read by load_zeta_zeros."""
    zeros = as_zero_array(values)
    with open(path, "w", encoding="utf-8") as f:
        if header:
            for line in str(header).splitlines():
                f.write(f"# {line}\n")
        for t in zeros:
            f.write(f"{float(t)!r}\n")
