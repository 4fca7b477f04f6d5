"""Binary and text serialization of curve point arrays.

Binary files are a raw, headerless dump of native-endian float64 ``x, y``
pairs in traversal order.  Readers must know the order (and therefore the
point count) to parse one.
"""

import os
import re
import tempfile
from pathlib import Path

import numpy as np

from pseudohilbert.config import (
    FILENAME_TEMPLATE,
    TEXT_PRECISION,
    TEXT_SUFFIX,
    WRITE_CHUNK,
)
from pseudohilbert.curve import num_points

NATIVE_DTYPE = np.dtype("=f8")
FORMATS = ("binary", "text")

_TEXT_LINE = re.compile(r"^\(([^,()]+),([^,()]+)\)$")


class CurveFormatError(ValueError):
    """Raised when a serialized curve does not match the expected layout."""


def _check_format(fmt):
    if fmt not in FORMATS:
        raise ValueError(f"unknown format {fmt!r} (expected one of {FORMATS})")


def curve_filename(order, fmt="binary"):
    """File name for a curve of ``order``, e.g. ``o03_hilbert``."""
    _check_format(fmt)
    num_points(order)  # validates the order
    name = FILENAME_TEMPLATE.format(order=order)
    if fmt == "text":
        name += TEXT_SUFFIX
    return name


# ── Stream writers ────────────────────────────────────────────────────

def write_binary(points, fp, chunk_size=WRITE_CHUNK):
    """Write points to a binary stream, ``chunk_size`` points per write."""
    data = np.ascontiguousarray(points, dtype=NATIVE_DTYPE)
    for start in range(0, len(data), chunk_size):
        fp.write(data[start:start + chunk_size].tobytes())
        fp.flush()


def write_text(points, fp):
    """Write one ``(x,y)`` line per point with fixed fractional precision."""
    line = f"({{:.{TEXT_PRECISION}f}},{{:.{TEXT_PRECISION}f}})\n"
    for x, y in points:
        fp.write(line.format(x, y))
    fp.flush()


# ── Stream readers ────────────────────────────────────────────────────

def read_binary(fp, order):
    """Read exactly ``4 ** order`` points from a binary stream."""
    expected = num_points(order) * 2 * NATIVE_DTYPE.itemsize
    data = fp.read()
    if len(data) != expected:
        raise CurveFormatError(
            f"order {order} curve needs {expected} bytes, got {len(data)}"
        )
    return np.frombuffer(data, dtype=NATIVE_DTYPE).reshape(-1, 2).astype(np.float64)


def read_text(fp):
    """Parse the text format back into an (n, 2) array."""
    rows = []
    for lineno, raw in enumerate(fp, 1):
        line = raw.strip()
        if not line:
            continue
        m = _TEXT_LINE.match(line)
        if not m:
            raise CurveFormatError(f"line {lineno}: cannot parse {line!r}")
        try:
            rows.append((float(m.group(1)), float(m.group(2))))
        except ValueError:
            raise CurveFormatError(f"line {lineno}: cannot parse {line!r}") from None
    return np.array(rows, dtype=np.float64).reshape(-1, 2)


# ── Files ─────────────────────────────────────────────────────────────

def save_curve(points, order, output_dir, fmt="binary"):
    """Atomically write a curve file into ``output_dir``; return its Path."""
    _check_format(fmt)
    # The file name is the only record of the order, so it must match
    if len(points) != num_points(order):
        raise CurveFormatError(
            f"order {order} curve needs {num_points(order)} points, got {len(points)}"
        )
    path = Path(output_dir) / curve_filename(order, fmt)
    path.parent.mkdir(parents=True, exist_ok=True)
    # Atomic write: write to temp file then rename
    fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        if fmt == "binary":
            with os.fdopen(fd, "wb") as f:
                write_binary(points, f)
        else:
            with os.fdopen(fd, "w") as f:
                write_text(points, f)
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise
    return path


def load_curve(path, order, fmt="binary"):
    """Read a curve file written by save_curve()."""
    _check_format(fmt)
    if fmt == "binary":
        with open(path, "rb") as f:
            return read_binary(f, order)
    with open(path) as f:
        points = read_text(f)
    if len(points) != num_points(order):
        raise CurveFormatError(
            f"order {order} curve needs {num_points(order)} points, got {len(points)}"
        )
    return points
