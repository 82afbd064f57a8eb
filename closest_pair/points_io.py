"""
Reading and writing point sets as text.

Two layouts are accepted:

    x0 y0            N
    x1 y1            x0 y0
    ...              x1 y1
                     ...

The left one is plain whitespace-separated coordinate pairs read to end of
input. The right one (``header=True``) starts with the point count, as written
for generated datasets. ``#`` starts a comment that runs to the end of the line.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import IO, Iterator, List, Sequence, Tuple, Union

from .geometry import Point


class PointFormatError(ValueError):
    """Raised when point text cannot be turned into finite coordinate pairs."""


def _tokens(text: str) -> Iterator[Tuple[int, str]]:
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.split("#", 1)[0]
        for tok in line.split():
            yield lineno, tok


def _coordinate(tok: str, lineno: int) -> float:
    try:
        value = float(tok)
    except ValueError:
        raise PointFormatError(f"line {lineno}: not a number: {tok!r}") from None
    if not math.isfinite(value):
        raise PointFormatError(f"line {lineno}: non-finite coordinate: {tok!r}")
    return value


def parse_points(text: str, header: bool = False) -> List[Point]:
    """Parse point text into a list of ``(x, y)`` tuples."""
    toks = list(_tokens(text))

    expected = None
    if header:
        if not toks:
            raise PointFormatError("missing point count")
        lineno, tok = toks[0]
        try:
            expected = int(tok)
        except ValueError:
            raise PointFormatError(f"line {lineno}: bad point count: {tok!r}") from None
        if expected < 0:
            raise PointFormatError(f"line {lineno}: negative point count: {expected}")
        toks = toks[1:]

    if len(toks) % 2 != 0:
        lineno, tok = toks[-1]
        raise PointFormatError(f"line {lineno}: incomplete coordinate pair ending at {tok!r}")

    points: List[Point] = []
    for i in range(0, len(toks), 2):
        (lx, tx), (ly, ty) = toks[i], toks[i + 1]
        points.append((_coordinate(tx, lx), _coordinate(ty, ly)))

    if expected is not None and expected != len(points):
        raise PointFormatError(f"header says {expected} points, found {len(points)}")
    return points


def load_points(source: Union[str, Path, IO[str]], header: bool = False) -> List[Point]:
    """Read points from a path or an open text stream."""
    try:
        if isinstance(source, (str, Path)):
            text = Path(source).read_text(encoding="utf-8")
        else:
            text = source.read()
    except UnicodeDecodeError as e:
        raise PointFormatError(f"not UTF-8 text: {e}") from None
    return parse_points(text, header=header)


def write_points(points: Sequence[Sequence[float]], path: Path, header: bool = True) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        if header:
            f.write(f"{len(points)}\n")
        for x, y in points:
            # Full precision so a reloaded set has exactly the same distances.
            f.write(f"{x:.17g} {y:.17g}\n")
