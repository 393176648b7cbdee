"""Three-axis phone readings labelled with an orientation, and their text file format."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Union

PathType = Union[str, "os.PathLike[str]"]


class Orientation(IntEnum):
    """Orientation of a phone; the integer values are those stored in data files."""

    UNKNOWN = 0
    FACE_UP = 1
    FACE_DOWN = 2
    PORTRAIT_UP = 3
    PORTRAIT_DOWN = 4
    LANDSCAPE_LEFT = 5
    LANDSCAPE_RIGHT = 6

    def label(self) -> str:
        """Return the human-readable name written to result files."""
        return _LABELS[self]


_LABELS = {
    Orientation.UNKNOWN: "unknown",
    Orientation.FACE_UP: "faceup",
    Orientation.FACE_DOWN: "facedown",
    Orientation.PORTRAIT_UP: "portrait",
    Orientation.PORTRAIT_DOWN: "portrait upside down",
    Orientation.LANDSCAPE_LEFT: "landscapeleft",
    Orientation.LANDSCAPE_RIGHT: "landscapeRight",
}


@dataclass
class PhoneVector:
    """An (x, y, z) sensor reading with the orientation it belongs to."""

    x: float
    y: float
    z: float
    orientation: Orientation = Orientation.UNKNOWN

    def distance(self, other: PhoneVector) -> float:
        """Euclidean distance between the two readings."""
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def to_line(self) -> str:
        """Format as a result line: ``x,y,z,orientation,label``."""
        return (
            f"{self.x:g},{self.y:g},{self.z:g},"
            f"{int(self.orientation)},{self.orientation.label()}"
        )


def _parse_line(line: str, orientation_known: bool, number: int) -> PhoneVector:
    fields = line.split(",")
    needed = 4 if orientation_known else 3
    if len(fields) < needed:
        raise ValueError(f"line {number}: expected at least {needed} comma-separated fields")
    try:
        x, y, z = (float(field) for field in fields[:3])
    except ValueError as error:
        raise ValueError(f"line {number}: invalid coordinate: {error}") from None
    orientation = Orientation.UNKNOWN
    if orientation_known:
        try:
            orientation = Orientation(int(fields[3]))
        except ValueError:
            raise ValueError(f"line {number}: invalid orientation {fields[3].strip()!r}") from None
    return PhoneVector(x, y, z, orientation)


def read_vectors(path: PathType, orientation_known: bool) -> list[PhoneVector]:
    """Read readings from a comma-separated file.

    Each line holds ``x,y,z`` and, when ``orientation_known`` is true, an
    integer orientation as the fourth field. Raises ``OSError`` if the file
    cannot be opened and ``ValueError`` on a malformed line.
    """
    with open(path, encoding="utf-8") as handle:
        return [
            _parse_line(line.rstrip("\r\n"), orientation_known, number)
            for number, line in enumerate(handle, start=1)
        ]


def write_vectors(path: PathType, vectors: Iterable[PhoneVector]) -> None:
    """Write one result line per reading to ``path``."""
    with open(path, "w", encoding="utf-8") as handle:
        for vector in vectors:
            handle.write(vector.to_line() + "\n")