"""Classifiers that assign an orientation to a phone reading."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Iterable

from .vectors import Orientation, PhoneVector


class Classifier(ABC):
    """A model trained on labelled readings that predicts orientations."""

    @abstractmethod
    def train(self, training_data: Iterable[PhoneVector]) -> None:
        """Train the model on labelled readings."""

    @abstractmethod
    def classify(self, sample: PhoneVector) -> Orientation:
        """Predict the orientation of a reading."""


class NNClassifier(Classifier):
    """Nearest-neighbour classifier using Euclidean distance."""

    def __init__(self) -> None:
        self._training: list[PhoneVector] = []

    def train(self, training_data: Iterable[PhoneVector]) -> None:
        """Store a copy of the labelled readings, replacing any earlier training."""
        self._training = list(training_data)

    def classify(self, sample: PhoneVector) -> Orientation:
        """Return the orientation of the closest training reading.

        The earliest reading wins a tie; with no training data the result is
        ``Orientation.UNKNOWN``.
        """
        best = Orientation.UNKNOWN
        best_distance = sys.float_info.max
        for point in self._training:
            distance = sample.distance(point)
            if distance < best_distance:
                best_distance = distance
                best = point.orientation
        return best