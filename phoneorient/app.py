"""Interactive menu for classifying phone readings."""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import Container, TextIO

from .classifiers import Classifier, NNClassifier
from .vectors import PhoneVector, read_vectors, write_vectors

TRAINING_FILE = "training.txt"


class AppController:
    """Menu-driven front end reading whitespace-separated answers from a stream."""

    def __init__(
        self,
        classifier: Classifier,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self._classifier = classifier
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._pending: list[str] = []

    def run(self) -> None:
        """Show the main menu until the user chooses 0 or input runs out."""
        try:
            while True:
                choice = self._main_menu()
                if choice == 0:
                    self._write("Exiting program.\n")
                    return
                self._handle(choice)
        except EOFError:
            return

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _next_token(self) -> str:
        while not self._pending:
            line = self._in.readline()
            if not line:
                raise EOFError("input exhausted")
            self._pending = line.split()
        return self._pending.pop(0)

    def _discard_line(self) -> None:
        self._pending.clear()

    def _read_choice(self, valid: Container[int], retry_prompt: str) -> int:
        while True:
            token = self._next_token()
            try:
                choice = int(token)
            except ValueError:
                choice = None
            if choice is not None and choice in valid:
                return choice
            self._discard_line()
            self._write(retry_prompt)

    def _read_number(self, prompt: str) -> float:
        self._write(prompt)
        while True:
            try:
                return float(self._next_token())
            except ValueError:
                self._discard_line()
                self._write("Invalid number. " + prompt)

    def _read_string(self, prompt: str) -> str:
        self._write(prompt)
        return self._next_token()

    def _main_menu(self) -> int:
        self._write(
            "\nChoose classifier (or 0 to exit):\n"
            "1. NNClassifier\n"
            "2. AnotherClassifier\n"
            "3. KNNClassifier\n"
            "Enter choice: "
        )
        return self._read_choice(range(0, 4), "Invalid input. Enter 0-3: ")

    def _nn_menu(self) -> int:
        self._write(
            "\nNNClassifier options:\n"
            "1. Enter single (x,y,z) sample\n"
            "2. Process file input\n"
            "Enter choice: "
        )
        return self._read_choice((1, 2), "Invalid input. Enter 1 or 2: ")

    def _handle(self, choice: int) -> None:
        if choice == 1:
            if self._nn_menu() == 1:
                self._process_single_sample()
            else:
                self._process_file()
        elif choice == 2:
            self._write("AnotherClassifier not implemented yet.\n")
        elif choice == 3:
            self._write("KNNClassifier not implemented yet.\n")

    def _process_single_sample(self) -> None:
        x = self._read_number("Enter x: ")
        y = self._read_number("Enter y: ")
        z = self._read_number("Enter z: ")
        orientation = self._classifier.classify(PhoneVector(x, y, z))
        self._write(f"Detected orientation: {orientation.label()}\n")

    def _process_file(self) -> None:
        filename = self._read_string("Enter input filename (e.g., unknownData.txt): ")
        samples = read_vectors(filename, False)
        results = [
            replace(sample, orientation=self._classifier.classify(sample))
            for sample in samples
        ]
        write_vectors("results-" + filename, results)
        self._write(f"Classification complete. Results saved in results-{filename}\n")


def main(argv: list[str] | None = None) -> int:
    """Train a nearest-neighbour classifier and start the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="phoneorient", description="Classify phone orientation from sensor readings."
    )
    parser.add_argument(
        "training",
        nargs="?",
        default=TRAINING_FILE,
        help="labelled training file (default: %(default)s)",
    )
    args = parser.parse_args(argv)
    try:
        classifier = NNClassifier()
        classifier.train(read_vectors(args.training, True))
        AppController(classifier).run()
    except OSError:
        print("error opening file, might not exist", file=sys.stderr)
        return 1
    except ValueError as error:
        print(f"error reading file: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())