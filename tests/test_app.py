import io

import pytest

from phoneorient.app import AppController, main
from phoneorient.classifiers import NNClassifier
from phoneorient.vectors import Orientation, PhoneVector, read_vectors

TRAINING = [
    PhoneVector(0.0, 0.0, 9.8, Orientation.FACE_UP),
    PhoneVector(0.0, 0.0, -9.8, Orientation.FACE_DOWN),
    PhoneVector(9.8, 0.0, 0.0, Orientation.LANDSCAPE_LEFT),
]


def run_app(text):
    classifier = NNClassifier()
    classifier.train(TRAINING)
    out = io.StringIO()
    AppController(classifier, io.StringIO(text), out).run()
    return out.getvalue()


def test_exit_immediately():
    output = run_app("0\n")
    assert output.endswith("Exiting program.\n")
    assert output.count("Choose classifier (or 0 to exit):") == 1


def test_single_sample():
    output = run_app("1\n1\n0.1\n0.2\n9.5\n0\n")
    assert "Detected orientation: faceup\n" in output
    assert output.endswith("Exiting program.\n")


def test_tokens_on_one_line():
    output = run_app("1 1 9 0.5 0.1 0")
    assert "Detected orientation: landscapeleft\n" in output
    assert "Exiting program." in output


def test_invalid_main_choice_retries():
    output = run_app("abc\n5\n0\n")
    assert output.count("Invalid input. Enter 0-3: ") == 2
    assert "Exiting program." in output


def test_invalid_sub_choice_retries():
    output = run_app("1\n3\n1\n0\n0\n-9\n0\n")
    assert output.count("Invalid input. Enter 1 or 2: ") == 1
    assert "Detected orientation: facedown\n" in output


def test_invalid_number_retries():
    output = run_app("1\n1\nfoo\n0\n0\n9\n0\n")
    assert "Invalid number. Enter x: " in output
    assert "Detected orientation: faceup\n" in output


@pytest.mark.parametrize(
    "choice, message",
    [
        ("2", "AnotherClassifier not implemented yet.\n"),
        ("3", "KNNClassifier not implemented yet.\n"),
    ],
)
def test_other_classifiers(choice, message):
    output = run_app(f"{choice}\n0\n")
    assert message in output
    assert output.count("Choose classifier (or 0 to exit):") == 2


def test_end_of_input_stops():
    output = run_app("1\n1\n")
    assert "Enter x: " in output
    assert "Exiting program." not in output


def test_process_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "unknown.txt").write_text("0.5,0,9\n8,1,0\n0,0.2,-9\n")
    output = run_app("1\n2\nunknown.txt\n0\n")
    assert "Classification complete. Results saved in results-unknown.txt\n" in output
    results = read_vectors(tmp_path / "results-unknown.txt", True)
    assert [r.orientation for r in results] == [
        Orientation.FACE_UP,
        Orientation.LANDSCAPE_LEFT,
        Orientation.FACE_DOWN,
    ]
    assert [(r.x, r.y, r.z) for r in results] == [(0.5, 0.0, 9.0), (8.0, 1.0, 0.0), (0.0, 0.2, -9.0)]
    lines = (tmp_path / "results-unknown.txt").read_text().splitlines()
    assert lines[1].endswith(",landscapeleft")


def test_process_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(FileNotFoundError):
        run_app("1\n2\nabsent.txt\n0\n")


def test_main_runs_with_training_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "training.txt").write_text("0,0,9.8,1\n0,0,-9.8,2\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n1\n0\n0\n-9\n0\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "Detected orientation: facedown" in captured.out


def test_main_missing_training(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1
    assert "error opening file, might not exist" in capsys.readouterr().err


def test_main_bad_training(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "training.txt").write_text("0,0,9.8\n")
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("error reading file")