# phoneorient

Work out which way a phone is facing from an accelerometer reading. The
package uses a nearest-neighbour model: an unlabelled `(x, y, z)` sample gets
the orientation of the closest labelled training sample, by Euclidean
distance. When two training samples are equally close, the earlier one wins;
with no training data the answer is `unknown`.

The orientations are `unknown`, `faceup`, `facedown`, `portrait`,
`portrait upside down`, `landscapeleft` and `landscapeRight`. In files they
are stored by number, 0 to 6 in that order (`Orientation.UNKNOWN` to
`Orientation.LANDSCAPE_RIGHT`).

## Installing

```
pip install .
```

## Data files

Each line is one sample, with values separated by commas.

Training data has at least four fields, `x,y,z,orientation`:

```
0.0,0.0,1.0,1
0.0,0.0,-1.0,2
0.0,1.0,0.0,3
```

Data to classify has at least three fields, `x,y,z`. Fields beyond those
needed are ignored.

Results files have five fields: the three coordinates, the orientation
number and the orientation label, for example `0.1,0.2,0.9,1,faceup`.

`read_vectors` raises `OSError` when the file cannot be opened and
`ValueError` on a line with too few fields, a coordinate that is not a
number, or an orientation number outside 0 to 6.

## Command line

```
phoneorient [training]
```

`training` is the labelled training file; it defaults to `training.txt` in
the current directory. The command trains a nearest-neighbour model on it and
opens a menu:

- `1` chooses the nearest-neighbour classifier, which then offers to classify
  one sample that you type in (`x`, `y` and `z` in turn), or every sample in a
  file. For a file, the results go to `results-<input file name>` in the
  current directory.
- `0` exits.

The menu repeats until you choose `0` or input ends. Invalid choices and
numbers are asked for again. If a data file cannot be opened or is malformed,
the command prints an error and exits with status 1.

## Library use

```python
from phoneorient.vectors import PhoneVector, read_vectors, write_vectors
from phoneorient.classifiers import NNClassifier

model = NNClassifier()
model.train(read_vectors("training.txt", orientation_known=True))

orientation = model.classify(PhoneVector(0.1, 0.2, 0.9))
print(orientation.label())

samples = read_vectors("unknownData.txt", orientation_known=False)
labelled = [
    PhoneVector(s.x, s.y, s.z, model.classify(s)) for s in samples
]
write_vectors("results-unknownData.txt", labelled)
```

`PhoneVector.distance` gives the Euclidean distance between two samples, and
`PhoneVector.to_line` gives the line used for that sample in a results file.
`Classifier` in `phoneorient.classifiers` is the abstract base with `train`
and `classify` for writing other models.

To drive the interactive menu from your own streams, build an
`AppController` from a trained classifier and the input and output text
streams (`AppController(model, stdin, stdout)`), then call `run()`.

## What it does not do

Nearest-neighbour is the only classifier. The menu lists
`AnotherClassifier` (`2`) and `KNNClassifier` (`3`), but choosing either only
prints that it is not implemented yet.