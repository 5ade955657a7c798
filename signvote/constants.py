"""Default hyperparameters and file names shared by the CLI and the models."""

DEFAULT_ALPHA = 0.01
DEFAULT_TOLERANCE = 1e-7
# Hard cap on gradient descent steps; separable data can need millions of steps to reach the tolerance.
DEFAULT_MAX_ITER = 100_000
DEFAULT_K = 5

# Debug log cadence for the gradient descent loop.
LOG_EVERY = 1000

POSITIVE_LABEL = 1
NEGATIVE_LABEL = -1
VALID_LABELS = (NEGATIVE_LABEL, POSITIVE_LABEL)

TRAIN_FEATURES_FILE = "dataX.dat"
TRAIN_LABELS_FILE = "dataY.dat"
TEST_FEATURES_FILE = "dataXtest.dat"
LOGREG_OUTPUT_FILE = "LogReg.dat"
KNN_OUTPUT_FILE = "NN.dat"
