from enum import Enum

class Mode(Enum):
    NONE = 0
    BENCHMARK = 1
    CLASS_DEMO = 2
    GENERATE = 3
    SERVE = 4


# ---- Configuration ----

MODE = Mode.BENCHMARK # Default command when the CLI is run without one
DEBUGGING = False # True to log every pass of every sort
INPUT_FILE = "floats.dat"
CATS_FILE = "cats.dat"
OUTPUT_FILES = ("out1.dat", "out2.dat", "out3.dat") # One per algorithm: bubble, shuttle, quick

# Data generation
GENERATE_COUNT = 1000
GENERATE_SEED = None

# Sort API
API_HOST = "127.0.0.1"
API_PORT = 8000
API_URL = f"http://{API_HOST}:{API_PORT}"
API_MAX_VALUES = 10000 # The exchange sorts are O(n^2), keep requests small
