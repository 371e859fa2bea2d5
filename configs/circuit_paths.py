import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = (BASE_DIR / "../data/circuits").resolve()
REPORTS_DIR = (BASE_DIR / "../circuit_reports").resolve()

DEFAULT_INPUT_PATH = Path(os.environ.get("CIRCUIT_INPUT", DATA_DIR / "example.txt"))
VERBOSE_DEFAULT = os.environ.get("CIRCUIT_VERBOSE", "").lower() in {"1", "true", "yes"}

DEFAULT_TARGET_WIRE = "a"
DEFAULT_OVERRIDE_WIRE = "b"

# 16-bit signal width
WORD_MASK = 0xFFFF
