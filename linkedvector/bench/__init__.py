from .report import human_bytes, run_suite, sweep, write_csv
from .timing import measure

__all__ = [
    "human_bytes",
    "measure",
    "run_suite",
    "sweep",
    "write_csv",
]
