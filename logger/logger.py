import json
import os
from datetime import datetime, timezone

from simulator.codec import polynomial


def utc_date():
    return datetime.now(timezone.utc).strftime("%Y-%m-%d")


class JSONLogger:
    """Appends computation records as JSON lines, one file per kind and UTC day.

    Every record goes to `<prefix><date>.jsonl`; abnormal halts are copied to
    `abnormal_<date>.jsonl` and wrong answers to `mismatch_<date>.jsonl`.
    """

    def __init__(self, output_directory="logs/", log_file_prefix="polytm_"):
        self.output_directory = output_directory
        self.log_file_prefix = log_file_prefix
        os.makedirs(self.output_directory, exist_ok=True)
        self.rotate()

    def path_for(self, kind):
        name = self.log_file_prefix if kind == "main" else f"{kind}_"
        return os.path.join(self.output_directory, f"{name}{self.today}.jsonl")

    def _append(self, kind, entries):
        with open(self.path_for(kind), "a", encoding="utf-8") as f:
            f.writelines(json.dumps(entry) + "\n" for entry in entries)

    def rotate(self):
        """Pick up the current UTC date for subsequent file names."""
        self.today = utc_date()
        self.current_log = self.path_for("main")

    def log(self, entry: dict):
        self._append("main", [entry])

    def log_batch(self, entries: list):
        self._append("main", entries)

    def log_abnormal(self, entries: list):
        self._append("abnormal", entries)

    def log_mismatch(self, entries: list):
        self._append("mismatch", entries)

    def log_result(self, result):
        """Record a ComputeResult and route it by outcome. Returns the logged entry."""
        entry = result.as_entry()
        entry["expected"] = polynomial(*result.operands)
        self.log(entry)
        if not result.ok:
            self.log_abnormal([entry])
        elif result.value != entry["expected"]:
            self.log_mismatch([entry])
        return entry
