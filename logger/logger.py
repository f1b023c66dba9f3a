import json
from datetime import datetime, timezone
from pathlib import Path

class JSONLogger:
    """Appends finished runs to daily JSON-lines files under output_directory.

    The directory is only created once something is written.
    """

    def __init__(self, output_directory="logs/", log_file_prefix="tm_runs_"):
        self.output_directory = Path(output_directory)
        self.log_file_prefix = log_file_prefix

    def path_for(self, prefix):
        today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
        return self.output_directory / f"{prefix}{today}.jsonl"

    def _append(self, prefix, entries):
        self.output_directory.mkdir(parents=True, exist_ok=True)
        with open(self.path_for(prefix), "a", encoding="utf-8") as f:
            for entry in entries:
                f.write(json.dumps(entry, ensure_ascii=False) + "\n")

    def log(self, entry: dict):
        self._append(self.log_file_prefix, [entry])

    def log_accepted(self, entries: list):
        """Runs that ended in an accepting state also go to accepted_<date>.jsonl."""
        self._append("accepted_", entries)
