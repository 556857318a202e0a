"""
Result rendering for the POTD generator.

Turns records (or a DES key representation) into text or JSON and writes it
to standard output, a file, or both.
"""

import json
import sys
from typing import Iterable, Optional, TextIO

from potd.core.engine import PotdRecord
from potd.utils.exceptions import OutputError

FORMATS = ("text", "json")


class ResultFormatter:
    """Renders POTD results in one output format"""

    def __init__(self, output_format: str = "text", date_format: Optional[str] = None):
        if output_format not in FORMATS:
            raise ValueError(f"Unknown output format: {output_format}")
        self.output_format = output_format
        self.date_format = date_format

    def render_record(self, record: PotdRecord) -> str:
        if self.output_format == "json":
            return json.dumps(record.to_dict(self.date_format), indent=2)
        return record.password

    def render_records(self, records: Iterable[PotdRecord]) -> str:
        if self.output_format == "json":
            return json.dumps([record.to_dict(self.date_format) for record in records], indent=2)
        lines = []
        for record in records:
            date = record.to_dict(self.date_format)["date"]
            lines.append(f"{date} {record.password}")
        return "\n".join(lines)

    def render_des(self, seed: str, des: str) -> str:
        if self.output_format == "json":
            return json.dumps({"seed": seed, "des": des}, indent=2)
        return des


def emit(text: str, output_file: Optional[str] = None, verbose: bool = False,
         stream: Optional[TextIO] = None) -> None:
    """Write rendered output

    Args:
        text: Rendered output
        output_file: Write to this file instead of the console
        verbose: Also print to the console when writing to a file
        stream: Console stream (default: stdout)
    """
    stream = stream or sys.stdout
    if output_file:
        try:
            with open(output_file, "w", encoding="utf-8") as f:
                f.write(text + "\n")
        except OSError as e:
            raise OutputError(f"Could not write {output_file}: {e}")
        if not verbose:
            return
    stream.write(text + "\n")
