"""
randompass.export
Serialize an assembled output for the CLI and web front-ends.
"""

import csv
import io
import json
from typing import Any, Dict, List

from .models import PasswordRecord
from .output import EXPORT_FIELDS, OutputShape


def export_rows(output: OutputShape) -> List[Dict[str, Any]]:
    """Normalize any output shape into export rows."""
    if isinstance(output, str):
        return [PasswordRecord(index=1, value=output).as_row()]
    if isinstance(output, dict):
        return [PasswordRecord(index=i, value=v).as_row() for i, v in enumerate(output.values(), start=1)]
    return list(output)


def to_csv(output: OutputShape) -> str:
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=EXPORT_FIELDS, lineterminator="\n")
    writer.writeheader()
    writer.writerows(export_rows(output))
    return buf.getvalue()


def to_json(output: OutputShape) -> str:
    return json.dumps(output, ensure_ascii=False, indent=2)
