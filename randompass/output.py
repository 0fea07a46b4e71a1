"""
randompass.output
Package generated passwords into the shape the caller asked for.
"""

from typing import Any, Dict, List, Sequence, Union

from .models import EXPORT_NUMBER_FIELD, EXPORT_VALUE_FIELD, PasswordRecord

EXPORT_FIELDS = (EXPORT_NUMBER_FIELD, EXPORT_VALUE_FIELD)

# bare password, "Password <i>" mapping, or export rows
OutputShape = Union[str, Dict[str, str], List[Dict[str, Any]]]


def label(index: int) -> str:
    return f"Password {index}"


def assemble(records: Sequence[PasswordRecord], exportable: bool = False) -> OutputShape:
    """
    A single record collapses to its bare value. Otherwise return an ordered
    label -> value mapping, or export rows when `exportable` is set.
    """
    if not records:
        raise ValueError("no passwords to assemble")
    if len(records) == 1:
        return records[0].value
    if exportable:
        return [r.as_row() for r in records]
    return {label(r.index): r.value for r in records}
