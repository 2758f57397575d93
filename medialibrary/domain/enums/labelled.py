from __future__ import annotations

from enum import StrEnum
from typing import Dict, List


class LabelledEnum(StrEnum):
    """
    String enum whose members carry a human readable label.

    Members are declared as ``CODE = "CODE", "Label"``; the stored/serialised
    value is the code, the label is only for display.
    """

    label: str

    def __new__(cls, value: str, label: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.label = label
        return obj

    @classmethod
    def listing(cls) -> List[Dict[str, str]]:
        return [{"value": m.value, "label": m.label} for m in cls]
