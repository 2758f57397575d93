from __future__ import annotations

from medialibrary.domain.enums.labelled import LabelledEnum


class BookFormat(LabelledEnum):
    CLASSICAL = "CLASSICAL", "Classical"
    POCKET = "POCKET", "Pocket"
    UNSPECIFIED = "UNSPECIFIED", "Unspecified"
