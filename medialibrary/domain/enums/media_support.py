from __future__ import annotations

from medialibrary.domain.enums.labelled import LabelledEnum


class MediaSupport(LabelledEnum):
    VIDEO_TAPE = "VIDEO_TAPE", "Video Tape"
    DVD = "DVD", "DVD"
    BLU_RAY = "BLU_RAY", "Blu Ray"
    PAPER = "PAPER", "Paper"
    AUDIO_TAPE = "AUDIO_TAPE", "Audio Tape"
    VINYL = "VINYL", "Vinyl"
    CD = "CD", "CD"
    ROM_CARTRIDGE = "ROM_CARTRIDGE", "ROM Cartridge"
    DIGITAL = "DIGITAL", "Digital"
