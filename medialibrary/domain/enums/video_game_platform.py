from __future__ import annotations

from medialibrary.domain.enums.labelled import LabelledEnum


class VideoGamePlatform(LabelledEnum):
    NES = "NES", "NES"
    SNES = "SNES", "Super NES"
    N64 = "N64", "N64"
    GAMECUBE = "GAMECUBE", "Gamecube"
    WII = "WII", "Wii"
    WII_U = "WII_U", "Wii U"
    GAMEBOY = "GAMEBOY", "Gameboy"
    GAMEBOY_ADVANCE = "GAMEBOY_ADVANCE", "Gameboy Advance"
    NINTENDO_DS = "NINTENDO_DS", "Nintendo DS"
    NINTENDO_3DS = "NINTENDO_3DS", "Nintendo 3DS"
    MEGA_DRIVE = "MEGA_DRIVE", "Mega Drive"
    SEGA_SATURN = "SEGA_SATURN", "Sega Saturn"
    DREAMCAST = "DREAMCAST", "Dreamcast"
    PSX = "PSX", "Playstation"
    PS2 = "PS2", "Playstation 2"
    PS3 = "PS3", "Playstation 3"
    PS4 = "PS4", "Playstation 4"
    PSP = "PSP", "Playstation Portable"
    XBOX = "XBOX", "Xbox"
    XBOX_360 = "XBOX_360", "Xbox 360"
    XBOX_ONE = "XBOX_ONE", "Xbox One"
    PC = "PC", "PC"
