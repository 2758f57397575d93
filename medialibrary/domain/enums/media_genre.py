from __future__ import annotations

from medialibrary.domain.enums.labelled import LabelledEnum


class MediaGenre(LabelledEnum):
    """Flat genre list shared by every media type (film, book, music and game genres)."""

    ACTION = "ACTION", "Action"
    ADVENTURE = "ADVENTURE", "Adventure"
    ANIMATION = "ANIMATION", "Animation"
    BIOPIC = "BIOPIC", "Biopic"
    BUDDY_COP = "BUDDY_COP", "Buddy Cop"
    COMEDY = "COMEDY", "Comedy"
    COP = "COP", "Cop"
    CRIME = "CRIME", "Crime"
    CYBERPUNK = "CYBERPUNK", "Cyberpunk"
    DISASTER = "DISASTER", "Disaster"
    DRAMA = "DRAMA", "Drama"
    DYSTOPIAN = "DYSTOPIAN", "Dystopian"
    EPIC = "EPIC", "Epic"
    FAMILY = "FAMILY", "Family"
    FANTASY = "FANTASY", "Fantasy"
    HORROR = "HORROR", "Horror"
    HEROIC_FANTASY = "HEROIC_FANTASY", "Heroic Fantasy"
    HISTORICAL = "HISTORICAL", "Historical"
    MAGICAL_GIRL = "MAGICAL_GIRL", "Magical Girl"
    MARTIAL_ART = "MARTIAL_ART", "Martial Art"
    MECHA = "MECHA", "Mecha"
    MONSTER = "MONSTER", "Monster"
    MUSICAL = "MUSICAL", "Musical"
    MYSTERY = "MYSTERY", "Mystery"
    ROMANTIC = "ROMANTIC", "Romantic"
    SCIENCE_FICTION = "SCIENCE_FICTION", "Science Fiction"
    SPACE_OPERA = "SPACE_OPERA", "Space Opera"
    SPAGHETTI_WESTERN = "SPAGHETTI_WESTERN", "Spaghetti Western"
    SPORT = "SPORT", "Sport"
    SPY = "SPY", "Spy"
    SUPERHERO = "SUPERHERO", "Superhero"
    SUPERNATURAL = "SUPERNATURAL", "Supernatural"
    TEEN = "TEEN", "Teen"
    TOKUSATSU = "TOKUSATSU", "Tokusatsu"
    THEATER = "THEATER", "Theater"
    THRILLER = "THRILLER", "Thriller"
    WAR = "WAR", "War"
    WESTERN = "WESTERN", "Western"
    ALTERNATIVE_METAL = "ALTERNATIVE_METAL", "Alternative Metal"
    ALTERNATIVE_ROCK = "ALTERNATIVE_ROCK", "Alternative Rock"
    BALLAD = "BALLAD", "Ballad"
    BLUE_EYES_SOUL = "BLUE_EYES_SOUL", "Blue-eyes Soul"
    BLUES = "BLUES", "Blues"
    BLUES_ROCK = "BLUES_ROCK", "Blues Rock"
    CLASSIC = "CLASSIC", "Classic"
    CELTIC = "CELTIC", "Celtic"
    COUNTRY = "COUNTRY", "Country"
    DANCE = "DANCE", "Dance"
    DANCE_POP = "DANCE_POP", "Dance-Pop"
    DISCO = "DISCO", "Disco"
    ELECTRO = "ELECTRO", "Electro"
    EURODANCE = "EURODANCE", "Eurodance"
    EUROPOP = "EUROPOP", "Europop"
    FRENCH_VARIETY = "FRENCH_VARIETY", "French Variety"
    FUNK = "FUNK", "Funk"
    JAZZ = "JAZZ", "Jazz"
    J_POP = "J_POP", "J-Pop"
    J_ROCK = "J_ROCK", "J-Rock"
    HARD_ROCK = "HARD_ROCK", "Hard Rock"
    HEAVY_METAL = "HEAVY_METAL", "Heavy Metal"
    HIP_HOP = "HIP_HOP", "Hip Hop"
    HOUSE = "HOUSE", "House"
    METAL = "METAL", "Metal"
    NEW_WAVE = "NEW_WAVE", "New Wave"
    OPERA = "OPERA", "Opera"
    ORCHESTRA = "ORCHESTRA", "Orchestra"
    OST = "OST", "Original Soundtrack"
    POP = "POP", "Pop"
    POP_FUNK = "POP_FUNK", "Pop Funk"
    POP_ROCK = "POP_ROCK", "Pop Rock"
    POST_GRUNGE = "POST_GRUNGE", "Post Grunge"
    POWER_BALLAD = "POWER_BALLAD", "Power Ballad"
    PROGRESSIVE_ROCK = "PROGRESSIVE_ROCK", "Progressive Rock"
    PUNK = "PUNK", "Punk"
    REGGAE = "REGGAE", "Reggae"
    REGGAE_FUSION = "REGGAE_FUSION", "Reggae Fusion"
    RAP = "RAP", "Rap"
    RAP_CELTIC = "RAP_CELTIC", "Rap Celtic"
    ROCK = "ROCK", "Rock"
    ROCK_N_ROLL = "ROCK_N_ROLL", "Rock'n'Roll"
    RNB = "RNB", "R'N'B"
    SKA = "SKA", "Ska"
    SOUL = "SOUL", "Soul"
    SOUTHERN_ROCK = "SOUTHERN_ROCK", "Southern Rock"
    SYNTHPOP = "SYNTHPOP", "Synthpop"
    TECHNO = "TECHNO", "Techno"
    ZOUK = "ZOUK", "Zouk"
    ACTION_RPG = "ACTION_RPG", "Action RPG"
    BEAT_EM_ALL = "BEAT_EM_ALL", "Beat'em All"
    BEAT_EM_UP = "BEAT_EM_UP", "Beat'em Up"
    COURSES = "COURSES", "Courses"
    FPS = "FPS", "First Person Shooter"
    IDLE = "IDLE", "Idle"
    MANAGEMENT = "MANAGEMENT", "Management"
    PLATFORMS = "PLATFORMS", "Platform"
    PUZZLE_GAME = "PUZZLE_GAME", "Puzzle Game"
    ROGUE_LIKE = "ROGUE_LIKE", "Rogue Like"
    RPG = "RPG", "Role Playing Game"
    RTS = "RTS", "Real-Time Strategy"
    SANDBOX = "SANDBOX", "Sandbox"
    SHOOTER = "SHOOTER", "Shooter"
    SURVIVAL_HORROR = "SURVIVAL_HORROR", "Survival Horror"
    TACTICAL_RPG = "TACTICAL_RPG", "Tactical RPG"
    TPS = "TPS", "Third Person Shooter"
    VERSUS_FIGHTING = "VERSUS_FIGHTING", "Versus Fighting"


# Film/TV genres: everything up to WESTERN in declaration order.
VIDEO_GENRES: tuple[MediaGenre, ...] = tuple(list(MediaGenre)[: list(MediaGenre).index(MediaGenre.WESTERN) + 1])
