"""
Vocabulaire des tags de release a retirer des noms de fichiers.

Les tags sont des donnees : chaque categorie liste des fragments d'expression
reguliere, compiles en un motif "mot entier, insensible a la casse". L'ordre
des categories est significatif : les substitutions s'enchainent dans cet ordre.
"""

import re

# (categorie, fragments) dans l'ordre d'application
RELEASE_TAG_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("resolution", (
        "720p", "1080p", "2160p", "4k", "UHD", "HD", "SD",
        "CAM", "TS", "TC", "HDCAM", "HDTS",
    )),
    ("video_codec", (
        "x264", "x265", "h264", "h265", "HEVC", "AVC", "XviD", "DivX", "VP9", "AV1",
    )),
    ("audio_codec_aac", (r"AAC5\.?1", r"AAC7\.?1", "AAC")),
    ("audio_codec", ("AC3", "DTS", "FLAC", "MP3")),
    ("audio_object", ("Atmos", "TrueHD")),
    ("audio_dolby", (r"DD5\.?1", r"DD7\.?1", r"DDP5\.?1", r"DDP7\.?1", "EAC3")),
    ("audio_dts_hd", (r"DTS-HD\.?MA\.?5\.?1", r"DTS-HD\.?MA\.?7\.?1", "DTS-HD")),
    ("audio_channels_51", (r"MA\.?5\.?1",)),
    ("audio_channels_71", (r"MA\.?7\.?1",)),
    ("source", (
        "BluRay", "BRRip", "BDRip", "DVDRip", "WEB-?DL", "WEBRip",
        "HDTV", "PDTV", "DVDSCR", "SCREENER", "REMUX",
    )),
    ("release_group", (
        "YIFY", "YTS", "RARBG", "SPARKS", "ETRG",
        "EXTENDED", "REMASTERED", "UNRATED", r"Directors?\.?Cut",
    )),
    ("attribute", (
        "10bit", "8bit", "HDR", "SDR", "PROPER", "REPACK", "INTERNAL", "LIMITED",
    )),
    ("language", (
        "DUAL", "MULTI", "DUBBED", "SUBBED", "LEGENDADO", "PT-BR", "ENG", "ITA", "ESP",
    )),
    ("edition", (
        "COMPLETE", "EXTENDED", "THEATRICAL", "IMAX", "3D", "SBS", "HSBS", "OU",
    )),
    ("codec_dotted_264", (r"H\.?264",)),
    ("codec_dotted_265", (r"H\.?265",)),
)

# Tags qualite/source qui terminent un titre d'episode
EPISODE_TITLE_STOP_TAGS: tuple[str, ...] = (
    "360p", "480p", "576p", "720p", "1080p", "2160p", "4k", "UHD",
    "BluRay", "BRRip", "WEB-?DL", "WEBRip", "HDTV",
    "x264", "x265", "h264", "h265", "HEVC",
)

# Indices de release utilises pour reconnaitre un nom "sale"
RELEASE_HINT_TAGS: tuple[tuple[str, ...], ...] = (
    ("720p", "1080p", "2160p", "4k"),
    ("x264", "x265", "h264", "h265", "HEVC"),
    ("BluRay", "BRRip", "WEBRip", "WEB-?DL", "HDTV"),
    ("YIFY", "YTS", "RARBG", "ETRG"),
)

# Chiffres romains conserves en majuscules
ROMAN_NUMERALS = frozenset({
    "I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII",
})

# Articles et conjonctions en minuscules (sauf en premiere position)
LOWERCASE_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for", "of",
})


def compile_word_group(fragments: tuple[str, ...]) -> re.Pattern[str]:
    """Compile des fragments en un motif "mot entier" insensible a la casse."""
    return re.compile(r"\b(?:" + "|".join(fragments) + r")\b", re.IGNORECASE)


RELEASE_TAG_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    compile_word_group(fragments) for _, fragments in RELEASE_TAG_CATEGORIES
)

EPISODE_TITLE_STOP_PATTERN = re.compile(
    r"\b(?:" + "|".join(EPISODE_TITLE_STOP_TAGS) + r")", re.IGNORECASE
)

RELEASE_HINT_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    compile_word_group(fragments) for fragments in RELEASE_HINT_TAGS
)
