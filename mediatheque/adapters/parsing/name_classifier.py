"""
Classifieur de noms de fichiers et dossiers video.

Ce module fournit NameClassifier qui implemente INameClassifier. Le nettoyage
du titre est un pipeline ordonne de fonctions pures (une par etape), chacune
testable isolement. Le vocabulaire des tags vit dans release_tags.py.

Exemple:
    classifier = NameClassifier()
    classifier.classify("Show.Name.S01E02.1080p.WEB-DL.x264-GROUP.mkv")
    # ParsedName(title="Show Name", season=1, episode=2, parsed=True, ...)
"""

import re
from typing import Callable, Iterable, Optional

from loguru import logger

from mediatheque.adapters.parsing.release_tags import (
    EPISODE_TITLE_STOP_PATTERN,
    LOWERCASE_WORDS,
    RELEASE_HINT_PATTERNS,
    RELEASE_TAG_PATTERNS,
    ROMAN_NUMERALS,
)
from mediatheque.core.ports.parser import INameClassifier
from mediatheque.core.value_objects.parsed_info import EpisodeMarker, ParsedName

EXTENSION_PATTERN = re.compile(r"\.(mp4|mkv|avi|mov|webm|m4v)$", re.IGNORECASE)

# S01E01, S1E1, S01E01E02 (multi-episode)
EPISODE_PATTERN = re.compile(r"[Ss](\d{1,2})[Ee](\d{1,2})(?:[Ee](\d{1,2}))?(?!\d)")
# 1x01, 01x05
EPISODE_PATTERN_ALT = re.compile(r"(?<!\d)(\d{1,2})[xX](\d{1,2})(?!\d)")
# E01 ou E01E02, uniquement quand le dossier parent porte la saison
EPISODE_ONLY_PATTERN = re.compile(r"[Ee](\d{1,2})(?:[Ee](\d{1,2}))?(?!\d)")

# Dossier "Suits.S02", "Suits S02"
FOLDER_SEASON_PATTERN = re.compile(r"[._\-\s]S(\d{1,2})$", re.IGNORECASE)
# Suffixe de saison retire d'un nom de dossier de serie
SHOW_FOLDER_SEASON_SUFFIX = re.compile(
    r"[._\-\s]+(?:S\d{1,2}|Season[\s._-]*\d{1,2})$", re.IGNORECASE
)
SEASON_FOLDER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"Season[\s._-]*(\d{1,2})", re.IGNORECASE),
    re.compile(r"S(\d{1,2})$", re.IGNORECASE),
    re.compile(r"^(\d{1,2})$"),
)

YEAR_PATTERN = re.compile(r"[(\[{]?(?<!\d)(19\d{2}|20[0-2]\d)(?!\d)[)\]}]?")
CLEAN_FOLDER_PATTERN = re.compile(r"^(.+?)\s*\((\d{4})\)$")

SEPARATOR_PATTERN = re.compile(r"[._\-+]")
BRACKETED_GROUP_PATTERN = re.compile(r"[\[({][^\])}]*[\])}]")
WHITESPACE_PATTERN = re.compile(r"\s+")
LEADING_SEPARATORS = re.compile(r"^[.\-_\s]+")


# --- Etapes pures ---------------------------------------------------------


def strip_extension(name: str) -> str:
    """Retire une extension video connue."""
    return EXTENSION_PATTERN.sub("", name)


def match_episode(text: str) -> Optional[EpisodeMarker]:
    """Cherche un marqueur S01E02[E03], sinon la forme alternative 1x02."""
    match = EPISODE_PATTERN.search(text)
    if match:
        return EpisodeMarker(
            season=int(match.group(1)),
            episode=int(match.group(2)),
            episode_end=int(match.group(3)) if match.group(3) else None,
            start=match.start(),
            end=match.end(),
        )

    match = EPISODE_PATTERN_ALT.search(text)
    if match:
        return EpisodeMarker(
            season=int(match.group(1)),
            episode=int(match.group(2)),
            start=match.start(),
            end=match.end(),
        )
    return None


def match_folder_season_episode(
    text: str, parent_folder_name: Optional[str]
) -> Optional[EpisodeMarker]:
    """
    Combine la saison d'un dossier "Show.S02" et un marqueur "E05" du fichier.

    Returns:
        Le marqueur combine, ou None si le dossier ne porte pas de saison
        ou si le fichier n'a pas de numero d'episode
    """
    if not parent_folder_name:
        return None
    season_match = FOLDER_SEASON_PATTERN.search(parent_folder_name)
    if not season_match:
        return None
    episode_match = EPISODE_ONLY_PATTERN.search(text)
    if not episode_match:
        return None
    return EpisodeMarker(
        season=int(season_match.group(1)),
        episode=int(episode_match.group(1)),
        episode_end=int(episode_match.group(2)) if episode_match.group(2) else None,
        start=episode_match.start(),
        end=episode_match.end(),
    )


def extract_episode_title(after_marker: str) -> Optional[str]:
    """
    Extrait le titre d'episode situe entre le marqueur et le premier tag qualite.

    Returns:
        Titre avec chaque mot capitalise, ou None si aucun tag ne suit
    """
    after_marker = LEADING_SEPARATORS.sub("", after_marker)
    stop = EPISODE_TITLE_STOP_PATTERN.search(after_marker)
    if not stop:
        return None

    raw_title = after_marker[: stop.start()].strip()
    cleaned = collapse_whitespace(re.sub(r"[._\-]", " ", raw_title))
    if not cleaned:
        return None
    return " ".join(_capitalize(word) for word in cleaned.split(" "))


def extract_year(fragment: str) -> tuple[str, Optional[str]]:
    """
    Extrait la premiere annee (1900-2029, eventuellement entre crochets).

    Returns:
        (fragment tronque avant l'annee, annee) ou (fragment, None)
    """
    match = YEAR_PATTERN.search(fragment)
    if not match:
        return fragment, None
    return fragment[: match.start()], match.group(1)


def strip_release_tags(text: str) -> str:
    """Remplace chaque tag de release par un espace (jamais de suppression seche)."""
    for pattern in RELEASE_TAG_PATTERNS:
        text = pattern.sub(" ", text)
    return text


def normalize_separators(text: str) -> str:
    """Remplace . _ - + par des espaces."""
    return SEPARATOR_PATTERN.sub(" ", text)


def drop_bracketed_groups(text: str) -> str:
    """Retire les groupes [..], (..), {..} restants."""
    return BRACKETED_GROUP_PATTERN.sub(" ", text)


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def title_case(text: str) -> str:
    """
    Capitalise chaque mot.

    Les chiffres romains I-XII restent en majuscules, les articles et
    conjonctions passent en minuscules sauf en premiere position.
    """
    words = []
    for index, word in enumerate(text.split(" ")):
        if not word:
            continue
        if word.upper() in ROMAN_NUMERALS:
            words.append(word.upper())
        elif index > 0 and word.lower() in LOWERCASE_WORDS:
            words.append(word.lower())
        else:
            words.append(_capitalize(word))
    return " ".join(words)


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


# Ordre d'application sur le fragment de titre (apres extraction de l'annee)
TITLE_CLEANING_STAGES: tuple[Callable[[str], str], ...] = (
    strip_release_tags,
    normalize_separators,
    drop_bracketed_groups,
    collapse_whitespace,
    title_case,
)


def clean_title(fragment: str) -> str:
    """Applique les etapes de nettoyage dans l'ordre."""
    for stage in TITLE_CLEANING_STAGES:
        fragment = stage(fragment)
    return fragment


def has_episode_pattern(name: str) -> bool:
    """True si le nom porte un marqueur S01E01 ou 1x01."""
    return match_episode(name) is not None


def has_release_tags(name: str) -> bool:
    """True si le nom ressemble a une release (marqueur d'episode ou tags qualite)."""
    if has_episode_pattern(name):
        return True
    return any(pattern.search(name) for pattern in RELEASE_HINT_PATTERNS)


def extract_season_number(folder_name: str) -> Optional[int]:
    """Numero de saison d'un dossier "Season 1", "S01", "Show.S02" ou "1"."""
    for pattern in SEASON_FOLDER_PATTERNS:
        match = pattern.search(folder_name)
        if match:
            return int(match.group(1))
    return None


def _differs_from_raw(title: str, raw: str) -> bool:
    """Un simple changement de casse ou d'espacement ne compte pas comme un parsing."""
    return title.casefold() != collapse_whitespace(raw).casefold()


# --- Classifieur ----------------------------------------------------------


class NameClassifier(INameClassifier):
    """
    Classifieur de noms de releases (films et episodes).

    Ne leve jamais d'exception : toute erreur inattendue produit le
    ParsedName de repli (parsed=False, titre = nom brut).
    """

    def classify(
        self, name: str, parent_folder_name: Optional[str] = None
    ) -> ParsedName:
        """
        Parse un nom de fichier ou de dossier de release.

        Args:
            name: Nom a parser
            parent_folder_name: Dossier parent, utilise pour la saison quand
                                le fichier ne porte que "E05"

        Returns:
            ParsedName avec les informations extraites
        """
        if not isinstance(name, str) or not name:
            return ParsedName.unparsed(name if isinstance(name, str) else "")

        try:
            return self._classify(name, parent_folder_name)
        except Exception as exc:
            logger.debug(f"Classification impossible pour {name!r}: {exc}")
            return ParsedName.unparsed(name)

    def _classify(self, name: str, parent_folder_name: Optional[str]) -> ParsedName:
        cleaned = strip_extension(name)

        marker = match_episode(cleaned) or match_folder_season_episode(
            cleaned, parent_folder_name
        )

        if marker is None:
            fragment, year = extract_year(cleaned)
            title = clean_title(fragment)
            if not title or not _differs_from_raw(title, name):
                return ParsedName.unparsed(name)
            return ParsedName(title=title, original_name=name, year=year, parsed=True)

        episode_title = extract_episode_title(cleaned[marker.end:])
        fragment, year = extract_year(cleaned[: marker.start])
        title = clean_title(fragment)
        if not title:
            return ParsedName.unparsed(name)

        return ParsedName(
            title=title,
            original_name=name,
            year=year,
            season=marker.season,
            episode=marker.episode,
            episode_end=marker.episode_end,
            episode_title=episode_title,
            parsed=True,
        )

    def classify_folder(self, name: str) -> ParsedName:
        """
        Parse un nom de dossier : "Titre (Annee)" est reconnu tel quel.

        Returns:
            ParsedName ; les autres formes passent par classify()
        """
        if isinstance(name, str):
            match = CLEAN_FOLDER_PATTERN.match(name)
            if match:
                return ParsedName(
                    title=match.group(1).strip(),
                    original_name=name,
                    year=match.group(2),
                    parsed=True,
                )
        return self.classify(name)

    def classify_show_folder(self, name: str) -> ParsedName:
        """Parse un dossier de serie en ignorant un suffixe de saison ("Suits.S02")."""
        if not isinstance(name, str):
            return self.classify(name)
        stripped = SHOW_FOLDER_SEASON_SUFFIX.sub("", name)
        if not stripped or stripped == name:
            return self.classify_folder(name)

        result = self.classify_folder(stripped)
        if result.parsed:
            return ParsedName(
                title=result.title, original_name=name, year=result.year, parsed=True
            )

        # Le suffixe de saison retire, le reste est le titre
        title = clean_title(stripped)
        if not title:
            return ParsedName.unparsed(name)
        return ParsedName(title=title, original_name=name, parsed=True)

    def match_episode(
        self, name: str, parent_folder_name: Optional[str] = None
    ) -> Optional[EpisodeMarker]:
        """Marqueur d'episode brut, meme quand aucun titre n'a pu etre extrait."""
        if not isinstance(name, str) or not name:
            return None
        cleaned = strip_extension(name)
        return match_episode(cleaned) or match_folder_season_episode(
            cleaned, parent_folder_name
        )

    def extract_season_number(self, folder_name: str) -> Optional[int]:
        if not isinstance(folder_name, str):
            return None
        return extract_season_number(folder_name)

    def classify_batch(self, names: Iterable[str]) -> list[ParsedName]:
        return [self.classify(name) for name in names]
