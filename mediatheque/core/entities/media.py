"""
Media catalog entities.

Entities representing the movies and TV shows produced by a library scan.
They are rebuilt on every scan, never updated incrementally.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from mediatheque.core.entities.video import VideoFile


class MediaKind(str, Enum):
    """Discriminant of a catalog item."""

    MOVIE = "movie"
    TVSHOW = "tvshow"


@dataclass
class Movie:
    """
    Movie found in the library.

    Attributes:
        title: Cleaned title (raw name when unparsed)
        year: Release year, as found in the name
        path: Folder of the movie, or the file itself for a root video
        files: Every video file of the folder
        resolution: "{width}x{height}" of the largest file
        duration: Runtime in minutes of the largest file
        original_name: Folder or file name the title comes from
        is_root_video: True when the movie is a file directly in the library root
    """

    title: str
    path: Path
    year: Optional[str] = None
    files: list[VideoFile] = field(default_factory=list)
    resolution: Optional[str] = None
    duration: Optional[int] = None
    original_name: str = ""
    is_root_video: bool = False

    kind = MediaKind.MOVIE


@dataclass
class Episode:
    """
    Individual episode of a TV show.

    Attributes:
        episode_number: Episode number within the season
        episode_end: Last episode number for multi-episode files
        episode_title: Episode title found in the file name
        path: Path of the episode file
        files: Video files of the episode
        resolution: "{width}x{height}"
        duration: Runtime in minutes
    """

    episode_number: int
    path: Path
    episode_end: Optional[int] = None
    episode_title: Optional[str] = None
    files: list[VideoFile] = field(default_factory=list)
    resolution: Optional[str] = None
    duration: Optional[int] = None
    original_name: str = ""


@dataclass
class Season:
    """Season of a TV show, episodes sorted by number."""

    season_number: int
    episodes: list[Episode] = field(default_factory=list)


@dataclass
class TVShow:
    """
    TV show assembled from scanned episodes.

    Attributes:
        title: Show title
        year: First year found in the episode names
        seasons: Seasons sorted by number
        original_name: Name of the first episode file seen for the show
    """

    title: str
    year: Optional[str] = None
    seasons: list[Season] = field(default_factory=list)
    original_name: str = ""

    kind = MediaKind.TVSHOW

    @property
    def episode_count(self) -> int:
        return sum(len(season.episodes) for season in self.seasons)
