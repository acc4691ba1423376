"""
Business entities representing core domain concepts.

Entities are mutable objects describing what a scan found.

Exports:
- RawEntry: Directory entry seen during a scan
- VideoFile: Video file kept on a movie or episode
- FlatEpisode: Scanned episode before grouping
- Movie, TVShow, Season, Episode: Catalog items
- MediaKind: Discriminant of catalog items
"""

from mediatheque.core.entities.video import FlatEpisode, RawEntry, VideoFile
from mediatheque.core.entities.media import Episode, MediaKind, Movie, Season, TVShow

__all__ = [
    "RawEntry",
    "VideoFile",
    "FlatEpisode",
    "MediaKind",
    "Movie",
    "TVShow",
    "Season",
    "Episode",
]
