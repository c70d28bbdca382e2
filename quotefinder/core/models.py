"""
Data models (plain dataclasses) for QuoteFinder.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Cue:
    index: int                       # as declared in the file, not renumbered
    start_ms: int
    end_ms: int
    text: str = ""


@dataclass(frozen=True)
class EpisodeConfig:
    youtube_url: str
    subtitle_path: str
    variant_paths: dict = field(default_factory=dict)   # variant -> path


@dataclass
class SearchResult:
    episode_key: str
    cue_index: int
    start_sec: int
    end_sec: int
    clock: str
    text: str
    direct_url: str
    embed_url: str

    def to_dict(self) -> dict:
        return {
            "episodeKey": self.episode_key,
            "cueIndex": self.cue_index,
            "startSec": self.start_sec,
            "endSec": self.end_sec,
            "time": self.clock,
            "text": self.text,
            "youtubeUrl": self.direct_url,
            "embedUrl": self.embed_url,
        }
