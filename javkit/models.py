"""Result records for search and detail pages."""

from dataclasses import dataclass, field, asdict
from typing import Optional

# Ascending; the last tier present wins when ranking.
QUALITY_TIERS = ("480p", "720p", "1080p")

QUALITY_NAMES = {
    "1080p": "1080p (Full HD)",
    "720p": "720p (HD)",
    "480p": "480p (SD)",
}


def empty_sources() -> dict[str, Optional[str]]:
    return {q: None for q in QUALITY_TIERS}


@dataclass(frozen=True)
class SearchResultItem:
    # None = the origin omitted the element, "" = element present but empty
    title: str = ""
    url: Optional[str] = None
    thumbnail: Optional[str] = None
    duration: Optional[str] = None
    views: Optional[str] = None
    rating: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class VideoDetail:
    title: str = ""
    uploader: str = ""
    views: str = ""
    submitted: str = ""
    description: str = ""
    categories: list[str] = field(default_factory=list)
    screenshots: list[str] = field(default_factory=list)
    video_sources: dict[str, Optional[str]] = field(default_factory=empty_sources)

    def __post_init__(self):
        # Always exactly the fixed tiers; unknown keys are dropped, "" becomes None.
        self.video_sources = {q: self.video_sources.get(q) or None for q in QUALITY_TIERS}

    def is_empty(self) -> bool:
        """True when every single-value field came back empty."""
        return not any((self.title, self.uploader, self.views, self.submitted, self.description))

    def best_source(self) -> Optional[tuple[str, str]]:
        """Highest available (quality, url) pair, or None."""
        for quality in reversed(QUALITY_TIERS):
            url = self.video_sources.get(quality)
            if url:
                return quality, url
        return None

    def best_quality_label(self) -> str:
        best = self.best_source()
        if not best:
            return "Unknown"
        return QUALITY_NAMES.get(best[0], best[0])

    def to_dict(self) -> dict:
        d = asdict(self)
        d["videoSources"] = d.pop("video_sources")
        return d
