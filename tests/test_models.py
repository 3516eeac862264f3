import dataclasses

import pytest

import javkit


@pytest.mark.unit
class Describe_SearchResultItem:
    def test_should_default_title_to_empty_string(self):
        """title is always a string."""
        assert javkit.SearchResultItem().title == ""

    def test_should_be_immutable(self):
        """Items cannot be changed after construction."""
        item = javkit.SearchResultItem(title="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.title = "y"


@pytest.mark.unit
class Describe_VideoDetail:
    def test_should_always_have_three_source_keys(self):
        """Missing tiers are filled with None and unknown ones dropped."""
        r = javkit.VideoDetail(video_sources={"720p": "http://x/720.mp4", "4k": "http://x/4k.mp4"})
        assert r.video_sources == {"480p": None, "720p": "http://x/720.mp4", "1080p": None}

    def test_should_turn_empty_source_into_none(self):
        """Sources are never empty strings."""
        assert javkit.VideoDetail(video_sources={"480p": ""}).video_sources["480p"] is None

    def test_best_source_should_prefer_highest_tier(self):
        """1080p beats 720p beats 480p."""
        r = javkit.VideoDetail(video_sources={"480p": "a", "720p": "b"})
        assert r.best_source() == ("720p", "b")
        assert r.best_quality_label() == "720p (HD)"

    def test_best_source_should_be_none_without_sources(self):
        """No sources gives no best source."""
        r = javkit.VideoDetail()
        assert r.best_source() is None
        assert r.best_quality_label() == "Unknown"

    def test_to_dict_should_use_wire_name_for_sources(self):
        """The mapping is serialized as videoSources."""
        d = javkit.VideoDetail(title="t", video_sources={"1080p": "u"}).to_dict()
        assert "video_sources" not in d
        assert d["videoSources"] == {"480p": None, "720p": None, "1080p": "u"}
        assert list(d) == [
            "title", "uploader", "views", "submitted", "description",
            "categories", "screenshots", "videoSources",
        ]

    def test_is_empty_should_ignore_lists(self):
        """Only single-value fields decide emptiness."""
        assert javkit.VideoDetail(categories=["a"]).is_empty()
        assert not javkit.VideoDetail(views="1").is_empty()
