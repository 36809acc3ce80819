"""Shared test fixtures for m3ucatalog unit tests."""

import pytest

from m3ucatalog.config import Config


# ── Sample playlists ─────────────────────────────────────────────────────────

SAMPLE_PLAYLIST = """#EXTM3U
#EXTINF:-1 tvg-id="bbc.uk" tvg-logo="http://img/bbc.png" group-title="News",BBC
http://x/bbc.m3u8
#EXTINF:-1 tvg-id="cnn.us" group-title="News",CNN
http://x/cnn.m3u8
#EXTINF:-1 group-title="Action Movies",Die Hard
http://x/diehard.mkv
#EXTINF:-1 group-title="Sports",ESPN
#EXTVLCOPT:http-user-agent=Mozilla
http://x/espn.m3u8
#EXTINF:-1 group-title="Breaking Bad Season 1",Breaking Bad S01E01
http://x/bb/s01e01.mp4
#EXTINF:-1,Loose Clip
http://x/clip.avi
#EXTINF:-1 group-title="Documentaries",Orphaned Metadata
#EXTINF:-1 group-title="VOD Classics",Casablanca
http://x/casablanca.m3u8
"""


@pytest.fixture
def sample_playlist():
    return SAMPLE_PLAYLIST


@pytest.fixture
def playlist_file(tmp_path):
    """Sample playlist written to a temporary .m3u file."""
    path = tmp_path / "playlist.m3u"
    path.write_text(SAMPLE_PLAYLIST, encoding="utf-8")
    return path


@pytest.fixture
def sample_config(tmp_path):
    """Config with test defaults pointing to a temporary directory."""
    return Config(
        playlist_url="http://example.com/playlist.m3u",
        request_timeout=5.0,
        max_retries=1,
        chunk_size=2,
        row_limit=5,
        cache_dir=str(tmp_path / "cache"),
    )
