from core.magnet import (
    TRACKERS,
    add_trackers,
    build_magnet,
    escape_title,
    find_torrent,
    movie_magnet,
)
from tests.conftest import HASH_720, HASH_1080


def test_picks_torrent_of_requested_quality(make_movie):
    magnet = movie_magnet(make_movie(), "1080p", trackers=False)

    assert f"xt=urn:btih:{HASH_1080}" in magnet
    assert HASH_720 not in magnet


def test_last_matching_torrent_wins(make_movie):
    movie = make_movie(
        torrents=[
            {"hash": "first", "quality": "1080p"},
            {"hash": "second", "quality": "1080p"},
        ]
    )

    assert find_torrent(movie, "1080p").hash == "second"
    assert movie_magnet(movie, "1080p", trackers=False).startswith(
        "magnet:?xt=urn:btih:second&"
    )


def test_no_matching_quality_gives_empty_string(make_movie):
    movie = make_movie()

    assert movie_magnet(movie, "2160p") == ""
    assert movie_magnet(movie, "1080P") == ""


def test_trackers_appended_in_fixed_order(make_movie):
    magnet = movie_magnet(make_movie(), "720p")

    segments = magnet.split("&tr=")
    assert len(TRACKERS) == 8
    assert segments[1:] == list(TRACKERS)


def test_disabled_trackers_append_nothing(make_movie):
    magnet = movie_magnet(make_movie(), "720p", trackers=False)

    assert "&tr=" not in magnet
    assert magnet == f"magnet:?xt=urn:btih:{HASH_720}&dn=Arrival"


def test_custom_tracker_list(make_movie):
    magnet = movie_magnet(
        make_movie(), "720p", tracker_list=["udp://tracker.example:1337/announce"]
    )

    assert magnet.endswith("&dn=Arrival&tr=udp://tracker.example:1337/announce")


def test_escape_title_uses_percent20_for_spaces():
    assert escape_title("The Lord of the Rings: The Two Towers") == (
        "The%20Lord%20of%20the%20Rings%3A%20The%20Two%20Towers"
    )
    assert "+" not in escape_title("A B+C")
    assert escape_title("Amélie") == "Am%C3%A9lie"


def test_build_magnet():
    assert build_magnet("abc", "Blade Runner 2049") == (
        "magnet:?xt=urn:btih:abc&dn=Blade%20Runner%202049"
    )


def test_add_trackers_leaves_empty_magnet_alone():
    assert add_trackers("") == ""
