"""Magnet link construction for YTS torrents."""

from collections.abc import Sequence
from urllib.parse import quote

from .models import Movie, Torrent

# Public trackers to help find peers for metadata
TRACKERS = (
    "udp://open.demonii.com:1337/announce",
    "udp://tracker.openbittorrent.com:80",
    "udp://tracker.coppersurfer.tk:6969",
    "udp://glotorrents.pw:6969/announce",
    "udp://tracker.opentrackr.org:1337/announce",
    "udp://torrent.gresille.org:80/announce",
    "udp://p4p.arenabg.com:1337",
    "udp://tracker.leechers-paradise.org:6969",
)


def escape_title(title: str) -> str:
    """Percent-escape a title for the ``dn`` parameter (spaces become %20)."""
    return quote(title, safe="")


def build_magnet(info_hash: str, title: str) -> str:
    """Build a bare magnet link from a hash and display name."""
    return f"magnet:?xt=urn:btih:{info_hash}&dn={escape_title(title)}"


def add_trackers(magnet: str, trackers: Sequence[str] = TRACKERS) -> str:
    """Append one ``&tr=`` segment per tracker, in order."""
    if not magnet:
        return magnet
    return magnet + "".join(f"&tr={t}" for t in trackers)


def find_torrent(movie: Movie, quality: str) -> Torrent | None:
    """Torrent of ``movie`` whose quality is exactly ``quality``; last match wins."""
    found = None
    for torrent in movie.torrents:
        if torrent.quality == quality:
            found = torrent
    return found


def movie_magnet(
    movie: Movie,
    quality: str,
    trackers: bool = True,
    tracker_list: Sequence[str] = TRACKERS,
) -> str:
    """Magnet link for the torrent of ``movie`` matching ``quality``.

    Returns "" when no torrent matches.
    """
    torrent = find_torrent(movie, quality)
    if torrent is None:
        return ""
    magnet = build_magnet(torrent.hash, movie.title)
    if trackers:
        magnet = add_trackers(magnet, tracker_list)
    return magnet
