from __future__ import annotations

from urllib.parse import quote

from .models import ResolvedAlbum, ResolvedArtist, ResolvedTrack

TRACK_NAME_WIDTH = 28


def format_duration(ms: int) -> str:
    total_seconds = ms // 1000
    return f"{total_seconds // 60}:{total_seconds % 60:02d}"


def format_total_duration(tracks: list[ResolvedTrack]) -> str:
    total_seconds = sum(track.duration_ms for track in tracks) // 1000
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours > 0:
        return f"{hours}h {minutes}m {seconds}s"
    return f"{minutes}m {seconds}s"


def format_popularity(score: int) -> str:
    filled = max(0, min(10, round(score / 10)))
    return f"{'█' * filled}{'░' * (10 - filled)} {score}%"


def format_count(value: int) -> str:
    return f"{value:,}"


def truncate(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 1] + "…"


def tracklist_lines(tracks: list[ResolvedTrack], artist_name: str = "") -> list[str]:
    lines = []
    for index, track in enumerate(tracks, start=1):
        url = track.target_url or f"https://open.spotify.com/search/{quote(f'{track.name} {artist_name}'.strip(), safe='')}"
        lines.append(f"{index:02d} {truncate(track.name, TRACK_NAME_WIDTH)} {format_duration(track.duration_ms)} {url}")
    return lines


def render_album(album: ResolvedAlbum) -> str:
    artist_name = album.artists[0].name if album.artists else ""
    lines = [
        album.name,
        f"by {', '.join(artist.name for artist in album.artists)}",
        album.url,
        f"Released: {album.release_date}",
        f"Tracks: {album.total_tracks}",
        f"Duration: {format_total_duration(album.tracks)}",
        f"Genre: {', '.join(album.genres) if album.genres else 'N/A'}",
    ]
    if album.label:
        lines.append(f"Label: {album.label}")
    if album.popularity is not None:
        lines.append(f"Popularity: {format_popularity(album.popularity)}")
    lines.append("")
    lines.extend(tracklist_lines(album.tracks, artist_name))
    if album.copyright:
        lines.extend(["", album.copyright])
    return "\n".join(lines)


def render_artist(artist: ResolvedArtist) -> str:
    lines = [artist.name, artist.url, f"{format_count(artist.listeners)} listeners on Last.fm", ""]
    if not artist.albums:
        lines.append("No albums found")
    for album in artist.albums:
        lines.append(f"{album.rank}. {album.name} ({format_count(album.playcount)} plays)")
    return "\n".join(lines)
