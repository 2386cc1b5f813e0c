from .artists import find_spotify_playlist_url, get_artist_top_albums, is_artist_query
from .cache import AlbumCache
from .orchestrator import get_album

__all__ = ["AlbumCache", "get_album", "get_artist_top_albums", "find_spotify_playlist_url", "is_artist_query"]
