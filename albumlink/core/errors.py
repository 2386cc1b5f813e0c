from __future__ import annotations


class AlbumLinkError(Exception):
    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class CatalogError(AlbumLinkError):
    pass


class LinkResolutionError(AlbumLinkError):
    pass


class ArtistLookupError(AlbumLinkError):
    pass
