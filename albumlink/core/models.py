from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ResolvedTrack(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    duration_ms: int = 0
    track_number: int | None = None
    target_url: str | None = None


class ArtistRef(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str | None = None


class ResolvedAlbum(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: Literal["itunes"] = "itunes"
    name: str
    url: str
    artists: list[ArtistRef] = Field(default_factory=list)
    release_date: str = "Unknown"
    total_tracks: int = 0
    artwork: str | None = None
    genres: list[str] = Field(default_factory=list)
    label: str | None = None
    popularity: int | None = None
    copyright: str | None = None
    tracks: list[ResolvedTrack] = Field(default_factory=list)


class CacheEntry(BaseModel):
    data: ResolvedAlbum
    timestamp: float


class CacheStats(BaseModel):
    size: int
    ttl_ms: int
    entries: list[str] = Field(default_factory=list)


class TopAlbum(BaseModel):
    rank: int
    name: str
    playcount: int = 0
    url: str | None = None
    image: str | None = None


class ResolvedArtist(BaseModel):
    name: str
    url: str
    listeners: int = 0
    albums: list[TopAlbum] = Field(default_factory=list)


class ArtistMatch(BaseModel):
    artist_name: str
    target_url: str
