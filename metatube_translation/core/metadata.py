"""
Metadata records mutated in place by the translator.

Only the text fields the translator touches are modelled here; everything
else about a movie or actor belongs to the metadata provider.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class MovieInfo:
    """Movie metadata as returned by the MetaTube server."""
    id: str = ""
    provider: str = ""
    title: Optional[str] = None
    summary: Optional[str] = None
    director: Optional[str] = None
    maker: Optional[str] = None
    label: Optional[str] = None
    series: Optional[str] = None
    genres: List[str] = field(default_factory=list)
    actors: List[str] = field(default_factory=list)


@dataclass
class ActorInfo:
    """Actor name record."""
    name: Optional[str] = None
