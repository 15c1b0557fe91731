"""
Data loading and parsing module.

This package handles all file and network I/O: the course catalog,
student transcripts, and the roadmap web API.
"""

from .loader import CatalogLoader
from .parser import TranscriptParser
from .client import RoadmapClient

__all__ = ["CatalogLoader", "TranscriptParser", "RoadmapClient"]
