"""Scanner module for discovering and classifying incoming media files."""

from harvester.scanner.analyzer import analyze_directory, media_identities
from harvester.scanner.directory import file_identity, find_all_files
from harvester.scanner.patterns import classify, classify_with_reason, normalize_stem

__all__ = [
    "analyze_directory",
    "classify",
    "classify_with_reason",
    "file_identity",
    "find_all_files",
    "media_identities",
    "normalize_stem",
]
