"""Typed filesystem paths.

This module provides the path identity type, its Directory and File
roles, the recursive tree walker and glob matcher used by searches,
and the streaming cursors used for incremental I/O.
"""

from easyfs.filesystem.directory import Directory
from easyfs.filesystem.file import File
from easyfs.filesystem.matcher import PathMatcher, validate_pattern
from easyfs.filesystem.models import DirStructure, SearchQuery
from easyfs.filesystem.path import FsPath, join
from easyfs.filesystem.streams import AppendWriter, ChunkReader, LineReader, StringAppendWriter
from easyfs.filesystem.walker import TreeWalker, list_entries

__all__ = [
    "AppendWriter",
    "ChunkReader",
    "DirStructure",
    "Directory",
    "File",
    "FsPath",
    "LineReader",
    "PathMatcher",
    "SearchQuery",
    "StringAppendWriter",
    "TreeWalker",
    "join",
    "list_entries",
    "validate_pattern",
]
