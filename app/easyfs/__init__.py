"""easyfs - typed directories and files over filesystem paths."""

from easyfs.filesystem import (
    AppendWriter,
    ChunkReader,
    Directory,
    DirStructure,
    File,
    FsPath,
    LineReader,
    SearchQuery,
    StringAppendWriter,
    TreeWalker,
    join,
)

__version__ = "0.1.0"

__all__ = [
    "AppendWriter",
    "ChunkReader",
    "DirStructure",
    "Directory",
    "File",
    "FsPath",
    "LineReader",
    "SearchQuery",
    "StringAppendWriter",
    "TreeWalker",
    "__version__",
    "join",
]
