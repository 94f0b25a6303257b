"""Directory resolvers for sources and indexes."""

from .access import ProbeFileWriteAccess, WriteAccessCheck
from .index import determine_index_dir
from .source import resolve_source_directory

__all__ = [
    "ProbeFileWriteAccess",
    "WriteAccessCheck",
    "determine_index_dir",
    "resolve_source_directory",
]
