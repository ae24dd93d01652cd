"""Document store domain: file access and link target resolution."""

from ._AbstractStore import _AbstractStore
from ._constants import DOCUMENT_EXTENSIONS, MARKDOWN_EXTENSION, NODE_GRAPH_EXTENSION
from .build_resolver import build_resolver
from .DocumentUnreadable import DocumentUnreadable
from .normalize_store_path import normalize_store_path, parent_dir
from .PathResolver import PathResolver
from .ResolvedTarget import ResolvedTarget
from .Store import Store
from .TargetKind import TargetKind

__all__ = [
    "DOCUMENT_EXTENSIONS",
    "MARKDOWN_EXTENSION",
    "NODE_GRAPH_EXTENSION",
    "DocumentUnreadable",
    "PathResolver",
    "ResolvedTarget",
    "Store",
    "TargetKind",
    "_AbstractStore",
    "build_resolver",
    "normalize_store_path",
    "parent_dir",
]
