"""Block extraction, pruning, classification and record collection."""

from .extractor import build_tree, extract_blocks
from .pruner import prune, prune_tree
from .classifier import classify, classify_tree, parse_long_date
from .flattener import RecordCollector, collect_changes

__all__ = [
    "build_tree",
    "extract_blocks",
    "prune",
    "prune_tree",
    "classify",
    "classify_tree",
    "parse_long_date",
    "RecordCollector",
    "collect_changes"
]
