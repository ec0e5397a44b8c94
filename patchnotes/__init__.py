"""
Patchnotes: turns changelog web pages into normalized change records.

Each change statement is tagged with the category path it was published under.
"""

__version__ = "0.1.0"
__author__ = "Patchnotes Project"

# Import main components
from .config import ConfigManager
from .models import Block, BlockType, ChangeRecord, ChangeLog
from .tags import TagRules, clean_tag, fix_casing, check_tags
from .importers import BaseImporter, HotfixImporter, ContentUpdateImporter
from .pipeline import run_pipeline

__all__ = [
    "ConfigManager",
    "Block",
    "BlockType",
    "ChangeRecord",
    "ChangeLog",
    "TagRules",
    "clean_tag",
    "fix_casing",
    "check_tags",
    "BaseImporter",
    "HotfixImporter",
    "ContentUpdateImporter",
    "run_pipeline"
]
