"""Tag normalization, casing reconciliation and consistency checks."""

from .rules import TagRules
from .normalizer import TextPrefix, clean_tag
from .casing import fix_casing, read_archive_tags
from .checker import check_tags

__all__ = ["TagRules", "TextPrefix", "clean_tag", "fix_casing", "read_archive_tags", "check_tags"]
