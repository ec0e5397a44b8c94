"""Importers for the changelog document shapes."""

from .base import BaseImporter
from .hotfix import HotfixImporter
from .content_update import ContentUpdateImporter
from .routing import importer_for_url

__all__ = ["BaseImporter", "HotfixImporter", "ContentUpdateImporter", "importer_for_url"]
