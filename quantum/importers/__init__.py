"""Importers that supply the initial contents of a workspace."""

from .base import BaseImporter
from .sample import SampleImporter

__all__ = ["BaseImporter", "SampleImporter"]
