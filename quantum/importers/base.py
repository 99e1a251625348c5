"""
Base importer interface for Quantum.

This module defines the abstract interface that every source of initial
workspace contents must implement.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..models import Block, Page, Template, Workspace


class BaseImporter(ABC):
    """
    Abstract base class for workspace importers.

    Each importer supplies the flat page and block collections a
    ``WorkspaceStore`` starts from, in collection order.
    """

    @abstractmethod
    def get_workspace(self) -> Workspace:
        """
        Retrieve the workspace record.

        Returns:
            The Workspace to load
        """
        pass

    @abstractmethod
    def get_pages(self) -> List[Page]:
        """
        Retrieve all pages.

        Returns:
            List of pages; hierarchy is carried by ``parent_id``
        """
        pass

    @abstractmethod
    def get_blocks(self) -> List[Block]:
        """
        Retrieve all blocks of all pages.

        Returns:
            List of blocks in display order
        """
        pass

    def get_templates(self) -> Optional[List[Template]]:
        """
        Retrieve the template catalog.

        Returns:
            List of templates, or None to use the built-in catalog
        """
        return None

    def get_selected_page_id(self) -> Optional[str]:
        """Page to select once the workspace is loaded, if any."""
        return None
