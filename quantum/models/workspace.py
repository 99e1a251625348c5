"""
Workspace data models for Quantum.

This module defines the page hierarchy and the content blocks that live on
pages. Hierarchy is expressed through id-valued fields only: pages point at
their parent page, blocks point at their page and, optionally, at the
container block they are filed under.
"""

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field


class BlockType(str, Enum):
    """Kinds of content block a page can hold."""

    TEXT = "text"
    HEADING = "heading"
    SUBHEADING = "subheading"
    BULLETED_LIST = "bulleted_list"
    NUMBERED_LIST = "numbered_list"
    TODO = "todo"
    QUOTE = "quote"
    CODE = "code"
    DIVIDER = "divider"
    TOGGLE = "toggle"

    @property
    def is_container(self) -> bool:
        """Whether blocks of this type hold child blocks."""
        return self is BlockType.TOGGLE


class TemplateType(str, Enum):
    ROADMAP = "roadmap"
    CALENDAR = "calendar"


class Workspace(BaseModel):
    """
    The singleton workspace that owns every page.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        description="Identifier of the workspace"
    )

    name: str = Field(
        ...,
        description="Display name shown at the top of the sidebar"
    )


class Page(BaseModel):
    """
    A titled node in the document hierarchy.

    Pages form a forest through ``parent_id``; a page with no parent is a
    root page.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        description="Unique page identifier"
    )

    title: str = Field(
        ...,
        description="Page title as entered by the user"
    )

    parent_id: Optional[str] = Field(
        None,
        description="Identifier of the parent page, or None for a root page"
    )

    created_at: datetime = Field(
        default_factory=datetime.now,
        description="When the page was created"
    )

    is_expanded: bool = Field(
        False,
        description="Whether the page's children are shown in the outline"
    )

    icon: Optional[str] = Field(
        None,
        description="Emoji or short glyph displayed next to the title"
    )


class Block(BaseModel):
    """
    A unit of content within a page.

    Container blocks (toggles) list the ids of their children in
    ``children``; each child records the container in ``parent_block_id``.
    Containment is one level deep.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        description="Unique block identifier"
    )

    type: BlockType = Field(
        BlockType.TEXT,
        description="How the block's content is presented"
    )

    content: str = Field(
        "",
        description="The text content of the block"
    )

    page_id: str = Field(
        ...,
        description="Identifier of the page that owns the block"
    )

    parent_block_id: Optional[str] = Field(
        None,
        description="Identifier of the container block this block is filed under"
    )

    children: Optional[Tuple[str, ...]] = Field(
        None,
        description="Ordered ids of the blocks filed under this container"
    )

    is_expanded: Optional[bool] = Field(
        None,
        description="Whether a container block currently shows its children"
    )

    @property
    def is_container(self) -> bool:
        return self.type.is_container


class Template(BaseModel):
    """
    A predefined structured view shown instead of a page's blocks.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Unique template identifier")
    name: str = Field(..., description="Display name of the template")
    icon: str = Field(..., description="Emoji shown next to the name")
    description: str = Field(..., description="One-line description of the view")
    type: TemplateType = Field(..., description="Which structured view the template opens")
