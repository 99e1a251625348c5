"""
Auxiliary workspace entities for Quantum.

Roadmap tasks and calendar events carry a free-form attribute payload on
top of their identifier; notifications are short-lived messages shown to
the user.
"""

from pydantic import BaseModel, ConfigDict, Field


class RoadmapTask(BaseModel):
    """
    A task on the roadmap template. Any extra attributes are kept as-is.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = Field(
        ...,
        description="Unique task identifier"
    )

    title: str = Field(
        "",
        description="Short task title"
    )


class CalendarEvent(BaseModel):
    """
    An event on the calendar template. Any extra attributes are kept as-is.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: str = Field(
        ...,
        description="Unique event identifier"
    )

    title: str = Field(
        "",
        description="Short event title"
    )


class Notification(BaseModel):
    """
    A transient message that expires on its own after a fixed delay.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(
        ...,
        description="Identifier assigned when the notification was queued"
    )

    title: str = Field(
        ...,
        description="Headline of the notification"
    )

    message: str = Field(
        ...,
        description="Body text of the notification"
    )

    icon_url: str = Field(
        "",
        description="URL of the icon displayed beside the message"
    )
