"""Slack Block Kit entities used to render a menu message.

Only the subset the service emits is modelled: section blocks with markdown
text and an optional image accessory, wrapped in a message envelope.
Serialize with ``model_dump(exclude_none=True)`` so unset optional fields are
left out instead of sent as null.
"""
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class TextObject(BaseModel):
    type: Literal["mrkdwn"] = "mrkdwn"
    text: str


class ImageAccessory(BaseModel):
    type: Literal["image"] = "image"
    image_url: str
    alt_text: str


class SectionBlock(BaseModel):
    type: Literal["section"] = "section"
    text: TextObject
    accessory: Optional[ImageAccessory] = None


class SlackMessage(BaseModel):
    blocks: List[SectionBlock] = Field(default_factory=list)
    response_type: Optional[str] = None
