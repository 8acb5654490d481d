"""
Input validation schemas using Pydantic for inbound request data.
"""
from pydantic import BaseModel, field_validator

from kantine.utilities.constants import SLACK_WEBHOOK_PREFIX


class WebhookTarget(BaseModel):
    """Schema for a Slack incoming webhook URL to deliver a message to."""
    url: str

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        """Only Slack's own webhook endpoints are accepted."""
        v = (v or '').strip()
        if not v.startswith(SLACK_WEBHOOK_PREFIX):
            raise ValueError(f'URL must start with {SLACK_WEBHOOK_PREFIX}')
        return v
