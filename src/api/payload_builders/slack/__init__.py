"""Payload builders Slack."""

from .message import (
    DATA_COLOR,
    EMPTY_VALUE_PLACEHOLDER,
    ERROR_COLOR,
    SlackMessagePayloadBuilder,
    build_slack_payload,
    render_fields,
)

__all__ = [
    "DATA_COLOR",
    "EMPTY_VALUE_PLACEHOLDER",
    "ERROR_COLOR",
    "SlackMessagePayloadBuilder",
    "build_slack_payload",
    "render_fields",
]
