"""Use cases do relay Mailgun → Slack."""

from .relay_event import MailgunRelayPipeline, RejectionReason, RelayResult

__all__ = [
    "MailgunRelayPipeline",
    "RejectionReason",
    "RelayResult",
]
