"""Agregador de settings do relay Mailgun → Slack.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Provider-specific settings
from config.settings.mailgun import (
    MailgunSettings,
    get_mailgun_settings,
)
from config.settings.slack import (
    DEFAULT_MESSAGE_TITLE,
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    # Constants
    "DEFAULT_MESSAGE_TITLE",
    # Base
    "BaseSettings",
    "Environment",
    # Providers
    "MailgunSettings",
    "SlackSettings",
    "get_base_settings",
    "get_mailgun_settings",
    "get_slack_settings",
]
