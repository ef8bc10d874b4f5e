"""Payload builders por destino — construção de payloads para APIs externas.

Estrutura:
- slack/: Slack incoming webhooks

Cada destino tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
