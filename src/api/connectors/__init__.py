"""Connectors por provedor — adapters de borda para APIs externas.

Estrutura:
- mailgun/: webhooks de eventos de entrega (entrada)
- slack/: incoming webhooks (saída)

Cada provedor tem seu próprio connector, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
