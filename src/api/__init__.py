"""API — camada de borda e adapters de provedores.

Responsabilidades:
- Receber webhooks do Mailgun
- Validar assinaturas e decodificar payloads
- Construir payloads para o Slack

Subpastas:
- connectors/: adapters por provedor (mailgun, slack)
- payload_builders/: construção de payloads para APIs externas
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: FSM, orquestração de use cases.
"""
