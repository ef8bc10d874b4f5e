"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (webhook, health)
- Validação inicial de request (corpo, headers)
- Delegação para connectors/use_cases
- Respostas HTTP apropriadas

Estrutura:
- routes/mailgun/: webhook de eventos Mailgun
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
