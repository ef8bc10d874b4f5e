"""App — orquestração do relay, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos de evento, envelope e notificação
- use_cases/: pipeline de relay (verificação → decodificação → entrega)
- services/: serviços puros (montagem da notificação)
- infra/: implementações concretas de IO (HTTP)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; fsm governa; utils apoia.
"""
