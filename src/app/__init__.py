"""App — execução, infraestrutura e wiring.

Subpastas:
- bootstrap/: composition root (logging, settings, factories)
- services/: caller de APIs com logging
- infra/: engine de transporte concreto (httpx)
- protocols/: contratos de engine e de chamada
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
