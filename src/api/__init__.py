"""API — chamadas a APIs HTTP externas.

Subpastas:
- calls/: ciclo de vida de chamada, tradução de opções, cabeçalhos, status
  e tipos concretos (GET/POST/PUT/DELETE)

NÃO PODE conter: IO direto de rede (fica no engine em app/infra).
"""
