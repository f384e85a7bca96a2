"""Connectors: adapters de borda para APIs externas.

Estrutura:
- steadfast/: API do courier Steadfast (pedidos, status, webhook)
"""

__all__: list[str] = []
