"""API: camada de borda.

Subpastas:
- connectors/: adapters HTTP por provedor (Steadfast)
- routes/: endpoints HTTP (webhook, health)

NÃO PODE conter: wiring de dependências nem leitura de settings.
"""
