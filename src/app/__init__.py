"""App: inicialização, wiring e observabilidade.

Subpastas:
- bootstrap/: composition root (logging, settings, handler, client)
- observability/: correlation_id para logs
"""
