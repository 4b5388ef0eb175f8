"""API — rotas HTTP próprias do container (health e readiness).

Rotas de negócio são registradas pelo usuário em ``Application.router``.
"""
