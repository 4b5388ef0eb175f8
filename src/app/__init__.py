"""App — container de ciclo de vida: boot, eventos e dispatch.

Subpastas:
- application.py: Application (boot/run) e resolução do endereço de escuta
- boot/: cadeia de boot loaders
- events/: barramento de eventos de ciclo de vida
- lifecycle/: estados e transições da Application
- dispatch/: DispatchShim (hooks + isolamento de falhas por requisição)
- bootstrap/: composition root (logging, settings, cadeia padrão)
- protocols/: contratos dos colaboradores (loader, servidor)
- infra/: implementações concretas (uvicorn)
- observability/: correlation_id de requisição

Padrão: app orquestra; config carrega; api expõe; utils apoia.
"""
