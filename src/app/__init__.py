"""App: estado do shell do back office da clínica.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: identidade, papéis e capacidades
- sessions/: Session Store, diretório de identidades, política de senha
- preferences/: Preference Store (tema, sidebar)
- panels/: painéis efêmeros e regra de clique externo
- layout/: viewport, menu por papel e geometria do shell
- toasts/: feedback transitório
- shell/: fachada exposta a quem renderiza
- infra/: backends de armazenamento durável
- protocols/: contratos/interfaces
- observability/: correlation_id e métricas via logs
- constants/: chaves de armazenamento

Padrão: app executa; fsm governa a sessão; config configura; utils apoia.
"""
