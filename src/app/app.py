"""Entrypoint de linha de comando do shell da clínica.

Opera o shell headless sobre o armazenamento durável configurado
(STORAGE_BACKEND), útil para inspeção e para scripts de suporte.

Uso:
    python -m app.app status
    python -m app.app login --email admin@clinic.com --password admin123
    python -m app.app logout
    python -m app.app toggle-theme
    python -m app.app toggle-sidebar
"""

from __future__ import annotations

import argparse
import asyncio
import json
from typing import TYPE_CHECKING

from app.bootstrap import build_shell, initialize_app, validate_runtime_settings
from app.shell import LOGOUT_PERSIST_FAILED_MESSAGE
from config.logging import get_logger

if TYPE_CHECKING:
    from app.shell import DashboardShell

logger = get_logger(__name__)


def describe(shell: DashboardShell) -> dict[str, object]:
    """Resumo do shell sem dados sensíveis."""
    identity = shell.current_identity
    return {
        "authenticated": shell.is_authenticated,
        "role": identity.role.value if identity else None,
        "name": identity.name if identity else None,
        "theme": shell.theme.value,
        "sidebar_collapsed": shell.sidebar_collapsed,
        "unread_notifications": shell.notifications.unread_count,
    }


async def run(args: argparse.Namespace) -> int:
    shell = build_shell()
    shell.start()
    try:
        if args.command == "login":
            result = await shell.login(args.email, args.password)
            if not result.success:
                print(result.error)
                return 1
        elif args.command == "logout":
            if not shell.logout():
                print(LOGOUT_PERSIST_FAILED_MESSAGE)
                return 1
        elif args.command == "toggle-theme":
            shell.toggle_theme()
        elif args.command == "toggle-sidebar":
            shell.toggle_sidebar()

        print(json.dumps(describe(shell), ensure_ascii=False))
        return 0
    finally:
        shell.stop()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Shell do back office da clínica")
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("status", help="Mostra sessão e preferências")
    login = sub.add_parser("login", help="Autentica contra o diretório")
    login.add_argument("--email", required=True)
    login.add_argument("--password", required=True)
    sub.add_parser("logout", help="Encerra a sessão persistida")
    sub.add_parser("toggle-theme", help="Alterna claro/escuro")
    sub.add_parser("toggle-sidebar", help="Recolhe/expande a sidebar")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    initialize_app()
    validate_runtime_settings()
    return asyncio.run(run(args))


if __name__ == "__main__":
    raise SystemExit(main())
