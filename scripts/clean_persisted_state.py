#!/usr/bin/env python3
"""Remove valores ilegíveis do armazenamento durável do shell.

Verifica as chaves user/theme/sidebarCollapsed do backend configurado
(STORAGE_BACKEND) e lista as que o shell descartaria ao iniciar.

Uso:
    python scripts/clean_persisted_state.py --apply

Padrão: dry-run (não escreve nada).
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, replace

from app.bootstrap import create_storage
from app.constants.storage_keys import ALL_KEYS, SIDEBAR_COLLAPSED_KEY, THEME_KEY, USER_KEY
from app.domain.identity import Identity
from app.preferences import ThemeMode
from utils.errors import CorruptPersistedStateError


@dataclass(frozen=True)
class CleanupStats:
    scanned: int = 0
    invalid: int = 0
    removed: int = 0


def is_valid_value(key: str, raw: str) -> bool:
    if key == USER_KEY:
        try:
            Identity.from_storage_json(raw)
        except CorruptPersistedStateError:
            return False
        return True
    if key == THEME_KEY:
        return raw in {m.value for m in ThemeMode}
    if key == SIDEBAR_COLLAPSED_KEY:
        return raw in {"true", "false"}
    return True


def clean_storage(*, apply: bool) -> CleanupStats:
    storage = create_storage()
    stats = CleanupStats()

    for key in ALL_KEYS:
        raw = storage.get_item(key)
        if raw is None:
            continue
        stats = replace(stats, scanned=stats.scanned + 1)
        if is_valid_value(key, raw):
            continue

        stats = replace(stats, invalid=stats.invalid + 1)
        print(f"inválido: {key}")
        if apply and storage.remove_item(key):
            stats = replace(stats, removed=stats.removed + 1)

    return stats


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--apply",
        action="store_true",
        help="Remove os valores inválidos. Sem esta flag executa dry-run.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    stats = clean_storage(apply=args.apply)
    mode = "apply" if args.apply else "dry-run"
    print(
        f"[{mode}] scanned={stats.scanned} "
        f"invalid={stats.invalid} removed={stats.removed}"
    )


if __name__ == "__main__":
    main()
