"""Armazenamento durável em arquivo JSON local.

Um único objeto JSON {chave: valor} por arquivo. Cada escrita regrava
o arquivo inteiro via arquivo temporário + os.replace, de modo que um
crash no meio da escrita nunca deixa o arquivo pela metade.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from app.protocols.storage import KeyValueStorageProtocol
from config.logging import log_fallback
from utils.errors import StorageUnavailableError

logger = logging.getLogger(__name__)


class FileStorage(KeyValueStorageProtocol):
    """Store chave/valor persistido em arquivo JSON.

    Args:
        path: Caminho do arquivo (diretórios são criados na primeira escrita)
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        """Lê o arquivo inteiro; arquivo ilegível conta como vazio."""
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StorageUnavailableError(f"Falha ao ler {self._path}") from exc

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            log_fallback(logger, "file_storage", reason="unreadable_storage_file")
            return {}

        if not isinstance(data, dict):
            log_fallback(logger, "file_storage", reason="unexpected_storage_shape")
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write_all(self, items: dict[str, str]) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(items, ensure_ascii=False, sort_keys=True),
                encoding="utf-8",
            )
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise StorageUnavailableError(f"Falha ao gravar {self._path}") from exc

    def get_item(self, key: str) -> str | None:
        """Lê valor da chave (None se ausente)."""
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        """Grava valor na chave e persiste o arquivo."""
        items = self._read_all()
        items[key] = str(value)
        self._write_all(items)
        logger.debug("storage_item_saved", extra={"storage_key": key, "backend": "file"})

    def remove_item(self, key: str) -> bool:
        """Remove a chave. Retorna False se não existia."""
        items = self._read_all()
        if key not in items:
            return False
        del items[key]
        self._write_all(items)
        return True

    def keys(self) -> list[str]:
        """Lista as chaves presentes."""
        return list(self._read_all())
