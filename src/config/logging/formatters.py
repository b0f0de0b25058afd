"""Formatter JSON dos logs do shell (python-json-logger)."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
        "service",
    }
)

# levelname/name saem como level/logger
FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """JsonFormatter com os campos obrigatórios e demais `extra` ao lado.

    Nomes de operadores podem ter acentos ou escrita árabe, então o
    JSON não escapa não-ASCII. Exemplo de linha:

        {"asctime": "...", "correlation_id": "9f1c...", "level": "INFO",
         "logger": "app.sessions.store", "message": "login_succeeded",
         "service": "clinic_shell", "role": "doctor"}
    """
    fields = " ".join(f"%({name})s" for name in sorted(REQUIRED_LOG_FIELDS))
    return JsonFormatter(
        fields,
        rename_fields=FIELD_RENAME_MAP,
        json_ensure_ascii=False,
    )
