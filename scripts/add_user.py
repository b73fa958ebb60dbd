#!/usr/bin/env python3
"""
Cadastrar um novo usuario diretamente no arquivo JSON.

Uso:
  python scripts/add_user.py --name Ada --lastname Lovelace [--storage data/user.json]
"""
from __future__ import annotations

import argparse
import sys

from records_api.core.config import get_settings
from records_api.core.logging_config import configure_logging
from records_api.domain.users import UserInput
from records_api.repositories.json_user_repository import JsonUserRepository


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Cadastrar usuario no arquivo JSON")
    ap.add_argument("--name", required=True, help="Nome do usuario")
    ap.add_argument("--lastname", required=True, help="Sobrenome do usuario")
    ap.add_argument("--storage", help="Arquivo JSON (default: USER_STORAGE_PATH)")
    args = ap.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    try:
        payload = UserInput(name=args.name, lastname=args.lastname)
    except ValueError:
        raise SystemExit("Nome e sobrenome nao podem ser vazios")

    repo = JsonUserRepository(args.storage or settings.resolved_storage_path)
    user = repo.upsert(payload)
    print("OK: usuario cadastrado")
    print(f"  ID: {user.id}")
    print(f"  Nome: {user.name} {user.lastname}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
