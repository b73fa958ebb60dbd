#!/usr/bin/env python3
"""
Listar usuarios gravados no arquivo JSON.

Uso:
  python scripts/list_users.py [--amount 10] [--offset 0] [--storage data/user.json]
"""
from __future__ import annotations

import argparse
import sys

from records_api.core.config import get_settings
from records_api.core.logging_config import configure_logging
from records_api.repositories.json_user_repository import JsonUserRepository


def main(argv: list[str] | None = None) -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Listar usuarios do arquivo JSON")
    ap.add_argument("--amount", type=int, default=settings.default_page_size, help="Quantidade por pagina")
    ap.add_argument("--offset", type=int, default=0, help="Quantos usuarios pular")
    ap.add_argument("--storage", help="Arquivo JSON (default: USER_STORAGE_PATH)")
    args = ap.parse_args(argv)

    if args.amount < 0 or args.offset < 0:
        raise SystemExit("amount e offset devem ser >= 0")

    configure_logging(settings.log_level)
    repo = JsonUserRepository(args.storage or settings.resolved_storage_path)
    users = repo.list_users(args.amount, args.offset)
    for user in users:
        print(f"{user.id}\t{user.name}\t{user.lastname}")
    print(f"{len(users)} de {repo.count()} usuario(s)")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
