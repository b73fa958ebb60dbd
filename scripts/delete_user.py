#!/usr/bin/env python3
"""
Remover um usuario (ID) do arquivo JSON.

Uso:
  python scripts/delete_user.py --id 3 [--storage data/user.json]
"""
from __future__ import annotations

import argparse
import sys

from records_api.core.config import get_settings
from records_api.core.logging_config import configure_logging
from records_api.domain.errors import NotFoundError
from records_api.repositories.json_user_repository import JsonUserRepository


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Remover usuario do arquivo JSON")
    ap.add_argument("--id", type=int, required=True, help="ID do usuario a remover")
    ap.add_argument("--storage", help="Arquivo JSON (default: USER_STORAGE_PATH)")
    args = ap.parse_args(argv)

    settings = get_settings()
    configure_logging(settings.log_level)
    repo = JsonUserRepository(args.storage or settings.resolved_storage_path)
    try:
        user = repo.find_one_by_id(args.id)
    except NotFoundError:
        raise SystemExit(f"Usuario '{args.id}' nao existe")

    repo.delete(user)
    print(f"OK: usuario {args.id} removido ({user.name} {user.lastname})")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
