#!/usr/bin/env python3
"""Envia uma lista interativa via Evolution API a partir de arquivos JSON.

Uso:
    python scripts/send_list.py --params params.json
    python scripts/send_list.py --params params.json --items items.json --continue-on-fail

`params.json` contém os parâmetros do node (instanceName, remoteJid,
title, description, buttonText, footerText, enableAutoRows,
sectionsManual/sectionsAuto, options_message). `items.json` é uma lista
de objetos (ou `{"json": {...}}`) usados no modo automático.

Credenciais: EVOLUTION_API_URL e EVOLUTION_API_KEY.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from app.bootstrap import create_send_list_use_case, initialize_app, validate_runtime_settings
from app.infra.host import StaticExecutionContext
from app.observability import reset_correlation_id, set_correlation_id
from utils.errors import NodeOperationError


def _load_json(path: str) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _unwrap_items(raw: Any) -> list[dict[str, Any]]:
    if not isinstance(raw, list):
        raise ValueError("items deve ser uma lista JSON")
    items: list[dict[str, Any]] = []
    for entry in raw:
        if isinstance(entry, dict) and set(entry) <= {"json", "error"} and "json" in entry:
            items.append(dict(entry["json"]))
        else:
            items.append(dict(entry))
    return items


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Envia lista interativa via Evolution API.")
    parser.add_argument("--params", required=True, help="Arquivo JSON com parâmetros do node")
    parser.add_argument("--items", default=None, help="Arquivo JSON com items de entrada")
    parser.add_argument("--continue-on-fail", action="store_true")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--correlation-id", default=None)
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> int:
    context = StaticExecutionContext(
        parameters=_load_json(args.params),
        items=_unwrap_items(_load_json(args.items)) if args.items else None,
        continue_on_fail=args.continue_on_fail,
    )
    use_case = create_send_list_use_case()

    token = set_correlation_id(args.correlation_id)
    try:
        results = await use_case.execute(context)
    except NodeOperationError as exc:
        print(
            json.dumps(
                {"error": str(exc), "message": exc.summary, "description": exc.description},
                ensure_ascii=False,
            ),
            file=sys.stderr,
        )
        return 1
    finally:
        reset_correlation_id(token)

    print(json.dumps([item.to_dict() for item in results], ensure_ascii=False, indent=2))
    return 0 if all(item.error is None for item in results) else 2


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    initialize_app(args.log_level)
    validate_runtime_settings()
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
