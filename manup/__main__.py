#!/usr/bin/env python3
"""
CLI do ManUp - verifica a policy de atualização.

Uso:
    python -m manup check --url https://exemplo.com/manup.json --platform ios --version 1.2.3
    python -m manup check --json

Exit codes:
    0 = NOP / OPTIONAL (app pode continuar)
    1 = erro
    2 = MANDATORY
    3 = MAINTENANCE
"""
import argparse
import asyncio
import json
import logging
import sys

from manup.core.config import settings
from manup.core.exceptions import ManUpException
from manup.core.logging import setup_logging
from manup.services.gate import (
    FixedPlatform,
    StaticVersionProvider,
    Verdict,
    create_update_gate,
)
from manup.services.http_client import close_http_client
from manup.services.redis import RedisCacheStore

logger = logging.getLogger("manup.cli")

EXIT_CODES = {
    Verdict.NOP: 0,
    Verdict.OPTIONAL: 0,
    Verdict.MANDATORY: 2,
    Verdict.MAINTENANCE: 3,
}
EXIT_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="manup", description="Gate de atualização obrigatória")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Busca a policy e imprime o verdict")
    check.add_argument("--url", default=None, help="URL da policy (default: MANUP_URL)")
    check.add_argument("--platform", default=None, help="ios | android | windows (default: detectar)")
    check.add_argument("--version", dest="app_version", default=None, help="Versão do app (X.Y.Z)")
    check.add_argument("--redis-url", default=None, help="Redis para cache (default: REDIS_URL)")
    check.add_argument("--json", action="store_true", help="Imprime o resultado completo em JSON")
    return parser


async def run_check(args: argparse.Namespace) -> int:
    overrides = {}
    if args.url:
        overrides["url"] = args.url
    if args.platform:
        overrides["platform"] = FixedPlatform(args.platform)
    if args.app_version:
        overrides["version_provider"] = StaticVersionProvider(args.app_version)
    if args.redis_url:
        overrides["cache_store"] = RedisCacheStore(url=args.redis_url)

    gate = create_update_gate(settings, **overrides)
    try:
        result = await gate.check()
    except ManUpException as e:
        logger.error(f"[ManUp] Check falhou: {e}")
        return EXIT_ERROR
    finally:
        await gate.close()
        await close_http_client()

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        print(result.verdict.value)
        if result.update_available:
            print(result.record.url)

    return EXIT_CODES[result.verdict]


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(settings.ENVIRONMENT, settings.LOG_LEVEL)

    if args.command == "check":
        return asyncio.run(run_check(args))

    parser.print_help()
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
