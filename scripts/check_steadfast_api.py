#!/usr/bin/env python3
"""Checagem somente-leitura da API Steadfast com credenciais reais.

Uso:
    STEADFAST_API_KEY=... STEADFAST_SECRET_KEY=... \
        python scripts/check_steadfast_api.py [--only balance payments]

Nenhum pedido ou devolução é criado. Sai com código 1 se alguma checagem falhar.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from api.connectors.steadfast import SteadfastClient, SteadfastError
from config.settings import get_steadfast_settings


@dataclass(frozen=True)
class CheckResult:
    name: str
    ok: bool
    detail: str


def _build_checks(client: SteadfastClient) -> dict[str, Callable[[], Awaitable[str]]]:
    async def balance() -> str:
        response = await client.balance.get_balance()
        return f"current_balance={response.current_balance}"

    async def police_stations() -> str:
        return f"count={len(await client.police_stations.get_police_stations())}"

    async def payments() -> str:
        return f"count={len(await client.payments.get_payments())}"

    async def return_requests() -> str:
        return f"count={len(await client.returns.get_return_requests())}"

    return {
        "balance": balance,
        "police_stations": police_stations,
        "payments": payments,
        "return_requests": return_requests,
    }


async def run_checks(client: SteadfastClient, names: list[str] | None = None) -> list[CheckResult]:
    checks = _build_checks(client)
    results: list[CheckResult] = []
    for name, check in checks.items():
        if names and name not in names:
            continue
        try:
            detail = await check()
        except SteadfastError as exc:
            results.append(CheckResult(name, False, f"{exc.kind}: {exc.message}"))
        else:
            results.append(CheckResult(name, True, detail))
    return results


async def _main(names: list[str] | None) -> int:
    settings = get_steadfast_settings()
    try:
        client = SteadfastClient.from_settings(settings)
    except SteadfastError as exc:
        print(f"config: {exc.message}", file=sys.stderr)
        return 1

    async with client:
        results = await run_checks(client, names)

    for result in results:
        print(f"[{'OK' if result.ok else 'FAIL'}] {result.name}: {result.detail}")
    return 0 if all(result.ok for result in results) else 1


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--only",
        nargs="*",
        choices=["balance", "police_stations", "payments", "return_requests"],
        help="Executa só as checagens listadas",
    )
    args = parser.parse_args()
    return asyncio.run(_main(args.only))


if __name__ == "__main__":
    raise SystemExit(main())
