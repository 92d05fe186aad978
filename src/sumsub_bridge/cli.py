"""CLI утилита: подписанные запросы к Sumsub и сервер вебхуков."""

import argparse
import json
import sys

import structlog

from sumsub_bridge.client.sumsub import SumsubClient, random_external_user_id
from sumsub_bridge.infrastructure.logging import configure_logging
from sumsub_bridge.services.errors import MissingCredential, SumsubAPIError, TransportFailure
from sumsub_bridge.settings import get_settings

log = structlog.get_logger()


def _print_json(data: object) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def cmd_applicant_status(args: argparse.Namespace) -> int:
    """Печатает данные аппликанта."""
    with SumsubClient.from_settings(get_settings()) as client:
        _print_json(client.get_applicant(args.applicant_id))
    return 0


def cmd_list_levels(args: argparse.Namespace) -> int:
    with SumsubClient.from_settings(get_settings()) as client:
        _print_json(client.list_applicant_levels())
    return 0


def cmd_sdk_token(args: argparse.Namespace) -> int:
    """Создаёт access token для WebSDK (userId случайный, если не задан)."""
    settings = get_settings()
    user_id = args.user_id or random_external_user_id()
    level_name = args.level_name or settings.sumsub_level_name
    ttl = args.ttl if args.ttl is not None else settings.sumsub_token_ttl_seconds

    print(f"External UserID: {user_id}")
    with SumsubClient.from_settings(settings) as client:
        _print_json(client.create_access_token(user_id, level_name, ttl))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Поднимает HTTP сервер вебхуков (uvicorn)."""
    import uvicorn

    from sumsub_bridge.main import create_app

    settings = get_settings()
    app = create_app(settings)
    host = args.host if args.host is not None else settings.webhook_host
    port = args.port if args.port is not None else settings.webhook_port
    log.info("webhook_server_starting", host=host, port=port)
    uvicorn.run(app, host=host, port=port, log_level=settings.log_level.lower())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sumsub-bridge", description="Sumsub bridge: CLI")
    sub = parser.add_subparsers(dest="cmd", required=True)

    p_status = sub.add_parser("applicant-status", help="Данные/статус аппликанта")
    p_status.add_argument("applicant_id", help="ID аппликанта в Sumsub")
    p_status.set_defaults(func=cmd_applicant_status)

    p_levels = sub.add_parser("list-levels", help="Список уровней верификации")
    p_levels.set_defaults(func=cmd_list_levels)

    p_token = sub.add_parser("sdk-token", help="Создать access token для WebSDK")
    p_token.add_argument("--user-id", default=None, help="externalUserId (по умолчанию случайный)")
    p_token.add_argument("--level-name", default=None, help="Уровень (SUMSUB_LEVEL_NAME)")
    p_token.add_argument("--ttl", type=int, default=None, help="TTL токена в секундах")
    p_token.set_defaults(func=cmd_sdk_token)

    p_serve = sub.add_parser("serve", help="Запустить приём вебхуков")
    p_serve.add_argument("--host", default=None)
    p_serve.add_argument("--port", type=int, default=None)
    p_serve.set_defaults(func=cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Точка входа CLI."""
    args = build_parser().parse_args(argv)
    configure_logging()
    try:
        return int(args.func(args))
    except MissingCredential as e:
        # Без секрета дальше ничего корректного сделать нельзя.
        log.error("startup_failed", missing=e.variable)
        return 1
    except (SumsubAPIError, TransportFailure) as e:
        log.error("sumsub_call_failed", err=str(e))
        return 2


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
