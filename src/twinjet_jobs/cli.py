# src/twinjet_jobs/cli.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict

import requests

from .api.client import JobsClient
from .config.env import EnvError, get_app_env
from .config.logging_config import get_logger
from .errors import AddressValidationError, ConfigurationError, MissingAddressError, MissingIdentifierError


def _common_options() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(add_help=False)
    p.add_argument(
        "--env-file",
        type=Path,
        default=Path(".env"),
        help="Path to a .env file with TWINJET_* settings. Default: ./.env",
    )
    p.add_argument("--base-url", default=None,
                   help="Override the API base URL.")
    p.add_argument("--timeout-ms", type=int, default=None,
                   help="Request timeout in milliseconds.")
    p.add_argument(
        "--test-mode",
        action="store_true",
        help="Create jobs with live=false (not processed by TwinJet).",
    )
    p.add_argument(
        "--replay-file",
        type=Path,
        default=None,
        help="JSON file of canned responses; no network calls are made.",
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). Default: INFO",
    )
    p.add_argument("--log-file", type=Path, default=None,
                   help="Also write logs to this file.")
    p.add_argument(
        "--no-console",
        action="store_true",
        help="Disable console logging (file logging remains).",
    )
    return p


def _identifier_options() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(add_help=False)
    g = p.add_argument_group("job identifier (at least one)")
    g.add_argument("--request-id", default=None)
    g.add_argument("--job-id", type=int, default=None)
    g.add_argument("--external-id", default=None)
    g.add_argument("--reference", default=None)
    return p


def build_parser() -> argparse.ArgumentParser:
    common = _common_options()
    ident = _identifier_options()

    p = argparse.ArgumentParser(
        prog="twinjet-jobs",
        description="Create, cancel, update and query TwinJet delivery jobs; validate addresses.",
    )
    sub = p.add_subparsers(dest="command", required=True)

    c = sub.add_parser("create", parents=[common],
                       help="Create a job from a JSON payload file; prints the request_id.")
    c.add_argument("payload", type=Path, help="JSON file with the job payload.")

    u = sub.add_parser("update", parents=[common, ident],
                       help="Edit an existing job with a partial JSON payload.")
    u.add_argument("payload", type=Path,
                   help="JSON file with the fields to change.")

    sub.add_parser("cancel", parents=[common, ident],
                   help="Cancel an existing job.")
    sub.add_parser("status", parents=[common, ident],
                   help="Print the status of an existing job.")

    v = sub.add_parser("validate", parents=[common],
                       help="Validate pick/deliver addresses against the delivery zone.")
    v.add_argument("payload", type=Path,
                   help="JSON file with pick_address and/or deliver_address.")
    return p


def _read_payload(path: Path) -> Dict[str, Any]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object")
    return data


def _identifier(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "request_id": args.request_id,
        "job_id": args.job_id,
        "external_id": args.external_id,
        "reference": args.reference,
    }


def _run(client: JobsClient, args: argparse.Namespace, payload: Dict[str, Any]) -> Any:
    if args.command == "create":
        return {"request_id": client.create(payload)}
    if args.command == "update":
        return client.update(_identifier(args), payload).to_dict()
    if args.command == "cancel":
        return client.cancel(_identifier(args)).to_dict()
    if args.command == "status":
        return client.status(_identifier(args)).to_dict()
    if args.command == "validate":
        return client.address_validation(payload).to_dict()
    raise ValueError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logger = get_logger(
        "twinjet_jobs",
        level=args.log_level,
        console=not args.no_console,
        log_file=args.log_file,
    )
    logger.debug("Logger initialized.")

    try:
        options = get_app_env(args.env_file, strict=False)
    except EnvError as e:
        logger.error("Environment error: %s", e)
        return 2

    payload: Dict[str, Any] = {}
    if getattr(args, "payload", None) is not None:
        try:
            payload = _read_payload(args.payload)
        except (OSError, ValueError) as e:
            logger.error("Cannot read payload %s: %s", args.payload, e)
            return 2

    transport = None
    if args.replay_file:
        from .api.replay import ReplayTransport

        try:
            transport = ReplayTransport(args.replay_file)
        except ValueError as e:
            logger.error("Replay file error: %s", e)
            return 2
        logger.info("Replay mode enabled: %s", args.replay_file)

    try:
        client = JobsClient(
            options,
            transport=transport,
            base_url=args.base_url,
            timeout=args.timeout_ms,
            live=False if args.test_mode else None,
        )
    except ConfigurationError as e:
        logger.error("Configuration error: %s (set TWINJET_API_TOKEN)", e)
        return 2

    with client:
        logger.info("TwinJet %s (base=%s live=%s)", args.command,
                    client.config.base_url, client.config.live)
        try:
            result = _run(client, args, payload)
        except (MissingAddressError, MissingIdentifierError) as e:
            logger.error("%s", e)
            return 2
        except AddressValidationError as e:
            logger.error("Address validation failed: %s", e)
            return 1
        except requests.RequestException as e:
            logger.error("TwinJet request failed: %s", e)
            return 1
        except KeyError as e:
            logger.error("Unexpected TwinJet response, missing %s", e)
            return 1
        except (TypeError, ValueError) as e:
            logger.error("Invalid payload: %s", e)
            return 2

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
