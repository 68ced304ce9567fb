from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any

from pydantic import BaseModel

from lifx_cloud.client import LifxClient, LifxConfigError, LifxDecodeError, LifxTransportError
from lifx_cloud.commands import EffectsOff, State, Toggle
from lifx_cloud.config import LifxConfig


def _to_jsonable(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", exclude_none=True)
    if isinstance(value, list):
        return [_to_jsonable(v) for v in value]
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lifx-cloud")
    parser.add_argument("--token", default=os.getenv("LIFX_ACCESS_TOKEN"))
    parser.add_argument(
        "--endpoint",
        action="append",
        dest="endpoints",
        help="Base URL; repeat to configure fallbacks in order (default: $LIFX_API_ENDPOINTS).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log requests and fallbacks to stderr.")

    sub = parser.add_subparsers(dest="command", required=True)

    lights = sub.add_parser("lights", help="List lights.")
    lights.add_argument("selector", nargs="?", default="all")

    sub.add_parser("scenes", help="List scenes.")

    color = sub.add_parser("color", help="Validate a color string.")
    color.add_argument("color")

    power = sub.add_parser("power", help="Set power on or off.")
    power.add_argument("selector")
    power.add_argument("state", choices=["on", "off"])
    power.add_argument("--duration", type=float, default=None)

    toggle = sub.add_parser("toggle", help="Toggle power.")
    toggle.add_argument("selector")
    toggle.add_argument("--duration", type=int, default=None)

    off = sub.add_parser("effects-off", help="Stop running effects.")
    off.add_argument("selector")
    off.add_argument("--power-off", action="store_true")
    return parser


def _run(client: LifxClient, args: argparse.Namespace) -> Any:
    if args.command == "lights":
        return client.list_lights(args.selector)
    if args.command == "scenes":
        return client.list_scenes()
    if args.command == "color":
        return client.validate_color(args.color)
    if args.command == "power":
        return client.set_state(args.selector, State(power=args.state, duration=args.duration))
    if args.command == "toggle":
        return client.toggle(args.selector, Toggle(duration=args.duration))
    if args.command == "effects-off":
        return client.effects_off(args.selector, EffectsOff(power_off=args.power_off or None))
    raise ValueError(f"unknown command: {args.command}")


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if not args.token:
        print("Missing access token. Provide --token or set LIFX_ACCESS_TOKEN.", file=sys.stderr)
        raise SystemExit(2)

    config = LifxConfig(
        access_token=args.token,
        api_endpoints=args.endpoints or LifxConfig.from_env().api_endpoints,
    )

    try:
        client = LifxClient(config)
    except LifxConfigError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        raise SystemExit(2)

    with client:
        try:
            result = _run(client, args)
        except LifxTransportError as exc:
            print(f"No LIFX endpoint reachable (last tried {exc.endpoint}): {exc}", file=sys.stderr)
            raise SystemExit(1)
        except LifxDecodeError as exc:
            print(f"Unexpected response: HTTP {exc.status_code} {exc.body}", file=sys.stderr)
            raise SystemExit(1)

    print(json.dumps(_to_jsonable(result), indent=2))


if __name__ == "__main__":
    main()
