"""CLI entry point."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from datetime import date
from pathlib import Path

from .config import load_config
from .estimator import DateEstimator
from .expiring import expiration_status, expiring_items, needs_restock
from .models import ItemDescriptor, TrackedItem, parse_iso_date
from .remote import create_backend
from .rules import DEFAULT_RULES


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="prox",
        description="Estimate expiration and restock dates for groceries",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to the config file (TOML)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # lookup
    lookup_parser = sub.add_parser("lookup", help="Look an item up in the rule table")
    lookup_parser.add_argument("name", type=str)
    lookup_parser.add_argument("--category", type=str, required=True)

    # estimate
    estimate_parser = sub.add_parser("estimate", help="Estimate dates for one item")
    estimate_parser.add_argument("name", type=str)
    estimate_parser.add_argument("--category", type=str, required=True)
    estimate_parser.add_argument(
        "--purchased", type=date.fromisoformat, default=None,
        help="Purchase date (YYYY-MM-DD, default: today)",
    )
    estimate_parser.add_argument(
        "--offline", action="store_true", help="Skip the remote estimator"
    )
    estimate_parser.add_argument("--json", action="store_true", help="Output JSON")

    # batch
    batch_parser = sub.add_parser(
        "batch", help="Estimate dates for a JSON list of items"
    )
    batch_parser.add_argument("file", type=str, help="JSON file ('-' for stdin)")
    batch_parser.add_argument(
        "--offline", action="store_true", help="Skip the remote estimator"
    )

    # expiring
    expiring_parser = sub.add_parser(
        "expiring", help="List tracked items that expire soon"
    )
    expiring_parser.add_argument("file", type=str, help="JSON file ('-' for stdin)")
    expiring_parser.add_argument(
        "--within", type=int, default=None, help="Window in days"
    )
    expiring_parser.add_argument(
        "--today", type=date.fromisoformat, default=None,
        help="Reference date (YYYY-MM-DD, default: today)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    match args.command:
        case "lookup":
            _cmd_lookup(args)
        case "estimate":
            asyncio.run(_cmd_estimate(config, args))
        case "batch":
            asyncio.run(_cmd_batch(config, args))
        case "expiring":
            _cmd_expiring(config, args)


def _build_estimator(config, offline: bool) -> DateEstimator:
    if offline:
        return DateEstimator()
    try:
        remote = create_backend(config)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(2)
    return DateEstimator(remote=remote)


def _read_json(path: str):
    if path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _cmd_lookup(args) -> None:
    pair = DEFAULT_RULES.lookup(args.name, args.category)
    note = "" if args.category in DEFAULT_RULES else "  (unknown category)"
    print(
        f"{args.name}: shelf life {pair.shelf_life_days} days, "
        f"restock {pair.restock_days} days{note}"
    )


async def _cmd_estimate(config, args) -> None:
    estimator = _build_estimator(config, args.offline)
    descriptor = ItemDescriptor(
        name=args.name,
        category=args.category,
        purchased_at=args.purchased or date.today(),
    )
    result = await estimator.estimate(descriptor)

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return
    print(f"{descriptor.name} [{descriptor.category}]")
    print(f"  Purchased:  {descriptor.purchased_at.isoformat()}")
    print(f"  Expires:    {result.estimated_expiration_at.isoformat()}")
    print(f"  Restock by: {result.estimated_restock_at.isoformat()}")
    print(f"  Source:     {result.source.value}")


async def _cmd_batch(config, args) -> None:
    records = _read_json(args.file)
    today = date.today()
    descriptors = [
        ItemDescriptor(
            name=r["name"],
            category=r.get("category", ""),
            purchased_at=parse_iso_date(r["purchasedAt"])
            if r.get("purchasedAt")
            else today,
        )
        for r in records
    ]

    estimator = _build_estimator(config, args.offline)
    results = await estimator.estimate_many(descriptors)

    data = [
        {
            "name": d.name,
            "category": d.category,
            "purchasedAt": d.purchased_at.isoformat(),
            **result.to_dict(),
        }
        for d, result in zip(descriptors, results)
    ]
    print(json.dumps(data, indent=2))


def _cmd_expiring(config, args) -> None:
    items = [TrackedItem.from_dict(r) for r in _read_json(args.file)]
    today = args.today or date.today()
    within = args.within if args.within is not None else config.expiring.within_days

    expiring = expiring_items(items, today, within_days=within)
    if not expiring:
        print("No items expiring soon.")
    else:
        print(f"{len(expiring)} items expiring within {within} days:")
        for item in expiring:
            status = expiration_status(item.estimated_expiration_at, today)
            print(
                f"  {item.name:<24} {item.quantity_label():<8} {status.label:<10} "
                f"{item.estimated_expiration_at.isoformat()}  [{item.category}]"
            )

    restock = needs_restock(items, today)
    if restock:
        print(f"\n{len(restock)} items due for restock:")
        for item in restock:
            print(f"  {item.name:<24} since {item.estimated_restock_at.isoformat()}")
