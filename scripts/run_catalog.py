#!/usr/bin/env python3
"""
Load the product catalog and print the sorted list (or one product) to the terminal.

Usage (from repo root):
  python scripts/run_catalog.py                    # list, sorted by name
  python scripts/run_catalog.py --sort count
  python scripts/run_catalog.py --product 3        # detail view with comments
  python scripts/run_catalog.py --local            # read data/products.json instead of the API

Start the API itself with:
  uvicorn catalog.api.main:app --host 127.0.0.1 --port 8000
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from dotenv import load_dotenv

load_dotenv()

from catalog.integrations.clients.mocks.local_products import LocalProductsClient
from catalog.integrations.clients.real_http.products_api import RealProductsClient
from catalog.utils.config_loader import load_catalog_config
from catalog.views.product_detail import ProductDetailView
from catalog.views.product_list import ProductListView


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


async def show_list(client, sort_by: str) -> int:
    view = ProductListView(client, sort_by=sort_by)
    await view.activate()
    if view.load_state.is_failed:
        print(f"Could not load products: {view.load_state.reason}")
        return 1

    print(f"\n### Products (sorted by {view.sort_by.value})\n")
    for p in view.sorted_products():
        print(f"[{p.id}] {p.name}")
        print(f"    count={p.count} size={p.size.width}x{p.size.height} weight={p.weight}")
        print(f"    image={p.image_url}")
    if not view.products:
        print("(no products)")
    return 0


async def show_product(client, product_id: int) -> int:
    view = ProductDetailView(client, product_id)
    await view.activate()
    if view.is_loading:
        print(f"Could not load product {product_id}: {view.load_state.reason}")
        return 1

    p = view.product
    print(f"\n### {p.name}\n")
    print(f"Count: {p.count}")
    print(f"Size: {p.size.width} x {p.size.height}")
    print(f"Weight: {p.weight}")
    print("\nComments:")
    for c in p.comments:
        print(f"  - {c.description} ({c.date})")
    if not p.comments:
        print("  (none)")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Print the product catalog from the product service.")
    parser.add_argument("--sort", choices=["alphabetical", "count"], default=None, help="List order")
    parser.add_argument("--product", type=int, default=None, help="Show one product by id")
    parser.add_argument("--local", action="store_true", help="Read data/products.json instead of the API")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)
    cfg = load_catalog_config()

    if args.local or cfg.local_data.enabled:
        client = LocalProductsClient(data_path=cfg.local_data.resolved_path())
    else:
        client = RealProductsClient(base_url=cfg.api.base_url, timeout_seconds=cfg.api.timeout_seconds)

    if args.product is not None:
        return asyncio.run(show_product(client, args.product))
    return asyncio.run(show_list(client, args.sort or cfg.views.default_sort))


if __name__ == "__main__":
    sys.exit(main())
