"""Command-line interface for the Virtual Stylist.

Usage:
    python -m stylist.cli suggest --product sku789 --cart sku001
    python -m stylist.cli catalog
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List, Optional

from stylist.core.use_cases import GetSuggestionUseCase, OutfitRecommender
from stylist.infrastructure.cart import InMemoryCartStore
from stylist.infrastructure.catalog import JsonCatalogRepository
from stylist.infrastructure.llm import build_suggestion_source
from stylist.utils import get_config, get_logger, log_execution_time, set_package_log_level
from stylist.utils.exceptions import AppException

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="stylist",
        description="Suggest one garment that completes an outfit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Suggest for the default product page with an empty cart
  python -m stylist.cli suggest

  # Suggest for a t-shirt with jeans already in the cart, rules only
  python -m stylist.cli suggest --product sku001 --cart sku005 --offline

  # Machine-readable output
  python -m stylist.cli suggest --json

  # List the catalog from a custom file
  python -m stylist.cli --catalog data/catalog.json catalog
        """
    )

    parser.add_argument(
        '--config',
        type=Path,
        default=None,
        help='Path to configuration file (default: auto-detect)'
    )

    parser.add_argument(
        '--catalog',
        type=Path,
        default=None,
        help='Catalog JSON file (overrides config)'
    )

    parser.add_argument(
        '--log-level',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help='Override log level'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    suggest = subparsers.add_parser('suggest', help='Suggest a complementary product')
    suggest.add_argument(
        '--product',
        type=str,
        default=None,
        help='Id of the product being viewed (default: configured current product)'
    )
    suggest.add_argument(
        '--cart',
        type=str,
        nargs='*',
        default=None,
        help='Product ids already in the cart (default: configured seed cart)'
    )
    suggest.add_argument(
        '--offline',
        action='store_true',
        help='Skip the chat model and use the rule-based stylist only'
    )
    suggest.add_argument(
        '--json',
        action='store_true',
        help='Print the suggestion as JSON'
    )

    subparsers.add_parser('catalog', help='List catalog products')

    return parser.parse_args(argv)


def _print_catalog(catalog: JsonCatalogRepository) -> None:
    print(f"{'ID':<10} {'NAME':<22} {'CATEGORY':<9} {'COLOR':<7} {'FIT':<10} PRICE")
    for product in catalog.get_all():
        print(
            f"{product.id:<10} {product.name:<22} {product.category:<9} "
            f"{product.color:<7} {product.fit:<10} {product.price:.2f}"
        )


async def _suggest(args: argparse.Namespace, config, catalog: JsonCatalogRepository) -> int:
    cart_ids = args.cart if args.cart is not None else config.cart.seed_product_ids
    cart_store = InMemoryCartStore.seeded(catalog, cart_ids)

    source = None if args.offline else build_suggestion_source(config.llm)
    recommender = OutfitRecommender(source=source, timeout_seconds=config.llm.timeout_seconds)
    use_case = GetSuggestionUseCase(catalog, cart_store, recommender)

    with log_execution_time(logger, "suggestion"):
        result = await use_case.execute(product_id=args.product)

    if not result.success:
        print(f"\n✗ No suggestion: {result.message}")
        return 1

    suggestion = result.suggestion
    if args.json:
        print(json.dumps(suggestion.to_payload(), indent=2))
        return 0

    print("\n" + "=" * 60)
    print("STYLIST SUGGESTION")
    print("=" * 60)
    print(f"Viewing:   {result.current_product.name} ({result.current_product.id})")
    print(f"Cart:      {result.cart_size} item(s)")
    print(f"Suggested: {suggestion.product.name} ({suggestion.suggested_product_id})")
    print(f"Tags:      {', '.join(tag.value for tag in suggestion.style_tags)}")
    print(f"Source:    {suggestion.source.value}")
    print(f"\n{suggestion.reason}")
    print("=" * 60)
    return 0


async def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_args(argv)

    try:
        config = get_config(args.config)

        set_package_log_level(args.log_level or config.log_level)

        catalog_path = args.catalog if args.catalog is not None else config.catalog.path
        catalog = JsonCatalogRepository(
            path=catalog_path,
            current_product_id=config.catalog.current_product_id,
        )

        if args.command == 'catalog':
            _print_catalog(catalog)
            return 0

        return await _suggest(args, config, catalog)

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        print("\n✗ Cancelled by user")
        return 1

    except AppException as e:
        logger.error(f"Stylist failed: {e}")
        print(f"\n✗ {e}")
        return 1

    except ValueError as e:
        # pydantic ValidationError from an invalid config file
        logger.error(f"Invalid configuration: {e}")
        print(f"\n✗ Invalid configuration: {e}")
        return 1


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == '__main__':
    run()
