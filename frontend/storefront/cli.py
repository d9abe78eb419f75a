"""
Storefront CLI - browse the catalog and create products from a terminal
"""
import asyncio
import logging
import sys
from typing import Optional

import click

from storefront.api import ProductApiClient, ProductCreateError, ProductQuery
from storefront.config import StorefrontConfig
from storefront.constants import PRICE_RANGE
from storefront.filters import ProductFilterState
from storefront.models import Product
from storefront.utils.text_utils import highlight_search_term

logger = logging.getLogger(__name__)

NAME_WIDTH = 40


def setup_logging(debug: bool = False) -> None:
    """Log to stderr; warnings and errors only unless debug"""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[%(name)s] %(levelname)s: %(message)s"))
    root_logger.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger('httpx').setLevel(logging.DEBUG if debug else logging.WARNING)


def _highlight(word: str) -> str:
    return click.style(word, fg='yellow', bold=True)


def render_product(product: Product, search_term: str) -> str:
    name = product.name
    padding = max(NAME_WIDTH - len(name), 1)
    name = highlight_search_term(name, search_term, wrap=_highlight)
    stock = "-" if product.stock is None else str(product.stock)
    return f"{name}{' ' * padding}{product.price:>10,.2f}  {stock:>6}"


@click.group()
@click.option('--debug', is_flag=True, help='Enable detailed debug output')
@click.option('--api-url', default=None, help='Catalog API base URL (default: CATALOG_API_URL)')
@click.pass_context
def cli(ctx, debug: bool, api_url: Optional[str]):
    """Product catalog storefront"""
    ctx.ensure_object(dict)
    setup_logging(debug=debug)

    try:
        config = StorefrontConfig.from_env()
    except ValueError as e:
        click.secho(f"Error initializing configuration: {e}", fg='red', err=True)
        ctx.exit(1)

    if api_url:
        config.api_url = api_url

    ctx.obj['config'] = config
    if 'client' not in ctx.obj:
        ctx.obj['client'] = ProductApiClient(base_url=config.api_url, timeout=config.timeout)


@cli.command('list')
@click.option('--search', default="", help='Search by name (ignores accents and punctuation)')
@click.option('--min-price', type=float, default=PRICE_RANGE['MIN'], show_default=True)
@click.option('--max-price', type=float, default=PRICE_RANGE['MAX'], show_default=True)
@click.option('--desc', is_flag=True, help='Sort by price, highest first')
@click.pass_context
def list_products(ctx, search: str, min_price: float, max_price: float, desc: bool):
    """List products matching the filters"""
    config: StorefrontConfig = ctx.obj['config']
    query = ProductQuery(ctx.obj['client'], stale_time=config.stale_time)

    products = asyncio.run(query.fetch())

    state = ProductFilterState(products)
    state.update_search_term(search)
    try:
        state.update_price_range((min_price, max_price))
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'--min-price' / '--max-price'")
    state.update_sort_order(not desc)

    visible = state.filtered_products

    if not visible:
        click.echo("No products match your filters.")
        if state.has_active_filters:
            click.echo("Try a different search or widen the price range.")
    else:
        click.secho(f"{'Product':<{NAME_WIDTH}}{'Price':>10}  {'Stock':>6}", bold=True)
        for product in visible:
            click.echo(render_product(product, state.search_term))

    stats = state.stats()
    click.echo("")
    click.echo(stats.summary)
    if stats.search_term:
        click.echo(f'Search: "{stats.search_term}" (smart search ignores accents and special characters)')


@cli.command('create')
@click.argument('name')
@click.option('--price', type=float, required=True, help='Price, greater than 0')
@click.option('--stock', type=int, required=True, help='Units in stock, 0 or more')
@click.pass_context
def create_product(ctx, name: str, price: float, stock: int):
    """Create a product in the catalog API"""
    client: ProductApiClient = ctx.obj['client']

    try:
        product = asyncio.run(client.create_product({"name": name, "price": price, "stock": stock}))
    except ProductCreateError as e:
        click.secho(f"Error creating product: {e}", fg='red', err=True)
        ctx.exit(1)

    click.secho(f"Product created: {product.name} (id {product.id})", fg='green')


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
