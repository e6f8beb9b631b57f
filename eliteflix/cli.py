"""
CLI Commands

Out-of-band operations run with ``flask --app app <command>``.
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from werkzeug.exceptions import NotFound

from eliteflix.services.catalog import seed_products, assign_credentials


@click.command('seed-products')
@with_appcontext
def seed_products_command():
    """Seed the default catalog if it is empty."""
    inserted = seed_products()
    if inserted:
        click.echo(f'Inserted {inserted} products.')
    else:
        click.echo('Catalog already has products, nothing to do.')


@click.command('assign-credentials')
@click.argument('order_id', type=int)
@click.option('--credentials', default=None,
              help='Text handed to the client. Defaults to the product template.')
@click.option('--days', type=int, default=None, help='Subscription length in days.')
@with_appcontext
def assign_credentials_command(order_id, credentials, days):
    """Fulfill ORDER_ID by hand."""
    if days is None:
        days = current_app.config['FULFILLMENT_DAYS']
    try:
        order = assign_credentials(order_id, credentials=credentials, days=days)
    except NotFound:
        raise click.ClickException(f'Order {order_id} does not exist.')
    click.echo(f'Order {order.id} active until {order.end_date.isoformat()}.')


def register_commands(app):
    app.cli.add_command(seed_products_command)
    app.cli.add_command(assign_credentials_command)
