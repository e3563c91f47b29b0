"""
Maintenance commands, available as `flask --app run <command>`
"""

import click
from flask import current_app
from flask.cli import with_appcontext


def _services():
    return current_app.extensions['scripthub']


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create the schema and seed the default categories if needed"""
    from scripthub.utils.db_schema import initialize_database

    database = _services()['database']
    catalog, seeded = initialize_database(
        database,
        default_categories=current_app.config.get('DEFAULT_CATEGORIES'),
        legacy_file=current_app.config.get('LEGACY_DB_FILE'),
    )
    click.echo(f"Database ready at {database.db_file}")
    if seeded:
        click.echo("Default categories seeded")
    click.echo(f"Categories: {catalog.count_categories()}")


@click.command('check-db')
@with_appcontext
def check_db_command():
    """Show tables and row counts"""
    database = _services()['database']
    tables = [
        row['name'] for row in database.fetchall(
            "SELECT name FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%' ORDER BY name"
        )
    ]
    click.echo(f"Tables: {', '.join(tables)}")

    for table in ('categories', 'scripts'):
        if table in tables:
            count = database.fetchone(f"SELECT COUNT(*) AS c FROM {table}")['c']
            click.echo(f"{table.capitalize()} count: {count}")

    for category in database.fetchall("SELECT id, name, slug FROM categories ORDER BY name"):
        click.echo(f"  {category['id']} - {category['name']} ({category['slug']})")


def register_commands(app):
    """Attach the maintenance commands to the app CLI"""
    app.cli.add_command(init_db_command)
    app.cli.add_command(check_db_command)
