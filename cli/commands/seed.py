import logging
import click
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import LibraryError
from core.seed import DEFAULT_GENRES, run_seed

logger = logging.getLogger(__name__)

@click.group()
def seed():
    """Seed the catalog with fixed data"""
    pass

@seed.command()
@click.pass_context
def genres(ctx: click.Context):
    """
    Replace all genres with the default set:
    Fiction, Non-Fiction, Science Fiction, Mystery and Fantasy.
    """
    try:
        inserted = run_seed(ctx.obj.get('database_url'), DEFAULT_GENRES)
    except (SQLAlchemyError, LibraryError) as e:
        logger.error("Error seeding genres: %s", e)
        raise click.ClickException(f"Error seeding genres: {e}")

    click.echo(click.style(f"Seeded {len(inserted)} genres:", fg='green'))
    for name in inserted:
        click.echo(f" - {name}")
