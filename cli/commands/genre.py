import click
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import ValidationError
from core.result import Failure
from core.sa.repositories.genre import GenreRepository
from core.services.catalog_service import CatalogService
from ..utils import echo_names, open_session

@click.group()
def genre():
    """Genre management commands"""
    pass

@genre.command(name="list")
@click.pass_context
def list_genres(ctx: click.Context):
    """List all genre names alphabetically"""
    with open_session(ctx) as session:
        echo_names(CatalogService(session).list_genre_names(), "No genres found", "genres")

@genre.command()
@click.pass_context
def count(ctx: click.Context):
    """Print the total number of genres"""
    with open_session(ctx) as session:
        result = CatalogService(session).count_genres()
    if isinstance(result, Failure):
        raise click.ClickException(f"Error retrieving genre count: {result.reason}")
    click.echo(result.value)

@genre.command()
@click.argument('name')
@click.pass_context
def add(ctx: click.Context, name: str):
    """
    Add a genre.

    NAME must be between 4 and 100 characters.
    """
    try:
        with open_session(ctx) as session:
            genre_id = GenreRepository(session).create_genre(name).id
    except ValidationError as e:
        raise click.BadParameter(e.message, param_hint="NAME")
    except SQLAlchemyError as e:
        raise click.ClickException(f"Error adding genre: {e}")
    click.echo(click.style(f"Added genre '{name}' (ID: {genre_id})", fg='green'))
