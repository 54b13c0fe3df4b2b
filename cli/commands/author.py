from datetime import datetime
from typing import Optional
import click
from sqlalchemy.exc import SQLAlchemyError

from core.exceptions import ValidationError
from core.sa.repositories.author import AuthorRepository
from core.services.catalog_service import CatalogService
from ..utils import echo_names, open_session

@click.group()
def author():
    """Author management commands"""
    pass

@author.command(name="list")
@click.pass_context
def list_authors(ctx: click.Context):
    """List all authors sorted by family name"""
    with open_session(ctx) as session:
        echo_names(CatalogService(session).list_author_names(), "No authors found", "authors")

@author.command()
@click.argument('first_name')
@click.argument('family_name')
@click.option('--born', type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help='Date of birth (YYYY-MM-DD)')
@click.option('--died', type=click.DateTime(formats=["%Y-%m-%d"]), default=None, help='Date of death (YYYY-MM-DD)')
@click.pass_context
def add(ctx: click.Context, first_name: str, family_name: str, born: Optional[datetime], died: Optional[datetime]):
    """Add an author"""
    try:
        with open_session(ctx) as session:
            created = AuthorRepository(session).create_author(
                first_name,
                family_name,
                date_of_birth=born.date() if born else None,
                date_of_death=died.date() if died else None
            )
            name = created.name
    except ValidationError as e:
        raise click.BadParameter(e.message, param_hint=e.field.upper())
    except SQLAlchemyError as e:
        raise click.ClickException(f"Error adding author: {e}")
    click.echo(click.style(f"Added author {name}", fg='green'))
