from contextlib import contextmanager
from typing import Iterator, List
import click
from sqlalchemy.orm import Session

from core.result import Empty, Failure, QueryResult
from core.sa.database import Database


@contextmanager
def open_session(ctx: click.Context) -> Iterator[Session]:
    """Open a session on the database selected by the root command.

    Tables are created if missing, and the engine is disposed on the way out.
    """
    database = Database(ctx.obj.get('database_url'))
    try:
        database.init_db()
        with database.session_scope() as session:
            yield session
    finally:
        database.dispose()

def echo_names(result: QueryResult[List[str]], empty_message: str, what: str) -> None:
    """Print one name per line, the empty message, or fail with a ClickException"""
    if isinstance(result, Failure):
        raise click.ClickException(f"Error retrieving {what}: {result.reason}")
    if isinstance(result, Empty):
        click.echo(click.style(empty_message, fg='yellow'))
        return
    for name in result.value:
        click.echo(f" - {name}")
