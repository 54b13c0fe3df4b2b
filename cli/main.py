# cli/main.py
from typing import Optional
import click

from core.config import get_settings
from core.logging_config import setup_logging
from .commands.db import db
from .commands.seed import seed
from .commands.genre import genre
from .commands.author import author
from .commands.serve import serve

@click.group()
@click.option('--database-url', default=None, envvar='DATABASE_URL',
              help="SQLAlchemy database URL (default: sqlite:///library.db)")
@click.option('--verbose/--no-verbose', default=False, help='Enable debug logging')
@click.pass_context
def cli(ctx: click.Context, database_url: Optional[str], verbose: bool):
    """Local Library catalog CLI"""
    setup_logging('DEBUG' if verbose else get_settings().log_level)
    ctx.ensure_object(dict)
    ctx.obj['database_url'] = database_url

cli.add_command(db)
cli.add_command(seed)
cli.add_command(genre)
cli.add_command(author)
cli.add_command(serve)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
