import click
from core.sa.database import Database

@click.group()
def db():
    """Database management commands"""
    pass

@db.command()
@click.pass_context
def init(ctx: click.Context):
    """Create any missing tables"""
    database = Database(ctx.obj.get('database_url'))
    try:
        database.init_db()
    finally:
        database.dispose()
    click.echo(click.style("Database initialized", fg='green'))
