import os
import click

from core.sa.database import Database

@click.command()
@click.option('--host', default="127.0.0.1", help='Interface to bind')
@click.option('--port', default=8000, type=int, help='Port to listen on')
@click.option('--reload/--no-reload', default=False, help='Restart on code changes')
@click.pass_context
def serve(ctx: click.Context, host: str, port: int, reload: bool):
    """Run the HTTP API with uvicorn"""
    import uvicorn

    database_url = ctx.obj.get('database_url')
    if reload:
        # The reloader calls create_app in a fresh process that reads DATABASE_URL
        if database_url:
            os.environ['DATABASE_URL'] = database_url
        uvicorn.run(
            "api.main:create_app",
            factory=True,
            host=host,
            port=port,
            reload=True,
            reload_dirs=["api", "core"]
        )
        return

    from api.main import create_app
    uvicorn.run(create_app(Database(database_url)), host=host, port=port)
