"""Typer CLI for Hintline."""

import typer
from rich.console import Console

app = typer.Typer(name="hintline", help="Hintline: support hints delivered in real time")
console = Console()


@app.command()
def serve(
    host: str = typer.Option(None, help="Bind host (default from settings)"),
    port: int = typer.Option(None, help="Bind port (default from settings)"),
):
    """Start the Hintline API server."""
    import uvicorn
    from hintline.app import create_app
    from hintline.common.config import get_settings

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    console.print(f"[bold green]Starting Hintline on {host}:{port}[/bold green]")
    uvicorn.run(create_app(), host=host, port=port)


@app.command()
def token(
    subject: str = typer.Argument(..., help="User id to put in the sub claim"),
    role: str = typer.Option("user", help="user, support_specialist or admin"),
    minutes: int = typer.Option(None, help="Lifetime in minutes"),
):
    """Mint a development credential signed with the configured secret."""
    from datetime import timedelta

    from hintline.common.security import Role, create_access_token

    try:
        parsed = Role(role)
    except ValueError:
        console.print(f"[bold red]Unknown role:[/bold red] {role}")
        raise typer.Exit(1)

    expires = timedelta(minutes=minutes) if minutes else None
    # Plain echo: rich would wrap the token at terminal width
    typer.echo(create_access_token(subject, parsed, expires_delta=expires))


@app.command()
def health(
    url: str = typer.Option("http://localhost:4000", help="Server URL"),
):
    """Check Hintline server health."""
    import httpx

    try:
        resp = httpx.get(f"{url}/api/health", timeout=5)
        data = resp.json()
        console.print(f"[bold green]{data['status']}[/bold green] - v{data['version']}")
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
