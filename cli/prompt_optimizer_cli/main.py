"""Prompt Optimizer CLI"""

from typing import Optional

import typer

app = typer.Typer(
    name="prompt-optimizer",
    help="Prompt Optimizer CLI - optimize prompts with Gemini and GPT-4o",
    no_args_is_help=True,
)

# Provider -> environment variable holding its credential
PROVIDER_KEYS = {
    "gemini": "GOOGLE_GENERATIVE_AI_API_KEY",
    "openai": "OPENAI_API_KEY",
}


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Interface to bind"),
    port: int = typer.Option(8000, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the API server with uvicorn"""
    import uvicorn

    typer.echo(f"Starting Prompt Optimizer API on http://{host}:{port}")
    uvicorn.run("prompt_optimizer_server.main:app", host=host, port=port, reload=reload)


@app.command("check-env")
def check_env(
    provider: Optional[str] = typer.Option(
        None, "--provider", help="Only check this provider (gemini or openai)"
    ),
):
    """Check which provider API keys are configured (.env, .env.local or environment)

    Key values are never printed, only whether they are set and their length.
    """
    from prompt_optimizer_server.config import Settings

    if provider is not None and provider not in PROVIDER_KEYS:
        typer.secho(
            f"Provider '{provider}' is not yet supported. Choose from: {', '.join(PROVIDER_KEYS)}",
            fg=typer.colors.RED,
        )
        raise typer.Exit(1)

    settings = Settings()
    values = {
        "gemini": settings.google_generative_ai_api_key,
        "openai": settings.openai_api_key,
    }

    checked = [provider] if provider else list(PROVIDER_KEYS)
    missing = False
    for name in checked:
        env_var = PROVIDER_KEYS[name]
        key = values[name]
        if key:
            typer.secho(f"✓ {env_var} (length {len(key)})", fg=typer.colors.GREEN)
        else:
            typer.secho(f"✗ {env_var} not set", fg=typer.colors.YELLOW)
            missing = True

    if missing:
        raise typer.Exit(1)


@app.command()
def version():
    """Show Prompt Optimizer CLI version"""
    from . import __version__
    typer.echo(f"Prompt Optimizer CLI v{__version__}")


if __name__ == "__main__":
    app()
