"""CLI entry point for the storyboard prompt generator."""

import logging
import typer
from pathlib import Path
from typing import Optional

from . import __version__
from .config import config
from .export import ExportFormat, export_project, scenes_to_text
from .history import HistoryStore
from .models import Complexity, FocusPreset, GeneratedProject, GenerationRequest, Provider, Tone
from .prompts import MODELS, PRESET_TEMPLATES, default_model
from .services import GenerationError, ProviderAdapter, default_strategies

app = typer.Typer(
    name="promptforge",
    help="Masterprompt storyboard generator for classic 2D Bangladeshi cartoons",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"promptforge version {__version__}")
        raise typer.Exit()


def build_adapter() -> ProviderAdapter:
    """Create the provider adapter from the current configuration."""
    strategies = default_strategies(
        validation_model=config.validation_model,
        timeout=config.request_timeout,
    )
    return ProviderAdapter(strategies, fallback_credential=config.gemini_api_key)


def build_history() -> HistoryStore:
    """Open the history log in the workspace."""
    return HistoryStore(config.history_path, limit=config.history_limit)


def _resolve_key(provider: Provider, api_key: Optional[str]) -> str:
    # Gemini falls back to the configured key inside the adapter
    if api_key:
        return api_key
    if provider == Provider.GEMINI:
        return ""
    return config.api_key_for(provider)


PROVIDER_OPTION = typer.Option(
    Provider.GEMINI,
    "--provider",
    "-p",
    help="API platform",
    case_sensitive=False
)
API_KEY_OPTION = typer.Option(
    None,
    "--api-key",
    "-k",
    help="API key (defaults to the provider's environment variable)"
)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """PromptForge - Masterprompt scenes for 2D cartoons using AI."""
    pass


@app.command()
def validate(
    provider: Provider = PROVIDER_OPTION,
    api_key: Optional[str] = API_KEY_OPTION,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Check that an API key is accepted by the provider."""
    setup_logging(verbose)
    adapter = build_adapter()
    key = adapter.resolve_credential(provider, _resolve_key(provider, api_key))

    typer.echo(f"🔌 Validating {provider.value} key...")
    if adapter.validate_credential(provider, key):
        typer.echo(f"✅ {provider.value} Connected & Ready")
    else:
        typer.echo(f"❌ {provider.value} Check Fail: verify the key and retry")
        raise typer.Exit(1)


@app.command()
def generate(
    title: str = typer.Argument(
        ...,
        help="Animation title, e.g. 'Monsoon Day Adventures in the Village'"
    ),
    provider: Provider = PROVIDER_OPTION,
    api_key: Optional[str] = API_KEY_OPTION,
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Model name (defaults to the provider's first catalog model)"
    ),
    tone: Tone = typer.Option(
        Tone.FUNNY,
        "--tone",
        "-t",
        help="Story tone",
        case_sensitive=False
    ),
    complexity: Complexity = typer.Option(
        Complexity.INTERMEDIATE,
        "--complexity",
        "-c",
        help="Complexity level",
        case_sensitive=False
    ),
    focus: FocusPreset = typer.Option(
        FocusPreset.VILLAGE_LIFE,
        "--focus",
        "-f",
        help="Cultural focus preset",
        case_sensitive=False
    ),
    scenes: int = typer.Option(
        80,
        "--scenes",
        "-s",
        help="Number of scenes",
        min=10,
        max=100
    ),
    skip_validation: bool = typer.Option(
        False,
        "--skip-validation",
        help="Do not check the API key before generating"
    ),
    save_history: bool = typer.Option(
        True,
        "--history/--no-history",
        help="Append the result to the history log"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Also write the scenes to this file"
    ),
    output_format: ExportFormat = typer.Option(
        ExportFormat.TEXT,
        "--format",
        help="Output file format"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Generate Masterprompt scenes for a cartoon title."""
    setup_logging(verbose)
    adapter = build_adapter()
    key = adapter.resolve_credential(provider, _resolve_key(provider, api_key))

    if not key:
        typer.echo(f"❌ No API key for {provider.value}. Pass --api-key or set it in the environment")
        raise typer.Exit(1)

    if not skip_validation:
        typer.echo(f"🔌 Validating {provider.value} key...")
        if not adapter.validate_credential(provider, key):
            typer.echo(f"❌ {provider.value} Check Fail: validate your API key first")
            raise typer.Exit(1)

    request = GenerationRequest(
        provider=provider,
        credential=key,
        model=model or default_model(provider),
        title=title,
        tone=tone,
        complexity=complexity,
        focus=focus,
        scene_count=scenes,
    )

    typer.echo(f"🎬 Forging scenes: {title}")
    typer.echo(f"   Provider: {provider.value} ({request.model})")
    typer.echo(f"   {tone.value} | {complexity.value} | {focus.value} | {scenes} scenes")

    try:
        generated = adapter.generate(request)
    except GenerationError as e:
        typer.echo(f"❌ Generation failed: {e}")
        raise typer.Exit(1)

    project = GeneratedProject.from_request(request, generated)

    typer.echo(f"\n📽️  Generated {len(generated)} scenes:")
    for scene in generated:
        preview = scene.setup[:70] + "..." if len(scene.setup) > 70 else scene.setup
        typer.echo(f"   • Scene {scene.number}: {preview}")

    if save_history:
        try:
            build_history().add(project)
            typer.echo(f"\n💾 Saved to history as {project.id}")
        except OSError as e:
            typer.echo(f"⚠️  Failed to save history: {e}")

    if output:
        try:
            written = export_project(project, output, output_format)
            typer.echo(f"✅ Scenes written: {written}")
        except OSError as e:
            typer.echo(f"❌ Error writing scenes: {e}")
            raise typer.Exit(1)


@app.command()
def history() -> None:
    """List saved projects, most recent first."""
    projects = build_history().load()
    if not projects:
        typer.echo("📁 No saved projects")
        return

    typer.echo(f"📁 {len(projects)} saved project(s):")
    for project in projects:
        typer.echo(
            f"   {project.id}  {project.timestamp:%Y-%m-%d %H:%M}  {project.title} "
            f"({len(project.scenes)} scenes, {project.provider.value})"
        )


def _load_project(project_id: str) -> GeneratedProject:
    project = build_history().get(project_id)
    if project is None:
        typer.echo(f"❌ No project with id {project_id}")
        typer.echo("   Run 'promptforge history' to list saved projects")
        raise typer.Exit(1)
    return project


@app.command()
def show(
    project_id: str = typer.Argument(..., help="Project id from the history list")
) -> None:
    """Print every scene of a saved project."""
    typer.echo(scenes_to_text(_load_project(project_id)))


@app.command()
def export(
    project_id: str = typer.Argument(..., help="Project id from the history list"),
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        help="Output file path"
    ),
    output_format: ExportFormat = typer.Option(
        ExportFormat.TEXT,
        "--format",
        "-f",
        help="Output file format"
    ),
) -> None:
    """Write a saved project to a text, JSON or CSV file."""
    project = _load_project(project_id)
    try:
        written = export_project(project, output, output_format)
    except OSError as e:
        typer.echo(f"❌ Error writing scenes: {e}")
        raise typer.Exit(1)
    typer.echo(f"✅ Exported {len(project.scenes)} scenes: {written}")


@app.command()
def models() -> None:
    """List the model catalog per provider."""
    for provider, names in MODELS.items():
        typer.echo(f"{provider.value}:")
        for name in names:
            typer.echo(f"   • {name}")


@app.command()
def presets() -> None:
    """List the cultural focus presets."""
    for template in PRESET_TEMPLATES:
        typer.echo(f"   • {template.focus.value}: {template.description}")


if __name__ == "__main__":
    app()
