"""CLI entry point for api-spec-generator."""

import logging
import os
from pathlib import Path

import click

from api_spec_generator.analyzer.extract import extract_json
from api_spec_generator.analyzer.pipeline import ApiAnalyzer
from api_spec_generator.config import API_KEY_ENV_VARS, DEFAULT_OUTPUT, DEFAULT_PROVIDER, PROVIDERS
from api_spec_generator.errors import SpecGeneratorError
from api_spec_generator.models import TEMPLATE_KINDS, CustomTemplate
from api_spec_generator.renderer.templates import TEMPLATE_OPTIONS, load_custom_template, render
from api_spec_generator.session import GenerationSession

template_option = click.option(
    "--template", default="basic", type=click.Choice(TEMPLATE_KINDS), help="Documentation template."
)
custom_template_option = click.option(
    "--custom-template",
    "custom_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with custom template options (used with --template custom).",
)
output_option = click.option(
    "-o", "--output", default=DEFAULT_OUTPUT, show_default=True, type=click.Path(path_type=Path),
    help="Output Markdown file.",
)


def _load_custom(template: str, custom_path: Path | None) -> CustomTemplate | None:
    if template != "custom":
        return None
    if custom_path is None:
        click.echo("No --custom-template given, using the basic layout.", err=True)
        return None
    try:
        return load_custom_template(custom_path)
    except SpecGeneratorError as e:
        raise click.ClickException(str(e)) from e


def _write_output(output: Path, content: str) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(content, encoding="utf-8")
    click.echo(f"Specification saved to {output}")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """API Spec Generator: build API documentation from controller sources with AI."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("source", type=click.Path(exists=True, path_type=Path))
@output_option
@click.option("--provider", default=DEFAULT_PROVIDER, type=click.Choice(PROVIDERS), help="AI provider.")
@click.option("--api-key", default=None, help="Provider API key. Defaults to GEMINI_API_KEY or OPENAI_API_KEY.")
@click.option("--model", default=None, help="Override the provider's default model.")
@template_option
@custom_template_option
@click.option("--save-analysis", default=None, type=click.Path(path_type=Path), help="Also save the analysis JSON.")
def generate(
    source: Path,
    output: Path,
    provider: str,
    api_key: str | None,
    model: str | None,
    template: str,
    custom_path: Path | None,
    save_analysis: Path | None,
):
    """Analyze a JAR/ZIP archive or source directory and write its API spec."""
    env_var = API_KEY_ENV_VARS[provider]
    api_key = api_key or os.getenv(env_var)
    if not api_key:
        raise click.UsageError(f"No API key for {provider}: pass --api-key or set {env_var}.")
    custom = _load_custom(template, custom_path)

    session = GenerationSession().start(str(source), provider, template)
    click.echo(f"Analyzing {source} with {provider}...")
    analyzer = ApiAnalyzer(
        provider=provider,
        api_key=api_key,
        model=model,
        on_step=lambda step, message: click.echo(f"  {message}..."),
    )
    try:
        result = analyzer.analyze(source)
    except SpecGeneratorError as e:
        session = session.fail(str(e))
        raise click.ClickException(f"Analysis failed: {session.error}") from e
    click.echo(f"Found {len(result.endpoints)} endpoints.")

    if save_analysis:
        save_analysis.parent.mkdir(parents=True, exist_ok=True)
        save_analysis.write_text(result.to_json(), encoding="utf-8")
        click.echo(f"Analysis saved to {save_analysis}")

    session = session.succeed(render(result, template, custom))
    _write_output(output, session.specification)


@main.command(name="render")
@click.argument("analysis_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@output_option
@template_option
@custom_template_option
def render_cmd(analysis_path: Path, output: Path, template: str, custom_path: Path | None):
    """Render a saved analysis (or raw AI response) without calling the AI."""
    custom = _load_custom(template, custom_path)
    try:
        result = extract_json(analysis_path.read_text(encoding="utf-8"))
    except SpecGeneratorError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Rendering {len(result.endpoints)} endpoints (template: {template})...")
    _write_output(output, render(result, template, custom))


@main.command()
@click.option("--preview", is_flag=True, help="Show a preview of each template.")
def templates(preview: bool):
    """List the available documentation templates."""
    for option in TEMPLATE_OPTIONS:
        click.echo(f"{option.id:<10} {option.name} - {option.description}")
        if preview:
            click.echo("")
            for line in option.preview.splitlines():
                click.echo(f"    {line}")
            click.echo("")
