"""xai-models CLI entry point."""
from __future__ import annotations

import json
import logging
import sys

import click

from xai_provider import capabilities, catalog
from xai_provider.config import XAIConfig, missing_configuration_keys
from xai_provider.provider import xai
from xai_provider.types.descriptor import ModelDescriptor


def _format_row(model: ModelDescriptor) -> str:
    return (
        f"{model.id:<18} {model.name:<18} {model.context_window:>10,} "
        f"{model.input_price_per_million:>8.2f} {model.output_price_per_million:>8.2f}  "
        f"{','.join(model.capabilities)}"
    )


@click.group()
@click.option("--verbose/--no-verbose", default=False, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Inspect the xAI model catalog."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command("list")
@click.option("--capability", default=None, help="Only models with this capability tag")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of a table")
def list_command(capability: str | None, as_json: bool) -> None:
    """List the models in the catalog."""
    if capability is None:
        models = xai.list_models()
    else:
        models = catalog.list_models(xai.provider_slug(), capability=capability)

    if as_json:
        click.echo(json.dumps([m.to_dict() for m in models], indent=2))
        return

    click.echo(
        f"{'ID':<18} {'NAME':<18} {'CONTEXT':>10} {'IN/1M':>8} {'OUT/1M':>8}  CAPABILITIES"
    )
    for model in models:
        click.echo(_format_row(model))


@cli.command()
@click.argument("model_id")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON instead of text")
def show(model_id: str, as_json: bool) -> None:
    """Show the descriptor for MODEL_ID.

    Identifiers outside the catalog are shown with default values.
    """
    model = capabilities.build_descriptor(model_id, xai.provider_slug())
    if as_json:
        click.echo(json.dumps(model.to_dict(), indent=2))
        return

    if not catalog.is_known_model(model_id):
        click.echo(f"Note: {model_id} is not in the catalog; showing defaults", err=True)
    click.echo(f"ID:              {model.id}")
    click.echo(f"Name:            {model.name}")
    click.echo(f"Family:          {model.family}")
    click.echo(f"Context window:  {model.context_window:,}")
    click.echo(f"Max output:      {model.max_output_tokens:,}")
    click.echo(f"Input:           {', '.join(model.modalities.input)}")
    click.echo(f"Output:          {', '.join(model.modalities.output)}")
    click.echo(f"Capabilities:    {', '.join(model.capabilities)}")
    click.echo(
        f"Pricing (USD/1M): input {model.input_price_per_million:.2f}, "
        f"output {model.output_price_per_million:.2f}"
    )


@cli.command()
@click.argument("model_id")
@click.option("--input-tokens", required=True, type=click.IntRange(min=0), help="Prompt tokens")
@click.option("--output-tokens", required=True, type=click.IntRange(min=0), help="Generated tokens")
def cost(model_id: str, input_tokens: int, output_tokens: int) -> None:
    """Estimate the USD cost of a call to MODEL_ID."""
    total = capabilities.estimate_cost(model_id, input_tokens, output_tokens)
    click.echo(f"${total:.6f}")


@cli.command("check-config")
def check_config() -> None:
    """Check that the environment holds every required setting."""
    config = XAIConfig.from_env()
    missing = missing_configuration_keys(config, xai.required_configuration_keys())
    if missing:
        click.echo(f"Missing configuration: {', '.join(missing)}", err=True)
        sys.exit(1)
    click.echo("Configuration OK")


if __name__ == "__main__":
    cli()
