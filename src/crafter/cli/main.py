"""
Main CLI entry point for crafter using Click.

Usage:
    crafter customer --first-name NAME --last-name NAME --email ADDR [--recipe full --phone PHONE]
    crafter product [--recipe full | --part NAME ...]
    crafter vehicle TAG MODEL YEAR
    crafter payment TAG AMOUNT
    crafter family TAG
    crafter batch FILE [--output DIR]
    crafter variants
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional

import click
from pydantic import ValidationError

from crafter import __version__
from crafter.config import load_settings
from crafter.context import AppContext, create_context
from crafter.errors import CrafterError
from crafter.factories import describe_vehicle, process_payment, variant_tags
from crafter.models.base import Snapshot
from crafter.validation import SnapshotValidator
from crafter.workflow import (
    BatchAssembler,
    BuildResult,
    CustomerDirector,
    ProductDirector,
    load_requests,
)
from crafter.writers import write_build_to_json

BUILD_ERRORS = (CrafterError, ValidationError, TypeError, ValueError)


def setup_logging(verbose: bool = False, debug: bool = False, default: str = "WARNING") -> None:
    """Configure logging based on verbosity."""
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = getattr(logging, default, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


pass_app = click.make_pass_decorator(AppContext)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug output")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    help="JSON settings file",
)
@click.option("--strict", is_flag=True, help="Reject products with required fields unset")
@click.version_option(version=__version__, prog_name="crafter")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    debug: bool,
    config_file: Optional[str],
    strict: bool,
) -> None:
    """Step-wise builders, recipes and variant factories."""
    try:
        settings = load_settings(config_file, strict=strict or None)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Error loading settings: {e}")

    setup_logging(verbose=verbose, debug=debug, default=settings.log_level)
    ctx.obj = create_context(settings)


def _echo_product(product: Snapshot, text: str, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(product.to_dict(), indent=2))
    else:
        click.echo(text)


@cli.command()
@click.option(
    "--recipe",
    type=click.Choice(sorted(CustomerDirector.recipes)),
    default="minimal",
    show_default=True,
    help="Which fields to set",
)
@click.option("--first-name", default="", help="Given name")
@click.option("--last-name", default="", help="Family name")
@click.option("--email", default="", help="Email address")
@click.option("--phone", default=None, help="Phone number (full recipe only)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_app
def customer(
    app_ctx: AppContext,
    recipe: str,
    first_name: str,
    last_name: str,
    email: str,
    phone: Optional[str],
    as_json: bool,
) -> None:
    """Build a customer with a named recipe.

    Example:
        crafter customer --recipe full --first-name Jane --last-name Doe \\
            --phone 123-456-7890 --email jane.doe@example.com
    """
    values = {"first_name": first_name, "last_name": last_name, "email": email}
    if recipe == "full":
        values["phone_number"] = phone or ""
    elif phone:
        click.echo(click.style("Warning: --phone is ignored by the minimal recipe", fg="yellow"), err=True)

    try:
        built = app_ctx.customer_director.build(recipe, **values)
    except BUILD_ERRORS as e:
        raise click.ClickException(str(e))

    _echo_product(built, str(built), as_json)


@cli.command()
@click.option(
    "--recipe",
    type=click.Choice(sorted(ProductDirector.recipes)),
    default=None,
    help="Named recipe (ignored when --part is given)",
)
@click.option("--part", "parts", multiple=True, help="Part to add (can be specified multiple times)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_app
def product(app_ctx: AppContext, recipe: Optional[str], parts: tuple[str, ...], as_json: bool) -> None:
    """Build a multi-part product.

    Example:
        crafter product --recipe full
        crafter product --part Engine --part Wheels
    """
    try:
        if parts:
            builder = app_ctx.parts_builder
            for part in parts:
                builder.add_part(part)
            built = builder.finalize()
        else:
            built = app_ctx.product_director.build(recipe or "minimal")
    except BUILD_ERRORS as e:
        app_ctx.parts_builder.reset()
        raise click.ClickException(str(e))

    _echo_product(built, built.list_parts(), as_json)


@cli.command()
@click.argument("tag")
@click.argument("model")
@click.argument("year", type=int)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_app
def vehicle(app_ctx: AppContext, tag: str, model: str, year: int, as_json: bool) -> None:
    """Create a vehicle variant.

    Example:
        crafter vehicle sedan "Toyota Camry" 2020
    """
    try:
        built = app_ctx.vehicles.create(tag, model, year)
    except BUILD_ERRORS as e:
        raise click.ClickException(str(e))

    _echo_product(built, describe_vehicle(built), as_json)


@cli.command()
@click.argument("tag")
@click.argument("amount", type=float)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_app
def payment(app_ctx: AppContext, tag: str, amount: float, as_json: bool) -> None:
    """Create a payment processor variant.

    Example:
        crafter payment paypal 100
    """
    try:
        built = app_ctx.payments.create(tag, amount)
    except BUILD_ERRORS as e:
        raise click.ClickException(str(e))

    _echo_product(built, process_payment(built), as_json)


@cli.command()
@click.argument("tag")
@pass_app
def family(app_ctx: AppContext, tag: str) -> None:
    """Make a matching pair of components from one family.

    Example:
        crafter family standard
    """
    try:
        factory = app_ctx.families.create(tag)
    except BUILD_ERRORS as e:
        raise click.ClickException(str(e))

    product_a = factory.create_product_a()
    product_b = factory.create_product_b()
    click.echo(product_a.operation_a())
    click.echo(product_b.combined_operation(product_a))
    click.echo(product_b.operation_b())


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--output",
    "-o",
    type=click.Path(file_okay=False),
    help="Output directory for product JSON files",
)
@click.option("--dry-run", is_flag=True, help="Build and validate but don't write output")
@click.option("--json", "as_json", is_flag=True, help="Output summary as JSON")
@pass_app
def batch(app_ctx: AppContext, file: str, output: Optional[str], dry_run: bool, as_json: bool) -> None:
    """Build every request in a JSON file.

    The file holds a list of requests, e.g.
    [{"kind": "vehicle", "type": "suv", "model": "Honda CR-V", "year": 2021}].

    Example:
        crafter batch requests.json --output ./products/
    """
    logger = logging.getLogger("batch")

    try:
        requests = load_requests(file)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Error reading requests: {e}")

    logger.info(f"Building {len(requests)} request(s) from {file}")
    result = BatchAssembler(app_ctx).assemble(requests, source_file=file)
    validation = SnapshotValidator().validate_build(result)

    if as_json:
        _print_build_summary_json(result, validation.warnings)
    else:
        click.echo(result.summary())
        for issue in validation.warnings:
            click.echo(click.style(f"Warning: {issue.field}: {issue.message}", fg="yellow"), err=True)

    output_dir = output or app_ctx.settings.output_dir
    if dry_run:
        logger.info("Dry run - skipping output")
    elif output_dir:
        try:
            paths = write_build_to_json(result, output_dir)
        except OSError as e:
            raise click.ClickException(f"Error writing output: {e}")
        if not as_json:
            click.echo(click.style("\nOutput files:", fg="green"))
            for kind, path in paths.items():
                click.echo(f"  {kind}: {path}")

    if result.has_errors:
        sys.exit(1)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@pass_app
def variants(app_ctx: AppContext, as_json: bool) -> None:
    """List the tags each factory accepts."""
    tags = variant_tags([app_ctx.vehicles, app_ctx.payments, app_ctx.families])

    if as_json:
        click.echo(json.dumps(tags, indent=2))
    else:
        for name, names in tags.items():
            click.echo(f"{name}: {', '.join(names)}")


def _print_build_summary_json(result: BuildResult, warnings: list) -> None:
    """Print batch summary as JSON."""
    output = {
        "source_file": result.source_file,
        "counts": {kind: len(items) for kind, items in result.products.items()},
        "errors": result.errors,
        "warnings": result.warnings + [f"{i.field}: {i.message}" for i in warnings if i.field != "build"],
    }
    click.echo(json.dumps(output, indent=2))


def app(args: Optional[list[str]] = None) -> int:
    """
    Main application entry point (for testing).

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success)
    """
    try:
        cli(args, standalone_mode=False)
        return 0
    except click.ClickException as e:
        e.show()
        return 1
    except click.exceptions.Exit as e:
        return e.exit_code
    except click.Abort:
        return 1
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1


def main() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
