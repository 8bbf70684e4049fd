import json
import logging
import time
from typing import Any

import click
import yaml

from .config import RegistryConfig, load_config
from .errors import AccountsError
from .inventory import build_user_inventory
from .registry import AccountRegistry

logger = logging.getLogger("ncs_accounts")

_FORMAT_OPTION = click.option(
    "--format",
    "fmt",
    type=click.Choice(["yaml", "json"]),
    default="yaml",
    show_default=True,
    help="Output format.",
)


def _emit(data: Any, fmt: str) -> None:
    if fmt == "json":
        click.echo(json.dumps(data, indent=2))
    else:
        click.echo(yaml.safe_dump(data, default_flow_style=False, sort_keys=False), nl=False)


def _registry(ctx: click.Context) -> AccountRegistry:
    return ctx.obj["registry"]


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug-level logging.")
@click.option("--config", "config_path", type=click.Path(dir_okay=False), help="Path to a YAML config file.")
@click.option("--passwd", "passwd_path", type=click.Path(dir_okay=False), help="Override the account registry path.")
@click.option("--shadow", "shadow_path", type=click.Path(dir_okay=False), help="Override the credential registry path.")
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    config_path: str | None,
    passwd_path: str | None,
    shadow_path: str | None,
) -> None:
    """NCS Accounts: inspect local accounts from /etc/passwd and /etc/shadow."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )

    try:
        config = load_config(config_path)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc

    overrides = {k: v for k, v in {"passwd_path": passwd_path, "shadow_path": shadow_path}.items() if v}
    if overrides:
        config = RegistryConfig.model_validate({**config.model_dump(), **overrides})

    ctx.ensure_object(dict)
    ctx.obj.setdefault("registry", AccountRegistry(config=config, identity=ctx.obj.get("identity")))


@main.command("list")
@_FORMAT_OPTION
@click.pass_context
def list_accounts(ctx: click.Context, fmt: str) -> None:
    """Print every account in file order."""
    try:
        records = _registry(ctx).get_all()
    except AccountsError as exc:
        raise click.ClickException(str(exc)) from exc
    _emit([r.model_dump() for r in records], fmt)


@main.command()
@click.argument("name", required=False)
@click.option("--uid", type=int, help="Look up by numeric UID instead of name.")
@_FORMAT_OPTION
@click.pass_context
def show(ctx: click.Context, name: str | None, uid: int | None, fmt: str) -> None:
    """Print a single account by NAME or --uid."""
    if (name is None) == (uid is None):
        raise click.UsageError("Provide exactly one of NAME or --uid.")

    registry = _registry(ctx)
    try:
        record = registry.lookup(name) if name is not None else registry.lookup_by_id(uid)
    except AccountsError as exc:
        raise click.ClickException(str(exc)) from exc

    # An account line that parses to all-empty fields is indistinguishable from a miss here.
    if record.is_empty:
        target = name if name is not None else f"uid {uid}"
        raise click.ClickException(f"Account not found: {target}")
    _emit(record.model_dump(), fmt)


@main.command()
@_FORMAT_OPTION
@click.pass_context
def whoami(ctx: click.Context, fmt: str) -> None:
    """Print the account matching the effective UID."""
    try:
        record = _registry(ctx).current()
    except AccountsError as exc:
        raise click.ClickException(str(exc)) from exc
    _emit(record.model_dump(), fmt)


@main.command()
@click.option("--epoch-seconds", type=int, help="Reference time for password age. Defaults to now.")
@_FORMAT_OPTION
@click.pass_context
def inventory(ctx: click.Context, epoch_seconds: int | None, fmt: str) -> None:
    """Print the flat user inventory with password age in days."""
    try:
        records = _registry(ctx).get_all()
    except AccountsError as exc:
        raise click.ClickException(str(exc)) from exc

    now = int(time.time()) if epoch_seconds is None else epoch_seconds
    rows = build_user_inventory(records, now)
    logger.debug("Built inventory for %d accounts at epoch %d", len(rows), now)
    _emit(rows, fmt)


if __name__ == "__main__":
    main()
