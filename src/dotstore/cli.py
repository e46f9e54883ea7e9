"""CLI entry point for dotstore."""

import click

from dotstore import __version__
from dotstore.basedirs import StoreKind

_KIND_CHOICES = [k.value for k in StoreKind]


def _load_config(config_path=None):
    """Load the user config, reporting a malformed file as a usage error."""
    from dotstore.config import DotstoreConfig, get_config_path

    try:
        return DotstoreConfig.load(config_path or get_config_path())
    except ValueError as e:
        raise click.ClickException(str(e))


def _target(name, kind, root, create):
    """Resolve (and optionally create) the dot directory for NAME.

    An explicit --root wins, then an explicit --in, then the configured
    store.root, then the configured store.kind.
    """
    from pathlib import Path

    from dotstore.errors import DotstoreError
    from dotstore.store import create_store, custom_store, dot_name, store_path

    cfg = _load_config()
    if root is None and kind is None and cfg.store.root:
        root = cfg.store.root

    try:
        if root is not None:
            if create:
                return custom_store(root, name)
            return Path(root) / dot_name(name)
        kind = kind or cfg.store.kind
        if create:
            return create_store(kind, name)
        return store_path(kind, name)
    except (DotstoreError, ValueError) as e:
        raise click.ClickException(str(e))


@click.group()
@click.version_option(version=__version__, prog_name="dotstore")
def main():
    """Create dot directories in common per-user places."""


@main.command()
@click.argument("name")
@click.option("--in", "kind", default=None, type=click.Choice(_KIND_CHOICES),
              help="Base directory kind (default: from config, else home).")
@click.option("--root", "-r", type=click.Path(), default=None,
              help="Custom base directory; overrides --in.")
def create(name, kind, root):
    """Create the dot directory .NAME and print its path.

    \b
    Examples:
      dotstore create barracuda              ~/.barracuda
      dotstore create editor --in config     ~/.config/.editor
      dotstore create eregion -r ~/workspace/middle-earth
    """
    click.echo(str(_target(name, kind, root, create=True)))


@main.command()
@click.argument("name")
@click.option("--in", "kind", default=None, type=click.Choice(_KIND_CHOICES),
              help="Base directory kind (default: from config, else home).")
@click.option("--root", "-r", type=click.Path(), default=None,
              help="Custom base directory; overrides --in.")
def path(name, kind, root):
    """Print where the dot directory .NAME would be, without creating it."""
    click.echo(str(_target(name, kind, root, create=False)))


@main.command()
def kinds():
    """List base directory kinds and where they resolve on this machine."""
    from dotstore.basedirs import resolve

    click.echo(f"{'Kind':<14} {'Directory'}")
    click.echo("-" * 60)
    for kind in StoreKind:
        base = resolve(kind)
        click.echo(f"{kind.value:<14} {base if base is not None else '---'}")


@main.group()
def config():
    """View or change the dotstore configuration."""


@config.command(name="show")
def config_show():
    """Print every configuration value."""
    cfg = _load_config()
    for section_name, values in cfg._to_dict().items():
        for k, v in values.items():
            click.echo(f"{section_name}.{k} = {v!r}")


@config.command(name="get")
@click.argument("key")
def config_get(key):
    """Print the value of KEY (e.g. store.kind)."""
    cfg = _load_config()
    try:
        value = cfg.get(key)
    except KeyError as e:
        raise click.ClickException(e.args[0])
    click.echo(value)


@config.command(name="set")
@click.argument("key")
@click.argument("value")
def config_set(key, value):
    """Set KEY to VALUE and save the config file."""
    from dotstore.config import get_config_path

    config_path = get_config_path()
    cfg = _load_config(config_path)
    try:
        cfg.set(key, value)
    except KeyError as e:
        raise click.ClickException(e.args[0])
    except ValueError as e:
        raise click.ClickException(str(e))
    cfg.save(config_path)
    click.echo(f"{key} = {value!r} saved to {config_path}")


@config.command(name="path")
def config_path():
    """Print the location of the config file."""
    from dotstore.config import get_config_path

    click.echo(str(get_config_path()))
