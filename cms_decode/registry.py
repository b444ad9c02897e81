"""Command discovery.

Every module in cms_decode/commands/ that defines a module-level `command`
(a Command instance) becomes a CLI subcommand under that command's name.
Module names come from pkgutil.
"""

import importlib
import pkgutil

from cms_decode.core.types import Command

_commands: dict[str, Command] = {}


def _module_names() -> list[str]:
    import cms_decode.commands as pkg

    return [info.name for info in pkgutil.iter_modules(pkg.__path__) if not info.name.startswith('_')]


def discover() -> dict[str, Command]:
    """Import the command modules once and return name -> Command."""
    if not _commands:
        for modname in _module_names():
            module = importlib.import_module(f'cms_decode.commands.{modname}')
            found = getattr(module, 'command', None)
            if isinstance(found, Command):
                _commands[found.name] = found
    return _commands


def get(name: str) -> Command:
    """Look up one command; KeyError lists the available names."""
    commands = discover()
    try:
        return commands[name]
    except KeyError:
        raise KeyError(f'Unknown command: {name}. Available: {", ".join(sorted(commands))}') from None


def all_commands() -> dict[str, Command]:
    return discover()
