"""Load and save the registry file, export and read foreign copies."""

import json
import logging
from pathlib import Path

import yaml

from placefolder.errors import CorruptStateError, StorageError
from placefolder.paths import registry_path
from placefolder.registry.model import Registry

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


def load_registry(path: Path | str | None = None) -> Registry:
    """Load the registry from disk, creating it if absent.

    A missing file is replaced by an empty registry, which is written
    immediately so later loads always find a well-formed document.

    Args:
        path: Path to registry file. Defaults to ``paths.registry_path()``.

    Returns:
        The loaded Registry.

    Raises:
        CorruptStateError: If the file is not a valid registry document.
        StorageError: If the file cannot be read or created.
    """
    target = Path(path) if path else registry_path()
    if not target.exists():
        logger.debug("No registry at %s, creating a default one", target)
        registry = Registry()
        save_registry(registry, target)
        return registry
    return _decode(_read_text(target), target, as_yaml=False)


def save_registry(registry: Registry, path: Path | str | None = None) -> None:
    """Write the registry back to disk with consistent formatting.

    Args:
        registry: Registry to write.
        path: Path to write to. Defaults to ``paths.registry_path()``.

    Raises:
        StorageError: If the file cannot be written.
    """
    target = Path(path) if path else registry_path()
    _write_text(target, _encode(registry, as_yaml=False))
    logger.debug("Saved %d project(s) to %s", len(registry.projects), target)


def export_registry(registry: Registry, path: Path | str) -> None:
    """Write a full copy of the registry to an arbitrary file.

    Files ending in .yaml or .yml are written as YAML, anything else as JSON.
    """
    target = Path(path)
    _write_text(target, _encode(registry, as_yaml=_is_yaml(target)))


def read_registry_file(path: Path | str) -> Registry:
    """Read a registry document from an arbitrary file without creating it.

    Raises:
        StorageError: If the file is missing or unreadable.
        CorruptStateError: If its content is not a valid registry document.
    """
    source = Path(path)
    return _decode(_read_text(source), source, as_yaml=_is_yaml(source))


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in YAML_SUFFIXES


def _encode(registry: Registry, as_yaml: bool) -> str:
    data = registry.to_dict()
    if as_yaml:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def _decode(text: str, source: Path, as_yaml: bool) -> Registry:
    try:
        data = yaml.safe_load(text) if as_yaml else json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CorruptStateError(f"Cannot parse registry {source}: {e}") from e
    try:
        return Registry.from_dict(data)
    except CorruptStateError as e:
        raise CorruptStateError(f"Invalid registry {source}: {e}") from e


def _read_text(path: Path) -> str:
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise CorruptStateError(f"Registry {path} is not UTF-8 text") from e
    except OSError as e:
        raise StorageError(f"Failed to read {path}: {e.strerror or e}") from e


def _write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise StorageError(f"Failed to write {path}: {e.strerror or e}") from e
