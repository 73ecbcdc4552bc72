"""Map declaration loading from TOML files."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from .exceptions import DeclarationError
from .generation.config import RenderConfig
from .generation.declaration import MapDeclaration
from .terrain_types import FeatureType, TerrainType
from .types import Location


class TerrainEntry(BaseModel):
    """Terrain declaration from TOML."""

    location: Location
    type: TerrainType


class FeatureEntry(BaseModel):
    """Feature declaration from TOML."""

    location: Location
    type: FeatureType


class DeclarationConfig(BaseModel):
    """Complete map declaration file."""

    background: TerrainType
    render: RenderConfig = Field(default_factory=RenderConfig)
    terrains: list[TerrainEntry] = []
    features: list[FeatureEntry] = []


def declaration_from_dict(data: dict[str, Any]) -> tuple[MapDeclaration, RenderConfig]:
    """Build a declaration and its render settings from parsed TOML data.

    Args:
        data: Parsed TOML document.

    Returns:
        Tuple of (MapDeclaration, RenderConfig).

    Raises:
        DeclarationError: If the data doesn't match the declaration schema.
    """
    try:
        config = DeclarationConfig.model_validate(data)
    except ValidationError as e:
        raise DeclarationError(f"Invalid map declaration: {e}") from e

    declaration = MapDeclaration(background=config.background)
    for terrain in config.terrains:
        declaration.add_terrain(terrain.location, terrain.type)
    for feature in config.features:
        declaration.add_map_feature(feature.location, feature.type)

    return declaration, config.render


def load_declaration(path: Path) -> tuple[MapDeclaration, RenderConfig]:
    """Load a map declaration from a TOML file.

    Args:
        path: Path to the TOML declaration file.

    Returns:
        Tuple of (MapDeclaration, RenderConfig).

    Raises:
        FileNotFoundError: If the file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        DeclarationError: If the document doesn't match the schema.
    """
    with open(path, "rb") as f:
        data = tomllib.load(f)
    return declaration_from_dict(data)


def find_declaration(name: str) -> Path:
    """Find a declaration file by name.

    Searches in the following order:
    1. Exact path if name contains path separator or ends in .toml
    2. configs/{name}.toml
    3. configs/{name}

    Args:
        name: Declaration name or path.

    Returns:
        Path to the declaration file.

    Raises:
        FileNotFoundError: If the file is not found.
    """
    if "/" in name or name.endswith(".toml"):
        path = Path(name)
        if path.exists():
            return path
        raise FileNotFoundError(f"Declaration file not found: {name}")

    configs_dir = _configs_dir()

    config_path = configs_dir / f"{name}.toml"
    if config_path.exists():
        return config_path

    config_path = configs_dir / name
    if config_path.exists():
        return config_path

    raise FileNotFoundError(
        f"Declaration '{name}' not found in {configs_dir}. "
        f"Available declarations: {list_declarations()}"
    )


def list_declarations() -> list[str]:
    """List bundled declaration names."""
    configs_dir = _configs_dir()
    if not configs_dir.exists():
        return []
    return sorted(p.stem for p in configs_dir.glob("*.toml"))


def _configs_dir() -> Path:
    return Path(__file__).parent.parent.parent / "configs"
