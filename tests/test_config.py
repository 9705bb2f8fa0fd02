import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

import gaea  # noqa: E402
from gaea import (  # noqa: E402
    DeploymentConfig,
    DeploymentConfigLoader,
    SchemaVariant,
    UnknownFieldPolicy,
    build_catalog,
)


def test_loader_lists_default_deployments() -> None:
    names = DeploymentConfigLoader().list_configs()

    assert "full" in names
    assert "lite" in names


def test_default_deployments_ship_inside_the_package() -> None:
    loader = DeploymentConfigLoader()
    package_dir = Path(gaea.__file__).resolve().parent

    assert Path(str(loader.config_dir)).resolve() == package_dir / "deployments"
    assert loader.load("full").variant is SchemaVariant.FULL


def test_lite_deployment_builds_lite_catalog() -> None:
    config = DeploymentConfigLoader().load("lite")

    assert config.variant is SchemaVariant.LITE
    assert config.unknown_fields is UnknownFieldPolicy.IGNORE

    catalog = build_catalog(config)
    assert catalog.variant is SchemaVariant.LITE
    assert "Feature" in catalog


def test_loader_accepts_explicit_path(tmp_path: Path) -> None:
    path = tmp_path / "archive.json"
    path.write_text(
        json.dumps({"name": "archive", "variant": "FULL", "unknown_fields": "preserve"})
    )

    config = DeploymentConfigLoader().load(path)

    assert config.name == "archive"
    assert config.variant is SchemaVariant.FULL
    assert build_catalog(config).unknown_fields is UnknownFieldPolicy.PRESERVE


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValueError, match="Invalid deployment config"):
        DeploymentConfig.from_mapping({"variant": "medium"})
    with pytest.raises(ValueError):
        DeploymentConfig.from_mapping({"unknown_fields": "reject"})


def test_missing_config_lists_available(tmp_path: Path) -> None:
    loader = DeploymentConfigLoader(tmp_path)

    with pytest.raises(FileNotFoundError, match="Available"):
        loader.load("production")


def test_defaults_select_full_schema() -> None:
    config = DeploymentConfig.from_mapping({})

    assert config.name == "full"
    assert config.variant is SchemaVariant.FULL
    assert config.unknown_fields is UnknownFieldPolicy.IGNORE
