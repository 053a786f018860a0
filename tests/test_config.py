import dacite
import pulumi
import pytest

from infra_vision.lib.config import HierarchicalConfig, VisionConfigException, get_stack_config
from infra_vision.modules.azure.vision_api.config import VisionApiConfig


@pytest.fixture
def stack_config(monkeypatch):
    config = {
        "vision-api:environment_name": "dev",
        "vision-api:location": "eastus",
        "vision-api:principal_id": "8e2c6c0b-4a4c-4e0a-9f55-2f3b9c1d7a11",
        "other-stack:location": "westus",
    }
    monkeypatch.setattr(pulumi.runtime.config, "CONFIG", config)
    return config


def test_stack_config_maps_to_dataclass(stack_config):
    config = get_stack_config("vision-api", VisionApiConfig)

    assert config.environment_name == "dev"
    assert config.location == "eastus"
    assert config.is_continuous_deployment is False
    assert config.storage_account_name == ""
    assert config.tags == {}


def test_stack_config_parses_json_values(stack_config):
    stack_config["vision-api:is_continuous_deployment"] = "true"
    stack_config["vision-api:tags"] = '{"cost-center": "42"}'

    config = get_stack_config("vision-api", VisionApiConfig)

    assert config.is_continuous_deployment is True
    assert config.tags == {"cost-center": "42"}


def test_stack_config_keeps_numeric_looking_strings(stack_config):
    stack_config["vision-api:environment_name"] = "2024"
    stack_config["vision-api:python_version"] = "3.10"
    stack_config["vision-api:vision_sku"] = "1e3"

    config = get_stack_config("vision-api", VisionApiConfig)

    assert config.environment_name == "2024"
    assert config.python_version == "3.10"
    assert config.vision_sku == "1e3"


def test_stack_config_keeps_json_looking_strings(stack_config):
    stack_config["vision-api:storage_container_name"] = "true"

    assert get_stack_config("vision-api", VisionApiConfig).storage_container_name == "true"


def test_principal_id_is_stripped():
    config = VisionApiConfig(environment_name="dev", location="eastus", principal_id="  8e2c6c0b-4a4c  ")

    assert config.principal_id == "8e2c6c0b-4a4c"


@pytest.mark.parametrize("key", ["environment_name", "location"])
def test_missing_required_value_fails(stack_config, key):
    del stack_config[f"vision-api:{key}"]

    with pytest.raises(dacite.MissingValueError):
        get_stack_config("vision-api", VisionApiConfig)


def test_unknown_key_fails(stack_config):
    stack_config["vision-api:storage_acount_name"] = "typo"

    with pytest.raises(dacite.UnexpectedDataError):
        get_stack_config("vision-api", VisionApiConfig)


def test_principal_required_for_interactive_deployments():
    with pytest.raises(ValueError, match="principal_id"):
        VisionApiConfig(environment_name="dev", location="eastus")


def test_principal_optional_for_continuous_deployment():
    config = VisionApiConfig(environment_name="dev", location="eastus", is_continuous_deployment=True)

    assert config.principal_id == ""


@pytest.mark.parametrize("environment_name", ["", "  ", "e" * 65])
def test_environment_name_is_validated(environment_name):
    with pytest.raises(ValueError, match="environment_name"):
        VisionApiConfig(environment_name=environment_name, location="eastus", principal_id="user")


@pytest.mark.parametrize("storage_account_name", ["st", "St-Upper", "s" * 25])
def test_storage_account_name_is_validated(storage_account_name):
    with pytest.raises(ValueError, match="storage_account_name"):
        VisionApiConfig(
            environment_name="dev",
            location="eastus",
            principal_id="user",
            storage_account_name=storage_account_name,
        )


def test_hierarchical_config_nearest_file_wins(tmp_path):
    (tmp_path / ".git").mkdir()
    (tmp_path / "Vision.common.yaml").write_text("team: shared\ntag_namespace: acme\n")
    environment = tmp_path / "azure" / "dev"
    environment.mkdir(parents=True)
    (environment / "Vision.common.yaml").write_text("team: vision\n")

    config = HierarchicalConfig(entrypoint=environment / "__main__.py")

    assert config["team"] == "vision"
    assert config.require("tag_namespace") == "acme"


def test_hierarchical_config_stops_at_project_root(tmp_path):
    (tmp_path / "Vision.common.yaml").write_text("team: outside\n")
    project = tmp_path / "project"
    (project / ".git").mkdir(parents=True)

    config = HierarchicalConfig(entrypoint=project / "__main__.py")

    assert config.get("team") is None


def test_hierarchical_config_require_missing(tmp_path):
    config = HierarchicalConfig(entrypoint=tmp_path / "__main__.py")

    with pytest.raises(VisionConfigException, match="team"):
        config.require("team")
