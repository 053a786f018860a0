import re

import pytest

from infra_vision.lib.naming import derive_name, resource_token, RESOURCE_TOKEN_LENGTH
from infra_vision.modules.azure.vision_api.config import VisionApiConfig
from infra_vision.modules.azure.vision_api.names import resolve_resource_names

SUBSCRIPTION_ID = "00000000-1111-2222-3333-444444444444"


def test_resource_token_is_deterministic():
    assert resource_token(SUBSCRIPTION_ID, "dev", "eastus") == resource_token(SUBSCRIPTION_ID, "dev", "eastus")


def test_resource_token_is_storage_safe():
    token = resource_token(SUBSCRIPTION_ID, "dev", "eastus")

    assert len(token) == RESOURCE_TOKEN_LENGTH
    assert re.fullmatch(r"[a-z2-7]+", token)


@pytest.mark.parametrize(
    "other",
    [
        (SUBSCRIPTION_ID, "prod", "eastus"),
        (SUBSCRIPTION_ID, "dev", "westus2"),
        ("ffffffff-1111-2222-3333-444444444444", "dev", "eastus"),
    ],
)
def test_resource_token_changes_with_inputs(other):
    assert resource_token(*other) != resource_token(SUBSCRIPTION_ID, "dev", "eastus")


@pytest.mark.parametrize("explicit", [None, "", "   "])
def test_derive_name_falls_back(explicit):
    assert derive_name(explicit, "st", "abc") == "stabc"


def test_derive_name_prefers_explicit():
    assert derive_name(" stcustom ", "st", "abc") == "stcustom"


def test_resolve_resource_names_defaults():
    config = VisionApiConfig(environment_name="dev", location="eastus", principal_id="user")
    token = resource_token(SUBSCRIPTION_ID, "dev", "eastus")

    names = resolve_resource_names(config, SUBSCRIPTION_ID)

    assert names.resource_token == token
    assert names.resource_group == "rg-dev"
    assert names.app_service_plan == f"plan-{token}"
    assert names.function_app == f"func-api-{token}"
    assert names.storage_account == f"st{token}"
    assert names.storage_container == "images"
    assert names.vision_service == f"cog-cv-{token}"
    assert names.cosmos_account == f"cosmos-{token}"
    assert names.cosmos_database == "vision"
    assert names.cosmos_container == "analyses"


def test_resolve_resource_names_overrides():
    config = VisionApiConfig(
        environment_name="dev",
        location="eastus",
        principal_id="user",
        resource_group_name="my-rg",
        function_app_name="my-func",
        storage_account_name="stmine",
        storage_container_name="uploads",
        cosmos_database_name="db",
    )

    names = resolve_resource_names(config, SUBSCRIPTION_ID)

    assert names.resource_group == "my-rg"
    assert names.function_app == "my-func"
    assert names.storage_account == "stmine"
    assert names.storage_container == "uploads"
    assert names.cosmos_database == "db"
    assert names.vision_service.startswith("cog-cv-")
