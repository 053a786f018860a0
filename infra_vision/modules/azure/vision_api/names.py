from dataclasses import dataclass

from infra_vision.lib.naming import ABBREVIATIONS, derive_name, resource_token
from .config import VisionApiConfig

DEFAULT_STORAGE_CONTAINER_NAME = "images"
DEFAULT_COSMOS_DATABASE_NAME = "vision"
DEFAULT_COSMOS_CONTAINER_NAME = "analyses"


@dataclass(frozen=True)
class ResourceNames:
    resource_token: str
    resource_group: str
    app_service_plan: str
    function_app: str
    storage_account: str
    storage_container: str
    vision_service: str
    cosmos_account: str
    cosmos_database: str
    cosmos_container: str


def resolve_resource_names(config: VisionApiConfig, subscription_id: str) -> ResourceNames:
    """Resolve the name of every resource, falling back to derived names for unset ones

    :param config: Module config
    :param subscription_id: Subscription the resources are deployed to
    :return: The resolved names
    """
    token = resource_token(subscription_id, config.environment_name, config.location)

    return ResourceNames(
        resource_token=token,
        resource_group=derive_name(
            config.resource_group_name, ABBREVIATIONS["resource_group"], config.environment_name
        ),
        app_service_plan=derive_name(config.app_service_plan_name, ABBREVIATIONS["app_service_plan"], token),
        function_app=derive_name(config.function_app_name, f"{ABBREVIATIONS['function_app']}api-", token),
        storage_account=derive_name(config.storage_account_name, ABBREVIATIONS["storage_account"], token),
        storage_container=derive_name(config.storage_container_name, "", DEFAULT_STORAGE_CONTAINER_NAME),
        vision_service=derive_name(config.vision_service_name, ABBREVIATIONS["vision_service"], token),
        cosmos_account=derive_name(config.cosmos_account_name, ABBREVIATIONS["cosmos_account"], token),
        cosmos_database=derive_name(config.cosmos_database_name, "", DEFAULT_COSMOS_DATABASE_NAME),
        cosmos_container=derive_name(config.cosmos_container_name, "", DEFAULT_COSMOS_CONTAINER_NAME),
    )
