from typing import Optional

from ..config import (
    tag_prefix,
    get_team,
    get_stack,
    get_project,
)

ENV_NAME_TAG = "azd-env-name"
SERVICE_NAME_TAG = "azd-service-name"


def get_tags(
    environment_name: str,
    service: str,
    role: str,
    group: Optional[str] = None,
    extra_tags: Optional[dict[str, str]] = None,
) -> dict[str, str]:
    """
    Generate tag dict for resources

    example tags:
      function app for environment `dev`:
        azd-env-name = dev
        azd-service-name = api
        vision:service = function
        vision:role = app
        vision:group = main
        vision:createdby = pulumi
        vision:stack = vision-api
        vision:project = dev
        vision:team = platform

      blob storage account for environment `dev`:
        azd-env-name = dev
        vision:service = storage
        vision:role = account
        vision:group = images
        vision:createdby = pulumi
        vision:stack = vision-api
        vision:project = dev

    :param environment_name: The deployment environment name, used to find all resources of an environment
    :param service: This resource's "namespace" (storage, function, cosmos,...)
    :param role: The role this resource performs within the namespace (account, app, plan,...)
    :param group: The group this resource belongs to (a container name, ...). Leave unset to use "main".
    :param extra_tags: User supplied tags, these win over the generated ones
    :return: Dict of tags
    """
    tags = {
        ENV_NAME_TAG: environment_name,
        f"{tag_prefix}service": service,
        f"{tag_prefix}role": role,
        f"{tag_prefix}group": group or "main",
        f"{tag_prefix}createdby": "pulumi",
        f"{tag_prefix}stack": get_stack(),
        f"{tag_prefix}project": get_project(),
    }

    if team := get_team():
        tags[f"{tag_prefix}team"] = team

    return {**tags, **(extra_tags or {})}
