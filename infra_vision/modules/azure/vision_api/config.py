import re
from dataclasses import dataclass, field

from pulumi import Output

_MAX_ENVIRONMENT_NAME_LENGTH = 64
_STORAGE_ACCOUNT_NAME = re.compile(r"^[a-z0-9]{3,24}$")


@dataclass
class VisionApiConfig:
    environment_name: str
    """Name of the environment, used to derive the resource group name and the resource token"""

    location: str
    """Primary location for all resources"""

    principal_id: str = ""
    """
    Object ID of the user that gets data-plane access to the deployed resources.
    Required unless ``is_continuous_deployment`` is set.
    """

    is_continuous_deployment: bool = False
    """Deploying from a pipeline. Skips the grants to ``principal_id``."""

    resource_group_name: str = ""
    """Defaults to ``rg-{environment_name}``"""

    app_service_plan_name: str = ""

    function_app_name: str = ""

    storage_account_name: str = ""
    """
    Between 3 and 24 characters in length, numbers and lower-case letters only.
    Defaults to ``st{token}``.
    """

    storage_container_name: str = ""
    """Blob container the API reads and writes. Defaults to ``images``."""

    vision_service_name: str = ""

    vision_sku: str = "S1"
    """SKU of the vision account, F0 for the free tier"""

    cosmos_account_name: str = ""

    cosmos_database_name: str = ""
    """Defaults to ``vision``"""

    cosmos_container_name: str = ""
    """Defaults to ``analyses``"""

    python_version: str = "3.11"
    """Python version of the function app runtime"""

    tags: dict[str, str] = field(default_factory=dict)
    """Extra tags for every resource"""

    def __post_init__(self):
        if not self.environment_name.strip():
            raise ValueError("`environment_name` must not be empty")

        if len(self.environment_name) > _MAX_ENVIRONMENT_NAME_LENGTH:
            raise ValueError(
                f"`environment_name` must be at most {_MAX_ENVIRONMENT_NAME_LENGTH} characters, "
                f"got {len(self.environment_name)}"
            )

        if not self.location.strip():
            raise ValueError("`location` must not be empty")

        self.principal_id = self.principal_id.strip()

        if not self.is_continuous_deployment and not self.principal_id:
            raise ValueError("`principal_id` is required unless `is_continuous_deployment` is set")

        storage_account_name = self.storage_account_name.strip()
        if storage_account_name and not _STORAGE_ACCOUNT_NAME.match(storage_account_name):
            raise ValueError(
                f"`storage_account_name` '{storage_account_name}' must be 3-24 lower-case letters and numbers"
            )


@dataclass
class VisionApiExports:
    location: Output[str]

    tenant_id: str

    resource_group_name: Output[str]

    storage_url: Output[str]
    """Primary blob endpoint"""

    storage_container_name: Output[str]

    api_url: Output[str]
