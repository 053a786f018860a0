from abc import ABC
from typing import Optional

from pulumi import ResourceOptions, Output
from pulumi_azure_native import resources

from infra_vision.lib.base import BaseModule, ConfigType


class AzureModule(BaseModule, ABC):
    """
    Base class for vision modules using the Azure provider
    """

    provider: str = "azure"

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(name, config, opts)

        self.resourcegroup: Optional[resources.ResourceGroup] = None
        self.location: Optional[Output[str]] = None

        # common arguments can be used on most azure resources, filled in once the resource group exists
        self.common_args: dict = {}

    def create_resourcegroup(self, name: str, location: str, tags: dict[str, str]) -> resources.ResourceGroup:
        """Create the resource group every other resource of the module lives in

        :param name: Name of the resource group
        :param location: Azure region
        :param tags: Resource group tags
        :return: The resource group
        """
        self.resourcegroup = resources.ResourceGroup(
            name,
            resource_group_name=name,
            location=location,
            tags=tags,
            opts=ResourceOptions(parent=self),
        )

        self.location = self.resourcegroup.location

        self.common_args = {
            "resource_group_name": self.resourcegroup.name,
            "location": self.location,
        }

        return self.resourcegroup
