from typing import Optional

from pulumi import Output, log
from pulumi_azure_native import cognitiveservices, cosmosdb, storage
from pulumi_azure_native.authorization import PrincipalType

from infra_vision.lib.azure.base import AzureModule
from infra_vision.lib.azure.client import get_subscription_id, get_tenant_id
from infra_vision.lib.tags import get_tags
from .access import AccessManager, STORAGE_BLOB_DATA_CONTRIBUTOR, STORAGE_BLOB_DATA_OWNER
from .config import VisionApiConfig, VisionApiExports
from .cosmos import create_cosmos
from .function_app import create_function_app
from .names import resolve_resource_names
from .storage import create_storage
from .vision import create_vision_service


class VisionApi(AzureModule):
    def build(self, config: VisionApiConfig) -> VisionApiExports:
        names = resolve_resource_names(config, get_subscription_id())

        log.debug(f"resolved resource names {names}")

        self.create_resourcegroup(
            names.resource_group,
            location=config.location,
            tags=self.tags_for(service="resources", role="group"),
        )

        storage_account, container = create_storage(
            self, self.resourcegroup, names.storage_account, names.storage_container
        )
        vision_service = create_vision_service(self, self.resourcegroup, names.vision_service, config.vision_sku)
        cosmos_account, database, cosmos_container = create_cosmos(
            self, self.resourcegroup, names.cosmos_account, names.cosmos_database, names.cosmos_container
        )

        storage_url = storage_account.primary_endpoints.blob

        _, function_app = create_function_app(
            self,
            self.resourcegroup,
            plan_name=names.app_service_plan,
            app_name=names.function_app,
            python_version=config.python_version,
            app_settings={
                "AzureWebJobsStorage__accountName": storage_account.name,
                "STORAGE_URL": storage_url,
                "STORAGE_CONTAINER_NAME": container.name,
                "VISION_ENDPOINT": vision_service.properties.endpoint,
                "COSMOS_ENDPOINT": cosmos_account.document_endpoint,
                "COSMOS_DATABASE_NAME": database.name,
                "COSMOS_CONTAINER_NAME": cosmos_container.name,
            },
        )

        self._grant_access(
            AccessManager(
                name="api",
                principal_id=function_app.identity.principal_id,
                principal_type=PrincipalType.SERVICE_PRINCIPAL,
                parent=function_app,
            ),
            storage_role=STORAGE_BLOB_DATA_OWNER,
            storage_account=storage_account,
            vision_service=vision_service,
            cosmos_account=cosmos_account,
        )

        # a pipeline deploys as a service principal of its own, the interactive user grants don't apply
        if not config.is_continuous_deployment:
            self._grant_access(
                AccessManager(
                    name="user",
                    principal_id=config.principal_id,
                    principal_type=PrincipalType.USER,
                    parent=self.resourcegroup,
                ),
                storage_role=STORAGE_BLOB_DATA_CONTRIBUTOR,
                storage_account=storage_account,
                vision_service=vision_service,
                cosmos_account=cosmos_account,
            )

        return VisionApiExports(
            location=self.location,
            tenant_id=get_tenant_id(),
            resource_group_name=self.resourcegroup.name,
            storage_url=storage_url,
            storage_container_name=container.name,
            api_url=Output.concat("https://", function_app.default_host_name),
        )

    def tags_for(
        self, service: str, role: str, group: Optional[str] = None, extra_tags: Optional[dict[str, str]] = None
    ) -> dict[str, str]:
        """Tags for a resource of this environment, with the configured extra tags applied last

        :param service: This resource's "namespace"
        :param role: The role this resource performs within the namespace
        :param group: The group this resource belongs to
        :param extra_tags: Resource specific tags
        :return: Dict of tags
        """
        return get_tags(
            self._config.environment_name,
            service=service,
            role=role,
            group=group,
            extra_tags={**(extra_tags or {}), **self._config.tags},
        )

    def _grant_access(
        self,
        manager: AccessManager,
        storage_role: str,
        storage_account: storage.StorageAccount,
        vision_service: cognitiveservices.Account,
        cosmos_account: cosmosdb.DatabaseAccount,
    ) -> None:
        manager.grant_storage_access(storage_account, storage_role)
        manager.grant_vision_access(vision_service)
        manager.grant_cosmos_data_access(cosmos_account, self.resourcegroup.name)
