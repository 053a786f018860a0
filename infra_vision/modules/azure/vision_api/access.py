import uuid
from dataclasses import dataclass

from pulumi import Input, Output, Resource, ResourceOptions
from pulumi_azure_native import cognitiveservices, cosmosdb, storage
from pulumi_azure_native.authorization import PrincipalType

from infra_vision.lib.azure.iam import RoleAssignmentArgs, assign_role

STORAGE_BLOB_DATA_OWNER = "Storage Blob Data Owner"
STORAGE_BLOB_DATA_CONTRIBUTOR = "Storage Blob Data Contributor"
COGNITIVE_SERVICES_USER = "Cognitive Services User"

COSMOS_DATA_CONTRIBUTOR_ID = "00000000-0000-0000-0000-000000000002"
"""Built-in Cosmos DB data contributor SQL role definition"""


def _role_slug(role_definition_name: str) -> str:
    return role_definition_name.lower().replace(" ", "-")


@dataclass
class AccessManager:
    """Grants one principal data-plane access to the deployed resources"""

    name: str
    """Short name of the principal, used in resource names"""

    principal_id: Input[str]

    principal_type: PrincipalType

    parent: Resource

    def grant_storage_access(self, account: storage.StorageAccount, role_definition_name: str) -> None:
        """Grant a blob data role on a storage account

        :param account: Storage account
        :param role_definition_name: One of the "Storage Blob Data" roles
        :return: None
        """
        self._assign(account.id, role_definition_name)

    def grant_vision_access(self, account: cognitiveservices.Account) -> None:
        self._assign(account.id, COGNITIVE_SERVICES_USER)

    def grant_cosmos_data_access(self, account: cosmosdb.DatabaseAccount, resource_group_name: Input[str]) -> None:
        """Grant the built-in data contributor role on a Cosmos DB account

        Cosmos DB data-plane roles live in the account, not in Azure RBAC, so this creates a SQL role assignment.
        The assignment id is derived from account, principal and role, so redeploys keep the same id.

        :param account: Database account
        :param resource_group_name: Resource group of the account
        :return: None
        """
        role_definition_id = Output.concat(account.id, "/sqlRoleDefinitions/", COSMOS_DATA_CONTRIBUTOR_ID)

        role_assignment_id = Output.all(account.name, self.principal_id).apply(
            lambda args: str(uuid.uuid5(uuid.NAMESPACE_URL, f"{args[0]}/{args[1]}/{COSMOS_DATA_CONTRIBUTOR_ID}"))
        )

        cosmosdb.SqlResourceSqlRoleAssignment(
            f"{self.name}-cosmos-data-contributor",
            account_name=account.name,
            resource_group_name=resource_group_name,
            role_assignment_id=role_assignment_id,
            role_definition_id=role_definition_id,
            principal_id=self.principal_id,
            scope=account.id,
            opts=ResourceOptions(parent=self.parent),
        )

    def _assign(self, scope: Output[str], role_definition_name: str) -> None:
        assign_role(
            f"{self.name}-{_role_slug(role_definition_name)}",
            principal_id=self.principal_id,
            principal_type=self.principal_type,
            args=RoleAssignmentArgs(scope=scope, role_definition_name=role_definition_name),
            parent=self.parent,
        )
