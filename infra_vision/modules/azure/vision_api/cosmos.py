from pulumi import ComponentResource, ResourceOptions
from pulumi_azure_native import cosmosdb

PARTITION_KEY_PATH = "/id"


def create_cosmos(
    cls, dependency: ComponentResource, account_name: str, database_name: str, container_name: str
) -> (cosmosdb.DatabaseAccount, cosmosdb.SqlResourceSqlDatabase, cosmosdb.SqlResourceSqlContainer):
    """Create a serverless Cosmos DB account with a SQL database and a container

    Local (key) auth is disabled, so every client needs a data-plane role assignment.

    :param cls: The module
    :param dependency: Parent of the account
    :param account_name: Name of the database account
    :param database_name: Name of the SQL database
    :param container_name: Name of the container
    :return: The account, the database and the container
    """
    account = cosmosdb.DatabaseAccount(
        account_name,
        account_name=account_name,
        kind=cosmosdb.DatabaseAccountKind.GLOBAL_DOCUMENT_DB,
        database_account_offer_type=cosmosdb.DatabaseAccountOfferType.STANDARD,
        consistency_policy=cosmosdb.ConsistencyPolicyArgs(
            default_consistency_level=cosmosdb.DefaultConsistencyLevel.SESSION,
        ),
        locations=[
            cosmosdb.LocationArgs(
                location_name=cls.location,
                failover_priority=0,
                is_zone_redundant=False,
            )
        ],
        capabilities=[
            cosmosdb.CapabilityArgs(
                name="EnableServerless",
            )
        ],
        disable_local_auth=True,
        **cls.common_args,
        tags=cls.tags_for(service="cosmos", role="account"),
        opts=ResourceOptions(parent=dependency),
    )

    database = cosmosdb.SqlResourceSqlDatabase(
        f"{account_name}-{database_name}",
        account_name=account.name,
        database_name=database_name,
        resource=cosmosdb.SqlDatabaseResourceArgs(
            id=database_name,
        ),
        resource_group_name=cls.resourcegroup.name,
        opts=ResourceOptions(parent=account),
    )

    container = cosmosdb.SqlResourceSqlContainer(
        f"{account_name}-{database_name}-{container_name}",
        account_name=account.name,
        database_name=database.name,
        container_name=container_name,
        resource=cosmosdb.SqlContainerResourceArgs(
            id=container_name,
            partition_key=cosmosdb.ContainerPartitionKeyArgs(
                paths=[PARTITION_KEY_PATH],
                kind=cosmosdb.PartitionKind.HASH,
            ),
        ),
        resource_group_name=cls.resourcegroup.name,
        opts=ResourceOptions(parent=database),
    )

    return account, database, container
