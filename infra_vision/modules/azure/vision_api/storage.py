from pulumi import ComponentResource, ResourceOptions
from pulumi_azure_native import storage


def create_storage(
    cls, dependency: ComponentResource, account_name: str, container_name: str
) -> (storage.StorageAccount, storage.BlobContainer):
    """Create a storage account with a private blob container inside it

    :param cls: The module
    :param dependency: Parent of the account
    :param account_name: Name of the storage account
    :param container_name: Name of the blob container
    :return: The storage account and the blob container
    """
    account = storage.StorageAccount(
        account_name,
        account_name=account_name,
        kind=storage.Kind.STORAGE_V2,
        sku=storage.SkuArgs(
            name=storage.SkuName.STANDARD_LRS,
        ),
        access_tier=storage.AccessTier.HOT,
        allow_blob_public_access=False,
        allow_shared_key_access=True,
        enable_https_traffic_only=True,
        minimum_tls_version="TLS1_2",
        **cls.common_args,
        tags=cls.tags_for(service="storage", role="account", group=container_name),
        opts=ResourceOptions(parent=dependency),
    )

    container = storage.BlobContainer(
        f"{account_name}-{container_name}",
        container_name=container_name,
        account_name=account.name,
        public_access=storage.PublicAccess.NONE,
        resource_group_name=cls.resourcegroup.name,
        opts=ResourceOptions(parent=account),
    )

    return account, container
