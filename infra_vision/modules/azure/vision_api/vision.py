from pulumi import ComponentResource, ResourceOptions
from pulumi_azure_native import cognitiveservices


def create_vision_service(cls, dependency: ComponentResource, name: str, sku: str) -> cognitiveservices.Account:
    # The custom subdomain is required for Entra ID auth, key auth stays off
    return cognitiveservices.Account(
        name,
        account_name=name,
        kind="ComputerVision",
        sku=cognitiveservices.SkuArgs(
            name=sku,
        ),
        properties=cognitiveservices.AccountPropertiesArgs(
            custom_sub_domain_name=name,
            disable_local_auth=True,
            public_network_access=cognitiveservices.PublicNetworkAccess.ENABLED,
        ),
        **cls.common_args,
        tags=cls.tags_for(service="vision", role="account"),
        opts=ResourceOptions(parent=dependency),
    )
