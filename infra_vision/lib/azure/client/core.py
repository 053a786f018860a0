from functools import lru_cache

from pulumi_azure_native import authorization


@lru_cache(maxsize=None)
def get_client_config() -> authorization.AwaitableGetClientConfigResult:
    """Invoke the provider once for the identity it deploys with

    :return: Client configuration including client, subscription and tenant IDs
    """
    return authorization.get_client_config()


def get_subscription_id() -> str:
    """Subscription the environment is deployed to, one of the inputs of the resource token"""
    return get_client_config().subscription_id


def get_subscription_scope() -> str:
    """RBAC scope of the whole subscription, where built-in role definitions are looked up"""
    return f"/subscriptions/{get_subscription_id()}"


def get_tenant_id() -> str:
    """Tenant of the deploying identity, exported so clients know where to request tokens"""
    return get_client_config().tenant_id
