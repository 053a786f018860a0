from .core import get_client_config, get_subscription_id, get_subscription_scope, get_tenant_id
