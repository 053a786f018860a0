from pulumi import ComponentResource, ResourceOptions, Input
from pulumi_azure_native import web

from infra_vision.lib.tags import SERVICE_NAME_TAG

SERVICE_NAME = "api"
"""Service name the deployment tooling looks for when publishing the function code"""


def _app_setting(name: str, value: Input[str]) -> web.NameValuePairArgs:
    return web.NameValuePairArgs(name=name, value=value)


def create_function_app(
    cls,
    dependency: ComponentResource,
    plan_name: str,
    app_name: str,
    python_version: str,
    app_settings: dict[str, Input[str]],
) -> (web.AppServicePlan, web.WebApp):
    """Create a Linux consumption plan and a Python function app running on it

    The app authenticates to the other resources with its system-assigned identity,
    ``AzureWebJobsStorage__accountName`` included.

    :param cls: The module
    :param dependency: Parent of the plan
    :param plan_name: Name of the app service plan
    :param app_name: Name of the function app
    :param python_version: Python version of the worker
    :param app_settings: Settings on top of the functions runtime ones
    :return: The plan and the function app
    """
    plan = web.AppServicePlan(
        plan_name,
        name=plan_name,
        kind="linux",
        reserved=True,
        sku=web.SkuDescriptionArgs(
            name="Y1",
            tier="Dynamic",
        ),
        **cls.common_args,
        tags=cls.tags_for(service="function", role="plan"),
        opts=ResourceOptions(parent=dependency),
    )

    settings = {
        "FUNCTIONS_EXTENSION_VERSION": "~4",
        "FUNCTIONS_WORKER_RUNTIME": "python",
        **app_settings,
    }

    app = web.WebApp(
        app_name,
        name=app_name,
        kind="functionapp,linux",
        server_farm_id=plan.id,
        https_only=True,
        identity=web.ManagedServiceIdentityArgs(
            type=web.ManagedServiceIdentityType.SYSTEM_ASSIGNED,
        ),
        site_config=web.SiteConfigArgs(
            linux_fx_version=f"Python|{python_version}",
            ftps_state="Disabled",
            min_tls_version="1.2",
            app_settings=[_app_setting(k, v) for k, v in settings.items()],
        ),
        **cls.common_args,
        tags=cls.tags_for(service="function", role="app", extra_tags={SERVICE_NAME_TAG: SERVICE_NAME}),
        opts=ResourceOptions(parent=plan),
    )

    return plan, app
