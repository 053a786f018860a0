from typing import Optional, Type

from pulumi import log, ResourceOptions

from infra_vision.lib.base import BaseModule, ExportsType
from infra_vision.lib.config import get_stack_config
from infra_vision.modules.azure.vision_api import VisionApi

MODULES: dict[str, Type[BaseModule]] = {
    "vision-api": VisionApi,
}
"""Stack name to the module it deploys. The stack's config namespace is the stack name too."""


def get_module(stack_name: str) -> Type[BaseModule]:
    """Look up the module a stack deploys

    :param stack_name: Stack name
    :return: The module class
    """
    try:
        return MODULES[stack_name]
    except KeyError:
        raise ModuleNotFoundError(f"no module for stack `{stack_name}`, expected one of {sorted(MODULES)}")


def run_module(stack_name: str, opts: Optional[ResourceOptions] = None) -> ExportsType:
    """Map the stack config onto the module's config type and declare its resources

    The config is validated before the module's component resource is created, so a bad config
    declares nothing.

    :param stack_name: Stack name
    :param opts: Optional set of ``pulumi.ResourceOptions`` to forward to ``pulumi.ComponentResource``.
    :return: The module's exports
    """
    module_cls = get_module(stack_name)

    log.debug(f"running module `{module_cls.__name__}` for stack `{stack_name}`")

    config = get_stack_config(
        stack=stack_name,
        config_cls=module_cls.get_config_type(),
    )

    return module_cls(name=stack_name, config=config, opts=opts).run()
