import logging
import os

from pulumi import get_stack, log, export

from infra_vision.lib.utils import dict_from_exports
from infra_vision.module_manager import run_module


def run_stack(stack_name: str) -> None:
    """Deploy the module registered for a stack and export its outputs under the stack name

    :param stack_name: The stack name
    :return: None
    """
    exports = run_module(stack_name)

    export(stack_name, dict_from_exports(exports))


def run_active_stack() -> None:
    """Deploy the module registered for the active stack

    :return: None
    """
    stack = get_stack()

    log.debug(f"active stack is `{stack}`")

    run_stack(stack)


if os.getenv("VISION_DEBUG"):
    logging.basicConfig(level=logging.DEBUG)
    msg = "vision logging enabled"
    log.debug(msg)
    logging.debug(msg)
