import json
from enum import Enum
from typing import Type, Any, get_type_hints

from dacite import from_dict, Config
from pulumi import log, runtime

from infra_vision.lib.base import ConfigType


def _parse_args_value(value: Any, field_type: Any) -> Any:
    """Parse a stack config value for a dataclass field

    Pulumi hands every value over as a string. String fields keep it verbatim, so `3.10` stays `3.10`.
    Anything else (bools, dicts, lists, numbers) is parsed as json when it is valid json.

    :param value: Raw config value
    :param field_type: Type hint of the target field, None for keys the dataclass doesn't know
    :return: The value to hand to dacite
    """
    if field_type is str or (isinstance(field_type, type) and issubclass(field_type, Enum)):
        return value

    try:
        return json.loads(value)
    except (json.decoder.JSONDecodeError, TypeError):
        return value


def get_raw_stack_config(stack: str) -> dict[str, Any]:
    """Pull stack config from Pulumi internals and strip the stack namespace from the keys

    This method may break when upgrading the ``pulumi`` python dependency.

    :param stack: Name of the stack
    :return: Config values as Pulumi stores them
    """
    stack_prefix = stack + ":"

    config = {k.removeprefix(stack_prefix): v for k, v in runtime.config.CONFIG.items() if k.startswith(stack_prefix)}

    log.debug(f"config dict for stack `{stack}` has keys {sorted(config)}")

    return config


def get_stack_config(stack: str, config_cls: Type[ConfigType]) -> ConfigType:
    """Get a stack config in dataclass form

    Values are parsed according to the field they land in, then mapped with
    `dacite <https://github.com/konradhalas/dacite>`_ in strict mode, so unknown keys fail.

    :param stack: Name of the stack
    :param config_cls: The dataclass for the config
    :return: The stack config expressed in the module's config dataclass
    """
    field_types = get_type_hints(config_cls)

    data = {k: _parse_args_value(v, field_types.get(k)) for k, v in get_raw_stack_config(stack).items()}

    config = from_dict(
        data_class=config_cls,
        data=data,
        config=Config(
            cast=[Enum],
            strict=True,
        ),
    )

    log.debug(f"config for stack `{stack}` is {config}")

    return config
