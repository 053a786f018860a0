from dataclasses import is_dataclass
from typing import Any

from pulumi import Output, get_stack


def _map_dict(val: dict) -> dict:
    return {k: _map(v) for k, v in val.items()}


def _map(val: Any) -> Any:
    if isinstance(val, type):
        raise TypeError(f"Unexpected value '{val}' of type '{type(val)}'")
    elif isinstance(val, (list, tuple)):
        return [_map(v) for v in val]
    elif isinstance(val, dict):
        return _map_dict(val)
    elif is_dataclass(val):
        return _map_dict(val.__dict__)
    elif isinstance(val, Output):
        return val
    else:
        return val


def dict_from_exports(exports: object) -> Any:
    """Recursively convert a module exports object to plain dicts and lists

    :param exports: A module exports object
    :return: The exports without dataclasses
    """
    return _map(exports)


def outputs_from_exports(exports: object) -> dict:
    """Generate a serializable output from a module exports object

    Recursively converts dataclasses to dict, keyed under the active stack name.

    Raises an exception for any class object found.

    :param exports: A module exports object, usually a dataclass instance
    :return: The output for the module
    """
    return {
        get_stack(): dict_from_exports(exports),
    }
