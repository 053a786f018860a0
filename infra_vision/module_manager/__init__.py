from .registry import MODULES, get_module, run_module
