from .core import (
    get_project,
    get_stack,
    get_team,
    tag_namespace,
    tag_prefix,
)
from .mapper import get_stack_config, get_raw_stack_config
from .vision_env import vision_env, HierarchicalConfig, VisionConfigException
