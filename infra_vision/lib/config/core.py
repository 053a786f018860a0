from typing import Optional

from pulumi import get_stack, get_project

from .vision_env import vision_env

tag_namespace = vision_env.get("tag_namespace", "vision")
"""Resources created using the tagging library prefix the standard tags with this.
   This differs from the Pulumi config namespace, as this is used for the actual resources, not the Pulumi config.
"""

tag_prefix = f"{tag_namespace}{vision_env.get('tag_separator', ':')}"


def get_team() -> Optional[str]:
    """
    The owning team, if one is set in `Vision.common.yaml`

    :return: Team name or None
    """
    return vision_env.get("team")
