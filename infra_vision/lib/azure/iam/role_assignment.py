from dataclasses import dataclass
from typing import Union

from pulumi import ResourceOptions, Output, Resource, Input
from pulumi_azure_native.authorization import RoleAssignment, PrincipalType

from .get_role_definition_id import get_role_definition_id


@dataclass
class RoleAssignmentArgs:
    scope: Union[str, Output[str]]
    """Scope of the role assignment"""

    role_definition_name: str
    """Name of the role definition"""


def assign_role(
    name: str,
    principal_id: Input[str],
    principal_type: PrincipalType,
    args: RoleAssignmentArgs,
    parent: Resource,
) -> RoleAssignment:
    """
    Grant a principal a role at a scope

    :param name: Pulumi name of the role assignment
    :param principal_id: Object ID of the user, group or service principal
    :param principal_type: Kind of principal
    :param args: Role and scope
    :param parent: Parent resource for the assignment
    :return: The role assignment
    """
    return RoleAssignment(
        name,
        scope=args.scope,
        principal_id=principal_id,
        principal_type=principal_type,
        role_definition_id=get_role_definition_id(args.role_definition_name, scope=args.scope),
        opts=ResourceOptions(parent=parent),
    )
