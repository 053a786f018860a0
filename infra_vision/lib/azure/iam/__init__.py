from .role_assignment import RoleAssignmentArgs, assign_role
from .get_role_definition_id import get_role_definition_id
