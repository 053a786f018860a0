# This file is boilerplate. Copy it to any new environment you create.
# Its purpose is to call the launcher that exists as part of `infra_vision`.
# From there, the module to run is picked from the stack name, so the `vision-api` stack runs the vision api module.
#
# If you need a custom stack name, call `run_stack("vision-api")` from `infra_vision.launcher` instead.
from infra_vision.launcher import run_active_stack

run_active_stack()
