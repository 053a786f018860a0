from .outputs_from_exports import outputs_from_exports, dict_from_exports
