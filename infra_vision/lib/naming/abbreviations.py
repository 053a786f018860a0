ABBREVIATIONS = {
    "resource_group": "rg-",
    "app_service_plan": "plan-",
    "function_app": "func-",
    "storage_account": "st",
    "vision_service": "cog-cv-",
    "cosmos_account": "cosmos-",
}
"""Name prefixes per resource kind, following the Azure Cloud Adoption Framework abbreviations"""
