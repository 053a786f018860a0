from .azure_module import AzureModule
