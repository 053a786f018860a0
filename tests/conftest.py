import pulumi
import pytest
from pulumi import Output

SUBSCRIPTION_ID = "00000000-1111-2222-3333-444444444444"
TENANT_ID = "99999999-8888-7777-6666-555555555555"
FUNCTION_PRINCIPAL_ID = "11111111-aaaa-bbbb-cccc-dddddddddddd"

_NAME_INPUTS = ("containerName", "databaseName", "accountName", "resourceGroupName", "name")


class VisionMocks(pulumi.runtime.Mocks):
    """Records every registered resource and fills in the outputs Azure would compute"""

    def __init__(self):
        self.resources = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)

        outputs = dict(args.inputs)
        outputs.setdefault("name", next((args.inputs[k] for k in _NAME_INPUTS if k in args.inputs), args.name))

        if args.typ == "azure-native:storage:StorageAccount":
            outputs["primaryEndpoints"] = {"blob": f"https://{args.inputs['accountName']}.blob.core.windows.net/"}
        elif args.typ == "azure-native:cognitiveservices:Account":
            outputs["properties"] = {
                **args.inputs.get("properties", {}),
                "endpoint": f"https://{args.inputs['accountName']}.cognitiveservices.azure.com/",
            }
        elif args.typ == "azure-native:cosmosdb:DatabaseAccount":
            outputs["documentEndpoint"] = f"https://{args.inputs['accountName']}.documents.azure.com:443/"
        elif args.typ == "azure-native:web:WebApp":
            outputs["defaultHostName"] = f"{args.inputs['name']}.azurewebsites.net"
            outputs["identity"] = {**args.inputs.get("identity", {}), "principalId": FUNCTION_PRINCIPAL_ID}

        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        if args.token == "azure-native:authorization:getClientConfig":
            return {
                "clientId": "client",
                "objectId": "object",
                "subscriptionId": SUBSCRIPTION_ID,
                "tenantId": TENANT_ID,
            }

        return {}


_mocks = VisionMocks()
pulumi.runtime.set_mocks(_mocks, project="vision-dev", stack="vision-api", preview=False)


@pytest.fixture
def mocks() -> VisionMocks:
    _mocks.resources.clear()
    return _mocks


@pytest.fixture(autouse=True)
def role_definitions(monkeypatch):
    """Resolve role names without calling the authorization API"""
    from infra_vision.lib.azure.iam import role_assignment

    monkeypatch.setattr(
        role_assignment,
        "get_role_definition_id",
        lambda name, scope=None: Output.from_input(f"/providers/Microsoft.Authorization/roleDefinitions/{name}"),
    )
