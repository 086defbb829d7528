from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers


class TicketMachineStack(Stack):
    """乗車券購入 API のスタック"""

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
        )

        api = Api(self, "Api", ticket_machine=fns.ticket_machine)

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "SessionTableName", value=database.table.table_name)
