from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

DRAFT_TTL_SECONDS = 3600


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        confirmation_mode: str = "dynamodb",
    ) -> None:
        super().__init__(scope, id)

        self.ticket_machine = _lambda.Function(
            self,
            "TicketMachineLambda",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="ticketing.booking.handlers.api.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            timeout=Duration.seconds(10),
            environment={
                "TABLE_NAME": table.table_name,
                "DRAFT_TTL_SECONDS": str(DRAFT_TTL_SECONDS),
                "CONFIRMATION_MODE": confirmation_mode,
                "POWERTOOLS_SERVICE_NAME": "ticket-machine-service",
                "POWERTOOLS_LOG_LEVEL": "INFO",
            },
        )

        table.grant_read_write_data(self.ticket_machine)
