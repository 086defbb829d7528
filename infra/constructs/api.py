from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

# (パス, HTTPメソッド) の一覧。すべて同じ Lambda で処理する
ROUTES: list[tuple[str, str]] = [
    ("draft", "GET"),
    ("origin", "POST"),
    ("destination", "POST"),
    ("departure", "POST"),
    ("arrival", "POST"),
    ("trips", "GET"),
    ("trip", "POST"),
    ("class", "POST"),
    ("name", "POST"),
    ("email", "POST"),
    ("phone_number", "POST"),
    ("book_trip", "POST"),
]


class Api(Construct):
    """API Gateway Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        ticket_machine: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "TicketMachineRestApi",
            rest_api_name="Ticket Machine API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                throttling_burst_limit=10,
                throttling_rate_limit=5,
            ),
        )

        integration = apigw.LambdaIntegration(ticket_machine)

        for path, method in ROUTES:
            resource = self.rest_api.root.get_resource(path)
            if resource is None:
                resource = self.rest_api.root.add_resource(path)
            resource.add_method(method, integration)
