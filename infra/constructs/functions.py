from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

SERVICE_NAME = "flight-booking"


class Functions(Construct):
    """Lambda 関数を管理する Construct

    - api: HTTP API の全ルートを処理する
    - seed_flights: フライト初期データ投入（管理者が直接 Invoke する）
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
    ) -> None:
        super().__init__(scope, id)

        self.api = self._create_function(
            "ApiLambda",
            "flight_booking.api.handler.lambda_handler",
            table,
            common_layer,
        )

        self.seed_flights = self._create_function(
            "SeedFlightsLambda",
            "flight_booking.flight.handlers.seed.lambda_handler",
            table,
            common_layer,
        )

        for fn in [self.api, self.seed_flights]:
            table.grant_read_write_data(fn)

        self.all_functions = [self.api, self.seed_flights]

    def _create_function(
        self,
        id: str,
        handler: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            timeout=Duration.seconds(10),
            environment={
                "TABLE_NAME": table.table_name,
                "POWERTOOLS_SERVICE_NAME": SERVICE_NAME,
                "POWERTOOLS_LOG_LEVEL": "INFO",
            },
        )
