from aws_cdk import CfnOutput
from aws_cdk import aws_apigatewayv2 as apigwv2
from aws_cdk import aws_lambda as _lambda
from aws_cdk.aws_apigatewayv2_integrations import HttpLambdaIntegration
from constructs import Construct


class Api(Construct):
    """API Gateway HTTP API Construct

    全パスを1つの Lambda にプロキシし、ルーティングと 404 は Lambda 側で行う。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        api_function: _lambda.Function,
    ) -> None:
        super().__init__(scope, id)

        self.http_api = apigwv2.HttpApi(
            self,
            "FlightBookingHttpApi",
            api_name="Flight Booking API",
            default_integration=HttpLambdaIntegration(
                "ApiIntegration", handler=api_function
            ),
            # フロントエンドは別オリジンから呼び出す
            cors_preflight=apigwv2.CorsPreflightOptions(
                allow_origins=["*"],
                allow_methods=[apigwv2.CorsHttpMethod.ANY],
                allow_headers=["content-type"],
            ),
        )

        CfnOutput(self, "ApiUrl", value=self.http_api.api_endpoint)
