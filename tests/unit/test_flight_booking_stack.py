import aws_cdk as core
import aws_cdk.assertions as assertions
import pytest

from flight_booking_stack import FlightBookingStack


@pytest.fixture(scope="module")
def template() -> assertions.Template:
    # レイヤーのバンドリングは行わない
    app = core.App(context={"aws:cdk:bundling-stacks": []})
    stack = FlightBookingStack(app, "FlightBookingStack")
    return assertions.Template.from_stack(stack)


def test_single_table_with_list_index(template):
    template.resource_count_is("AWS::DynamoDB::Table", 1)
    template.has_resource_properties(
        "AWS::DynamoDB::Table",
        {
            "BillingMode": "PAY_PER_REQUEST",
            "KeySchema": [
                {"AttributeName": "PK", "KeyType": "HASH"},
                {"AttributeName": "SK", "KeyType": "RANGE"},
            ],
            "GlobalSecondaryIndexes": [
                assertions.Match.object_like(
                    {
                        "IndexName": "GSI1",
                        "KeySchema": [
                            {"AttributeName": "GSI1PK", "KeyType": "HASH"},
                            {"AttributeName": "GSI1SK", "KeyType": "RANGE"},
                        ],
                    }
                )
            ],
        },
    )


@pytest.mark.parametrize(
    "handler",
    [
        "flight_booking.api.handler.lambda_handler",
        "flight_booking.flight.handlers.seed.lambda_handler",
    ],
)
def test_functions_receive_table_name(template, handler):
    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "Handler": handler,
            "Environment": {
                "Variables": assertions.Match.object_like(
                    {
                        "TABLE_NAME": assertions.Match.any_value(),
                        "POWERTOOLS_SERVICE_NAME": "flight-booking",
                    }
                )
            },
        },
    )


def test_http_api_proxies_to_lambda(template):
    template.resource_count_is("AWS::ApiGatewayV2::Api", 1)
    template.has_resource_properties(
        "AWS::ApiGatewayV2::Api", {"ProtocolType": "HTTP"}
    )
    template.has_resource_properties(
        "AWS::ApiGatewayV2::Integration", {"IntegrationType": "AWS_PROXY"}
    )
