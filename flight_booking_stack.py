from aws_cdk import Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers


class FlightBookingStack(Stack):
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

        Api(self, "Api", api_function=fns.api)
