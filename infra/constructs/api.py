from aws_cdk import CfnOutput
from aws_cdk import aws_apigatewayv2 as apigwv2
from aws_cdk import aws_lambda as _lambda
from aws_cdk.aws_apigatewayv2_integrations import HttpLambdaIntegration
from constructs import Construct


class Api(Construct):
    """API Gateway (HTTP API) Construct

    Lambda には payload format 2.0 のイベントが渡る。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        book_seat: _lambda.IFunction,
        get_available_seats: _lambda.IFunction,
        register_show_time: _lambda.IFunction,
        list_show_times: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        self.http_api = apigwv2.HttpApi(
            self,
            "CinemaHttpApi",
            api_name="Cinema Booking API",
        )

        # GET /showtimes?day=MONDAY
        self.http_api.add_routes(
            path="/showtimes",
            methods=[apigwv2.HttpMethod.GET],
            integration=HttpLambdaIntegration(
                "ListShowTimesIntegration", list_show_times
            ),
        )

        # PUT /showtimes/{show_time_id}
        self.http_api.add_routes(
            path="/showtimes/{show_time_id}",
            methods=[apigwv2.HttpMethod.PUT],
            integration=HttpLambdaIntegration(
                "RegisterShowTimeIntegration", register_show_time
            ),
        )

        # GET /showtimes/{show_time_id}/seats
        self.http_api.add_routes(
            path="/showtimes/{show_time_id}/seats",
            methods=[apigwv2.HttpMethod.GET],
            integration=HttpLambdaIntegration(
                "GetAvailableSeatsIntegration", get_available_seats
            ),
        )

        # POST /showtimes/{show_time_id}/bookings
        self.http_api.add_routes(
            path="/showtimes/{show_time_id}/bookings",
            methods=[apigwv2.HttpMethod.POST],
            integration=HttpLambdaIntegration("BookSeatIntegration", book_seat),
        )

        CfnOutput(self, "ApiUrl", value=self.http_api.api_endpoint)
