from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        cinema_timezone: str = "UTC",
    ) -> None:
        super().__init__(scope, id)

        self.book_seat = self._create_function(
            "BookSeatLambda",
            "services.booking.handlers.book_seat.lambda_handler",
            "booking-service",
            table,
            common_layer,
        )

        self.get_available_seats = self._create_function(
            "GetAvailableSeatsLambda",
            "services.booking.handlers.get_available_seats.lambda_handler",
            "booking-service",
            table,
            common_layer,
        )

        self.register_show_time = self._create_function(
            "RegisterShowTimeLambda",
            "services.screening.handlers.register_show_time.lambda_handler",
            "screening-service",
            table,
            common_layer,
            extra_environment={"CINEMA_TIMEZONE": cinema_timezone},
        )

        self.list_show_times = self._create_function(
            "ListShowTimesLambda",
            "services.screening.handlers.list_show_times.lambda_handler",
            "screening-service",
            table,
            common_layer,
        )

        table.grant_read_write_data(self.book_seat)
        table.grant_read_write_data(self.register_show_time)
        table.grant_read_data(self.get_available_seats)
        table.grant_read_data(self.list_show_times)

    def _create_function(
        self,
        id: str,
        handler: str,
        service_name: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        extra_environment: dict[str, str] | None = None,
    ) -> _lambda.Function:
        return _lambda.Function(
            self,
            id,
            runtime=_lambda.Runtime.PYTHON_3_14,
            handler=handler,
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            environment={
                "TABLE_NAME": table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "POWERTOOLS_LOG_LEVEL": "INFO",
                **(extra_environment or {}),
            },
        )
