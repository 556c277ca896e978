from aws_cdk import Stack
from constructs import Construct

from infra.constructs import Api, Database, Functions, Layers


class CinemaBookingStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        cinema_timezone: str = "UTC",
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            cinema_timezone=cinema_timezone,
        )

        Api(
            self,
            "Api",
            book_seat=fns.book_seat,
            get_available_seats=fns.get_available_seats,
            register_show_time=fns.register_show_time,
            list_show_times=fns.list_show_times,
        )
