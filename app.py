#!/usr/bin/env python3

import aws_cdk as cdk

from cinema_booking_stack import CinemaBookingStack

app = cdk.App()
CinemaBookingStack(
    app,
    "CinemaBookingStack",
    cinema_timezone=app.node.try_get_context("cinema_timezone") or "UTC",
)

app.synth()
