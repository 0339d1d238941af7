#!/usr/bin/env python3

import aws_cdk as cdk

from travel_booking_stack import TravelBookingStack

app = cdk.App()

# cdk deploy -c clientUrl=https://... -c emailSender=... で上書きする
context_env = {
    "CLIENT_URL": app.node.try_get_context("clientUrl"),
    "EMAIL_SENDER": app.node.try_get_context("emailSender"),
    "TEAM_EMAIL": app.node.try_get_context("teamEmail"),
}

TravelBookingStack(
    app,
    "TravelBookingStack",
    environment={k: v for k, v in context_env.items() if v},
)

app.synth()
