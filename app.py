#!/usr/bin/env python3

import aws_cdk as cdk

from ticket_machine_stack import TicketMachineStack

app = cdk.App()
TicketMachineStack(
    app,
    "TicketMachineStack",
)

app.synth()
