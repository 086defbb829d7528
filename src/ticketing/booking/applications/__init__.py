from .ticket_machine import TicketMachineService

__all__ = ["TicketMachineService"]
