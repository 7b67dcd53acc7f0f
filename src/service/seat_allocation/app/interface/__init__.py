"""Seat Allocation Service Interfaces"""

from src.service.seat_allocation.app.interface.i_ledger import ILedger
from src.service.seat_allocation.app.interface.i_payment_gate import IPaymentGate
from src.service.seat_allocation.app.interface.i_seat_table import ISeatTable

__all__ = [
    'ILedger',
    'IPaymentGate',
    'ISeatTable',
]
