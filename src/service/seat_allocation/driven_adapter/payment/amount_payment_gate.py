"""
Amount Payment Gate

Approval stand-in: any strictly positive amount is accepted. A real payment provider
plugs in behind the same IPaymentGate contract.
"""

from src.platform.logging.loguru_io import Logger
from src.service.seat_allocation.app.interface import IPaymentGate


class AmountPaymentGate(IPaymentGate):
    def approve(self, payer: str, amount: float) -> bool:
        Logger.base.info(f'💳 [PAYMENT] Validating payment of Rs.{amount} for {payer}')
        approved = amount > 0
        if not approved:
            Logger.base.info(f'🚫 [PAYMENT] Declined Rs.{amount} for {payer}')
        return approved
