"""Payment Gate Interface"""

from abc import ABC, abstractmethod


class IPaymentGate(ABC):
    @abstractmethod
    def approve(self, payer: str, amount: float) -> bool:
        pass
