from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class DepositLimitPolicy:
    """Defines how much a client may deposit at once.

    Semantics (intentionally centralized):
    - total_owed is the sum of prices of the client's unpaid jobs,
      across every contract of the client
    - a deposit is allowed if amount <= ratio * total_owed

    Note: a client who owes nothing can't deposit anything, since the cap is 0.
    """

    ratio: Decimal

    @classmethod
    def from_ratio(cls, ratio: float | str | Decimal) -> DepositLimitPolicy:
        # Go through str so 0.25 doesn't turn into 0.2500000000000000138...
        return cls(ratio=Decimal(str(ratio)))

    def max_deposit(self, total_owed: Decimal) -> Decimal:
        return self.ratio * total_owed

    def allows(self, *, amount: Decimal, total_owed: Decimal) -> bool:
        return amount <= self.max_deposit(total_owed)
