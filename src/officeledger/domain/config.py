"""Reporting configuration."""

from dataclasses import dataclass
from decimal import Decimal

from officeledger.domain.errors import ValidationError

# Two-decimal currency tolerance for balance checks
DEFAULT_TOLERANCE = Decimal("0.01")


@dataclass(frozen=True)
class ReportingConfig:
    """Options controlling balance checks and report presentation."""

    # Maximum absolute difference still treated as balanced
    tolerance: Decimal = DEFAULT_TOLERANCE

    # List accounts whose balance nets to zero in the trial balance
    include_zero_balances: bool = False

    currency_symbol: str = "$"

    def __post_init__(self):
        object.__setattr__(self, "tolerance", Decimal(str(self.tolerance)))
        if not self.tolerance.is_finite() or self.tolerance <= 0:
            raise ValidationError("tolerance must be a positive finite number")

    def within_tolerance(self, difference: Decimal) -> bool:
        """Check whether a difference is small enough to count as zero."""
        return abs(difference) < self.tolerance
