"""Cost models: flexible cash/points costs and stored cost estimates."""

from pydantic import Field, model_validator

from wandermint.models.common import DocumentModel
from wandermint.models.vocabularies import PaymentType


class FlexibleCost(DocumentModel):
    """Amount payable in cash, loyalty points, or a mix of both.

    ``total_cash_value`` is always populated so costs of any payment type
    can be summed and compared. Display strings are rendered verbatim by
    other layers; their format is part of the contract.
    """

    payment_type: PaymentType = PaymentType.cash
    cash_amount: float = Field(0.0, ge=0)
    points_amount: int | None = Field(None, ge=0)
    points_program: str | None = None
    total_cash_value: float = Field(0.0, ge=0)
    notes: str | None = None

    @model_validator(mode="after")
    def validate_points_fields(self) -> "FlexibleCost":
        """Points and hybrid costs must name both amount and program."""
        if self.payment_type != PaymentType.cash and (
            self.points_amount is None or self.points_program is None
        ):
            raise ValueError(
                f"{self.payment_type.value} cost requires points_amount and points_program"
            )
        return self

    @classmethod
    def cash_only(cls, amount: float, notes: str | None = None) -> "FlexibleCost":
        return cls(
            payment_type=PaymentType.cash,
            cash_amount=amount,
            total_cash_value=amount,
            notes=notes,
        )

    @classmethod
    def points_only(
        cls,
        points: int,
        program: str,
        cash_value: float,
        notes: str | None = None,
    ) -> "FlexibleCost":
        return cls(
            payment_type=PaymentType.points,
            cash_amount=0.0,
            points_amount=points,
            points_program=program,
            total_cash_value=cash_value,
            notes=notes,
        )

    @classmethod
    def hybrid(
        cls,
        cash: float,
        points: int,
        program: str,
        cash_value: float | None = None,
        notes: str | None = None,
    ) -> "FlexibleCost":
        """Cash plus points; the cash-equivalent defaults to the cash part."""
        return cls(
            payment_type=PaymentType.hybrid,
            cash_amount=cash,
            points_amount=points,
            points_program=program,
            total_cash_value=cash if cash_value is None else cash_value,
            notes=notes,
        )

    @property
    def _cash_text(self) -> str:
        return f"${int(self.cash_amount)}"

    @property
    def display_text(self) -> str:
        """Full text, e.g. ``$200 + 15,000 Amex``."""
        if self.payment_type == PaymentType.points:
            return f"{self.points_amount:,} {self.points_program} points"
        if self.payment_type == PaymentType.hybrid:
            return f"{self._cash_text} + {self.points_amount:,} {self.points_program}"
        return self._cash_text

    @property
    def short_display_text(self) -> str:
        """Compact text, e.g. ``$200+15,000pts``."""
        if self.payment_type == PaymentType.points:
            return f"{self.points_amount:,}pts"
        if self.payment_type == PaymentType.hybrid:
            return f"{self._cash_text}+{self.points_amount:,}pts"
        return self._cash_text

    @property
    def is_free(self) -> bool:
        return self.total_cash_value == 0 and not self.points_amount


class CostBreakdown(DocumentModel):
    """Stored cost estimate by category (cash only)."""

    total_estimate: float = 0.0
    flights: float = 0.0
    accommodation: float = 0.0
    activities: float = 0.0
    food: float = 0.0
    local_transport: float = 0.0
    miscellaneous: float = 0.0
    currency: str = "USD"
