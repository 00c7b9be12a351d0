"""FlexibleCost and cost-estimate parsers."""

from collections.abc import Mapping

from wandermint.config import get_settings
from wandermint.errors import MissingFieldError
from wandermint.models.cost import CostBreakdown, FlexibleCost
from wandermint.models.vocabularies import PaymentType
from wandermint.parsing.context import Fragment, ParseContext
from wandermint.parsing.fields import (
    optional_float,
    optional_int,
    optional_str,
    resolve_tag,
    text,
)


def parse_flexible_cost(fragment: Fragment, ctx: ParseContext | None = None) -> FlexibleCost:
    """Parse a cost fragment.

    Rules:
    - no ``paymentType`` but a legacy ``cash`` number: cash cost of that amount
    - unresolvable ``paymentType``: cash
    - cash: ``totalCashValue`` defaults to ``cashAmount``
    - points: ``pointsAmount`` and ``pointsProgram`` required; ``totalCashValue``
      defaults to 0
    - hybrid: ``pointsAmount`` and ``pointsProgram`` required; ``totalCashValue``
      defaults to ``cashAmount``

    Raises:
        MissingFieldError: points/hybrid cost without points amount or program
    """
    ctx = ctx or ParseContext()

    if fragment.get("paymentType") is None and fragment.get("cash") is not None:
        legacy_cash = max(0.0, optional_float(fragment, "cash", ctx) or 0.0)
        return FlexibleCost.cash_only(legacy_cash)

    payment_type = resolve_tag(PaymentType, fragment, "paymentType", ctx)
    cash_amount = max(0.0, optional_float(fragment, "cashAmount", ctx) or 0.0)
    supplied_total = optional_float(fragment, "totalCashValue", ctx, None)
    notes = optional_str(fragment, "notes", ctx)

    if payment_type == PaymentType.cash:
        total = cash_amount if supplied_total is None else supplied_total
        return FlexibleCost(
            payment_type=PaymentType.cash,
            cash_amount=cash_amount,
            total_cash_value=max(0.0, total),
            notes=notes,
        )

    points_amount = optional_int(fragment, "pointsAmount", ctx)
    if points_amount is None:
        raise MissingFieldError("pointsAmount", path=ctx.path)
    points_program = optional_str(fragment, "pointsProgram", ctx)
    if points_program is None:
        raise MissingFieldError("pointsProgram", path=ctx.path)

    if payment_type == PaymentType.points:
        total = 0.0 if supplied_total is None else supplied_total
    else:
        total = cash_amount if supplied_total is None else supplied_total

    return FlexibleCost(
        payment_type=payment_type,
        cash_amount=cash_amount,
        points_amount=max(0, points_amount),
        points_program=points_program,
        total_cash_value=max(0.0, total),
        notes=notes,
    )


def parse_cost_field(fragment: Fragment, key: str, ctx: ParseContext) -> FlexibleCost:
    """Cost stored under ``key``; a missing cost is free."""
    raw = fragment.get(key)
    if not isinstance(raw, Mapping):
        return FlexibleCost.cash_only(0)
    return parse_flexible_cost(raw, ctx.child(key))


def parse_cost_breakdown(fragment: Fragment, ctx: ParseContext | None = None) -> CostBreakdown:
    """Parse a stored cost estimate; missing amounts are 0."""
    ctx = ctx or ParseContext()
    return CostBreakdown(
        total_estimate=optional_float(fragment, "totalEstimate", ctx) or 0.0,
        flights=optional_float(fragment, "flights", ctx) or 0.0,
        accommodation=optional_float(fragment, "accommodation", ctx) or 0.0,
        activities=optional_float(fragment, "activities", ctx) or 0.0,
        food=optional_float(fragment, "food", ctx) or 0.0,
        local_transport=optional_float(fragment, "localTransport", ctx) or 0.0,
        miscellaneous=optional_float(fragment, "miscellaneous", ctx) or 0.0,
        currency=text(fragment, "currency", ctx, get_settings().default_currency),
    )
