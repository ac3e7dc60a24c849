"""Cart lines and totals from a selection and whatever metadata has resolved."""

from collections.abc import Collection, Mapping

from storefront.domain import CartLine, CartSummary, Money, TicketMetadataEntry, TicketTypeId


def summarize(
    selection: Mapping[TicketTypeId, int],
    entries: Mapping[TicketTypeId, TicketMetadataEntry],
    failed: Collection[TicketTypeId] = (),
) -> CartSummary:
    """Build the cart summary.

    Only ids with a positive quantity produce lines. Ids without resolved
    metadata are left out of the lines and the total and reported as
    pending, or as failed when their lookup failed.
    """
    lines: list[CartLine] = []
    pending: list[TicketTypeId] = []
    failed_ids: list[TicketTypeId] = []

    for ticket_id in sorted(selection):
        quantity = selection[ticket_id]
        if quantity <= 0:
            continue
        entry = entries.get(ticket_id)
        if entry is None:
            (failed_ids if ticket_id in failed else pending).append(ticket_id)
            continue
        lines.append(
            CartLine(
                ticket_id=ticket_id,
                name=entry.name,
                quantity=quantity,
                unit_price=entry.price,
            )
        )

    total = Money.zero()
    for line in lines:
        total = total + line.subtotal

    return CartSummary(
        lines=tuple(lines),
        total=total,
        pending_ids=tuple(pending),
        failed_ids=tuple(failed_ids),
    )
