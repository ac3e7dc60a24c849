from storefront.handlers.views import (
    CartView,
    CheckoutView,
    EventDetailView,
    EventListView,
    ProceedView,
    SelectionView,
)

__all__ = [
    "CartView",
    "CheckoutView",
    "EventDetailView",
    "EventListView",
    "ProceedView",
    "SelectionView",
]
