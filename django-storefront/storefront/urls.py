from django.urls import path

from storefront.handlers import (
    CartView,
    CheckoutView,
    EventDetailView,
    EventListView,
    ProceedView,
    SelectionView,
)

urlpatterns = [
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path(
        "events/<str:event_id>/selection",
        SelectionView.as_view(),
        name="event-selection",
    ),
    path("events/<str:event_id>/proceed", ProceedView.as_view(), name="event-proceed"),
    path("cart", CartView.as_view(), name="cart"),
    path("cart/checkout", CheckoutView.as_view(), name="cart-checkout"),
]
