from storefront.stores.http_store import HttpBackendStore
from storefront.stores.interfaces import CatalogStore, CheckoutGateway, SelectionStore
from storefront.stores.session_store import DjangoSessionStore

__all__ = [
    "CatalogStore",
    "CheckoutGateway",
    "SelectionStore",
    "HttpBackendStore",
    "DjangoSessionStore",
]
