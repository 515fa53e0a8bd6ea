from storefront.search.debounce import Debouncer
from storefront.search.dropdown import Dropdown, DropdownState
from storefront.search.routing import HOME_PATH, detail_path
from storefront.search.widget import ProductSearchBar, ResultRow

__all__ = [
    "Debouncer",
    "Dropdown",
    "DropdownState",
    "HOME_PATH",
    "ProductSearchBar",
    "ResultRow",
    "detail_path",
]
