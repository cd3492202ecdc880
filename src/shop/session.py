from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional, Tuple

from shop.cart import Cart
from shop.catalog import ALL_CATEGORIES, Catalog
from shop.checkout import CheckoutForm
from shop.models import CartLine, Product, UserIdentity
from utils.logger import get_logger

_logger = get_logger(__name__)


class Page(str, Enum):
    """pages of the storefront, values double as app mode names"""

    LOGIN = "login"
    BROWSING = "products"
    CART = "cart"
    CHECKOUT = "checkout"
    SUCCESS = "success"


@dataclass
class SessionState:
    """
    Everything one shopper's session holds.

    Fields:
      - page: page currently shown
      - user: logged-in identity, None while on the login page
      - cart: the shopper's cart
      - form: checkout draft, only present while on the checkout page
      - category: active category filter on the products page
      - sidebar_hidden: UI transient, reset on logout
    """

    page: Page = Page.LOGIN
    user: Optional[UserIdentity] = None
    cart: Cart = field(default_factory=Cart)
    form: Optional[CheckoutForm] = None
    category: str = ALL_CATEGORIES
    sidebar_hidden: bool = False


@dataclass(frozen=True)
class StorefrontView:
    """Read-only snapshot handed to the screens."""

    page: Page
    user: Optional[UserIdentity]
    lines: Tuple[CartLine, ...]
    total: Decimal
    count: int
    category: str
    categories: Tuple[str, ...]
    products: Tuple[Product, ...]
    form: Optional[Dict[str, str]]
    ready_to_submit: bool
    sidebar_hidden: bool


class SessionController:
    """
    Guarded page transitions for a single session.

    Every transition returns True when it took effect and False when a guard
    refused it; a refused transition leaves the state untouched. Pages past
    the login page are unreachable without a logged-in user.
    """

    def __init__(self, catalog: Catalog, state: Optional[SessionState] = None):
        self.catalog = catalog
        self.state = state if state is not None else SessionState()

    # ---------------------------
    # Read access
    # ---------------------------

    @property
    def page(self) -> Page:
        return self.state.page

    @property
    def user(self) -> Optional[UserIdentity]:
        return self.state.user

    @property
    def cart(self) -> Cart:
        return self.state.cart

    @property
    def form(self) -> Optional[CheckoutForm]:
        return self.state.form

    @property
    def is_authenticated(self) -> bool:
        return self.state.user is not None

    def visible_products(self) -> Tuple[Product, ...]:
        return self.catalog.filter_by_category(self.state.category)

    def view(self) -> StorefrontView:
        form = self.state.form
        return StorefrontView(
            page=self.state.page,
            user=self.state.user,
            lines=tuple(self.cart.lines()),
            total=self.cart.total(),
            count=self.cart.count(),
            category=self.state.category,
            categories=tuple(self.catalog.list_categories()),
            products=self.visible_products(),
            form=form.as_dict() if form else None,
            ready_to_submit=form.is_ready_to_submit() if form else False,
            sidebar_hidden=self.state.sidebar_hidden,
        )

    # ---------------------------
    # Auth
    # ---------------------------

    def login(self, email: str, password: str) -> bool:
        """Any non-empty email and password pair is accepted."""
        if self.state.page is not Page.LOGIN or self.is_authenticated:
            return self._refuse("login", "already logged in")
        if not email or not password:
            return self._refuse("login", "empty email or password")

        self.state.user = UserIdentity.from_email(email)
        _logger.info(f"User '{self.state.user.display_name}' logged in.")
        self._set_page(Page.BROWSING)
        return True

    def logout(self) -> bool:
        if not self.is_authenticated:
            return self._refuse("logout", "not logged in")

        _logger.info(f"User '{self.state.user.display_name}' logged out.")
        self.state.user = None
        self.state.cart.clear()
        self.state.form = None
        self.state.category = ALL_CATEGORIES
        self.state.sidebar_hidden = False
        self._set_page(Page.LOGIN)
        return True

    # ---------------------------
    # Navigation
    # ---------------------------

    def go_to_products(self) -> bool:
        """Header navigation, allowed from every page once logged in."""
        if not self.is_authenticated:
            return self._refuse("go_to_products", "not logged in")
        self._leave_checkout()
        self._set_page(Page.BROWSING)
        return True

    def go_to_cart(self) -> bool:
        if not self.is_authenticated:
            return self._refuse("go_to_cart", "not logged in")
        self._leave_checkout()
        self._set_page(Page.CART)
        return True

    def proceed_to_checkout(self) -> bool:
        """
        Cart -> checkout with a fresh form.
        An empty cart is not refused here.
        """
        if not self.is_authenticated:
            return self._refuse("proceed_to_checkout", "not logged in")
        if self.state.page is not Page.CART:
            return self._refuse("proceed_to_checkout", f"on page {self.state.page.value}")
        self.state.form = CheckoutForm()
        self._set_page(Page.CHECKOUT)
        return True

    def submit_payment(self) -> bool:
        if not self.is_authenticated:
            return self._refuse("submit_payment", "not logged in")
        if self.state.page is not Page.CHECKOUT or self.state.form is None:
            return self._refuse("submit_payment", f"on page {self.state.page.value}")
        missing = self.state.form.missing_fields()
        if missing:
            return self._refuse("submit_payment", f"missing {', '.join(missing)}")

        _logger.info(
            f"Mock payment accepted: {self.cart.count()} items, total {self.cart.total()}."
        )
        self.state.form = None
        self._set_page(Page.SUCCESS)
        return True

    def continue_shopping(self) -> bool:
        if not self.is_authenticated:
            return self._refuse("continue_shopping", "not logged in")
        if self.state.page is not Page.SUCCESS:
            return self._refuse("continue_shopping", f"on page {self.state.page.value}")
        self.state.cart.clear()
        self._set_page(Page.BROWSING)
        return True

    def navigate(self, target: Page) -> bool:
        """
        Route a page request to its guarded transition.
        The login page is only reached through logout().
        """
        if target is Page.LOGIN:
            return self.state.page is Page.LOGIN
        if target is Page.BROWSING:
            return self.go_to_products()
        if target is Page.CART:
            return self.go_to_cart()
        if target is Page.CHECKOUT:
            return self.proceed_to_checkout()
        if target is Page.SUCCESS:
            return self.submit_payment()
        return self._refuse("navigate", f"unknown page {target!r}")

    # ---------------------------
    # Catalog & cart
    # ---------------------------

    def select_category(self, category: str) -> bool:
        if not self.is_authenticated:
            return self._refuse("select_category", "not logged in")
        self.state.category = category
        return True

    def add_to_cart(self, product_id: int) -> bool:
        if not self.is_authenticated:
            return self._refuse("add_to_cart", "not logged in")
        product = self.catalog.get(product_id)
        if product is None:
            return self._refuse("add_to_cart", f"no product {product_id}")
        line = self.cart.add(product)
        _logger.debug(f"Cart: {product.name} x{line.quantity}")
        return True

    def change_quantity(self, product_id: int, delta: int) -> bool:
        if not self.is_authenticated:
            return self._refuse("change_quantity", "not logged in")
        return self.cart.set_quantity(product_id, delta) is not None

    def remove_from_cart(self, product_id: int) -> bool:
        if not self.is_authenticated:
            return self._refuse("remove_from_cart", "not logged in")
        return self.cart.remove(product_id)

    def clear_cart(self) -> bool:
        if not self.is_authenticated:
            return self._refuse("clear_cart", "not logged in")
        self.cart.clear()
        return True

    # ---------------------------
    # Checkout form & UI transients
    # ---------------------------

    def update_form(self, field_name: str, value: str) -> bool:
        if self.state.page is not Page.CHECKOUT or self.state.form is None:
            return self._refuse("update_form", f"on page {self.state.page.value}")
        self.state.form.update(field_name, value)
        return True

    def toggle_sidebar(self) -> bool:
        if not self.is_authenticated:
            return self._refuse("toggle_sidebar", "not logged in")
        self.state.sidebar_hidden = not self.state.sidebar_hidden
        return True

    # ---------------------------
    # helpers
    # ---------------------------

    def _leave_checkout(self) -> None:
        if self.state.page is Page.CHECKOUT:
            self.state.form = None

    def _set_page(self, page: Page) -> None:
        if page is not self.state.page:
            _logger.debug(f"Page {self.state.page.value} -> {page.value}")
        self.state.page = page

    @staticmethod
    def _refuse(action: str, reason: str) -> bool:
        _logger.debug(f"Refused {action}: {reason}")
        return False
