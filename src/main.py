from typing import Optional

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import LoadingIndicator

from shop.catalog import Catalog, load_catalog
from shop.session import Page, SessionController
from utils.logger import get_logger
from utils.messages import PageChangedMessage, QuitRequestedMessage, UserLogoutMessage
from views.scr_cart import CartScreen
from views.scr_checkout import CheckoutScreen
from views.scr_login import LoginScreen
from views.scr_products import ProductsScreen
from views.scr_success import SuccessScreen

_logger = get_logger(__name__)


class ShopHubApp(App):
    TITLE = "ShopHub"

    BINDINGS = [
        Binding("ctrl+t", "switch_light", "Toggle Theme", show=True),
    ]

    # one mode per page, keyed by the page value
    MODES = {
        Page.LOGIN.value: LoginScreen,
        Page.BROWSING.value: ProductsScreen,
        Page.CART.value: CartScreen,
        Page.CHECKOUT.value: CheckoutScreen,
        Page.SUCCESS.value: SuccessScreen,
    }

    PAGE_TITLES = {
        Page.BROWSING.value: "Products",
        Page.CART.value: "Cart",
        Page.CHECKOUT.value: "Checkout",
        Page.SUCCESS.value: "Order Complete",
    }

    CSS_PATH = [
        "styles/index.tcss",
        "styles/login.tcss",
        "styles/products.tcss",
        "styles/cart.tcss",
        "styles/checkout.tcss",
        "styles/success.tcss",
    ]

    session: SessionController

    def __init__(self, catalog: Optional[Catalog] = None):
        super().__init__()
        self.session = SessionController(
            catalog if catalog is not None else load_catalog()
        )

    def compose(self) -> ComposeResult:
        yield LoadingIndicator()

    async def on_mount(self) -> None:
        await self.sync_page()

    async def sync_page(self) -> None:
        """Show the screen for whatever page the session is on."""
        mode = self.session.page.value
        if self.current_mode != mode:
            _logger.debug(f"Switching mode {self.current_mode} -> {mode}")
            await self.switch_mode(mode)

    def action_switch_light(self):
        if self.theme == "textual-dark":
            self.theme = "solarized-light"
        else:
            self.theme = "textual-dark"
        self.notify(f"Theme changed to {self.theme}")

    @on(PageChangedMessage)
    async def handle_page_changed(self):
        await self.sync_page()

    @on(UserLogoutMessage)
    async def handle_user_logout(self):
        if self.session.logout():
            self.notify("Logout successful.")
        await self.sync_page()

    @on(QuitRequestedMessage)
    def handle_quit(self):
        if self.session.is_authenticated:
            self.session.logout()
        self.exit()


def run() -> None:
    ShopHubApp().run()


if __name__ == "__main__":
    run()
