from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import HorizontalGroup
from textual.events import ScreenResume
from textual.widgets import Button, DataTable, Label

from shop.models import Product
from utils.messages import CartChangedMessage
from utils.pure import format_price
from views.base_screen import BaseScreen
from views.modal_prod_detail import ProdDetailModal

CATEGORY_BTN_PREFIX = "btn-cat-"
PRODUCT_COLUMNS = ("ID", "Name", "Category", "Price", "Description")


class ProductsScreen(BaseScreen):
    """
    Catalog browsing with a category filter.
    Enter opens the product detail, `a` adds the highlighted product.
    """

    BINDINGS = [
        Binding("a", "add_selected", "Add to Cart", show=True),
    ]

    def __init__(self):
        super().__init__()
        self._categories = self.app.session.catalog.list_categories()

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield Label("Our Products", id="label-products-title")
        with HorizontalGroup(id="hort-categories"):
            for i, category in enumerate(self._categories):
                yield Button(
                    category, id=f"{CATEGORY_BTN_PREFIX}{i}", classes="btn-category"
                )
        yield DataTable(id="table-products")

    def on_mount(self):
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True

        self.refresh_products()
        table.focus()

    @on(ScreenResume)
    def handle_resume(self) -> None:
        self.refresh_products()

    def refresh_products(self) -> None:
        view = self.app.session.view()

        for i, category in enumerate(self._categories):
            btn = self.query_one(f"#{CATEGORY_BTN_PREFIX}{i}", Button)
            btn.variant = "primary" if category == view.category else "default"

        table = self.query_one(DataTable)
        if not table.columns:
            table.add_columns(*PRODUCT_COLUMNS)
        table.clear()
        for prod in view.products:
            table.add_row(
                prod.id,
                prod.name,
                prod.category,
                format_price(prod.price),
                prod.description,
                key=str(prod.id),
            )

    @on(Button.Pressed, ".btn-category")
    def handle_category(self, event: Button.Pressed) -> None:
        idx = int(event.button.id.removeprefix(CATEGORY_BTN_PREFIX))
        if self.app.session.select_category(self._categories[idx]):
            self.refresh_products()

    @on(DataTable.RowSelected)
    def handle_row_selected(self, event: DataTable.RowSelected) -> None:
        product = self.app.session.catalog.get(int(event.row_key.value))
        if product is not None:
            self.show_product_detail(product)

    @work()
    async def show_product_detail(self, product: Product) -> None:
        if await self.app.push_screen_wait(ProdDetailModal(product)):
            self.add_product(product.id)

    def action_add_selected(self) -> None:
        table = self.query_one(DataTable)
        if table.row_count == 0:
            return
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        self.add_product(int(row_key.value))

    def add_product(self, product_id: int) -> None:
        if not self.app.session.add_to_cart(product_id):
            return
        line = self.app.session.cart.get(product_id)
        self.notify(f"{line.product.name} added to cart (x{line.quantity}).")
        self.post_message(CartChangedMessage())
