from typing import Optional

from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal
from textual.events import ScreenResume
from textual.widgets import Button, DataTable, Label, Rule

from utils.messages import CartChangedMessage, PageChangedMessage
from utils.pure import format_price
from views.base_screen import BaseScreen
from views.modal_dialog import DialogModal


class CartScreen(BaseScreen):
    """
    Cart lines with quantity controls, removal and the way to checkout.
    Quantity never drops below 1 from here, removing a line is explicit.
    """

    BINDINGS = [
        Binding("plus", "change_qty(1)", "Qty +1", show=True, key_display="+"),
        Binding("minus", "change_qty(-1)", "Qty -1", show=True, key_display="-"),
        Binding("delete", "remove_selected", "Remove", show=True),
    ]

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield Label("Shopping Cart", id="label-cart-title")
        yield DataTable(id="table-cart")
        yield Label("Your cart is empty", id="label-cart-empty")
        yield Label("Subtotal: $0.00", id="label-cart-total")
        yield Rule(line_style="dashed")
        with Horizontal(id="hort-qty-buttons"):
            yield Button("-", id="btn-qty-sub")
            yield Button("+", id="btn-qty-add")
            yield Button("Remove", id="btn-remove", variant="warning")
        with Horizontal(id="hort-buttons"):
            yield Button("Clear Cart", id="btn-clear-cart")
            yield Button("Continue Shopping", id="btn-continue")
            yield Button("Proceed to Checkout", id="btn-checkout", variant="primary")

    def on_mount(self):
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True

        self.handle_cart_change()
        table.focus()

    @on(CartChangedMessage)
    @on(ScreenResume)
    def handle_cart_change(self) -> None:
        view = self.app.session.view()
        table = self.query_one(DataTable)
        if not table.columns:
            table.add_columns("Product", "Unit Price", "Qty", "Line Total")
        cursor_row = table.cursor_row

        table.clear()
        for line in view.lines:
            table.add_row(
                line.product.name,
                format_price(line.product.price),
                line.quantity,
                format_price(line.subtotal),
                key=str(line.product_id),
            )
        if view.lines:
            table.move_cursor(row=min(cursor_row, len(view.lines) - 1))

        self.query_one("#label-cart-empty").display = not view.lines
        self.query_one("#hort-qty-buttons").display = bool(view.lines)
        self.query_one("#label-cart-total", Label).update(
            f"Subtotal: {format_price(view.total)}"
        )

    def _selected_product_id(self) -> Optional[int]:
        table = self.query_one(DataTable)
        if table.row_count == 0:
            return None
        row_key, _ = table.coordinate_to_cell_key(table.cursor_coordinate)
        return int(row_key.value)

    def action_change_qty(self, delta: int) -> None:
        product_id = self._selected_product_id()
        if product_id is None:
            return
        if self.app.session.change_quantity(product_id, delta):
            self.post_message(CartChangedMessage())

    @on(Button.Pressed, "#btn-qty-add")
    def handle_qty_add(self) -> None:
        self.action_change_qty(1)

    @on(Button.Pressed, "#btn-qty-sub")
    def handle_qty_sub(self) -> None:
        self.action_change_qty(-1)

    @on(Button.Pressed, "#btn-remove")
    @work()
    async def action_remove_selected(self) -> None:
        product_id = self._selected_product_id()
        if product_id is None:
            return

        remove_confirmed = await self.app.push_screen_wait(
            DialogModal(
                "Do you really want to remove this item from cart?",
                primary_text="Yes",
                secondary_text="No",
                tone="warning",
            )
        )
        if remove_confirmed and self.app.session.remove_from_cart(product_id):
            self.post_message(CartChangedMessage())
            self.notify("Item removed from cart.", severity="information")

    @on(Button.Pressed, "#btn-clear-cart")
    @work()
    async def handle_clear_cart(self) -> None:
        if self.app.session.cart.is_empty():
            self.notify("Cart is empty.", severity="warning")
            return

        remove_confirmed = await self.app.push_screen_wait(
            DialogModal(
                "Do you really want to remove all items from cart?",
                primary_text="Yes",
                secondary_text="No",
                tone="error",
            )
        )
        if remove_confirmed and self.app.session.clear_cart():
            self.post_message(CartChangedMessage())

    @on(Button.Pressed, "#btn-continue")
    def handle_continue(self) -> None:
        if self.app.session.go_to_products():
            self.app.post_message(PageChangedMessage())

    @on(Button.Pressed, "#btn-checkout")
    def handle_checkout(self) -> None:
        # the session allows an empty cart through, the page does not
        if self.app.session.cart.is_empty():
            self.notify("Cart is empty.", severity="warning")
            return

        if self.app.session.proceed_to_checkout():
            self.app.post_message(PageChangedMessage())
