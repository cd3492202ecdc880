from textual import on
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.events import ScreenResume
from textual.widgets import Button, Label

from utils.messages import CartChangedMessage, PageChangedMessage
from utils.pure import format_price
from views.base_screen import BaseScreen


class SuccessScreen(BaseScreen):
    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical(id="div-success"):
            yield Label("Payment Successful!", id="label-success-title")
            yield Label("Thank you for your order.")
            yield Label("", id="label-success-total")
            yield Button("Continue Shopping", id="btn-continue", variant="primary")

    @on(ScreenResume)
    def handle_resume(self) -> None:
        total = self.app.session.cart.total()
        self.query_one("#label-success-total", Label).update(
            f"Order Total: {format_price(total)}"
        )
        self.query_one("#btn-continue").focus()

    @on(Button.Pressed, "#btn-continue")
    def handle_continue(self) -> None:
        # the cart is only emptied here, not when the payment went through
        if self.app.session.continue_shopping():
            self.post_message(CartChangedMessage())
            self.app.post_message(PageChangedMessage())
