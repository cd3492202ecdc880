from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import ScreenResume
from textual.widgets import Button, Input, Label, Markdown

from shop.checkout import FIELD_LABELS
from utils.messages import PageChangedMessage
from utils.pure import format_price, generate_markdown_table
from views.base_screen import BaseScreen

SHIPPING_FIELDS = ("full_name", "address", "city", "zip_code")
PAYMENT_FIELDS = ("card_number", "expiry_date", "cvv")
INPUT_PREFIX = "input-"


class CheckoutScreen(BaseScreen):
    """
    Shipping and payment form next to the order summary.

    Payment goes through once all seven fields hold something, nothing is
    charged.
    """

    BINDINGS = [
        Binding("escape", "back_to_cart", "Back to Cart", show=True),
    ]

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Horizontal(id="hort-checkout"):
            with VerticalScroll(id="div-checkout-form"):
                yield Label("Shipping Information", classes="label-section")
                for name in SHIPPING_FIELDS:
                    yield Input(placeholder=FIELD_LABELS[name], id=INPUT_PREFIX + name)
                yield Label("Payment Information", classes="label-section")
                for name in PAYMENT_FIELDS:
                    yield Input(placeholder=FIELD_LABELS[name], id=INPUT_PREFIX + name)
                with Horizontal(id="hort-checkout-btns"):
                    yield Button("Back to Cart", id="btn-back")
                    yield Button("Complete Payment", id="btn-submit", variant="primary")
            with Vertical(id="div-order-summary"):
                yield Markdown("", id="md-order-summary")

    @on(ScreenResume)
    async def handle_resume(self) -> None:
        view = self.app.session.view()
        form = view.form or {}
        for name in SHIPPING_FIELDS + PAYMENT_FIELDS:
            input_ = self.query_one(f"#{INPUT_PREFIX}{name}", Input)
            input_.value = form.get(name, "")
            input_.remove_class("-invalid")

        rows = [
            [f"{line.product.name} x{line.quantity}", format_price(line.subtotal)]
            for line in view.lines
        ]
        md = "### Order Summary\n\n"
        md += generate_markdown_table(["Item", "Price"], rows, ["l", "r"])
        md += f"\n\n**Total:** {format_price(view.total)}"
        await self.query_one("#md-order-summary", Markdown).update(md)

        self.query_one(f"#{INPUT_PREFIX}{SHIPPING_FIELDS[0]}").focus()

    @on(Input.Changed)
    def handle_input_changed(self, message: Input.Changed) -> None:
        field_name = message.input.id.removeprefix(INPUT_PREFIX)
        if self.app.session.update_form(field_name, message.value) and message.value:
            message.input.remove_class("-invalid")

    @on(Button.Pressed, "#btn-submit")
    def handle_submit(self) -> None:
        total = self.app.session.cart.total()
        if self.app.session.submit_payment():
            self.notify(f"Payment of {format_price(total)} accepted.")
            self.app.post_message(PageChangedMessage())
            return

        form = self.app.session.form
        missing = form.missing_fields() if form else []
        for name in missing:
            self.query_one(f"#{INPUT_PREFIX}{name}", Input).add_class("-invalid")
        if missing:
            self.query_one(f"#{INPUT_PREFIX}{missing[0]}", Input).focus()
            labels = ", ".join(FIELD_LABELS[name] for name in missing)
            self.notify(f"Please fill in: {labels}", severity="error")

    @on(Button.Pressed, "#btn-back")
    def action_back_to_cart(self) -> None:
        if self.app.session.go_to_cart():
            self.app.post_message(PageChangedMessage())
