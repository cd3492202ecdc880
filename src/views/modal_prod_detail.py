from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, MarkdownViewer

from shop.models import Product
from utils.pure import format_price, generate_markdown_table


class ProdDetailModal(ModalScreen[bool]):
    """
    Product detail.
    Returns True when the shopper asks to add the product to the cart.
    """

    BINDINGS = [Binding("escape", "go_back", "Back", show=False)]

    def __init__(self, product: Product) -> None:
        super().__init__()

        self._prod = product

    def compose(self) -> ComposeResult:
        with Vertical(id="div-prod-detail"):
            yield MarkdownViewer("", show_table_of_contents=False)
            with Horizontal(id="hort-prod-detail-btns"):
                yield Button("Go Back", id="btn-quit")
                yield Button("Add to Cart", id="btn-addcart", variant="primary")

    async def on_mount(self):
        table_rows = [
            ["Name", self._prod.name],
            ["Category", self._prod.category],
            ["Price", format_price(self._prod.price)],
            ["Description", self._prod.description],
            ["Image", self._prod.image],
        ]
        md_table_str = generate_markdown_table(
            ["Attribute", "Value"], table_rows, ["l", "l"]
        )
        header_md = f"### {self._prod.name}\n\n"
        await self.query_one(MarkdownViewer).document.update(header_md + md_table_str)
        self.query_one("#btn-addcart").focus()

    def action_go_back(self) -> None:
        self.dismiss(False)

    @on(Button.Pressed, "#btn-quit")
    def handle_quit(self):
        self.dismiss(False)

    @on(Button.Pressed, "#btn-addcart")
    def handle_addcart(self):
        self.dismiss(True)
