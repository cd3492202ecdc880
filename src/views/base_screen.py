from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.events import ScreenResume
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Label, ListItem, ListView, Markdown

from shop.session import Page
from utils.messages import CartChangedMessage, PageChangedMessage, UserLogoutMessage
from utils.pure import format_price, generate_markdown_table
from views.modal_dialog import DialogModal, QuitDialogModal

MENU_ITEM_PREFIX = "list-menu-item-"


class Sidebar(Container):
    MENU = {Page.BROWSING: "Products", Page.CART: "Cart"}

    def compose(self) -> ComposeResult:
        yield Label("User Info", id="label-info-1")
        yield Markdown("", id="md-userinfo")
        yield Button("Log out", id="btn-logout", variant="error")
        yield Label("Menu", id="label-info-2")
        yield ListView(
            *[
                ListItem(Label(v), id=MENU_ITEM_PREFIX + k.value)
                for k, v in self.MENU.items()
            ],
            id="list-menu",
        )

    async def on_mount(self):
        await self.refresh_info()

    async def refresh_info(self) -> None:
        view = self.app.session.view()
        self.display = not view.sidebar_hidden
        if view.user is None:
            return

        table_rows = [
            ["Name", view.user.display_name],
            ["Email", view.user.email],
            ["Items", view.count],
            ["Total", format_price(view.total)],
        ]
        md_table_str = generate_markdown_table(None, table_rows, ["l", "l"])
        await self.query_one("#md-userinfo", Markdown).update(md_table_str)
        self.highlight_item(view.page)

    def highlight_item(self, page: Page) -> None:
        list_menu = self.query_one("#list-menu", ListView)
        for i, item in enumerate(list_menu.children):
            if item.id == MENU_ITEM_PREFIX + page.value:
                list_menu.index = i
                return
        list_menu.index = None

    def on_list_view_selected(self, event: ListView.Selected):
        target = Page(event.item.id.removeprefix(MENU_ITEM_PREFIX))
        if target is self.app.session.page:
            return
        if self.app.session.navigate(target):
            self.app.post_message(PageChangedMessage())

    @on(Button.Pressed, "#btn-logout")
    @work()
    async def handle_logout(self):
        if not await self.app.push_screen_wait(
            DialogModal(
                "Are you sure you want to log out?",
                primary_text="Yes",
                secondary_text="No",
                tone="warning",
            )
        ):
            return

        self.post_message(UserLogoutMessage())


class BaseScreen(Screen):
    """
    Inherited by all pages, holds the header, footer, sidebar and the
    keybindings shared by every page.
    """

    BINDINGS = [
        Binding("ctrl+z", "quit", "Quit App", show=True),
        Binding("ctrl+b", "toggle_sidebar", "Toggle Menu", show=True),
    ]

    def __init__(self):
        super().__init__()

        self.configure()

    def configure(
        self,
        header_sub_title: str = "",
        show_sidebar: bool = True,
    ) -> None:
        self.app.title = self.app.TITLE
        self.sub_title = header_sub_title
        for k, v in self.app.MODES.items():
            if isinstance(self, v) and k in self.app.PAGE_TITLES:
                self.sub_title = self.app.PAGE_TITLES[k]

        self._show_sidebar = show_sidebar

    def compose(self) -> ComposeResult:
        if self._show_sidebar:
            yield Sidebar()
        yield Header()
        yield Footer(show_command_palette=False)

    @on(ScreenResume)
    @on(CartChangedMessage)
    async def handle_refresh_sidebar(self) -> None:
        if self._show_sidebar:
            await self.query_one(Sidebar).refresh_info()

    async def action_toggle_sidebar(self) -> None:
        if self.app.session.toggle_sidebar():
            await self.handle_refresh_sidebar()

    @work()
    async def action_quit(self):
        await self.app.push_screen_wait(QuitDialogModal())
