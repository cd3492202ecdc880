from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import ScreenResume
from textual.widgets import Button, Input, Label

from utils.messages import PageChangedMessage
from views.base_screen import BaseScreen
from views.modal_dialog import QuitDialogModal


class LoginScreen(BaseScreen):
    """
    Demo sign in, any email and password pair gets through.
    """

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Login", show_sidebar=False)

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical(id="div-login"):
            yield Label("Welcome to ShopHub", id="label-login-title")
            yield Label("Sign in to start shopping", id="label-login-sub")
            yield Label("Email Address")
            yield Input(placeholder="you@example.com", id="input-login-email")
            yield Label("Password")
            yield Input(placeholder="********", password=True, id="input-login-pwd")
            with Horizontal(id="div-login-btns"):
                yield Button("Quit", id="btn-quit")
                yield Button("Sign In", id="btn-login", variant="primary")
            yield Label("Demo: use any email and password", id="label-login-hint")

    def on_mount(self):
        self.query_one("#input-login-email").focus()

    @on(ScreenResume)
    def handle_resume(self) -> None:
        # inputs are cleared every time the page is shown again
        for input_ in self.query(Input):
            input_.value = ""
            input_.remove_class("-invalid")
        self.query_one("#input-login-email").focus()

    @on(Input.Submitted)
    @on(Button.Pressed, "#btn-login")
    def handle_login_submit(self) -> None:
        input_email = self.query_one("#input-login-email", Input)
        input_pwd = self.query_one("#input-login-pwd", Input)

        if self.app.session.login(input_email.value, input_pwd.value):
            self.notify(f"Hello {self.app.session.user.display_name}!")
            self.app.post_message(PageChangedMessage())
            return

        self.notify("Email or password cannot be empty!", severity="error")
        for input_ in (input_email, input_pwd):
            if not input_.value:
                input_.add_class("-invalid")
        (input_pwd if input_email.value else input_email).focus()

    @on(Input.Changed)
    def handle_input_changed(self, message: Input.Changed) -> None:
        if message.value:
            message.input.remove_class("-invalid")

    @on(Button.Pressed, "#btn-quit")
    def handle_quit_(self) -> None:
        self.app.push_screen(QuitDialogModal())
