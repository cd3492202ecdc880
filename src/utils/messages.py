from textual.message import Message


class QuitRequestedMessage(Message):
    """
    broadcasted when the app is about to quit
    """

    bubble = True


class UserLogoutMessage(Message):
    """
    posted by the sidebar once logout is confirmed, handled at app level
    """

    bubble = True


class PageChangedMessage(Message):
    """
    Posted after a session transition took effect.
    The app switches to the mode of the page the session now reports.

    Post at App level.
    """

    bubble = True


class CartChangedMessage(Message):
    """
    Fired whenever a cart line is added, changed or removed,
    so the sidebar summary and cart table can refresh
    """

    bubble = True
