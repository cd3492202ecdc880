import os
import sys
import unittest

# Ensure project src/ is on sys.path for imports
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(ROOT, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from textual.widgets import Button, Input  # noqa: E402

from main import ShopHubApp  # noqa: E402
from shop.catalog import DEFAULT_PRODUCTS, Catalog  # noqa: E402
from shop.checkout import FIELDS  # noqa: E402
from shop.session import Page  # noqa: E402
from views.scr_cart import CartScreen  # noqa: E402
from views.scr_checkout import CheckoutScreen  # noqa: E402
from views.scr_login import LoginScreen  # noqa: E402
from views.scr_products import ProductsScreen  # noqa: E402
from views.scr_success import SuccessScreen  # noqa: E402


class AppTestCase(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.app = ShopHubApp(Catalog(DEFAULT_PRODUCTS))

    async def test_starts_on_login(self):
        async with self.app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            self.assertIsInstance(self.app.screen, LoginScreen)
            self.assertEqual(self.app.session.page, Page.LOGIN)

    async def test_empty_login_is_refused(self):
        async with self.app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            await pilot.click("#btn-login")
            await pilot.pause()
            self.assertEqual(self.app.session.page, Page.LOGIN)
            self.assertIsInstance(self.app.screen, LoginScreen)
            self.assertTrue(
                self.app.screen.query_one("#input-login-email", Input).has_class(
                    "-invalid"
                )
            )

    async def test_login_then_add_to_cart(self):
        async with self.app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            self.app.screen.query_one("#input-login-email", Input).value = "a@b.com"
            self.app.screen.query_one("#input-login-pwd", Input).value = "x"
            await pilot.click("#btn-login")
            await pilot.pause()

            self.assertEqual(self.app.session.page, Page.BROWSING)
            self.assertEqual(self.app.session.user.display_name, "a")
            self.assertIsInstance(self.app.screen, ProductsScreen)

            self.app.screen.action_add_selected()
            await pilot.pause()
            self.assertEqual(self.app.session.cart.count(), 1)
            self.assertIsNotNone(self.app.session.cart.get(1))


    # ---------- Cart, checkout and success pages ----------

    async def _open_cart(self, pilot, *product_ids):
        await pilot.pause()
        self.assertTrue(self.app.session.login("a@b.com", "x"))
        for product_id in product_ids:
            self.app.session.add_to_cart(product_id)
        self.assertTrue(self.app.session.go_to_cart())
        await self.app.sync_page()
        await pilot.pause()
        self.assertIsInstance(self.app.screen, CartScreen)

    async def _press(self, pilot, selector):
        self.app.screen.query_one(selector, Button).press()
        await pilot.pause()
        # page switches land one message hop later
        await pilot.pause()

    async def _fill_checkout(self, pilot, **overrides):
        for name in FIELDS:
            value = overrides.get(name, "x")
            self.app.screen.query_one(f"#input-{name}", Input).value = value
        await pilot.pause()

    async def test_checkout_blocked_on_empty_cart(self):
        async with self.app.run_test(size=(120, 40)) as pilot:
            await self._open_cart(pilot)
            await self._press(pilot, "#btn-checkout")

            self.assertEqual(self.app.session.page, Page.CART)
            self.assertIsInstance(self.app.screen, CartScreen)
            self.assertIsNone(self.app.session.form)

    async def test_submit_marks_missing_fields(self):
        async with self.app.run_test(size=(120, 40)) as pilot:
            await self._open_cart(pilot, 1)
            await self._press(pilot, "#btn-checkout")
            self.assertIsInstance(self.app.screen, CheckoutScreen)

            await self._fill_checkout(pilot, cvv="")
            await self._press(pilot, "#btn-submit")

            self.assertEqual(self.app.session.page, Page.CHECKOUT)
            self.assertIsInstance(self.app.screen, CheckoutScreen)
            for name in FIELDS:
                input_ = self.app.screen.query_one(f"#input-{name}", Input)
                self.assertEqual(input_.has_class("-invalid"), name == "cvv", name)

    async def test_payment_then_continue_shopping(self):
        async with self.app.run_test(size=(120, 40)) as pilot:
            await self._open_cart(pilot, 1, 1, 2)
            await self._press(pilot, "#btn-checkout")
            self.assertIsInstance(self.app.screen, CheckoutScreen)

            await self._fill_checkout(pilot)
            await self._press(pilot, "#btn-submit")
            self.assertEqual(self.app.session.page, Page.SUCCESS)
            self.assertIsInstance(self.app.screen, SuccessScreen)
            self.assertEqual(self.app.session.cart.count(), 3)

            await self._press(pilot, "#btn-continue")
            self.assertEqual(self.app.session.page, Page.BROWSING)
            self.assertIsInstance(self.app.screen, ProductsScreen)
            self.assertEqual(self.app.session.cart.count(), 0)


if __name__ == "__main__":
    unittest.main()
