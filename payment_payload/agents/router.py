from urllib.parse import urlencode

RECREATE_CART_PATH = "/payment/checkout/recreate-cart"

class RouterAgent:
    def __init__(self, shop_url: str):
        self.shop_url = shop_url.rstrip("/")

    def generate_failure_url(self, order_id: str) -> str:
        """Absolute URL of the page that restores the cart of an unpaid order."""
        return f"{self.shop_url}{RECREATE_CART_PATH}?{urlencode({'orderId': order_id})}"
