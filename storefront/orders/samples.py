from storefront.catalog.types import Product
from storefront.delivery.types import HomeDelivery, PickPointDelivery, ShopDelivery
from storefront.orders.book import OrderBook
from storefront.orders.types import Order


def sample_orders() -> OrderBook:
    """
    Demo orders shown when no orders file is given: one per delivery variant.
    """
    home = Order(
        101,
        "New Year gift",
        HomeDelivery(
            address="10 Pushkin St, apt. 5",
            phone="+79001112233",
            courier_service="Yandex Go",
            time_slot="18:00 - 20:00",
        ),
    )
    home.add_product(Product("Samsung Galaxy A56 smartphone", 29990))
    home.add_product(Product("Protective case", 2000))

    pickpoint = Order(
        102,
        "Books and stationery",
        PickPointDelivery(
            address="Fantastika mall, 1st floor",
            phone="+79998887766",
            company="Boxberry",
            point_id="NN-1234",
        ),
    )
    pickpoint.add_product(Product("Book 'C#. Algorithms and data structures'", 3500))

    shop = Order(
        103,
        "PC parts",
        ShopDelivery(
            address="29 Gagarin Ave, 1st floor (SHOP)",
            phone="+78005553535",
            shop_id=77,
        ),
    )
    shop.add_product(Product("GeForce RTX 5070 graphics card", 63000))

    return OrderBook([home, pickpoint, shop])
