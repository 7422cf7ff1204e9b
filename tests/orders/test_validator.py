from storefront.catalog.types import Product
from storefront.delivery.types import ShopDelivery
from storefront.orders.book import OrderBook
from storefront.orders.samples import sample_orders
from storefront.orders.types import Order
from storefront.orders.validator import DefaultOrdersValidator


def make_order(number: int, *products: Product) -> Order:
    o = Order(number, f"order {number}", ShopDelivery(address="a", phone="p", shop_id=1))
    for p in products:
        o.add_product(p)
    return o


def codes(book: OrderBook) -> list[str]:
    return [i.code for i in DefaultOrdersValidator().validate(book)]


def test_sample_orders_have_no_issues():
    assert DefaultOrdersValidator().validate(sample_orders()) == []


def test_empty_order():
    assert codes(OrderBook([make_order(1)])) == ["empty_order"]


def test_negative_and_zero_prices():
    book = OrderBook([make_order(1, Product("Refund", -5), Product("Gift", 0))])
    assert codes(book) == ["negative_price", "zero_price"]


def test_empty_name():
    assert codes(OrderBook([make_order(1, Product("   ", 5))])) == ["empty_product_name"]


def test_duplicate_product():
    p = Product("Pen", 10)
    issues = DefaultOrdersValidator().validate(OrderBook([make_order(1, p, Product("Pen", 10))]))
    assert [i.code for i in issues] == ["duplicate_product"]
    assert issues[0].details == {"index": 1}


def test_same_name_different_price_is_not_duplicate():
    assert codes(OrderBook([make_order(1, Product("Pen", 10), Product("Pen", 12))])) == []


def test_duplicate_order_number():
    book = OrderBook([make_order(1, Product("A", 1)), make_order(1, Product("B", 1))])
    issues = DefaultOrdersValidator().validate(book)
    assert [i.code for i in issues] == ["duplicate_order_number"]
    assert issues[0].order_number == 1


def test_validation_does_not_change_orders():
    o = make_order(1, Product("Refund", -5))
    DefaultOrdersValidator().validate(OrderBook([o]))
    assert len(o.products) == 1
    assert o.total_product_price() == -5


def test_issue_to_dict():
    issue = DefaultOrdersValidator().validate(OrderBook([make_order(9)]))[0]
    assert issue.to_dict() == {
        "code": "empty_order",
        "message": "Order 9 has no products.",
        "order_number": 9,
        "details": {},
    }
