"""OrderItem aggregate: one purchased line of an order."""

from protean.fields import Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.aggregate
class OrderItem:
    """A product line as it was when the order was placed.

    Name and price are copied from the cart, so editing the product later
    does not change what the order says was bought.
    """

    order_id = Identifier(required=True)
    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    quantity = Integer(required=True)
    size = String(max_length=20)

    @classmethod
    def snapshot(cls, order_id, product_id, product_name, price, quantity, size=None):
        return cls(
            order_id=str(order_id),
            product_id=str(product_id),
            product_name=product_name,
            price=price,
            quantity=quantity,
            size=size,
        )

    @property
    def line_total(self) -> float:
        return self.price * self.quantity
