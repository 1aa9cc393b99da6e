"""
POS cart.

The cart is plain Python and never touches the database: the POS posts its
lines with every request and the service layer rebuilds a ``Cart`` from them.
Lines are merged by their identity, which is the menu, the chosen variations
and the (stripped) kitchen notes.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional, Tuple

ZERO = Decimal("0.00")

PAYMENT_CASH = "cash"


class CartError(ValueError):
    """Raised when a cart operation violates a POS rule."""

    pass


class InsufficientStockError(CartError):
    """Raised when the cart would hold more units of a menu than are in stock."""

    pass


class EmptyCartError(CartError):
    """Raised when checking out an empty cart."""

    pass


class InsufficientPaymentError(CartError):
    """Raised when cash received does not cover the total."""

    pass


@dataclass(frozen=True)
class VariationChoice:
    """A variation chosen for a cart line."""

    id: str
    name: str
    price_adjustment: Decimal = ZERO

    def as_dict(self):
        return {
            "id": str(self.id),
            "name": self.name,
            "price_adjustment": str(self.price_adjustment),
        }


@dataclass
class CartLine:
    """A menu in the cart with its quantity, variations and notes."""

    menu_id: str
    name: str
    base_price: Decimal
    quantity: int
    stock: int
    variations: Tuple[VariationChoice, ...] = ()
    notes: str = ""

    @property
    def key(self) -> Tuple[str, Tuple[str, ...], str]:
        return line_key(self.menu_id, [v.id for v in self.variations], self.notes)

    @property
    def unit_price(self) -> Decimal:
        price = Decimal(self.base_price) + sum(
            (Decimal(v.price_adjustment) for v in self.variations), ZERO
        )
        return max(price, ZERO)

    @property
    def subtotal(self) -> Decimal:
        return self.unit_price * self.quantity


def line_key(menu_id, variation_ids, notes) -> Tuple[str, Tuple[str, ...], str]:
    """Identity under which cart lines merge."""
    return (
        str(menu_id),
        tuple(sorted(str(v) for v in variation_ids)),
        (notes or "").strip(),
    )


@dataclass
class Cart:
    """An ordered collection of cart lines."""

    lines: List[CartLine] = field(default_factory=list)

    def find(self, key) -> Optional[CartLine]:
        for line in self.lines:
            if line.key == key:
                return line
        return None

    def quantity_for_menu(self, menu_id, exclude_key=None) -> int:
        """Total units of a menu across all its lines."""
        return sum(
            line.quantity
            for line in self.lines
            if line.menu_id == str(menu_id) and line.key != exclude_key
        )

    def add(
        self,
        menu_id,
        name,
        base_price,
        stock,
        quantity=1,
        variations=(),
        notes="",
    ) -> CartLine:
        """
        Add units of a menu to the cart.

        Merges into the existing line with the same identity, otherwise
        appends a new line.

        Raises:
            CartError: If quantity is not positive
            InsufficientStockError: If the menu's total quantity would exceed stock
        """
        if quantity <= 0:
            raise CartError("Quantity must be at least 1.")

        menu_id = str(menu_id)
        variations = tuple(variations)
        notes = (notes or "").strip()

        if self.quantity_for_menu(menu_id) + quantity > stock:
            raise InsufficientStockError(f"Insufficient stock for {name}. Available: {stock}")

        key = line_key(menu_id, [v.id for v in variations], notes)
        line = self.find(key)
        if line is not None:
            line.quantity += quantity
            return line

        line = CartLine(
            menu_id=menu_id,
            name=name,
            base_price=Decimal(base_price),
            quantity=quantity,
            stock=stock,
            variations=variations,
            notes=notes,
        )
        self.lines.append(line)
        return line

    def update_quantity(self, key, quantity) -> Optional[CartLine]:
        """
        Set the quantity of a line. A quantity of zero or less removes it.

        Raises:
            CartError: If the line does not exist
            InsufficientStockError: If the menu's total quantity would exceed stock
        """
        line = self.find(key)
        if line is None:
            raise CartError("Cart line not found.")

        if quantity <= 0:
            self.remove(key)
            return None

        if self.quantity_for_menu(line.menu_id, exclude_key=key) + quantity > line.stock:
            raise InsufficientStockError(
                f"Insufficient stock for {line.name}. Available: {line.stock}"
            )

        line.quantity = quantity
        return line

    def remove(self, key):
        self.lines = [line for line in self.lines if line.key != key]

    def clear(self):
        self.lines = []

    @property
    def total(self) -> Decimal:
        return sum((line.subtotal for line in self.lines), ZERO)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines


def compute_change(total, received) -> Decimal:
    """
    Change due to the customer. Negative when the cash falls short.
    """
    return Decimal(received or 0) - Decimal(total)


def validate_payment(payment_method, total, cash_received=None, is_empty=False) -> Decimal:
    """
    Check that a cart can be paid with the given method.

    Only cash payments look at the amount received; other methods are
    assumed to be settled exactly.

    Returns:
        The change to hand back

    Raises:
        EmptyCartError: If the cart is empty
        InsufficientPaymentError: If cash received is less than the total
    """
    if is_empty:
        raise EmptyCartError("Cart is empty.")

    if payment_method != PAYMENT_CASH:
        return ZERO

    if cash_received is None:
        raise InsufficientPaymentError("Cash received is required for cash payments.")

    change = compute_change(total, cash_received)
    if change < 0:
        raise InsufficientPaymentError(
            f"Insufficient payment. Short by {abs(change)}."
        )
    return change
