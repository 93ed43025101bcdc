"""Form validation and table formatting for the GUI panels.

Kept free of tkinter so the rules can be checked without a display.
"""

from decimal import Decimal, InvalidOperation

from errors import ValidationError

PASSWORD_MASK = "********"
MAX_USERNAME_LENGTH = 50
# bcrypt limit
MAX_PASSWORD_BYTES = 72


def validate_login_form(username, password):
    username = username.strip()
    if not username or not password:
        raise ValidationError("login", "Username and password are required")
    return username, password


def validate_product_form(name, price_text):
    """Return (name, price) ready for the repository, or raise ValidationError."""
    name = name.strip()
    price_text = price_text.strip().lstrip("$")
    if not name:
        raise ValidationError("name", "Name is required")
    if not price_text:
        raise ValidationError("price", "Price is required")
    try:
        price = Decimal(price_text)
    except InvalidOperation:
        raise ValidationError("price", "Price must be a number") from None
    if not price.is_finite():
        raise ValidationError("price", "Price must be a number")
    if price <= 0:
        raise ValidationError("price", "Price must be greater than zero")
    return name, price


def validate_user_form(username, password):
    username = username.strip()
    if not username:
        raise ValidationError("username", "Username is required")
    if not password:
        raise ValidationError("password", "Password is required")
    if len(username) > MAX_USERNAME_LENGTH:
        raise ValidationError("username", f"Username must be {MAX_USERNAME_LENGTH} characters or less")
    if len(password.encode()) > MAX_PASSWORD_BYTES:
        raise ValidationError("password", f"Password must be {MAX_PASSWORD_BYTES} bytes or less")
    return username, password


def format_price(price):
    return f"${price:.2f}"


def parse_price_cell(text):
    """Table shows '$999.99', the form wants '999.99'."""
    return str(text).replace("$", "").strip()


def product_row(product):
    return (product.id, product.name, format_price(product.price))


def user_row(user):
    return (user.id, user.username, PASSWORD_MASK)


def failure_message(action, result):
    if result.error is None:
        return f"Failed to {action}."
    return {
        "connection": f"Failed to {action}: cannot reach the database.",
        "constraint": f"Failed to {action}: the value is already in use.",
        "not_found": f"Failed to {action}: record no longer exists.",
    }.get(result.error.value, f"Failed to {action}.")
