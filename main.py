import logging

import customtkinter as ctk

from config import load_config
from db import Database
from errors import SimpleCrudError
from gui_dashboard import Dashboard
from gui_login import LoginWindow
from logging_config import get_logger, setup_logging
from product_repo import ProductRepository
from user_repo import UserRepository

logger = get_logger(__name__)

def run_app(products, users):
    """Alternate login and dashboard windows until the user exits instead of logging out."""
    while True:
        login = LoginWindow(users)
        login.mainloop()
        if login.user is None:
            return
        app = Dashboard(login.user, products, users)
        app.mainloop()
        if not app.logged_out:
            return

def main():
    try:
        config = load_config()
    except SimpleCrudError as e:
        raise SystemExit(f"Configuration error: {e}")
    setup_logging(getattr(logging, config['LOG_LEVEL'].upper(), logging.INFO), config['LOG_DIR'])

    db = Database(config)
    products = ProductRepository(db)
    users = UserRepository(db, config['PASSWORD_HASHING'], config['BCRYPT_ROUNDS'])

    # Fresh install: create tables and the first login account
    if db.init_schema():
        users.ensure_admin(config['ADMIN_USERNAME'], config['ADMIN_PASSWORD'])
    else:
        logger.warning("Could not prepare database schema, continuing to login")

    ctk.set_appearance_mode("dark")
    ctk.set_default_color_theme("blue")
    run_app(products, users)

if __name__ == "__main__":
    main()
