import customtkinter as ctk

from gui_products import ProductPanel
from gui_users import UserPanel
from gui_utils import center_window, show_popup_question

class Dashboard(ctk.CTk):
    def __init__(self, user, products, users):
        super().__init__()
        self.user = user
        self.products = products
        self.users = users
        # set when the window closed through Logout rather than exit
        self.logged_out = False
        self.title("Product & User Management")
        center_window(self, 900, 650)
        self.build_ui()

    def build_ui(self):
        header = ctk.CTkFrame(self)
        header.pack(fill="x", padx=10, pady=(10, 0))
        ctk.CTkLabel(header, text=f"Welcome, {self.user.username}", font=("Arial", 16)).pack(side="left", padx=10, pady=5)
        ctk.CTkButton(header, text="Logout", command=self.logout, width=90, fg_color="gray").pack(side="right", padx=10, pady=5)

        tabs = ctk.CTkTabview(self)
        tabs.pack(fill="both", expand=True, padx=10, pady=10)
        ProductPanel(tabs.add("Products"), self.products).pack(fill="both", expand=True)
        UserPanel(tabs.add("Users"), self.users, self.user).pack(fill="both", expand=True)
        self.protocol("WM_DELETE_WINDOW", self.confirm_exit)
        self.bind('<Control-q>', lambda e: self.confirm_exit())

    def confirm_exit(self):
        if show_popup_question("Are you sure you want to exit?", title="Exit", parent=self):
            self.destroy()

    def logout(self):
        if not show_popup_question("Log out?", parent=self):
            return
        self.logged_out = True
        self.destroy()
