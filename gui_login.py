import customtkinter as ctk

from errors import ValidationError
from forms import validate_login_form
from gui_utils import center_window, show_popup_error, show_popup_info, show_popup_warning
from models import ErrorKind

class LoginWindow(ctk.CTk):
    def __init__(self, users):
        super().__init__()
        self.title("Login")
        self.resizable(False, False)
        center_window(self, 400, 320)
        self.users = users
        # the authenticated User once login succeeds
        self.user = None
        self.build_ui()

    def build_ui(self):
        frame = ctk.CTkFrame(self)
        frame.pack(pady=30, padx=20, fill="both", expand=True)
        ctk.CTkLabel(frame, text="Please log in", font=("Arial", 20, "bold")).pack(pady=15)
        ctk.CTkLabel(frame, text="Username:").pack(pady=2)
        self.ent_user = ctk.CTkEntry(frame)
        self.ent_user.pack(pady=2)
        self.ent_user.focus()
        ctk.CTkLabel(frame, text="Password:").pack(pady=2)
        self.ent_pass = ctk.CTkEntry(frame, show="*")
        self.ent_pass.pack(pady=2)
        ctk.CTkButton(frame, text="Login", command=self.try_login).pack(pady=15)
        self.bind('<Return>', lambda e: self.try_login())

    def try_login(self):
        try:
            username, password = validate_login_form(self.ent_user.get(), self.ent_pass.get())
        except ValidationError as e:
            show_popup_warning(str(e), parent=self)
            return
        result = self.users.authenticate(username, password)
        if result:
            show_popup_info(f"Login successful! Welcome, {username}", title="Success", parent=self)
            self.user = result.value
            self.destroy()
        elif result.error is ErrorKind.CONNECTION:
            show_popup_error("Cannot connect to the database. Check config.json and the server.", title="Connection Failed", parent=self)
        else:
            show_popup_error("Invalid username or password", title="Login Failed", parent=self)
            self.ent_pass.delete(0, "end")
            self.ent_pass.focus()
