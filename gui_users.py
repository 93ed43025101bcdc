import customtkinter as ctk
from tkinter import ttk

from errors import ValidationError
from forms import failure_message, user_row, validate_user_form
from gui_utils import clear_tree, show_popup_error, show_popup_info, show_popup_question, show_popup_warning

COLUMNS = ("ID", "Username", "Password")

class UserPanel(ctk.CTkFrame):
    def __init__(self, master, users, current_user):
        super().__init__(master)
        self.users = users
        self.current_user = current_user
        self.selected_id = None
        self.build_ui()
        self.load_users()

    def build_ui(self):
        form = ctk.CTkFrame(self)
        form.pack(fill="x", padx=10, pady=10)
        ctk.CTkLabel(form, text="User Information", font=("Arial", 14, "bold")).grid(row=0, column=0, columnspan=4, pady=5, sticky="w")
        ctk.CTkLabel(form, text="Username:").grid(row=1, column=0, padx=5, pady=5, sticky="e")
        self.ent_user = ctk.CTkEntry(form, width=250)
        self.ent_user.grid(row=1, column=1, padx=5, pady=5, sticky="w")
        ctk.CTkLabel(form, text="Password:").grid(row=2, column=0, padx=5, pady=5, sticky="e")
        self.ent_pass = ctk.CTkEntry(form, width=250, show="*")
        self.ent_pass.grid(row=2, column=1, padx=5, pady=5, sticky="w")
        if self.users.hash_passwords:
            ctk.CTkLabel(form, text="Enter a new password to update a user", text_color="gray").grid(row=2, column=2, padx=5, sticky="w")

        buttons = ctk.CTkFrame(form, fg_color="transparent")
        buttons.grid(row=3, column=0, columnspan=4, pady=5)
        ctk.CTkButton(buttons, text="Add", command=self.add_user, width=90).pack(side="left", padx=5)
        ctk.CTkButton(buttons, text="Update", command=self.update_user, width=90).pack(side="left", padx=5)
        ctk.CTkButton(buttons, text="Delete", command=self.delete_user, width=90, fg_color="#c0392b").pack(side="left", padx=5)
        ctk.CTkButton(buttons, text="Clear", command=self.clear_form, width=90, fg_color="gray").pack(side="left", padx=5)
        ctk.CTkButton(buttons, text="Refresh", command=self.load_users, width=90).pack(side="left", padx=5)

        self.tree = ttk.Treeview(self, columns=COLUMNS, show="headings", selectmode="browse")
        for col in COLUMNS:
            self.tree.heading(col, text=col)
        self.tree.column("ID", width=60, anchor="center")
        self.tree.pack(fill="both", expand=True, padx=10, pady=10)
        self.tree.bind("<<TreeviewSelect>>", self.on_select)

    def load_users(self):
        result = self.users.list_all()
        if not result:
            show_popup_error(failure_message("load users", result), parent=self)
        clear_tree(self.tree)
        for u in result.value:
            self.tree.insert("", "end", values=user_row(u))

    def on_select(self, event=None):
        selected = self.tree.focus()
        if not selected:
            return
        user_id = int(self.tree.item(selected, "values")[0])
        # table only shows the mask, fetch the stored record
        result = self.users.get_by_id(user_id)
        if not result:
            show_popup_error(failure_message("load user", result), parent=self)
            return
        user = result.value
        self.selected_id = user.id
        self.ent_user.delete(0, "end")
        self.ent_user.insert(0, user.username)
        self.ent_pass.delete(0, "end")
        if not self.users.hash_passwords:
            self.ent_pass.insert(0, user.password)

    def read_form(self):
        try:
            return validate_user_form(self.ent_user.get(), self.ent_pass.get())
        except ValidationError as e:
            show_popup_warning(str(e), parent=self)
            return None

    def add_user(self):
        values = self.read_form()
        if values is None:
            return
        result = self.users.create(*values)
        if result:
            show_popup_info("User added successfully", parent=self)
            self.clear_form()
            self.load_users()
        else:
            show_popup_error(failure_message("add user", result), parent=self)

    def update_user(self):
        if self.selected_id is None:
            show_popup_warning("Select a user to update", parent=self)
            return
        values = self.read_form()
        if values is None:
            return
        result = self.users.update(self.selected_id, *values)
        if result:
            show_popup_info("User updated successfully", parent=self)
            self.clear_form()
            self.load_users()
        else:
            show_popup_error(failure_message("update user", result), parent=self)

    def delete_user(self):
        if self.selected_id is None:
            show_popup_warning("Select a user to delete", parent=self)
            return
        if self.selected_id == self.current_user.id:
            show_popup_warning("You cannot delete the account you are logged in with", parent=self)
            return
        if not show_popup_question("Delete this user?", parent=self):
            return
        result = self.users.delete(self.selected_id)
        if result:
            show_popup_info("User deleted successfully", parent=self)
            self.clear_form()
            self.load_users()
        else:
            show_popup_error(failure_message("delete user", result), parent=self)

    def clear_form(self):
        self.selected_id = None
        self.ent_user.delete(0, "end")
        self.ent_pass.delete(0, "end")
        for item in self.tree.selection():
            self.tree.selection_remove(item)
