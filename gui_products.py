import customtkinter as ctk
from tkinter import ttk

from errors import ValidationError
from forms import failure_message, parse_price_cell, product_row, validate_product_form
from gui_utils import clear_tree, show_popup_error, show_popup_info, show_popup_question, show_popup_warning

COLUMNS = ("ID", "Product Name", "Price")

class ProductPanel(ctk.CTkFrame):
    def __init__(self, master, products):
        super().__init__(master)
        self.products = products
        self.selected_id = None
        self.build_ui()
        self.load_products()

    def build_ui(self):
        # Form
        form = ctk.CTkFrame(self)
        form.pack(fill="x", padx=10, pady=10)
        ctk.CTkLabel(form, text="Product Information", font=("Arial", 14, "bold")).grid(row=0, column=0, columnspan=4, pady=5, sticky="w")
        ctk.CTkLabel(form, text="Name:").grid(row=1, column=0, padx=5, pady=5, sticky="e")
        self.ent_name = ctk.CTkEntry(form, width=250)
        self.ent_name.grid(row=1, column=1, padx=5, pady=5, sticky="w")
        ctk.CTkLabel(form, text="Price:").grid(row=2, column=0, padx=5, pady=5, sticky="e")
        self.ent_price = ctk.CTkEntry(form, width=250)
        self.ent_price.grid(row=2, column=1, padx=5, pady=5, sticky="w")

        buttons = ctk.CTkFrame(form, fg_color="transparent")
        buttons.grid(row=3, column=0, columnspan=4, pady=5)
        ctk.CTkButton(buttons, text="Add", command=self.add_product, width=90).pack(side="left", padx=5)
        ctk.CTkButton(buttons, text="Update", command=self.update_product, width=90).pack(side="left", padx=5)
        ctk.CTkButton(buttons, text="Delete", command=self.delete_product, width=90, fg_color="#c0392b").pack(side="left", padx=5)
        ctk.CTkButton(buttons, text="Clear", command=self.clear_form, width=90, fg_color="gray").pack(side="left", padx=5)

        # Search bar
        search = ctk.CTkFrame(self)
        search.pack(fill="x", padx=10)
        ctk.CTkLabel(search, text="Search:").pack(side="left", padx=5)
        self.search_var = ctk.StringVar()
        ent_search = ctk.CTkEntry(search, textvariable=self.search_var, width=250)
        ent_search.pack(side="left", padx=5, pady=5)
        ent_search.bind('<Return>', lambda e: self.search_products())
        ctk.CTkButton(search, text="Search", command=self.search_products, width=90).pack(side="left", padx=5)
        ctk.CTkButton(search, text="Refresh", command=self.refresh, width=90).pack(side="left", padx=5)

        # Table
        self.tree = ttk.Treeview(self, columns=COLUMNS, show="headings", selectmode="browse")
        for col in COLUMNS:
            self.tree.heading(col, text=col)
        self.tree.column("ID", width=60, anchor="center")
        self.tree.column("Price", width=120, anchor="e")
        self.tree.pack(fill="both", expand=True, padx=10, pady=10)
        self.tree.bind("<<TreeviewSelect>>", self.on_select)

    def show_rows(self, products):
        clear_tree(self.tree)
        for p in products:
            self.tree.insert("", "end", values=product_row(p))

    def load_products(self):
        result = self.products.list_all()
        if not result:
            show_popup_error(failure_message("load products", result), parent=self)
        self.show_rows(result.value)

    def refresh(self):
        self.search_var.set("")
        self.load_products()

    def search_products(self):
        term = self.search_var.get().strip()
        if not term:
            self.load_products()
            return
        result = self.products.search(term)
        if not result:
            show_popup_error(failure_message("search products", result), parent=self)
            return
        self.show_rows(result.value)
        if not result.value:
            show_popup_info(f"No products found matching '{term}'", title="Search", parent=self)

    def on_select(self, event=None):
        selected = self.tree.focus()
        if not selected:
            return
        product_id, name, price = self.tree.item(selected, "values")
        self.selected_id = int(product_id)
        self.ent_name.delete(0, "end")
        self.ent_name.insert(0, name)
        self.ent_price.delete(0, "end")
        self.ent_price.insert(0, parse_price_cell(price))

    def read_form(self):
        try:
            return validate_product_form(self.ent_name.get(), self.ent_price.get())
        except ValidationError as e:
            show_popup_warning(str(e), parent=self)
            return None

    def add_product(self):
        values = self.read_form()
        if values is None:
            return
        result = self.products.create(*values)
        if result:
            show_popup_info("Product added successfully", parent=self)
            self.clear_form()
            self.load_products()
        else:
            show_popup_error(failure_message("add product", result), parent=self)

    def update_product(self):
        if self.selected_id is None:
            show_popup_warning("Select a product to update", parent=self)
            return
        values = self.read_form()
        if values is None:
            return
        result = self.products.update(self.selected_id, *values)
        if result:
            show_popup_info("Product updated successfully", parent=self)
            self.clear_form()
            self.load_products()
        else:
            show_popup_error(failure_message("update product", result), parent=self)

    def delete_product(self):
        if self.selected_id is None:
            show_popup_warning("Select a product to delete", parent=self)
            return
        if not show_popup_question("Delete this product?", parent=self):
            return
        result = self.products.delete(self.selected_id)
        if result:
            show_popup_info("Product deleted successfully", parent=self)
            self.clear_form()
            self.load_products()
        else:
            show_popup_error(failure_message("delete product", result), parent=self)

    def clear_form(self):
        self.selected_id = None
        self.ent_name.delete(0, "end")
        self.ent_price.delete(0, "end")
        for item in self.tree.selection():
            self.tree.selection_remove(item)
