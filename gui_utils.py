from tkinter import messagebox

def show_popup_info(msg, title="Information", parent=None):
    """
    Show a short information popup.
    """
    messagebox.showinfo(title, msg, parent=parent)

def show_popup_warning(msg, title="Warning", parent=None):
    messagebox.showwarning(title, msg, parent=parent)

def show_popup_error(msg, title="Error", parent=None):
    messagebox.showerror(title, msg, parent=parent)

def show_popup_question(msg, title="Confirm", parent=None):
    """
    Yes/No popup, returns True/False
    """
    return messagebox.askyesno(title, msg, parent=parent)

def center_window(window, width, height):
    screen_width = window.winfo_screenwidth()
    screen_height = window.winfo_screenheight()
    x = (screen_width - width) // 2
    y = (screen_height - height) // 2
    window.geometry(f"{width}x{height}+{x}+{y}")

def clear_tree(tree):
    for row in tree.get_children():
        tree.delete(row)
