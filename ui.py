"""
Widget Menu UI
A graphical interface for the widget menu using Tkinter.

Shows:
- The menu of widgets on the left
- The selected widget's form and result on the right
- Toast notifications at the bottom
- A dark mode toggle that is remembered between runs
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from calculator import CalculatorError, format_result
from logic import GameEngine, GameEvent, GameStatus, Mark, TkScheduler
from menu import EXIT_MESSAGE, MENU_OPTIONS, MenuOption, MenuServices
from storage import KeyValueStore
from widgets import (
    GuessResult, HangmanGame, HangmanStatus, WidgetInputError, arithmetic,
    ascii_table, calculate_age, calculate_bmi, convert_by_code, greet,
    hello_world, prime_message,
)
from widgets.temperature import CONVERSIONS, UNIT_SYMBOLS

log = logging.getLogger("ui")

FONT = 'Segoe UI'

TOAST_COLORS = {
    "info": '#6366f1',
    "success": '#10b981',
    "error": '#ef4444',
}


class WidgetMenuUI:
    """
    Main UI class for the widget menu.
    """

    def __init__(self, store: KeyValueStore):
        """Initialize the UI."""
        self.services = MenuServices(store)

        # Tic-tac-toe view state
        self.engine: Optional[GameEngine] = None
        self.cell_buttons: List[tk.Button] = []

        # Calculator view state
        self.history_list: Optional[tk.Listbox] = None
        self.services.calculator.history.subscribe(self._on_history_changed)

        # Hangman view state
        self.hangman: Optional[HangmanGame] = None

        self._create_ui()
        self._apply_theme()

    # ==================== LAYOUT ====================

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Widget Menu")
        self.root.geometry("1000x650")
        self.root.minsize(800, 500)

        self.scheduler = TkScheduler(self.root)

        menubar = tk.Menu(self.root)
        view_menu = tk.Menu(menubar, tearoff=0)
        view_menu.add_command(label="Toggle dark mode", command=self._toggle_dark_mode)
        menubar.add_cascade(label="View", menu=view_menu)
        self.root.config(menu=menubar)

        self.style = ttk.Style()
        self.style.theme_use('clam')

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Left panel - menu buttons
        left_frame = ttk.Frame(main_frame, width=230)
        left_frame.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 10))
        left_frame.pack_propagate(False)

        ttk.Label(left_frame, text="Menu", style='Title.TLabel').pack(pady=(0, 10))

        for option in MENU_OPTIONS:
            ttk.Button(
                left_frame,
                text=f"{option.number}. {option.title}",
                command=lambda o=option: self._select(o)
            ).pack(fill=tk.X, pady=2)

        # Right panel - content
        self.content = ttk.Frame(main_frame)
        self.content.pack(side=tk.RIGHT, fill=tk.BOTH, expand=True)

        # Toast area
        self.toast_label = tk.Label(self.root, text="", font=(FONT, 10, 'bold'), fg='white')

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _apply_theme(self):
        colors = self.services.theme.colors
        self.root.configure(bg=colors["bg"])
        self.style.configure('TFrame', background=colors["bg"])
        self.style.configure('TLabel', background=colors["bg"], foreground=colors["fg"], font=(FONT, 11))
        self.style.configure('Title.TLabel', font=(FONT, 16, 'bold'), foreground=colors["accent"])
        self.style.configure('Result.TLabel', font=(FONT, 13, 'bold'), foreground=colors["accent"])
        self.style.configure('TButton', font=(FONT, 10, 'bold'))

    def _toggle_dark_mode(self):
        dark = self.services.theme.toggle()
        self._apply_theme()
        self._restyle_content()
        self._notify(f"Dark mode {'on' if dark else 'off'}")

    def _restyle_content(self):
        """Recolor the plain tk widgets of the open view; ttk ones follow the style."""
        colors = self.services.theme.colors
        if self.history_list is not None:
            self.history_list.configure(bg=colors["panel"], fg=colors["fg"])
        if self.engine is not None and self.cell_buttons:
            for button in self.cell_buttons:
                button.configure(fg=colors["fg"])
            self._update_board_display()

    def _clear_content(self):
        self._leave_game()
        self.history_list = None
        self.hangman = None
        for child in self.content.winfo_children():
            child.destroy()

    def _title(self, text: str):
        ttk.Label(self.content, text=text, style='Title.TLabel').pack(pady=(0, 10))

    def _field(self, label: str, default: str = "") -> ttk.Entry:
        row = ttk.Frame(self.content)
        row.pack(fill=tk.X, pady=3)
        ttk.Label(row, text=label, width=24).pack(side=tk.LEFT)
        entry = ttk.Entry(row)
        entry.insert(0, default)
        entry.pack(side=tk.LEFT, fill=tk.X, expand=True)
        return entry

    def _result_label(self) -> ttk.Label:
        label = ttk.Label(self.content, text="", style='Result.TLabel', wraplength=600)
        label.pack(pady=10)
        return label

    def _form(self, title: str, fields, compute):
        """
        Build a simple form: entries, a button and a result line.
        compute gets the entry texts and returns the text to show.
        """
        self._title(title)
        entries = [self._field(label) for label in fields]
        result = self._result_label()

        def submit():
            try:
                result.configure(text=compute(*[e.get() for e in entries]))
            except WidgetInputError as e:
                result.configure(text="")
                self._notify(str(e), "error")

        ttk.Button(self.content, text="Go", command=submit).pack(before=result)
        if entries:
            entries[0].focus_set()

    # ==================== DISPATCH ====================

    def _select(self, option: MenuOption):
        """Show the widget for a menu option."""
        self._clear_content()
        log.debug("Selected %s", option.key)

        builder = getattr(self, f"_show_{option.key}", None)
        if builder is None:
            self._title("Invalid option. Try again.")
            return
        builder()

    def _show_hello(self):
        self._title(hello_world())

    def _show_greet(self):
        self._form("Greet me", ["Your name"], greet)

    def _show_arithmetic(self):
        self._form(
            "Arithmetic",
            ["First number", "Second number", "Operation (1:+ 2:- 3:* 4:/)"],
            lambda a, b, op: f"Result: {format_result(arithmetic(a, b, op))}",
        )

    def _show_age(self):
        self._form(
            "Age calculator",
            ["Birth year", "Current year (blank = now)"],
            lambda born, now: f"You are {calculate_age(born, now)} years old",
        )

    def _show_prime(self):
        self._form("Prime checker", ["Whole number"], prime_message)

    def _show_bmi(self):
        self._form(
            "BMI calculator",
            ["Weight (kg)", "Height (m)"],
            lambda w, h: str(calculate_bmi(w, h)),
        )

    def _show_temperature(self):
        self._title("Temperature converter")
        choice = tk.IntVar(value=1)
        for code, (src, dst) in CONVERSIONS.items():
            ttk.Radiobutton(
                self.content,
                text=f"{UNIT_SYMBOLS[src]} -> {UNIT_SYMBOLS[dst]}",
                variable=choice,
                value=code
            ).pack(anchor=tk.W)
        entry = self._field("Temperature")
        result = self._result_label()

        def submit():
            try:
                result.configure(text=convert_by_code(choice.get(), entry.get()))
            except WidgetInputError as e:
                self._notify(str(e), "error")

        ttk.Button(self.content, text="Convert", command=submit).pack(before=result)

    def _show_ascii(self):
        self._title("ASCII table")
        frame = ttk.Frame(self.content)
        frame.pack(fill=tk.BOTH, expand=True)

        columns = ("dec", "char", "hex", "oct")
        tree = ttk.Treeview(frame, columns=columns, show='headings')
        for column, heading in zip(columns, ("Decimal", "Character", "Hexadecimal", "Octal")):
            tree.heading(column, text=heading)
            tree.column(column, width=110, anchor=tk.CENTER)
        for row in ascii_table():
            tree.insert('', tk.END, values=(row.decimal, row.character, row.hexadecimal, row.octal))

        scrollbar = ttk.Scrollbar(frame, orient=tk.VERTICAL, command=tree.yview)
        tree.configure(yscrollcommand=scrollbar.set)
        tree.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)

    def _show_exit(self):
        self._title(EXIT_MESSAGE)
        self.root.after(800, self._quit)

    # ==================== CALCULATOR ====================

    def _show_calculator(self):
        calculator = self.services.calculator
        colors = self.services.theme.colors
        self._title("Calculator")

        entry = self._field("Expression")
        result = self._result_label()

        def evaluate(_event=None):
            try:
                value = calculator.calculate(entry.get())
            except CalculatorError as e:
                self._notify(str(e), "error")
                return
            result.configure(text=f"= {format_result(value)}")
            entry.delete(0, tk.END)

        def clear_history():
            calculator.clear_history()
            self._notify("History cleared", "success")

        buttons = ttk.Frame(self.content)
        buttons.pack(before=result)
        ttk.Button(buttons, text="=", command=evaluate).pack(side=tk.LEFT, padx=5)
        ttk.Button(buttons, text="Clear history", command=clear_history).pack(side=tk.LEFT, padx=5)
        entry.bind('<Return>', evaluate)
        entry.focus_set()

        ttk.Label(self.content, text="History (latest first)").pack(anchor=tk.W)
        self.history_list = tk.Listbox(
            self.content,
            height=10,
            font=(FONT, 11),
            bg=colors["panel"],
            fg=colors["fg"]
        )
        self.history_list.pack(fill=tk.BOTH, expand=True)
        self._on_history_changed(calculator.history.entries)

    def _on_history_changed(self, entries):
        if self.history_list is None:
            return
        self.history_list.delete(0, tk.END)
        for entry in entries:
            stamp = entry.timestamp.strftime("%H:%M:%S")
            self.history_list.insert(tk.END, f"[{stamp}]  {entry.expression} = {format_result(entry.result)}")

    # ==================== HANGMAN ====================

    def _show_hangman(self):
        self.hangman = HangmanGame()
        self._title("Hangman")

        word_label = ttk.Label(self.content, text="", font=('Consolas', 24, 'bold'))
        word_label.pack(pady=10)
        status_label = ttk.Label(self.content, text="")
        status_label.pack()
        wrong_label = ttk.Label(self.content, text="")
        wrong_label.pack()
        entry = self._field("Letter")

        def refresh():
            game = self.hangman
            word_label.configure(text=game.masked_word)
            status_label.configure(text=game.status_text())
            wrong_label.configure(text=f"Wrong: {game.wrong_letters}" if game.wrong_letters else "")

        def guess(_event=None):
            outcome = self.hangman.guess(entry.get())
            entry.delete(0, tk.END)
            if outcome == GuessResult.INVALID:
                self._notify("Type a single letter", "error")
            elif outcome == GuessResult.REPEATED:
                self._notify("You already tried that letter")
            refresh()
            if self.hangman.status == HangmanStatus.WON:
                self._notify("You win!", "success")
            elif self.hangman.status == HangmanStatus.LOST:
                self._notify(self.hangman.status_text(), "error")

        ttk.Button(self.content, text="Guess", command=guess).pack(pady=5)
        ttk.Button(self.content, text="New word", command=self._show_hangman_again).pack()
        entry.bind('<Return>', guess)
        entry.focus_set()
        refresh()

    def _show_hangman_again(self):
        self._clear_content()
        self._show_hangman()

    # ==================== TIC-TAC-TOE ====================

    def _show_tictactoe(self):
        colors = self.services.theme.colors
        self.engine = self.services.new_game(self.scheduler)
        self.engine.subscribe(self._on_game_event)
        self._title("Tic-tac-toe")

        board_frame = ttk.Frame(self.content)
        board_frame.pack(pady=10)

        self.cell_buttons = []
        for index in range(9):
            row, col = divmod(index, 3)
            button = tk.Button(
                board_frame,
                text="",
                font=(FONT, 24, 'bold'),
                width=4,
                height=2,
                bg=colors["cell"],
                fg=colors["fg"],
                relief='ridge',
                command=lambda i=index: self._on_cell_click(i)
            )
            button.grid(row=row, column=col, padx=2, pady=2)
            self.cell_buttons.append(button)

        self.game_status_label = ttk.Label(self.content, text="", style='Result.TLabel')
        self.game_status_label.pack(pady=5)

        ttk.Button(self.content, text="Reset", command=self.engine.reset).pack(pady=5)
        self._update_board_display()

    def _on_cell_click(self, index: int):
        if self.engine is None:
            return
        self.engine.apply_move(index)

    def _on_game_event(self, event: GameEvent):
        if not self.cell_buttons:
            return
        self._update_board_display()
        if event.kind == "game_over":
            if event.mark == Mark.PLAYER:
                self._notify("You win!", "success")
            elif event.mark == Mark.OPPONENT:
                self._notify("The computer wins!", "error")
            else:
                self._notify("It's a draw!")

    def _update_board_display(self):
        """Redraw cells, lock the board while the computer is thinking."""
        engine = self.engine
        colors = self.services.theme.colors
        winning_line = engine.get_winning_line() or ()
        locked = engine.awaiting_opponent or engine.status != GameStatus.IN_PROGRESS

        for index, mark in enumerate(engine.board):
            button = self.cell_buttons[index]
            button.configure(
                text=mark.symbol,
                bg=colors["highlight"] if index in winning_line else colors["cell"],
                state='disabled' if locked or mark != Mark.EMPTY else 'normal',
                disabledforeground=colors["fg"],
            )

        self.game_status_label.configure(text=engine.status_text())

    def _leave_game(self):
        if self.engine is not None and self.engine.pending_reply is not None:
            self.engine.pending_reply.cancel()
        self.engine = None
        self.cell_buttons = []

    # ==================== TO-DO ====================

    def _show_todo(self):
        todo = self.services.todo_list
        self._title("To-do list")
        entry = self._field("New task")

        list_frame = ttk.Frame(self.content)

        def refresh():
            for child in list_frame.winfo_children():
                child.destroy()
            for item in todo.items:
                row = ttk.Frame(list_frame)
                row.pack(fill=tk.X, pady=1)
                done = tk.BooleanVar(value=item.done)
                ttk.Checkbutton(
                    row,
                    text=item.text,
                    variable=done,
                    command=lambda i=item.id: (todo.toggle(i), refresh())
                ).pack(side=tk.LEFT)
                ttk.Button(
                    row,
                    text="✕",
                    width=3,
                    command=lambda i=item.id: (todo.remove(i), refresh())
                ).pack(side=tk.RIGHT)

        def add(_event=None):
            try:
                todo.add(entry.get())
            except WidgetInputError as e:
                self._notify(str(e), "error")
                return
            entry.delete(0, tk.END)
            self._notify("Task added", "success")
            refresh()

        def clean():
            removed = todo.clear_completed()
            self._notify(f"Removed {removed} finished task(s)")
            refresh()

        buttons = ttk.Frame(self.content)
        buttons.pack(pady=5)
        ttk.Button(buttons, text="Add", command=add).pack(side=tk.LEFT, padx=5)
        ttk.Button(buttons, text="Clear completed", command=clean).pack(side=tk.LEFT, padx=5)
        list_frame.pack(fill=tk.BOTH, expand=True)
        entry.bind('<Return>', add)
        entry.focus_set()
        refresh()

    # ==================== NOTIFICATIONS ====================

    def _notify(self, message: str, level: str = "info"):
        self.services.notifications.push(message, level)
        self._show_next_toast()

    def _show_next_toast(self):
        note = self.services.notifications.show_next()
        if note is None:
            return
        self.toast_label.configure(text=note.message, bg=TOAST_COLORS.get(note.level, TOAST_COLORS["info"]))
        self.toast_label.pack(side=tk.BOTTOM, fill=tk.X)
        self.root.after(note.duration_ms, self._hide_toast)

    def _hide_toast(self):
        self.toast_label.pack_forget()
        self.services.notifications.dismiss()
        self._show_next_toast()

    # ==================== LIFECYCLE ====================

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self._leave_game()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    from main import main as run_main
    return run_main()


if __name__ == "__main__":
    main()
