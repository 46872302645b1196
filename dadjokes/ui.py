"""
Design (ui.py)
- Purpose: Build and manage the Tkinter UI (joke label, heart, favourites list, logs panel).
- Inputs: AppController (owns all state).
- Outputs: None (renders AppState, forwards clicks and window lifecycle to the controller).
- Side effects: Creates windows; may show desktop notifications via plyer.
- Thread-safety: UI code runs on main thread; worker threads reach it only through
                 dispatch() / append_log(), which reschedule with Tk.after().
"""

import logging
import tkinter as tk
from tkinter import ttk
from typing import Callable

from plyer import notification

from .config import LOG_MAX_LINES, WINDOW_TITLE
from .controller import AppController, AppState, Phase
from .logs import PanelHandler, attach_panel
from .utils import favourite_label, heart_colour, joke_display_text, lines_to_trim

logger = logging.getLogger(__name__)


def tk_dispatcher(root: tk.Misc) -> Callable[[Callable[[], None]], None]:
    """Dispatch function for AppController: run fn on the Tk main loop."""
    def dispatch(fn: Callable[[], None]) -> None:
        root.after(0, fn)
    return dispatch


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior.
    - Public attributes:
        enable_notifications (tk.BooleanVar): toggles a system notification on favouriting
        show_logs (tk.BooleanVar): toggles visibility of the logs panel
    - Public methods:
        render(): repaint from an AppState (registered with controller.subscribe)
        append_log(): thread-safe sink for the logging PanelHandler
        close(): save favourites and destroy the window
    """

    def __init__(self, root: tk.Tk, controller: AppController):
        self.root = root
        self.controller = controller

        # UI state variables
        self.enable_notifications = tk.BooleanVar(value=True)
        self.show_logs = tk.BooleanVar(value=False)
        self._rendered_favourites: tuple = ()

        # Window
        self.root.title(WINDOW_TITLE)
        self.root.rowconfigure(0, weight=1)
        self.root.columnconfigure(0, weight=1)
        self.root.configure(bg="#1e1e1e")
        self.root.minsize(420, 480)

        # Paned window: top = joke + favourites, bottom = logs (when shown)
        self.paned = ttk.PanedWindow(self.root, orient=tk.VERTICAL)
        self.paned.grid(row=0, column=0, sticky="nsew")

        content = tk.Frame(self.paned, bg="#1e1e1e")
        content.columnconfigure(0, weight=1)
        content.rowconfigure(5, weight=1)
        self.paned.add(content, weight=1)

        self.bottom_frame = tk.Frame(self.paned, bg="#1e1e1e")
        self.logs_box = tk.Text(self.bottom_frame, height=6, bg="#1b1b1b", fg="#dddddd", wrap="none")
        self.logs_box.configure(state="disabled")
        self.paned.add(self.bottom_frame, weight=0)  # start collapsed; expand when Logs checked
        self.paned.bind("<Configure>", self._keep_sash_collapsed)

        # Style
        style = ttk.Style(self.root)
        style.theme_use("default")
        style.configure("TButton", font=("Segoe UI", 11))

        # Joke
        self.joke_label = tk.Label(
            content,
            text="",
            wraplength=380,
            justify="center",
            fg="#f0f0f0",
            bg="#2b2b2b",
            font=("Segoe UI", 16),
            padx=20,
            pady=20,
            relief="ridge",
            borderwidth=3,
        )
        self.joke_label.grid(row=0, column=0, sticky="ew", padx=10, pady=(10, 5))
        self.joke_label.bind("<Configure>", self._rewrap_joke)

        # Heart: click to favourite the joke on screen
        self.heart = tk.Label(content, text="♥", font=("Segoe UI", 28), bg="#1e1e1e", cursor="hand2")
        self.heart.grid(row=1, column=0, pady=(0, 5))
        self.heart.bind("<Button-1>", lambda _event: self.on_favourite())

        self.another_button = ttk.Button(content, text="Another one!", command=self.controller.refresh)
        self.another_button.grid(row=2, column=0, pady=(0, 5))

        self.status_label = tk.Label(content, text="", fg="#FFA500", bg="#1e1e1e", font=("Segoe UI", 9))
        self.status_label.grid(row=3, column=0, sticky="ew", padx=10)

        tk.Label(
            content, text="Favourites", fg="#ffffff", bg="#1e1e1e", font=("Segoe UI", 12, "bold"), anchor="w"
        ).grid(row=4, column=0, sticky="ew", padx=10, pady=(5, 0))

        self.favourites_list = tk.Listbox(
            content,
            bg="#2b2b2b",
            fg="#f0f0f0",
            selectbackground="#444",
            font=("Segoe UI", 10),
            activestyle="none",
            highlightthickness=0,
        )
        self.favourites_list.grid(row=5, column=0, sticky="nsew", padx=10, pady=(0, 5))

        # Toggles
        toggles = tk.Frame(content, bg="#1e1e1e")
        toggles.grid(row=6, column=0, sticky="ew", padx=10, pady=(0, 10))
        tk.Checkbutton(
            toggles,
            text="Enable Notifications",
            variable=self.enable_notifications,
            fg="white",
            bg="#1e1e1e",
            selectcolor="#2b2b2b",
            activebackground="#1e1e1e",
            activeforeground="white",
        ).pack(side=tk.LEFT, padx=5)
        tk.Checkbutton(
            toggles,
            text="Show Logs",
            variable=self.show_logs,
            fg="white",
            bg="#1e1e1e",
            selectcolor="#2b2b2b",
            command=self.toggle_logs,
        ).pack(side=tk.LEFT, padx=5)

        # Host lifecycle -> controller phases
        self.root.bind("<Unmap>", lambda e: self._on_window_event(e, Phase.BACKGROUND))
        self.root.bind("<Map>", lambda e: self._on_window_event(e, Phase.ACTIVE))
        self.root.bind("<FocusOut>", lambda e: self._on_window_event(e, Phase.INACTIVE))
        self.root.bind("<FocusIn>", lambda e: self._on_window_event(e, Phase.ACTIVE))
        self.root.protocol("WM_DELETE_WINDOW", self.close)

        self.log_handler: PanelHandler = attach_panel(self.append_log)
        self.controller.subscribe(self.render)
        self.render(self.controller.state)

    # ---------- Rendering ----------

    def render(self, state: AppState) -> None:
        """
        Purpose: Repaint every widget from the given state.
        Thread-safety: Main thread only (controller updates arrive via dispatch()).
        """
        self.joke_label.configure(text=joke_display_text(state.current_joke, state.fetching))
        self.heart.configure(fg=heart_colour(state.is_current_favourited))
        self.status_label.configure(text=f"Could not load a new joke: {state.last_error}" if state.last_error else "")

        # Rebuild the list only when it changed so the selection survives refreshes
        if state.favourites != self._rendered_favourites:
            self.favourites_list.delete(0, tk.END)
            for joke in state.favourites:
                self.favourites_list.insert(tk.END, favourite_label(joke))
            self._rendered_favourites = state.favourites

    def _rewrap_joke(self, event) -> None:
        self.joke_label.configure(wraplength=max(100, event.width - 50))

    # ---------- UI callbacks ----------

    def on_favourite(self) -> None:
        joke = self.controller.state.current_joke
        if self.controller.favourite_current() and self.enable_notifications.get():
            self._notify("Added to favourites", joke.text)

    def _notify(self, title: str, message: str) -> None:
        try:
            notification.notify(title=title, message=message[:250], app_name=WINDOW_TITLE, timeout=5)
        except Exception as exc:  # plyer has no backend on some platforms
            logger.debug("Desktop notification unavailable: %s", exc)

    def _on_window_event(self, event, phase: Phase) -> None:
        # Child widgets share the toplevel binding; only the window itself counts
        if event.widget is not self.root:
            return
        if phase is Phase.ACTIVE and self.root.state() == "iconic":
            return
        self.controller.on_phase_change(phase)

    def close(self) -> None:
        """Save favourites (bounded wait), detach the log panel, destroy the window."""
        self.controller.shutdown()
        logging.getLogger("dadjokes").removeHandler(self.log_handler)
        self.root.destroy()

    # ---------- Logs panel ----------

    def toggle_logs(self) -> None:
        """Show logs in bottom pane. Resize pane to show/hide."""
        if self.show_logs.get():
            self.paned.pane(self.bottom_frame, weight=1)
            self.logs_box.pack(fill=tk.BOTH, expand=True, padx=10, pady=(0, 6))
            self.paned.update_idletasks()
            total = self.paned.winfo_height()
            if total > 0:
                self.paned.sashpos(0, int(total * 0.7))
        else:
            self.logs_box.pack_forget()
            self.paned.pane(self.bottom_frame, weight=0)
            self._keep_sash_collapsed()

    def _keep_sash_collapsed(self, _event=None) -> None:
        """When Logs is unchecked, keep sash at bottom so the window can resize down."""
        if not self.show_logs.get():
            self.paned.update_idletasks()
            total = self.paned.winfo_height()
            if total > 0:
                self.paned.sashpos(0, total)

    def append_log(self, line: str) -> None:
        """Thread-safe sink for PanelHandler; the append happens on the main thread."""
        self.root.after(0, lambda: self._append_log(line))

    def _append_log(self, text: str) -> None:
        """
        Purpose: Append one line to the Logs panel and trim to LOG_MAX_LINES.
        Thread-safety: Main thread only (called via after()).
        """
        self.logs_box.configure(state="normal")
        self.logs_box.insert("end", text)
        self.logs_box.see("end")
        total_lines = int(self.logs_box.index("end-1c").split(".")[0])
        remove = lines_to_trim(total_lines, LOG_MAX_LINES)
        if remove:
            self.logs_box.delete("1.0", f"{remove + 1}.0")
        self.logs_box.configure(state="disabled")
