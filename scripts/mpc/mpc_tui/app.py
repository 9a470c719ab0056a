"""Frame controller and CLI entrypoint for the immediate-mode form engine."""

from __future__ import annotations

import argparse
import json
import logging
import os
import string
import sys
from logging.handlers import RotatingFileHandler

from rich.console import Console

from mpc_tui.frame import Frame
from mpc_tui.models import Screen
from mpc_tui.navigation import KEY_DIRECTIONS, navigate
from mpc_tui.profiles import BUILTIN_PROFILES, resolve_profile
from mpc_tui.surfaces import TerminalSurface, create_surface
from mpc_tui.surfaces.buffer import BufferSurface
from mpc_tui.widgets import actions as action_row
from mpc_tui.widgets import border, inputs, title

logger = logging.getLogger(__name__)

QUIT_KEY = "q"
NOTIFICATION_OFFSET = 2


def parse_action_digit(key: str) -> int | None:
    if len(key) == 1 and key in string.hexdigits:
        return int(key, 16)
    return None


class App:
    """Owns one form and redeclares it on every frame.

    Only the focus cursor (on ``frame``), the buffered key, the active action
    and the notification survive from one frame to the next.
    """

    def __init__(self, surface: TerminalSurface, profile: dict):
        self.surface = surface
        self.profile = profile
        self.actions: list[str] = list(profile["actions"])
        self.poll_ms = int(profile["poll_ms"])
        self.frame = Frame(
            surface,
            Screen(row=0, col=0, width=profile["panel_width"], height=profile["panel_height"]),
        )
        self.key: str | None = None
        self.active_action: int | None = None
        self.notification = ""
        self.started = False
        self.quit = False

    def declare_form(self) -> None:
        frame = self.frame
        title.declare(frame, self.profile["title"])
        for index, row in enumerate(self.profile["rows"]):
            if index:
                frame.next_row()
            for field in row:
                inputs.declare(frame, field["label"], field["value"], field.get("width"))

    def handle_key(self, key: str) -> None:
        direction = KEY_DIRECTIONS.get(key)
        if direction is not None:
            self.frame.focus = navigate(direction, self.frame.focus, self.frame.elements)
            return

        digit = parse_action_digit(key)
        if digit is None:
            self.notification = ""
        elif digit <= len(self.actions):
            self.active_action = digit
            if digit >= 1:
                self.notification = f"{self.actions[digit - 1]} selected"
            logger.debug(f"Active action set to {digit}")

        if key == QUIT_KEY:
            logger.info("Quit requested")
            self.quit = True

    def draw_notification(self) -> None:
        if not self.notification:
            return
        screen = self.frame.screen
        self.surface.move(screen.row + screen.height + NOTIFICATION_OFFSET, screen.col)
        self.surface.draw_text(self.notification, dim=True)

    def run_frame(self) -> None:
        frame = self.frame
        self.surface.clear()
        width, _ = self.surface.size()
        frame.begin(width)
        border.render(frame)

        if not self.started:
            frame.focus = frame.render_cursor

        self.declare_form()

        if not self.started:
            frame.focus_first()

        action_row.render(frame, self.actions, self.active_action)

        key, self.key = self.key, None
        if key is not None:
            self.handle_key(key)

        self.draw_notification()
        self.surface.present()

        self.key = self.surface.poll_key(self.poll_ms)
        self.started = True

    def run(self) -> None:
        logger.info(f"Starting frame loop for profile {self.profile.get('name', '?')}")
        with self.surface:
            try:
                while not self.quit:
                    self.run_frame()
            except KeyboardInterrupt:
                logger.info("Interrupted")
        logger.info("Frame loop stopped")

    def to_dict(self) -> dict:
        screen = self.frame.screen
        return {
            "profile": self.profile.get("name"),
            "screen": {"row": screen.row, "col": screen.col, "width": screen.width, "height": screen.height},
            "focus": {"col": self.frame.focus.col, "row": self.frame.focus.row},
            "active_action": self.active_action,
            "elements": [element.to_dict() for element in self.frame.elements],
        }


def render_snapshot(app: App, frames: int = 2) -> App:
    """Run ``frames`` frames without a live terminal.

    Focus snaps to the first input at the end of the first frame, so the
    second frame is the first one that shows it.
    """
    for _ in range(max(1, frames)):
        app.run_frame()
    return app


def setup_logging(log_file: str | None = None, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    root = logging.getLogger()
    root.setLevel(level)

    if not log_file:
        # The terminal belongs to the UI; nothing is written unless asked.
        root.addHandler(logging.NullHandler())
        return

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=2)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    logging.info("Logging initialized")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Immediate-mode terminal form engine")
    parser.add_argument("-l", "--live", action="store_true", help="Run the interactive frame loop")
    parser.add_argument("--json", action="store_true", help="Emit the declared elements as JSON")
    parser.add_argument("--backend", choices=["rich", "curses"], default="rich", help="Live terminal backend")
    parser.add_argument(
        "--profile",
        default=os.environ.get("MPC_TUI_PROFILE", "play_record"),
        help=f"Form profile: {'|'.join(BUILTIN_PROFILES)}",
    )
    parser.add_argument("--config", help="Optional JSON config file for form/profile overrides")
    parser.add_argument("--poll-ms", type=int, help="Key poll timeout override in milliseconds")
    parser.add_argument("--log-file", help="Write log records to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug records")
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.verbose)

    try:
        profile = resolve_profile(args.profile, args.config)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.poll_ms is not None:
        profile["poll_ms"] = max(1, args.poll_ms)
    logger.info(f"Using profile {profile['name']}")

    if args.live:
        App(create_surface(args.backend), profile).run()
        return 0

    console = Console()
    surface = BufferSurface(console.size.width, profile["panel_height"] + NOTIFICATION_OFFSET + 1)
    app = render_snapshot(App(surface, profile))

    if args.json:
        print(json.dumps(app.to_dict(), indent=2))
        return 0

    console.print(surface.to_text())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
