"""Main event loop and entry point for blessed UI."""

import sys

from blessed import Terminal
from loguru import logger

from tapedeck.core.config import UIConfig
from tapedeck.core.errors import ChannelError, TerminalError
from tapedeck.domain.playback.transport import TransportController

from .components import render_frame
from .events import Channel, EventSource, FailureEvent, InputEvent, TickEvent
from .helpers import draw_lines
from .state import build_display_state


def run_interactive_ui(transport: TransportController, ui_config: UIConfig) -> None:
    """
    Run the full-screen session until Escape.

    The transport must already be started. Fullscreen, cbreak and the hidden
    cursor are restored on every exit path, including errors.

    Args:
        transport: Started transport controller (owned by this thread)
        ui_config: UI settings

    Raises:
        TerminalError: If reading from or drawing to the terminal fails
        ChannelError: If the event source stops or fails
    """
    term = Terminal()
    channel = Channel()

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        sys.stdout.write(term.home + term.clear)
        source = EventSource.for_terminal(term, channel, ui_config.tick_interval)
        thread = source.start()
        try:
            main_loop(term, transport, channel, ui_config.use_colors, ui_config.show_queue)
        except OSError as e:
            raise TerminalError(f"terminal I/O failed: {e}") from e
        finally:
            # Unblocks the event source on its next send
            channel.close()
            # Let it leave inkey() before cbreak is restored
            thread.join(timeout=ui_config.tick_interval * 2)


def main_loop(
    term: Terminal,
    transport: TransportController,
    channel: Channel,
    use_colors: bool = True,
    show_queue: bool = True,
) -> None:
    """
    Render, block for one event, apply it, repeat.

    Exactly one frame is drawn per received event; nothing is drawn while idle.

    Args:
        term: blessed Terminal instance
        transport: Transport controller, mutated only here
        channel: Event channel fed by the event source thread
        use_colors: Apply color roles when rendering
        show_queue: Render the queue panel

    Raises:
        ChannelError: If the event source stops or fails
    """
    logger.info(f"Session started with {len(transport.queue)} tracks")

    while True:
        display = build_display_state(transport.queue, transport.playback_state(), transport.volume)
        draw_lines(term, render_frame(term, display, term.width, term.height, use_colors, show_queue))

        event = channel.recv()

        if isinstance(event, FailureEvent):
            raise ChannelError(f"event source failed: {event.error}") from event.error

        if isinstance(event, InputEvent):
            logger.debug(f"Key {event.key} -> {event.action}")
            if not transport.handle(event.action):
                logger.info("Session ended by user")
                break
        elif isinstance(event, TickEvent):
            transport.tick()
