"""Example: run the ticker in a terminal (no Flask, no MySQL).

Shows the controller on its own: console prompts, in-memory state store and
the threaded one-second scheduler. Ctrl-C cancels the ticker.
"""

import time

from src.earnings_ticker.earnings_ticker.common.logging_config import configure_logging
from src.earnings_ticker.earnings_ticker.core.enums import ControllerState
from src.earnings_ticker.earnings_ticker.settings.workdays import WorkdaySettings
from src.earnings_ticker.earnings_ticker.state.memory_state_store import InMemoryStateStore
from src.earnings_ticker.earnings_ticker.ticker.console_ui import ConsoleTickerUI
from src.earnings_ticker.earnings_ticker.ticker.controller import TickerController
from src.earnings_ticker.earnings_ticker.ticker.scheduler import ThreadingScheduler


def main():
    configure_logging("WARNING")
    controller = TickerController(InMemoryStateStore(), ConsoleTickerUI(), ThreadingScheduler(), WorkdaySettings())
    controller.activate()
    controller.start_ticker()

    try:
        while controller.status != ControllerState.IDLE:
            time.sleep(0.5)
    except KeyboardInterrupt:
        controller.cancel_ticker()
    finally:
        controller.shutdown()


if __name__ == "__main__":
    main()
