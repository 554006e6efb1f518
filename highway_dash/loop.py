# loop.py
import logging

from .session import GameState

logger = logging.getLogger(__name__)


class FrameDriver:
    """Runs one session tick per frame while started; stops itself on game over."""

    def __init__(self, session):
        self.session = session
        self.running = False

    def start(self):
        if self.running:
            return
        self.running = True
        logger.debug("frame driver started")

    def stop(self):
        if not self.running:
            return
        self.running = False
        logger.debug("frame driver stopped")

    def step(self):
        if not self.running:
            return self.session.state
        state = self.session.tick()
        if state is GameState.OVER:
            self.stop()
        return state

    def restart(self):
        self.stop()
        self.session.reset()
        logger.info("restarted")
        self.start()
