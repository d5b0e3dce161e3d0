"""
Frame-driven spring runtime for Flet.
Steps a spring on an asyncio loop and pushes each frame into Flet controls.
"""

import asyncio
import logging
import time
from typing import Callable, Optional, Union

import flet as ft

from ....models import Offset
from ....spring import OffsetSpring, Spring


class FletSpringRuntime:
    """
    AnimationRuntime backed by a Spring or OffsetSpring.

    on_frame receives every new value and is expected to copy it onto
    controls; the runtime calls page.update() after each animated frame.
    Immediate updates only call on_frame; the caller batches page.update().
    """

    FRAME_INTERVAL = 1 / 60  # seconds

    def __init__(
        self,
        page: ft.Page,
        spring: Union[Spring, OffsetSpring],
        on_frame: Callable,
        on_settled: Optional[Callable[[], None]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.page = page
        self.spring = spring
        self.on_frame = on_frame
        self.on_settled = on_settled
        self.logger = logger or logging.getLogger(__name__)
        self._running = False

    def animate_to(
        self,
        target: Union[Offset, float],
        immediate: bool = False,
        initial_velocity: float = 0.0,
    ) -> None:
        self.spring.animate_to(target, immediate, initial_velocity)

        if immediate or self.spring.settled:
            self.on_frame(self.spring.value)
            return

        if not self._running:
            self._running = True
            self.page.run_task(self._run)

    async def _run(self) -> None:
        """Step the spring until it settles"""
        last = time.perf_counter()
        try:
            while not self.spring.settled:
                await asyncio.sleep(self.FRAME_INTERVAL)
                now = time.perf_counter()
                value = self.spring.step((now - last) * 1000)
                last = now
                self.on_frame(value)
                self.page.update()
        except Exception as e:
            self.logger.error(f"Sheet animation failed: {e}", exc_info=True)
            raise
        finally:
            self._running = False

        if self.on_settled is not None:
            self.on_settled()
            self.page.update()
