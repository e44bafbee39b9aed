"""Turn a stream of hand-height samples into discrete flap events.

Heights are normalized image coordinates in ``[0, 1]`` where smaller values
are higher up the frame, which is what MediaPipe reports. Kept free of any
camera code so the thresholds can be exercised with synthetic samples.
"""

from __future__ import annotations

from collections import deque
from typing import Deque


class FlapGesture:
    """Detect quick upward hand motions.

    Parameters
    ----------
    history_length:
        Number of recent samples kept for the decision.
    rise_threshold:
        Minimum upward travel within the analysis window that counts as a flap.
    velocity_threshold:
        Minimum upward speed (normalized units / second) between two
        consecutive samples that counts as a flap, so short flicks register.
    analysis_window:
        Seconds of history that contribute to a decision.
    cooldown_s:
        Minimum seconds between two reported flaps.
    """

    def __init__(
        self,
        *,
        history_length: int = 6,
        rise_threshold: float = 0.03,
        velocity_threshold: float = 0.75,
        analysis_window: float = 0.6,
        cooldown_s: float = 0.25,
    ) -> None:
        self.rise_threshold = rise_threshold
        self.velocity_threshold = velocity_threshold
        self.analysis_window = analysis_window
        self.cooldown_s = cooldown_s
        self._heights: Deque[float] = deque(maxlen=history_length)
        self._times: Deque[float] = deque(maxlen=history_length)
        self._last_flap = float("-inf")

    def reset(self) -> None:
        """Forget the history, e.g. when the hand leaves the frame."""
        self._heights.clear()
        self._times.clear()

    def add_sample(self, height: float, timestamp: float) -> bool:
        """Record a sample and return ``True`` if it completes a flap."""

        self._heights.append(height)
        self._times.append(timestamp)
        self._prune(timestamp)
        if len(self._heights) < 2:
            return False

        if not self._is_upward_motion(timestamp):
            return False
        if timestamp - self._last_flap < self.cooldown_s:
            return False
        self._last_flap = timestamp
        return True

    def _is_upward_motion(self, now: float) -> bool:
        heights = list(self._heights)
        times = list(self._times)
        newest = heights[-1]

        rise = max(
            (prev - newest for prev, t in zip(heights[:-1], times[:-1]) if now - t <= self.analysis_window),
            default=0.0,
        )
        if rise > self.rise_threshold:
            return True

        for i in range(1, len(heights)):
            dt = times[i] - times[i - 1]
            if dt <= 0 or now - times[i] > self.analysis_window:
                continue
            if (heights[i - 1] - heights[i]) / dt > self.velocity_threshold:
                return True
        return False

    def _prune(self, now: float) -> None:
        while len(self._times) > 1 and now - self._times[0] > self.analysis_window:
            self._times.popleft()
            self._heights.popleft()


__all__ = ["FlapGesture"]
