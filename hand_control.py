"""Webcam flap input: MediaPipe palm tracking feeding a :class:`FlapGesture`.

The capture loop runs on its own daemon thread; the game only ever calls
:meth:`HandFlapDetector.poll_flap` once per frame, which consumes at most one
pending flap.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Any, Optional

import cv2

from gesture import FlapGesture

try:  # MediaPipe renamed the public package for solutions in newer releases.
    from mediapipe import solutions as mp_solutions
except ImportError:  # pragma: no cover - depends on mediapipe installation layout.
    from mediapipe.python import solutions as mp_solutions  # type: ignore[attr-defined]

mp_hands = mp_solutions.hands
HandLandmark = mp_hands.HandLandmark

logger = logging.getLogger(__name__)

# Averaged so a partially occluded wrist still yields a stable height.
PALM_LANDMARKS = (
    HandLandmark.WRIST,
    HandLandmark.INDEX_FINGER_MCP,
    HandLandmark.MIDDLE_FINGER_MCP,
    HandLandmark.RING_FINGER_MCP,
    HandLandmark.PINKY_MCP,
)

DEBUG_WINDOW = "Hand Debug"


class HandFlapDetector:
    """Open ``camera_index`` and report upward hand flicks as flaps.

    Raises ``RuntimeError`` when the webcam cannot be opened. Extra keyword
    arguments tune the underlying :class:`FlapGesture`.
    """

    def __init__(self, *, camera_index: int = 0, debug: bool = False, **gesture_options: float) -> None:
        self.debug = debug
        self.gesture = FlapGesture(**gesture_options)

        self._capture = cv2.VideoCapture(camera_index)
        if not self._capture.isOpened():
            raise RuntimeError("Unable to open webcam. Ensure a camera is connected.")
        self._capture.set(cv2.CAP_PROP_FRAME_WIDTH, 640)
        self._capture.set(cv2.CAP_PROP_FRAME_HEIGHT, 480)
        self._capture.set(cv2.CAP_PROP_FPS, 30)

        self._hands = mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=1,
            model_complexity=0,
            min_detection_confidence=0.2,
            min_tracking_confidence=0.2,
        )

        self._lock = threading.Lock()
        self._flap_pending = False
        self._running = True
        self._closed = False
        self._thread = threading.Thread(target=self._capture_loop, name="hand-capture", daemon=True)
        self._thread.start()
        logger.info("Hand control started on camera %d", camera_index)

    def _capture_loop(self) -> None:
        while self._running:
            ok, frame = self._capture.read()
            if not ok:
                time.sleep(0.05)
                continue

            result = self._hands.process(cv2.cvtColor(frame, cv2.COLOR_BGR2RGB))
            hand = result.multi_hand_landmarks[0] if result.multi_hand_landmarks else None

            if hand is None:
                self.gesture.reset()
            elif self.gesture.add_sample(self._palm_height(hand), time.time()):
                with self._lock:
                    self._flap_pending = True

            if self.debug:
                self._show_debug(frame, hand)

        self._release()

    @staticmethod
    def _palm_height(hand: Any) -> float:
        landmarks = hand.landmark
        return sum(landmarks[idx.value].y for idx in PALM_LANDMARKS) / len(PALM_LANDMARKS)

    def _show_debug(self, frame: Any, hand: Optional[Any]) -> None:
        if hand is not None:
            mp_solutions.drawing_utils.draw_landmarks(frame, hand, mp_hands.HAND_CONNECTIONS)
        cv2.imshow(DEBUG_WINDOW, frame)
        if cv2.waitKey(1) & 0xFF == 27:
            self.debug = False
            cv2.destroyWindow(DEBUG_WINDOW)

    def poll_flap(self) -> bool:
        """Return ``True`` once for every flap detected since the last call."""

        with self._lock:
            detected = self._flap_pending
            self._flap_pending = False
        return detected

    def stop(self) -> None:
        self._running = False
        self._thread.join(timeout=1.0)
        self._release()

    def __enter__(self) -> "HandFlapDetector":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _release(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._capture.release()
        self._hands.close()
        if self.debug:
            cv2.destroyAllWindows()
        logger.debug("Hand control released the camera")


__all__ = ["HandFlapDetector"]
