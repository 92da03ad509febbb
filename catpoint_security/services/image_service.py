"""Image analysis services that decide whether a camera image shows a cat."""

import os
import random
from typing import Any, List, Optional, Tuple

import cv2
import numpy as np
from PIL import Image

from ..config.defaults import CASCADE_SETTINGS
from .interfaces import ImageServiceInterface
from ..logging_config import get_logger

logger = get_logger("image_service")


def load_image(image_path: str) -> np.ndarray:
    """Read an image file into an RGB numpy array."""
    with Image.open(image_path) as image:
        return np.array(image.convert("RGB"))


class FakeImageService(ImageServiceInterface):
    """Answers at random. Used by the simulator in place of a real classifier."""

    def __init__(self, seed: Optional[int] = None, cat_probability: float = 0.5):
        self.random = random.Random(seed)
        self.cat_probability = max(0.0, min(1.0, cat_probability))

    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        return self.random.random() < self.cat_probability


class OpenCVImageService(ImageServiceInterface):
    """Cat detection using OpenCV's frontal cat face Haar cascade.

    Haar cascades give no score of their own, so each box is scored from its
    size and distance to the frame centre, on a 0-100 scale to match the
    percent thresholds used by the security service.
    """

    def __init__(self, cascade_path: Optional[str] = None):
        self.cascade_path = cascade_path or os.path.join(
            cv2.data.haarcascades, CASCADE_SETTINGS["cascade_file"])
        self.scale_factor = CASCADE_SETTINGS["scale_factor"]
        self.min_neighbors = CASCADE_SETTINGS["min_neighbors"]
        self.min_detection_size = CASCADE_SETTINGS["min_size"]
        self.max_detection_size = CASCADE_SETTINGS["max_size"]

        if not os.path.exists(self.cascade_path):
            raise FileNotFoundError(f"Cascade file not found: {self.cascade_path}")

        self.haar_cascade = cv2.CascadeClassifier(self.cascade_path)
        if self.haar_cascade.empty():
            raise FileNotFoundError(f"Failed to load cascade from {self.cascade_path}")
        logger.info(f"Loaded Haar cascade from {self.cascade_path}")

    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        scores = self.score_detections(image)
        best = max(scores, default=0.0)
        logger.debug(f"Found {len(scores)} candidate boxes, best score {best:.1f}")
        return best >= confidence_threshold

    def score_detections(self, image: Any) -> List[float]:
        """Return a 0-100 confidence for every box the cascade finds."""
        if image is None:
            raise ValueError("No image to analyze")

        frame = self._preprocess_frame(image)
        boxes = self._detect_with_haar_cascade(frame)
        return [self._score_box(box, frame.shape) for box in boxes]

    def _preprocess_frame(self, image: Any) -> Any:
        """Convert to equalized grayscale for the cascade."""
        if len(image.shape) == 3:
            gray = cv2.cvtColor(image, cv2.COLOR_RGB2GRAY)
        else:
            gray = image
        return cv2.equalizeHist(gray)

    def _detect_with_haar_cascade(self, frame: Any) -> List[Tuple[int, int, int, int]]:
        detections = self.haar_cascade.detectMultiScale(
            frame,
            scaleFactor=self.scale_factor,
            minNeighbors=self.min_neighbors,
            minSize=self.min_detection_size,
            maxSize=self.max_detection_size,
            flags=cv2.CASCADE_SCALE_IMAGE
        )

        if len(detections) > 0:
            return [(int(x), int(y), int(w), int(h)) for x, y, w, h in detections]
        return []

    def _score_box(self, box: Tuple[int, int, int, int], frame_shape: Tuple[int, ...]) -> float:
        x, y, w, h = box
        frame_h, frame_w = frame_shape[:2]

        # Boxes near the centre of the frame score higher
        center_x = x + w // 2
        center_y = y + h // 2
        center_dist = ((center_x - frame_w // 2) ** 2 + (center_y - frame_h // 2) ** 2) ** 0.5
        max_dist = (frame_w ** 2 + frame_h ** 2) ** 0.5
        center_factor = 1.0 - (center_dist / max_dist)

        # Larger boxes score higher
        max_area = self.max_detection_size[0] * self.max_detection_size[1]
        size_factor = min(1.0, (w * h) / max_area)

        confidence = 0.6 + 0.2 * center_factor + 0.2 * size_factor
        return max(0.0, min(1.0, confidence)) * 100.0
