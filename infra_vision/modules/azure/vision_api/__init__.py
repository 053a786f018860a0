from .vision_api import VisionApi
