from .library import CAPTIONED_IMAGES, SCENIC_TEXTS, SampleLibrary
from .models import SamplePair, SampleSet

__all__ = [
    "CAPTIONED_IMAGES",
    "SCENIC_TEXTS",
    "SampleLibrary",
    "SamplePair",
    "SampleSet",
]
