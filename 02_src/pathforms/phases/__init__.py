"""Pipeline phases for the batch exploration report."""

from .build import GraphBuildPhase
from .nielsen_check import NielsenCheckPhase
from .puzzle import PuzzleSeedPhase
from .resolution import WordResolutionPhase
from .validation import ValidationPhase

__all__ = [
    "GraphBuildPhase",
    "PuzzleSeedPhase",
    "WordResolutionPhase",
    "NielsenCheckPhase",
    "ValidationPhase",
]
