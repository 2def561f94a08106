"""GGD Contact backend: exposure risk classification for index contacts."""

from .classification import classify, set_risks, visible_risks
from .logging_utils import configure_logging

__all__ = ["classify", "configure_logging", "set_risks", "visible_risks"]
