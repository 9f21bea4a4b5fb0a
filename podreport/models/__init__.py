"""
Data model exports for podreport.

Example:
    >>> from podreport.models import OutdatedPod, PodUpdate
"""

from __future__ import annotations

from podreport.models.update import OutdatedPod, PodUpdate

__all__ = [
    "OutdatedPod",
    "PodUpdate",
]
