"""
podreport: outdated CocoaPods report with GitHub release links.

podreport runs ``pod outdated`` for an Xcode project, lists every pod that
has a newer version available, and links each one to its GitHub releases
page when the pod's source repository lives on GitHub.

Typical usage::

    $ podreport path/to/project
    AFNetworking [2.6.3 -> 3.0.4] https://github.com/AFNetworking/AFNetworking/releases/
"""

from __future__ import annotations

from podreport.__version__ import __version__

__author__ = "podreport Contributors"
__license__ = "Apache-2.0"
__description__ = "Report outdated CocoaPods with links to their release notes."

__all__ = [
    "__version__",
]
