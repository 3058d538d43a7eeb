"""
eurofxref Document Sources

Fallback hierarchy: ECB daily endpoint → local fallback file
"""

from eurofxref.providers.base import BaseDocumentSource
from eurofxref.providers.bundled import BundledFileSource
from eurofxref.providers.ecb import ECBDailyClient
from eurofxref.providers.manager import SourceChain, default_sources

__all__ = [
    "BaseDocumentSource",
    "BundledFileSource",
    "ECBDailyClient",
    "SourceChain",
    "default_sources",
]
