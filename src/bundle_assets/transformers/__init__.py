"""Path transformers for URL friendly asset paths.

This package contains the base transformer interface and the
reversible prefix transformer.
"""

from .base import PathTransformer
from .prefix import PrefixTransformer

__all__ = ["PathTransformer", "PrefixTransformer"]
