"""Path identifier model package.

Defines the immutable ``PathIdentifier`` value type built on the codec in
``pathid.codec``.
"""

from pathid.model.identifier import PathIdentifier

__all__ = ["PathIdentifier"]
