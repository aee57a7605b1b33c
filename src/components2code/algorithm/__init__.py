"""algorithm subpackage: property resolution and tree filtering.

Provides the two decision-making stages of the pipeline.  Import from this
module (not from sub-modules directly) to stay on the stable public
interface.

Example::

    from components2code.algorithm import PromotionFilter, PropertyResolver

    resolver = PropertyResolver(host)
    props = await resolver.resolve(instance_node)

    kept = PromotionFilter().apply(classified_nodes)
"""

from __future__ import annotations

from components2code.algorithm.promotion import PromotionFilter
from components2code.algorithm.resolver import PropertyResolver

__all__ = ["PromotionFilter", "PropertyResolver"]
