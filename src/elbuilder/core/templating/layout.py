from __future__ import annotations

"""
Layout Applier.

Wraps a component-resolved page in the layout it names. Only the first
layout reference of a page is honored and layouts do not chain: layout
syntax inside a layout file is emitted as literal text.
"""

import logging

from elbuilder.core.templating.matcher import find_layout_ref, replace_placeholder
from elbuilder.core.templating.resolver import ComponentResolver

logger = logging.getLogger(__name__)


class LayoutApplier:
    """
    Applies at most one layout to resolved page content.
    """

    def __init__(self, resolver: ComponentResolver) -> None:
        self.resolver = resolver

    def apply_layout(self, page_content: str) -> str:
        """
        Inject the page body into its layout.

        Args:
            page_content: Page text after component expansion.

        Returns:
            str: The resolved layout with its placeholder replaced by the
                 captured body, or ``page_content`` unchanged when the page
                 names no layout.
        """
        ref = find_layout_ref(page_content)
        if ref is None:
            return page_content

        layout_path = self.resolver.context.layout_path(ref.name)
        logger.debug(f"Applying layout '{layout_path}'")

        # The layout's components form their own expansion scope
        layout_text = self.resolver.resolve(layout_path, set())
        return replace_placeholder(layout_text, ref.body)
