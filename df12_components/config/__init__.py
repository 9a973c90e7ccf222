"""Load and validate accordion configuration YAML.

This subpackage parses a YAML file declaring one accordion (its open mode,
style, colors and Markdown sections) plus optional preview page settings,
and produces dataclasses (:class:`AccordionPageConfig`,
:class:`AccordionConfig`, ...) that the preview builder and CLI consume.

Examples
--------
>>> from pathlib import Path
>>> from df12_components.config import load_accordion_config
>>> config = load_accordion_config(Path("config/faq.yaml"))  # doctest: +SKIP
>>> accordion = config.accordion.build()  # doctest: +SKIP
"""

from .loader import load_accordion_config
from .models import (
    AccordionConfig,
    AccordionConfigError,
    AccordionPageConfig,
    HeaderColors,
    ItemConfig,
    PageSettings,
)

__all__ = [
    "AccordionConfig",
    "AccordionConfigError",
    "AccordionPageConfig",
    "HeaderColors",
    "ItemConfig",
    "PageSettings",
    "load_accordion_config",
]
