"""Common literal values used across df12_components.

Class names and CSS custom properties follow the Bootstrap 5 accordion
contract, so templates, elements, and tests can import the same values
without drifting.

Examples
--------
>>> from df12_components import _constants
>>> _constants.ACCORDION_CLASS
'accordion'
>>> _constants.HEADER_BACKGROUND_CLOSED_PROPERTIES[0]
'--bs-accordion-btn-bg'
"""

ACCORDION_CLASS = "accordion"
ACCORDION_FLUSH_CLASS = "accordion-flush"
ACCORDION_ITEM_CLASS = "accordion-item"
ACCORDION_HEADER_CLASS = "accordion-header"
ACCORDION_BUTTON_CLASS = "accordion-button"
ACCORDION_COLLAPSE_CLASS = "accordion-collapse"
ACCORDION_BODY_CLASS = "accordion-body"

GROUP_ID_PREFIX = "accordion"
GROUP_ID_TOKEN_LENGTH = 16

HEADER_BACKGROUND_CLOSED_PROPERTIES = (
    "--bs-accordion-btn-bg",
    "--bs-btn-hover-bg",
    "--bs-btn-active-bg",
)
HEADER_BACKGROUND_OPEN_PROPERTY = "--bs-accordion-active-bg"
HEADER_FOREGROUND_CLOSED_PROPERTIES = (
    "--bs-accordion-btn-color",
    "--bs-btn-hover-color",
    "--bs-btn-active-color",
)
HEADER_FOREGROUND_OPEN_PROPERTY = "--bs-accordion-active-color"
BORDER_COLOR_PROPERTY = "--bs-accordion-border-color"

BOOTSTRAP_CSS_URL = (
    "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css"
)
BOOTSTRAP_JS_URL = (
    "https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/js/bootstrap.bundle.min.js"
)
