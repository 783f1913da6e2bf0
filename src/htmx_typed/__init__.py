"""
htmx-typed

Typed builders for HTMX attribute values (``hx-*``) and response header
values (``HX-*``). Values are immutable pydantic models that render to
HTMX's micro-syntax via ``str()``.

Example usage:
    >>> from htmx_typed import attributes as hx, headers
    >>> from htmx_typed.specs import event, milliseconds
    >>> from htmx_typed.specs.events import changed, delay
    >>>
    >>> hx.trigger(event("keyup", changed(), delay(milliseconds(300)))).value
    'keyup changed delay:300ms'
    >>> headers.trigger("reload", "clearForm").value
    'reload, clearForm'
"""

from htmx_typed import attributes, headers
from htmx_typed.attributes import HxAttribute, attributes_dict, render_attributes
from htmx_typed.config import HxConfig, load_config
from htmx_typed.errors import ConfigError, HtmxTypedError
from htmx_typed.headers import HxHeader, headers_dict

__version__ = "0.3.0"

__all__ = [
    "__version__",
    # Surfaces
    "attributes",
    "headers",
    "HxAttribute",
    "HxHeader",
    "render_attributes",
    "attributes_dict",
    "headers_dict",
    # Configuration
    "HxConfig",
    "load_config",
    # Errors
    "HtmxTypedError",
    "ConfigError",
]
