import logging

from django import template
from django.template.loader import render_to_string
from django.templatetags.static import static

from apps.visitors.services import get_counter
from apps.visitors.windows import UnknownWindowError

register = template.Library()

ERROR_TEMPLATE = "visitors/scope_error.html"
ERROR_STYLESHEET = "visitors/error.css"

logger = logging.getLogger(__name__)


def render_scope_error(error: UnknownWindowError) -> str:
    """Render the diagnostic shown in place of a count for an unknown scope."""

    return render_to_string(
        ERROR_TEMPLATE,
        {
            "scope": error.requested,
            "valid_scopes": ", ".join(error.valid_options),
            "stylesheet_url": static(ERROR_STYLESHEET),
        },
    )


@register.simple_tag
def visitor_count(scope: str | None = None) -> str:
    """Return the number of recent visitors for ``scope``.

    Usage: ``{% visitor_count %}`` or ``{% visitor_count scope="hour" %}``.
    """

    scope = str(scope) if scope else None
    try:
        return get_counter().formatted_count(scope)
    except UnknownWindowError as exc:
        logger.warning("Visitor counter rendered with unknown scope %r", exc.requested)
        return render_scope_error(exc)
