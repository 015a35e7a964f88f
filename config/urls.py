"""
URL configuration for the visitor counter project.

The visitor counter itself exposes no views; it records visits through
middleware and renders counts through the ``visitor_counter`` template tag
library.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path
from django.utils.translation import gettext_lazy as _

admin.site.site_header = _("Visitor Counter")
admin.site.site_title = _("Visitor Counter")

urlpatterns = [
    path("admin/", admin.site.urls),
]
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
