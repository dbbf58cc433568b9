"""
URL configuration for sideline_project project.

Every app mounts its routes under /api/; team-scoped resources live under
/api/teams/<team_id>/.
"""
from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),

    # Login, logout and token refresh
    path('api/', include('account.urls')),

    # Teams, memberships and roster
    path('api/', include('team.urls')),

    # Capabilities and audit trail
    path('api/', include('authority.urls')),

    # Calendar
    path('api/', include('events.urls')),

    # Documents & resources
    path('api/', include('documents.urls')),

    # Equipment
    path('api/', include('inventory.urls')),

    # Depth charts
    path('api/', include('depth_chart.urls')),

    # Formations and coach templates
    path('api/', include('formations.urls')),
]

# Serve media files during development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
