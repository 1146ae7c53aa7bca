from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),

    # REST API
    path('api/', include('inventory.urls')),
    path('api/', include('sales.urls')),
    path('api/', include('purchases.urls')),
    path('api/reports/', include('reports.urls')),
]
