from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

# REST API Router
router = DefaultRouter()
router.register(r'customers', views.CustomerViewSet, basename='customer')
router.register(r'suppliers', views.SupplierViewSet, basename='supplier')
router.register(r'products', views.ProductViewSet, basename='product')

urlpatterns = [
    # ============================================
    # STOCK ENDPOINTS
    # ============================================
    path('stocks/', views.StockView.as_view(), name='stock-list'),
    path('stocks/product/<int:pk>/', views.ProductStockView.as_view(), name='product-stock'),

    # ============================================
    # CRUD ENDPOINTS
    # ============================================
    path('', include(router.urls)),
]
