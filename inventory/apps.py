from django.apps import AppConfig


class InventoryConfig(AppConfig):
    """
    Configuration for the Inventory application.

    This app manages the reference records and stock:
    - Customers and Suppliers
    - Products (opening quantity, prices, purchase inward counter)
    - Closing stock computed from purchase and sales detail lines
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'inventory'
    verbose_name = 'Inventory Management'
