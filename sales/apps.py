from django.apps import AppConfig


class SalesConfig(AppConfig):
    """
    Configuration for the Sales application.

    A sale is a SalesMaster (invoice header) owning SalesDetails lines.
    Sales do not touch Product.stock; outward quantities are read from
    the detail lines when closing stock is computed.
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'sales'
    verbose_name = 'Sales'
