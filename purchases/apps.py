from django.apps import AppConfig


class PurchasesConfig(AppConfig):
    """
    Configuration for the Purchases application.

    A purchase is a PurchaseMaster (bill header) owning PurchaseDetails lines.
    Creating a purchase increments Product.stock by each line quantity.
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'purchases'
    verbose_name = 'Purchases'

    def ready(self):
        """
        Import signal handlers when the app is ready.

        Signals handle:
        - Audit logging when a purchase is deleted (stock is not reversed)
        """
        import purchases.signals  # noqa: F401
