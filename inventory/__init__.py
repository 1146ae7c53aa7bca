"""
Inventory Management Application

Reference records and stock for the stockbook project.

MODELS:
- Customer: buyers referenced by sales
- Supplier: vendors referenced by products and purchases
- Product: opening quantity (``qty``), cost/selling price, purchase inward counter (``stock``)

SERVICES:
- services.stock: closing stock = opening qty + purchase inward - sales outward
- services.orchestrator: atomic master/detail writes shared by sales and purchases

USAGE:
    from inventory.models import Product
    from inventory.services.stock import get_product_stock

    product = Product.objects.create(product_name="Cable", qty=50, cost_price=2, selling_price=3)
    get_product_stock(product.pk)
    # {'productId': 1, 'product_name': 'Cable', 'availableStock': 50}
"""

__version__ = '1.0.0'
