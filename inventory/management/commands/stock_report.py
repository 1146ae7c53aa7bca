from django.core.management.base import BaseCommand, CommandError
from rest_framework.exceptions import NotFound

from inventory.services.stock import get_product_stock, get_stock_view


class Command(BaseCommand):
    help = 'Print opening, inward, outward and closing stock for every product'

    def add_arguments(self, parser):
        parser.add_argument('--product', type=int, help='Only show the available stock of this product id')

    def handle(self, *args, **options):
        product_id = options.get('product')

        if product_id is not None:
            try:
                stock = get_product_stock(product_id)
            except NotFound:
                raise CommandError(f'Product {product_id} not found')
            self.stdout.write(
                f"{stock['product_name']} (#{stock['productId']}): {stock['availableStock']} available"
            )
            return

        rows = get_stock_view()
        if not rows:
            self.stdout.write(self.style.WARNING('No products found'))
            return

        header = f"{'Sr':>4}  {'Product':<30} {'Opening':>8} {'Inward':>8} {'Outward':>8} {'Closing':>8}"
        self.stdout.write(header)
        self.stdout.write('=' * len(header))
        for row in rows:
            self.stdout.write(
                f"{row['srNo']:>4}  {row['product_name'][:30]:<30} {row['openingStock']:>8} "
                f"{row['purchaseInward']:>8} {row['salesOutward']:>8} {row['closingStock']:>8}"
            )

        self.stdout.write(self.style.SUCCESS(f'\nTotal products: {len(rows)}'))
