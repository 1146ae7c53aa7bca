import pytest
from django.urls import reverse

from inventory.models import Customer, Product, Supplier

pytestmark = pytest.mark.django_db


class TestCustomers:
    payload = {
        'customer_name': 'Jane Buyer',
        'contact_number': '0722000111',
        'email': 'jane@example.com',
        'address': 'Main Street 1',
    }

    def test_create(self, api_client):
        response = api_client.post(reverse('customer-list'), self.payload, format='json')

        assert response.status_code == 201
        body = response.json()
        assert body['ok'] is True
        assert body['message'] == 'Customer added successfully'
        assert body['data']['customer_code'].startswith('CUST-')
        assert Customer.objects.count() == 1

    @pytest.mark.parametrize('field, value, message', [
        ('customer_name', 'J', 'customer_name: Customer name is required'),
        ('contact_number', '12345', 'contact_number: Contact number must be at least 10 digits'),
        ('contact_number', '1' * 16, 'contact_number: Contact number too long'),
        ('email', 'not-an-email', 'email: Invalid email format'),
        ('address', '', 'address: Address is required'),
    ])
    def test_validation_messages(self, api_client, field, value, message):
        payload = {**self.payload, field: value}

        response = api_client.post(reverse('customer-list'), payload, format='json')

        assert response.status_code == 400
        assert response.json() == {'ok': False, 'error': 'validation_error', 'message': message}

    def test_update_and_delete(self, api_client, customer):
        url = reverse('customer-detail', args=[customer.pk])

        updated = api_client.put(url, {**self.payload, 'customer_name': 'Janet'}, format='json')
        deleted = api_client.delete(url)

        assert updated.json()['data']['customer_name'] == 'Janet'
        assert updated.json()['message'] == 'Customer updated successfully'
        assert deleted.json() == {'ok': True, 'message': 'Customer deleted successfully'}
        assert Customer.objects.count() == 0

    def test_list_is_sorted_by_name(self, api_client, customer, other_customer):
        names = [c['customer_name'] for c in api_client.get(reverse('customer-list')).json()]

        assert names == ['Bob Retail', 'Jane Buyer']

    def test_unknown_customer_is_404(self, api_client):
        response = api_client.get(reverse('customer-detail', args=[999]))

        assert response.status_code == 404
        assert response.json()['error'] == 'not_found'


class TestSuppliers:
    payload = {
        'supplier_name': 'Acme Wholesale',
        'contact_number': '0712345678',
        'email': 'acme@example.com',
        'address': 'Industrial Area',
    }

    def test_serial_numbers_follow_creation_order(self, api_client):
        first = api_client.post(reverse('supplier-list'), self.payload, format='json')
        second = api_client.post(
            reverse('supplier-list'), {**self.payload, 'supplier_name': 'Beta'}, format='json'
        )

        assert first.json()['data']['sr_no'] == 1
        assert second.json()['data']['sr_no'] == 2

    def test_missing_name(self, api_client):
        payload = {key: value for key, value in self.payload.items() if key != 'supplier_name'}

        response = api_client.post(reverse('supplier-list'), payload, format='json')

        assert response.json()['message'] == 'supplier_name: Supplier name is required'

    def test_delete_keeps_products(self, api_client, product, supplier):
        response = api_client.delete(reverse('supplier-detail', args=[supplier.pk]))

        assert response.status_code == 200
        assert Supplier.objects.count() == 0
        assert Product.objects.get(pk=product.pk).supplier is None


class TestProducts:
    def payload(self, supplier, /, **overrides):
        return {
            'product_name': 'USB Cable',
            'category': 'Accessories',
            'cost_price': '40.00',
            'selling_price': '100.00',
            'qty': 50,
            'supplier': supplier.pk,
            **overrides,
        }

    def test_create(self, api_client, supplier):
        response = api_client.post(reverse('product-list'), self.payload(supplier), format='json')

        assert response.status_code == 201
        data = response.json()['data']
        assert data['product_code'].startswith('PROD-')
        assert data['supplier_name'] == 'Acme Wholesale'
        assert data['profit_margin'] == 60
        assert data['stock'] == 0

    def test_stock_is_read_only(self, api_client, supplier):
        response = api_client.post(
            reverse('product-list'), self.payload(supplier, stock=99), format='json'
        )

        assert response.json()['data']['stock'] == 0

    @pytest.mark.parametrize('overrides, message', [
        ({'cost_price': '-1'}, 'cost_price: Cost price cannot be negative'),
        ({'qty': -1}, 'qty: Quantity cannot be negative'),
        ({'product_name': ''}, 'product_name: Product name is required'),
        ({'supplier': None}, 'supplier: Supplier ID is required'),
    ])
    def test_validation_messages(self, api_client, supplier, overrides, message):
        response = api_client.post(
            reverse('product-list'), self.payload(supplier, **overrides), format='json'
        )

        assert response.status_code == 400
        assert response.json()['message'] == message

    def test_filters(self, api_client, make_product):
        make_product(name='USB Cable', category='Accessories')
        make_product(name='Laptop', category='Computers')

        by_category = api_client.get(reverse('product-list'), {'category': 'computers'}).json()
        by_search = api_client.get(reverse('product-list'), {'search': 'usb'}).json()

        assert [p['product_name'] for p in by_category] == ['Laptop']
        assert [p['product_name'] for p in by_search] == ['USB Cable']
