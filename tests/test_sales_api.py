from decimal import Decimal

import pytest
from django.urls import reverse

from sales.models import SalesDetails, SalesMaster

pytestmark = pytest.mark.django_db


@pytest.fixture
def sale_payload(customer, product):
    return {
        'customerId': customer.pk,
        'date': '2024-05-10',
        'items': [{'productId': product.pk, 'quantity': 3, 'price': '100.00'}],
    }


def test_create_sale(api_client, sale_payload, product):
    response = api_client.post(reverse('sale-list'), sale_payload, format='json')

    assert response.status_code == 201
    body = response.json()
    assert body['ok'] is True
    assert body['message'] == 'Sale added successfully'
    assert body['data']['customer_name'] == 'Jane Buyer'
    assert body['data']['total_amount'] == 300
    assert body['data']['date'].startswith('2024-05-10')
    assert body['data']['invoice_no'].startswith('INV-')
    assert [d['productId'] for d in body['data']['details']] == [product.pk]


def test_client_total_is_ignored(api_client, sale_payload):
    sale_payload['totalAmount'] = '1.00'

    response = api_client.post(reverse('sale-list'), sale_payload, format='json')

    assert response.status_code == 201
    assert SalesMaster.objects.get().total_amount == Decimal('300.00')


def test_invoice_number_can_be_supplied(api_client, sale_payload):
    sale_payload['invoiceNo'] = 'INV-0001'

    response = api_client.post(reverse('sale-list'), sale_payload, format='json')

    assert response.json()['data']['invoice_no'] == 'INV-0001'


def test_bad_quantity_reports_first_failing_field(api_client, sale_payload):
    sale_payload['items'][0]['quantity'] = 0

    response = api_client.post(reverse('sale-list'), sale_payload, format='json')

    assert response.status_code == 400
    assert response.json() == {
        'ok': False,
        'error': 'validation_error',
        'message': 'items.0.quantity: Quantity must be greater than 0',
    }
    assert SalesMaster.objects.count() == 0


def test_bad_price_is_rejected(api_client, sale_payload):
    sale_payload['items'][0]['price'] = '0'

    response = api_client.post(reverse('sale-list'), sale_payload, format='json')

    assert response.status_code == 400
    assert response.json()['message'] == 'items.0.price: Price must be greater than 0'


@pytest.mark.parametrize('items', [[], None])
def test_sale_needs_at_least_one_item(api_client, customer, items):
    payload = {'customerId': customer.pk}
    if items is not None:
        payload['items'] = items

    response = api_client.post(reverse('sale-list'), payload, format='json')

    assert response.status_code == 400
    assert response.json()['message'] == 'items: At least one product required'


def test_unknown_product_is_a_validation_error(api_client, sale_payload):
    sale_payload['items'][0]['productId'] = 99999

    response = api_client.post(reverse('sale-list'), sale_payload, format='json')

    assert response.status_code == 400
    assert response.json()['message'] == 'items.0.productId: Product not found'


def test_missing_customer(api_client, sale_payload):
    del sale_payload['customerId']

    response = api_client.post(reverse('sale-list'), sale_payload, format='json')

    assert response.status_code == 400
    assert response.json()['message'] == 'customerId: Customer is required'


def test_list_and_retrieve(api_client, customer, other_customer, product, make_sale):
    first = make_sale(customer, [(product, 1, 10)])
    second = make_sale(other_customer, [(product, 2, 10)])

    listing = api_client.get(reverse('sale-list'))
    filtered = api_client.get(reverse('sale-list'), {'customer': customer.pk})
    detail = api_client.get(reverse('sale-detail', args=[first.pk]))

    assert [s['id'] for s in listing.json()] == [second.pk, first.pk]
    assert [s['id'] for s in filtered.json()] == [first.pk]
    assert detail.json()['details'][0]['quantity'] == 1


def test_update_replaces_lines(api_client, customer, make_product, make_sale):
    cable = make_product(name='Cable')
    mouse = make_product(name='Mouse')
    sale = make_sale(customer, [(cable, 1, 10), (mouse, 1, 10)])

    response = api_client.put(
        reverse('sale-detail', args=[sale.pk]),
        {'customerId': customer.pk, 'items': [{'productId': mouse.pk, 'quantity': 4, 'price': '2.50'}]},
        format='json',
    )

    assert response.status_code == 200
    assert response.json()['message'] == 'Sale updated successfully'
    assert response.json()['data']['total_amount'] == 10
    assert list(SalesDetails.objects.values_list('product_id', 'quantity')) == [(mouse.pk, 4)]


def test_update_unknown_sale_is_404(api_client, sale_payload):
    response = api_client.put(reverse('sale-detail', args=[4242]), sale_payload, format='json')

    assert response.status_code == 404
    assert response.json() == {'ok': False, 'error': 'not_found', 'message': 'Sale not found'}


def test_delete_sale(api_client, customer, product, make_sale):
    sale = make_sale(customer, [(product, 1, 10), (product, 1, 10)])

    response = api_client.delete(reverse('sale-detail', args=[sale.pk]))

    assert response.status_code == 200
    assert response.json() == {'ok': True, 'message': 'Sale deleted successfully', 'detailsRemoved': 2}
    assert SalesMaster.objects.count() == 0


def test_delete_unknown_sale_is_404(api_client):
    response = api_client.delete(reverse('sale-detail', args=[4242]))

    assert response.status_code == 404
    assert response.json()['error'] == 'not_found'


def test_patch_is_not_allowed(api_client, customer, product, make_sale):
    sale = make_sale(customer, [(product, 1, 10)])

    response = api_client.patch(reverse('sale-detail', args=[sale.pk]), {}, format='json')

    assert response.status_code == 405
    assert response.json()['ok'] is False


def test_oversized_quantity_is_rejected(api_client, sale_payload):
    sale_payload['items'][0].update(quantity=10 ** 13, price='9999999999.99')

    response = api_client.post(reverse('sale-list'), sale_payload, format='json')

    assert response.status_code == 400
    assert response.json() == {
        'ok': False,
        'error': 'validation_error',
        'message': 'items.0.quantity: Quantity is too large',
    }
    assert SalesMaster.objects.count() == 0


def test_line_amount_beyond_storage_is_rejected(api_client, sale_payload):
    sale_payload['items'][0].update(quantity=10 ** 9, price='9999999999.99')

    response = api_client.post(reverse('sale-list'), sale_payload, format='json')

    assert response.status_code == 400
    assert response.json()['message'] == 'items.0.price: Line amount is too large'
    assert SalesMaster.objects.count() == 0
