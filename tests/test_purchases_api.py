import pytest
from django.urls import reverse

from inventory.models import Product
from purchases.models import PurchaseDetails, PurchaseMaster

pytestmark = pytest.mark.django_db


@pytest.fixture
def purchase_payload(supplier, product):
    return {
        'supplierId': supplier.pk,
        'date': '2024-05-10T09:30:00',
        'items': [{'productId': product.pk, 'quantity': 20, 'rate': '30.00'}],
    }


def test_create_purchase_increments_stock(api_client, purchase_payload, product):
    response = api_client.post(reverse('purchase-list'), purchase_payload, format='json')

    assert response.status_code == 201
    body = response.json()
    assert body['message'] == 'Purchase added successfully'
    assert body['data']['supplier_name'] == 'Acme Wholesale'
    assert body['data']['total_amount'] == 600
    assert body['data']['bill_no'] == str(body['data']['id']).zfill(6)
    assert body['data']['details'][0]['purchase_inward'] == 20
    assert Product.objects.get(pk=product.pk).stock == 20


def test_bad_rate_is_rejected(api_client, purchase_payload):
    purchase_payload['items'][0]['rate'] = '-1'

    response = api_client.post(reverse('purchase-list'), purchase_payload, format='json')

    assert response.status_code == 400
    assert response.json() == {'ok': False, 'error': 'validation_error', 'message': 'items.0.rate: Rate > 0'}
    assert PurchaseMaster.objects.count() == 0


def test_bad_quantity_is_rejected(api_client, purchase_payload):
    purchase_payload['items'][0]['quantity'] = -5

    response = api_client.post(reverse('purchase-list'), purchase_payload, format='json')

    assert response.json()['message'] == 'items.0.quantity: Qty > 0'


def test_unknown_supplier(api_client, purchase_payload):
    purchase_payload['supplierId'] = 5555

    response = api_client.post(reverse('purchase-list'), purchase_payload, format='json')

    assert response.status_code == 400
    assert response.json()['message'] == 'supplierId: Supplier not found'


def test_bad_date(api_client, purchase_payload):
    purchase_payload['date'] = 'yesterday'

    response = api_client.post(reverse('purchase-list'), purchase_payload, format='json')

    assert response.status_code == 400
    assert response.json()['message'].startswith('date: ')


def test_update_replaces_lines_without_touching_stock(api_client, supplier, product, make_purchase):
    purchase = make_purchase(supplier, [(product, 5, 10)])

    response = api_client.put(
        reverse('purchase-detail', args=[purchase.pk]),
        {'supplierId': supplier.pk, 'items': [{'productId': product.pk, 'quantity': 8, 'rate': '10'}]},
        format='json',
    )

    assert response.status_code == 200
    assert response.json()['data']['total_amount'] == 80
    assert PurchaseDetails.objects.get().quantity == 8
    assert Product.objects.get(pk=product.pk).stock == 5


def test_list_filters_by_supplier(api_client, supplier, product, make_purchase):
    purchase = make_purchase(supplier, [(product, 1, 1)])

    matching = api_client.get(reverse('purchase-list'), {'supplier': supplier.pk})
    other = api_client.get(reverse('purchase-list'), {'supplier': supplier.pk + 1})

    assert [p['id'] for p in matching.json()] == [purchase.pk]
    assert other.json() == []


def test_delete_purchase(api_client, supplier, product, make_purchase):
    purchase = make_purchase(supplier, [(product, 5, 10)])

    response = api_client.delete(reverse('purchase-detail', args=[purchase.pk]))

    assert response.status_code == 200
    assert response.json()['detailsRemoved'] == 1
    assert PurchaseMaster.objects.count() == 0
    assert Product.objects.get(pk=product.pk).stock == 5


def test_delete_unknown_purchase_is_404(api_client):
    response = api_client.delete(reverse('purchase-detail', args=[777]))

    assert response.status_code == 404
    assert response.json() == {'ok': False, 'error': 'not_found', 'message': 'Purchase not found'}


def test_total_beyond_storage_is_rejected(api_client, supplier, product):
    line = {'productId': product.pk, 'quantity': 100000000, 'rate': '6000.00'}

    response = api_client.post(
        reverse('purchase-list'), {'supplierId': supplier.pk, 'items': [line, line]}, format='json'
    )

    assert response.status_code == 400
    assert response.json()['message'] == 'items: Total amount is too large'
    assert PurchaseMaster.objects.count() == 0
    assert Product.objects.get(pk=product.pk).stock == 0
