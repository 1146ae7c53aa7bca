"""
Master/detail writes for sales and purchases.

A master record and its detail lines are written inside one
``transaction.atomic()`` block: either all rows are committed or none are.
Updates replace the detail set wholesale (delete, then reinsert) so the
stored details always match the latest submitted line list.
"""

import logging
from decimal import Decimal

from django.db import DatabaseError, transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, ValidationError

from inventory.exceptions import TransactionFailure

logger = logging.getLogger(__name__)

# Line amounts and master totals are stored with 14 digits, 2 of them decimal
AMOUNT_LIMIT = Decimal('1000000000000')
MAX_LINE_QUANTITY = 1000000000


class MasterDetailWriter:
    """
    Base writer, configured per transaction kind by subclasses.

    Lines are dicts with ``product``, ``quantity`` and the price key named
    by ``price_field``.
    """

    master_model = None
    detail_model = None
    detail_master_field = None
    counterparty_field = None
    price_field = 'price'
    line_total_field = 'amount'
    label = 'record'

    # ------------------------------------
    # Line arithmetic and validation
    # ------------------------------------

    def line_total(self, line):
        return Decimal(line['quantity']) * Decimal(line[self.price_field])

    def total_amount(self, lines):
        return sum((self.line_total(line) for line in lines), Decimal('0'))

    def validate_lines(self, lines, master=None):
        if not lines:
            raise ValidationError({'items': ['At least one product required']})

        for index, line in enumerate(lines):
            if line.get('product') is None:
                raise ValidationError({'items': {index: {'productId': ['Product required']}}})
            if not line.get('quantity') or line['quantity'] <= 0:
                raise ValidationError({'items': {index: {'quantity': ['Quantity must be greater than 0']}}})
            if line['quantity'] > MAX_LINE_QUANTITY:
                raise ValidationError({'items': {index: {'quantity': ['Quantity is too large']}}})
            price = line.get(self.price_field)
            if price is None or price <= 0:
                raise ValidationError({'items': {index: {self.price_field: [f'{self.price_field.title()} must be greater than 0']}}})
            if self.line_total(line) >= AMOUNT_LIMIT:
                raise ValidationError({'items': {index: {self.price_field: ['Line amount is too large']}}})

        if self.total_amount(lines) >= AMOUNT_LIMIT:
            raise ValidationError({'items': ['Total amount is too large']})

    def detail_values(self, line):
        return {
            'product': line['product'],
            'quantity': line['quantity'],
            self.price_field: line[self.price_field],
            self.line_total_field: self.line_total(line),
        }

    def after_create_line(self, detail):
        """Hook run for every detail row written by ``create``."""

    # ------------------------------------
    # Store access
    # ------------------------------------

    def _locate(self, master_id, for_update=False):
        queryset = self.master_model.objects.all()
        if for_update:
            queryset = queryset.select_for_update()
        try:
            master = queryset.filter(pk=master_id).first()
        except (ValueError, TypeError):
            master = None
        if master is None:
            raise NotFound(f"{self.label.capitalize()} not found")
        return master

    def _details_of(self, master):
        return self.detail_model.objects.filter(**{self.detail_master_field: master})

    def _write_details(self, master, lines, run_hooks=False):
        details = [
            self.detail_model(**{self.detail_master_field: master}, **self.detail_values(line))
            for line in lines
        ]
        created = self.detail_model.objects.bulk_create(details)
        if run_hooks:
            for detail in created:
                self.after_create_line(detail)
        return created

    def _abort(self, action, exc):
        logger.exception(f"[{self.label.upper()} {action} FAILED] Transaction rolled back: {exc}")
        return TransactionFailure(f"Failed to {action.lower()} {self.label}; no changes were saved.")

    # ------------------------------------
    # Operations
    # ------------------------------------

    def create(self, counterparty, lines, date=None, **extra):
        """Create a master with one detail row per line."""
        self.validate_lines(lines)
        total = self.total_amount(lines)

        try:
            with transaction.atomic():
                master = self.master_model.objects.create(
                    **{self.counterparty_field: counterparty},
                    total_amount=total,
                    date=date or timezone.now(),
                    **extra,
                )
                self._write_details(master, lines, run_hooks=True)
        except DatabaseError as exc:
            raise self._abort('CREATE', exc) from exc

        logger.info(
            f"[{self.label.upper()} CREATED] #{master.pk} | "
            f"{self.counterparty_field.capitalize()}: {counterparty} | "
            f"Lines: {len(lines)} | Total: {total}"
        )
        return master

    def update(self, master_id, counterparty, lines, date=None, **extra):
        """Overwrite the master's header fields and replace all of its details."""
        self.validate_lines(lines, master=master_id)
        total = self.total_amount(lines)

        try:
            with transaction.atomic():
                master = self._locate(master_id, for_update=True)
                setattr(master, self.counterparty_field, counterparty)
                master.total_amount = total
                master.date = date or timezone.now()
                for field, value in extra.items():
                    setattr(master, field, value)
                master.save()

                removed, _ = self._details_of(master).delete()
                self._write_details(master, lines)
        except DatabaseError as exc:
            raise self._abort('UPDATE', exc) from exc

        logger.info(
            f"[{self.label.upper()} UPDATED] #{master.pk} | "
            f"Replaced {removed} detail rows with {len(lines)} | Total: {total}"
        )
        return master

    def delete(self, master_id):
        """Delete a master and every detail row that belongs to it."""
        try:
            with transaction.atomic():
                master = self._locate(master_id, for_update=True)
                pk = master.pk
                removed, _ = self._details_of(master).delete()
                master.delete()
        except DatabaseError as exc:
            raise self._abort('DELETE', exc) from exc

        logger.info(f"[{self.label.upper()} DELETED] #{pk} | Detail rows removed: {removed}")
        return removed
